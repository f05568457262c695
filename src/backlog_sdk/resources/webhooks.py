from __future__ import annotations

from typing import List

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import IDOrKey, api_path
from backlog_sdk.inputs import CreateWebhookInput, UpdateWebhookInput
from backlog_sdk.models import Webhook


async def get_webhooks(
    client: BacklogClient, project_id_or_key: IDOrKey
) -> List[Webhook]:
    return await client.request(
        "GET", api_path("projects", project_id_or_key, "webhooks"), List[Webhook]
    )


async def get_webhook(
    client: BacklogClient, project_id_or_key: IDOrKey, webhook_id: int
) -> Webhook:
    return await client.request(
        "GET", api_path("projects", project_id_or_key, "webhooks", webhook_id), Webhook
    )


async def create_webhook(
    client: BacklogClient, project_id_or_key: IDOrKey, body: CreateWebhookInput
) -> Webhook:
    return await client.request(
        "POST", api_path("projects", project_id_or_key, "webhooks"), Webhook, body=body
    )


async def update_webhook(
    client: BacklogClient,
    project_id_or_key: IDOrKey,
    webhook_id: int,
    body: UpdateWebhookInput,
) -> Webhook:
    return await client.request(
        "PATCH",
        api_path("projects", project_id_or_key, "webhooks", webhook_id),
        Webhook,
        body=body,
    )


async def delete_webhook(
    client: BacklogClient, project_id_or_key: IDOrKey, webhook_id: int
) -> Webhook:
    return await client.request(
        "DELETE",
        api_path("projects", project_id_or_key, "webhooks", webhook_id),
        Webhook,
    )
