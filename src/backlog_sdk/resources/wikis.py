from __future__ import annotations

from typing import List, Optional

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import api_path
from backlog_sdk.inputs import (
    AddAttachmentToWikiInput,
    CreateWikiInput,
    UpdateWikiInput,
)
from backlog_sdk.models import Attachment, CountResponse, Tag, Wiki
from backlog_sdk.options import GetWikiCountOptions, GetWikisOptions, GetWikiTagsOptions


async def get_wikis(client: BacklogClient, *, options: GetWikisOptions) -> List[Wiki]:
    """List wiki pages of one project (``options.project_id_or_key`` is required)."""
    return await client.request("GET", api_path("wikis"), List[Wiki], options=options)


async def get_wiki_count(
    client: BacklogClient, *, options: Optional[GetWikiCountOptions] = None
) -> int:
    resp = await client.request(
        "GET", api_path("wikis", "count"), CountResponse, options=options
    )
    return resp.count if resp else 0


async def get_wiki_tags(
    client: BacklogClient, *, options: Optional[GetWikiTagsOptions] = None
) -> List[Tag]:
    return await client.request(
        "GET", api_path("wikis", "tags"), List[Tag], options=options
    )


async def get_wiki(client: BacklogClient, wiki_id: int) -> Wiki:
    return await client.request("GET", api_path("wikis", wiki_id), Wiki)


async def create_wiki(client: BacklogClient, body: CreateWikiInput) -> Wiki:
    return await client.request("POST", api_path("wikis"), Wiki, body=body)


async def update_wiki(
    client: BacklogClient, wiki_id: int, body: UpdateWikiInput
) -> Wiki:
    return await client.request("PATCH", api_path("wikis", wiki_id), Wiki, body=body)


async def delete_wiki(client: BacklogClient, wiki_id: int) -> Wiki:
    return await client.request("DELETE", api_path("wikis", wiki_id), Wiki)


async def get_wiki_attachments(
    client: BacklogClient, wiki_id: int
) -> List[Attachment]:
    return await client.request(
        "GET", api_path("wikis", wiki_id, "attachments"), List[Attachment]
    )


async def add_wiki_attachments(
    client: BacklogClient, wiki_id: int, body: AddAttachmentToWikiInput
) -> List[Attachment]:
    return await client.request(
        "POST", api_path("wikis", wiki_id, "attachments"), List[Attachment], body=body
    )
