from __future__ import annotations

from typing import List

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import api_path
from backlog_sdk.models import Resolution


async def get_resolutions(client: BacklogClient) -> List[Resolution]:
    return await client.request("GET", api_path("resolutions"), List[Resolution])
