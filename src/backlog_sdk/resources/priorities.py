from __future__ import annotations

from typing import List

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import api_path
from backlog_sdk.models import Priority


async def get_priorities(client: BacklogClient) -> List[Priority]:
    return await client.request("GET", api_path("priorities"), List[Priority])
