from __future__ import annotations

from typing import Optional

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.identifiers import api_path
from backlog_sdk.models import RateLimit, RateLimitResponse


async def get_rate_limit(client: BacklogClient) -> Optional[RateLimit]:
    """
    Current read/update/search/icon quotas.
    Informational only; the client never throttles on it.
    """
    resp: Optional[RateLimitResponse] = await client.request(
        "GET", api_path("rateLimit"), RateLimitResponse
    )
    return resp.rate_limit if resp else None
