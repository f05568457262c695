import pytest_asyncio

from backlog_sdk.core.client import BacklogClient

BASE_URL = "https://example.backlog.com/"


@pytest_asyncio.fixture
async def client():
    async with BacklogClient(base_url=BASE_URL, api_key="K") as c:
        yield c
