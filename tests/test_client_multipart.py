from pathlib import Path

import httpx
import pytest
import respx
from httpx import Response

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.errors import BacklogAPIError, BacklogFileError
from backlog_sdk.resources import space

BASE = "https://example.backlog.com/"


@pytest.fixture
def image(tmp_path: Path) -> Path:
    f = tmp_path / "a.jpg"
    f.write_bytes(b"\xff\xd8\xff\xe0fakejpeg")
    return f


@pytest.mark.asyncio
async def test_upload_file_multipart(image):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        seen["body"] = request.content
        return httpx.Response(200, json={"id": 1, "name": "test.txt", "size": 8857})

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = BacklogClient(base_url=BASE, api_key="K", http=http)
    async with client:
        resp = await space.upload_file(client, str(image))
    await http.aclose()

    assert resp.id == 1
    assert resp.name == "test.txt"
    assert resp.size == 8857

    req = seen["request"]
    assert req.method == "POST"
    assert req.url.path == "/api/v2/space/attachment"
    assert req.url.params["apiKey"] == "K"
    assert req.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    body = seen["body"]
    assert b'name="file"; filename="a.jpg"' in body
    assert b"Content-Type: image/jpeg" in body
    assert b"\xff\xd8\xff\xe0fakejpeg" in body


@pytest.mark.asyncio
async def test_upload_unknown_extension_defaults_content_type(tmp_path: Path):
    f = tmp_path / "blob.zzq"
    f.write_bytes(b"raw")
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = request.content
        return httpx.Response(200, json={"id": 2, "name": f.name, "size": 3})

    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = BacklogClient(base_url=BASE, api_key="K", http=http)
    async with client:
        await space.upload_file(client, str(f))
    await http.aclose()

    assert b"Content-Type: application/octet-stream" in seen["body"]


@pytest.mark.asyncio
async def test_upload_missing_file(tmp_path: Path):
    async with respx.mock(assert_all_called=False) as mock:
        route = mock.post(f"{BASE}api/v2/space/attachment").mock(
            return_value=Response(200, json={})
        )

        client = BacklogClient(base_url=BASE, api_key="K")
        async with client:
            with pytest.raises(BacklogFileError):
                await space.upload_file(client, str(tmp_path / "missing.png"))

        assert not route.called


@pytest.mark.asyncio
async def test_upload_error_response(image):
    async with respx.mock:
        respx.post(f"{BASE}api/v2/space/attachment").mock(
            return_value=Response(
                413,
                json={
                    "errors": [
                        {"message": "Too large.", "code": 12, "moreInfo": ""}
                    ]
                },
            )
        )

        client = BacklogClient(base_url=BASE, api_key="K")
        async with client:
            with pytest.raises(BacklogAPIError) as exc:
                await space.upload_file(client, str(image))

    assert exc.value.status_code == 413
    assert exc.value.codes == [12]
