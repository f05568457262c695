import io
import json

import pytest
import respx
from httpx import Response
from pydantic import ValidationError

from backlog_sdk.core.errors import BacklogAPIError
from backlog_sdk.inputs import (
    CreateUserInput,
    CreateWatchingInput,
    CreateWebhookInput,
    CreateWikiInput,
    UpdateSpaceNotificationInput,
)
from backlog_sdk.models import RoleType
from backlog_sdk.options import (
    GetUserStarCountOptions,
    GetUserWatchingsCountOptions,
    GetWikiCountOptions,
    GetWikisOptions,
)
from backlog_sdk.resources import (
    priorities,
    rate_limit,
    resolutions,
    space,
    teams,
    users,
    watchings,
    webhooks,
    wikis,
)

API = "https://example.backlog.com/api/v2"


@pytest.mark.asyncio
async def test_space_notification_roundtrip(client):
    async with respx.mock:
        respx.get(f"{API}/space/notification").mock(
            return_value=Response(
                200, json={"content": "maintenance", "updated": "2024-01-01T00:00:00Z"}
            )
        )
        route = respx.put(f"{API}/space/notification").mock(
            return_value=Response(200, json={"content": "done"})
        )
        current = await space.get_space_notification(client)
        updated = await space.update_space_notification(
            client, UpdateSpaceNotificationInput(content="done")
        )

    assert current.content == "maintenance"
    assert current.updated.year == 2024
    assert updated.content == "done"
    assert json.loads(route.calls[0].request.content) == {"content": "done"}


@pytest.mark.asyncio
async def test_licence(client):
    async with respx.mock:
        respx.get(f"{API}/space/licence").mock(
            return_value=Response(200, json={"active": True, "userLimit": 30})
        )
        licence = await space.get_licence(client)

    assert licence.active is True
    assert licence.user_limit == 30


@pytest.mark.asyncio
async def test_rate_limit(client):
    async with respx.mock:
        respx.get(f"{API}/rateLimit").mock(
            return_value=Response(
                200,
                json={
                    "rateLimit": {
                        "read": {"limit": 600, "remaining": 598, "reset": 1700000000},
                        "update": {"limit": 150, "remaining": 150, "reset": 1700000000},
                    }
                },
            )
        )
        limits = await rate_limit.get_rate_limit(client)

    assert limits.read.remaining == 598
    assert limits.update.limit == 150
    assert limits.search is None


@pytest.mark.asyncio
async def test_static_lists(client):
    async with respx.mock:
        respx.get(f"{API}/priorities").mock(
            return_value=Response(200, json=[{"id": 2, "name": "High"}])
        )
        respx.get(f"{API}/resolutions").mock(
            return_value=Response(200, json=[{"id": 0, "name": "Fixed"}])
        )
        prios = await priorities.get_priorities(client)
        res = await resolutions.get_resolutions(client)

    assert prios[0].name == "High"
    assert res[0].id == 0


@pytest.mark.asyncio
async def test_users(client):
    async with respx.mock:
        respx.get(f"{API}/users/myself").mock(
            return_value=Response(200, json={"id": 1, "userId": "me", "roleType": 2})
        )
        created = respx.post(f"{API}/users").mock(
            return_value=Response(200, json={"id": 9, "userId": "new"})
        )
        stars = respx.get(f"{API}/users/1/stars/count").mock(
            return_value=Response(200, json={"count": 54})
        )

        me = await users.get_myself(client)
        new = await users.create_user(
            client,
            CreateUserInput(
                user_id="new",
                password="pw",
                name="New",
                mail_address="new@example.com",
                role_type=RoleType.REPORTER,
            ),
        )
        total = await users.get_user_star_count(
            client, 1, options=GetUserStarCountOptions(since="2024-01-01")
        )

    assert me.role_type is RoleType.GENERAL_USER
    assert new.user_id == "new"
    assert total == 54
    assert json.loads(created.calls[0].request.content) == {
        "userId": "new",
        "password": "pw",
        "name": "New",
        "mailAddress": "new@example.com",
        "roleType": 3,
    }
    assert stars.calls[0].request.url.params["since"] == "2024-01-01"


@pytest.mark.asyncio
async def test_user_icon(client):
    async with respx.mock:
        respx.get(f"{API}/users/1/icon").mock(
            return_value=Response(200, content=b"GIF89a")
        )
        sink = io.BytesIO()
        await users.get_user_icon(client, 1, sink)

    assert sink.getvalue() == b"GIF89a"


@pytest.mark.asyncio
async def test_watchings(client):
    async with respx.mock:
        created = respx.post(f"{API}/watchings").mock(
            return_value=Response(200, json={"id": 8, "note": "keep an eye"})
        )
        counted = respx.get(f"{API}/users/1/watchings/count").mock(
            return_value=Response(200, json={"count": 3})
        )
        marked = respx.post(f"{API}/watchings/8/markAsRead").mock(
            return_value=Response(204)
        )

        watching = await watchings.create_watching(
            client, CreateWatchingInput(issue_id_or_key="SRE-1", note="keep an eye")
        )
        total = await watchings.get_user_watchings_count(
            client, 1, options=GetUserWatchingsCountOptions(already_read=False)
        )
        assert await watchings.mark_watching_as_read(client, 8) is None

    assert watching.id == 8
    assert total == 3
    assert json.loads(created.calls[0].request.content) == {
        "issueIdOrKey": "SRE-1",
        "note": "keep an eye",
    }
    assert counted.calls[0].request.url.params["alreadyRead"] == "false"
    assert marked.calls[0].request.content == b""


@pytest.mark.asyncio
async def test_webhooks(client):
    async with respx.mock:
        route = respx.post(f"{API}/projects/SRE/webhooks").mock(
            return_value=Response(200, json={"id": 1, "hookUrl": "https://hook"})
        )
        hook = await webhooks.create_webhook(
            client,
            "SRE",
            CreateWebhookInput(
                name="ci", hook_url="https://hook", activity_type_ids=[1, 2]
            ),
        )

    assert hook.hook_url == "https://hook"
    assert json.loads(route.calls[0].request.content) == {
        "name": "ci",
        "hookUrl": "https://hook",
        "activityTypeIds": [1, 2],
    }


@pytest.mark.asyncio
async def test_wikis(client):
    async with respx.mock:
        listed = respx.get(f"{API}/wikis").mock(
            return_value=Response(200, json=[{"id": 1, "name": "Home"}])
        )
        counted = respx.get(f"{API}/wikis/count").mock(
            return_value=Response(200, json={"count": 5})
        )
        created = respx.post(f"{API}/wikis").mock(
            return_value=Response(200, json={"id": 2, "name": "Runbook"})
        )

        pages = await wikis.get_wikis(
            client, options=GetWikisOptions(project_id_or_key=12)
        )
        total = await wikis.get_wiki_count(
            client, options=GetWikiCountOptions(project_id_or_key="SRE")
        )
        page = await wikis.create_wiki(
            client, CreateWikiInput(project_id=12, name="Runbook", content="steps")
        )

    assert pages[0].name == "Home"
    assert total == 5
    assert page.id == 2
    assert listed.calls[0].request.url.params["projectIdOrKey"] == "12"
    assert counted.calls[0].request.url.params["projectIdOrKey"] == "SRE"
    assert json.loads(created.calls[0].request.content) == {
        "projectId": 12,
        "name": "Runbook",
        "content": "steps",
    }


def test_wiki_listing_requires_project():
    with pytest.raises(ValidationError):
        GetWikisOptions()


@pytest.mark.asyncio
async def test_team_not_found(client):
    async with respx.mock:
        respx.get(f"{API}/teams/404").mock(
            return_value=Response(
                404,
                json={"errors": [{"message": "No team.", "code": 6, "moreInfo": ""}]},
            )
        )
        with pytest.raises(BacklogAPIError) as exc:
            await teams.get_team(client, 404)

    assert exc.value.status_code == 404


@pytest.mark.parametrize("bad", ["", True])
def test_wiki_project_identifier_checked(bad):
    with pytest.raises(ValidationError):
        GetWikisOptions(project_id_or_key=bad)
    with pytest.raises(ValidationError):
        GetWikiCountOptions(project_id_or_key=bad)


@pytest.mark.asyncio
async def test_wiki_tags_without_project(client):
    async with respx.mock:
        route = respx.get(f"{API}/wikis/tags").mock(
            return_value=Response(200, json=[{"id": 1, "name": "ops"}])
        )
        tags = await wikis.get_wiki_tags(client)

    assert tags[0].name == "ops"
    assert route.calls[0].request.url.params.multi_items() == [("apiKey", "K")]
