import httpx
import pytest

from src.core.identity import HttpIdentityGateway, IdentityUser
from src.apps.feed.schemas.profile import to_public_profile

USERS = [
    {
        "id": "user_1",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "image_url": "https://img.example.com/ada.png",
        "email_addresses": [{"email_address": "ada@example.com"}],
        "private_metadata": {"plan": "pro"},
    },
    {"id": "user_2", "first_name": None, "image_url": "https://img.example.com/2.png"},
]


def make_gateway(handler) -> HttpIdentityGateway:
    return HttpIdentityGateway(
        base_url="https://identity.test/",
        secret_key="sk_test",
        transport=httpx.MockTransport(handler),
    )


async def test_get_user_list_sends_ids_and_limit():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["user_ids"] = request.url.params.get_list("user_id")
        seen["limit"] = request.url.params.get("limit")
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json=USERS)

    users = await make_gateway(handler).get_user_list(["user_1", "user_2", "user_1"], limit=100)

    assert seen == {
        "path": "/v1/users",
        "user_ids": ["user_1", "user_2", "user_1"],
        "limit": "100",
        "auth": "Bearer sk_test",
    }
    assert [user.id for user in users] == ["user_1", "user_2"]
    assert users[0].first_name == "Ada"


async def test_get_user_list_accepts_wrapped_payload():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": USERS[:1], "total_count": 1})

    users = await make_gateway(handler).get_user_list(["user_1"], limit=100)

    assert [user.id for user in users] == ["user_1"]


async def test_get_user_list_raises_on_server_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"errors": []})

    with pytest.raises(httpx.HTTPStatusError):
        await make_gateway(handler).get_user_list(["user_1"], limit=100)


@pytest.mark.parametrize(
    "status_code, body, expected",
    [
        (200, {"id": "sess_1", "user_id": "user_1", "status": "active"}, "user_1"),
        (200, {"id": "sess_1", "user_id": "user_1", "status": "expired"}, None),
        (200, [{"id": "user_1"}], None),
        (404, {"errors": [{"code": "resource_not_found"}]}, None),
    ],
)
async def test_resolve_current_user(status_code, body, expected):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/sessions/sess_1"
        return httpx.Response(status_code, json=body)

    assert await make_gateway(handler).resolve_current_user("sess_1") == expected


async def test_resolve_current_user_keeps_token_inside_session_path():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["raw_path"] = request.url.raw_path
        seen["query"] = request.url.query
        return httpx.Response(200, json=[{"id": "abc"}])

    user_id = await make_gateway(handler).resolve_current_user("x/../../v1/users/abc?limit=1")

    assert user_id is None
    prefix = b"/v1/sessions/"
    assert seen["raw_path"].startswith(prefix)
    assert b"/" not in seen["raw_path"][len(prefix):]
    assert b"?" not in seen["raw_path"]
    assert seen["query"] == b""


def test_public_profile_exposes_only_id_name_and_picture():
    user = IdentityUser.model_validate(USERS[0])

    profile = to_public_profile(user)

    assert profile.model_dump(by_alias=True) == {
        "id": "user_1",
        "username": "Ada",
        "profilePicture": "https://img.example.com/ada.png",
    }
