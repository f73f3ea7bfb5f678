import httpx
import pytest

from bookcheck.errors import AuthenticationError
from bookcheck.services.auth_service import authenticate


def _client(status_code, payload=None, content=None, seen=None):
    def handler(request: httpx.Request):
        if seen is not None:
            seen.append(request)
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=payload)
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")


@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["accessToken", "access_token", "token"])
async def test_authenticate_reads_token(key):
    seen = []
    async with _client(200, {key: "abc.def"}, seen=seen) as client:
        token = await authenticate(client, "jane@example.com", "pw")
    assert token == "abc.def"
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/user/login"


@pytest.mark.asyncio
async def test_authenticate_rejects_failed_login():
    async with _client(401, {"error": "Unauthorized"}) as client:
        with pytest.raises(AuthenticationError) as exc_info:
            await authenticate(client)
    assert exc_info.value.details["status_code"] == 401


@pytest.mark.asyncio
@pytest.mark.parametrize("kwargs", [
    {"payload": {"accessToken": "  "}},
    {"payload": {"user": "jane"}},
    {"content": b"not json"},
])
async def test_authenticate_rejects_missing_token(kwargs):
    async with _client(200, **kwargs) as client:
        with pytest.raises(AuthenticationError):
            await authenticate(client)
