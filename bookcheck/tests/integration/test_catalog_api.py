import pytest

from bookcheck.errors import AuthenticationError
from bookcheck.http import bearer
from bookcheck.services.auth_service import authenticate


@pytest.mark.asyncio
async def test_login_with_wrong_password(stub_client):
    with pytest.raises(AuthenticationError):
        await authenticate(stub_client, "john.doe@example.com", "wrong-password")


@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", [
    ("POST", "/category"),
    ("PUT", "/category/abc"),
    ("DELETE", "/category/abc"),
    ("POST", "/book"),
    ("PUT", "/book/abc"),
    ("DELETE", "/book/abc"),
])
async def test_mutations_require_token(stub_client, method, path):
    resp = await stub_client.request(method, path, json={"title": "x"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "Unauthorized: invalid or expired token"

    resp = await stub_client.request(method, path, json={"title": "x"}, headers=bearer("garbage"))
    assert resp.status_code == 401
    assert resp.json()["error"] == "Unauthorized: invalid or expired token"


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/category/unknown", "/book/unknown"])
async def test_unknown_ids_read_as_null(stub_client, path):
    resp = await stub_client.get(path)
    assert resp.status_code == 200
    assert resp.text == "null"


@pytest.mark.asyncio
async def test_book_with_unknown_category_rejected(stub_client):
    token = await authenticate(stub_client)
    resp = await stub_client.post("/book", headers=bearer(token), json={
        "title": "Orphan",
        "author": "Nobody",
        "description": "No category",
        "price": 1.0,
        "pages": 10,
        "category": "missing",
    })
    assert resp.status_code == 400
    assert resp.json()["details"] == {"category": "missing"}


@pytest.mark.asyncio
async def test_update_unknown_category_is_404(stub_client):
    token = await authenticate(stub_client)
    resp = await stub_client.put("/category/unknown", headers=bearer(token), json={"title": "x"})
    assert resp.status_code == 404
    assert resp.json()["error"] == "Category with id=unknown not found"


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/category/unknown", "/book/unknown"])
async def test_delete_unknown_id_reads_as_null(stub_client, path):
    token = await authenticate(stub_client)
    resp = await stub_client.delete(path, headers=bearer(token))
    assert resp.status_code == 200
    assert resp.text == "null"


@pytest.mark.asyncio
async def test_openapi_declares_bearer_scheme(stub_client):
    resp = await stub_client.get("/openapi.json")
    assert resp.status_code == 200
    schemes = resp.json()["components"]["securitySchemes"]
    assert schemes == {"HTTPBearer": {"type": "http", "scheme": "bearer"}}
