import pytest
from bookcheck.stub.errors import AppError
from bookcheck.stub.services import catalog_service


async def _book(conn, category_id, **overrides):
    data = {
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "description": "Jazz age",
        "price": 10.5,
        "pages": 180,
        "category": category_id,
    }
    data.update(overrides)
    return await catalog_service.create_book(conn, data)


@pytest.mark.asyncio
async def test_category_crud(db_conn):
    created = await catalog_service.create_category(db_conn, "Classics")
    assert created["_id"]
    assert created["title"] == "Classics"

    categories = await catalog_service.get_categories(db_conn)
    assert [c["_id"] for c in categories] == [created["_id"]]

    updated = await catalog_service.update_category(db_conn, created["_id"], "Old Classics")
    assert updated == {"_id": created["_id"], "title": "Old Classics"}

    assert await catalog_service.delete_category(db_conn, created["_id"])
    assert await catalog_service.get_category_by_id(db_conn, created["_id"]) is None
    assert not await catalog_service.delete_category(db_conn, created["_id"])


@pytest.mark.asyncio
async def test_book_embeds_category(db_conn):
    category = await catalog_service.create_category(db_conn, "Classics")
    book = await _book(db_conn, category["_id"])
    assert book["category"] == category
    assert book["price"] == 10.5
    assert book["pages"] == 180

    listed = await catalog_service.get_books(db_conn)
    assert listed == [book]


@pytest.mark.asyncio
async def test_book_requires_known_category(db_conn):
    with pytest.raises(AppError) as exc_info:
        await _book(db_conn, "missing")
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_partial_update_keeps_other_fields(db_conn):
    category = await catalog_service.create_category(db_conn, "Classics")
    book = await _book(db_conn, category["_id"])

    updated = await catalog_service.update_book(db_conn, book["_id"], {"title": "Gatsby", "author": "F. S. F."})
    assert updated["_id"] == book["_id"]
    assert updated["title"] == "Gatsby"
    assert updated["author"] == "F. S. F."
    assert updated["description"] == book["description"]
    assert updated["category"] == category

    with pytest.raises(AppError):
        await catalog_service.update_book(db_conn, book["_id"], {})
    assert await catalog_service.update_book(db_conn, "missing", {"title": "x"}) is None


@pytest.mark.asyncio
async def test_deleting_category_detaches_books(db_conn):
    category = await catalog_service.create_category(db_conn, "Classics")
    book = await _book(db_conn, category["_id"])
    await catalog_service.delete_category(db_conn, category["_id"])
    assert (await catalog_service.get_book_by_id(db_conn, book["_id"]))["category"] is None

    assert await catalog_service.delete_book(db_conn, book["_id"])
    assert await catalog_service.get_book_by_id(db_conn, book["_id"]) is None
