import uuid
from typing import List, Optional

from fastapi import status
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection

from bookcheck.stub.errors import AppError

BOOK_COLUMNS = {
    "title": "title",
    "author": "author",
    "description": "description",
    "price": "price",
    "pages": "pages",
    "category": "category_id",
}

_BOOK_SELECT = (
    "SELECT b.id, b.title, b.author, b.description, b.price, b.pages, "
    "c.id AS category_id, c.title AS category_title "
    "FROM books b LEFT JOIN categories c ON c.id = b.category_id"
)


def new_id() -> str:
    return uuid.uuid4().hex[:24]


def _book_to_dict(row) -> dict:
    category = None
    if row["category_id"] is not None:
        category = {"_id": row["category_id"], "title": row["category_title"]}
    return {
        "_id": row["id"],
        "title": row["title"],
        "author": row["author"],
        "description": row["description"],
        "price": row["price"],
        "pages": row["pages"],
        "category": category,
    }


async def create_category(conn: AsyncConnection, title: str) -> dict:
    title = (title or "").strip()
    if not title:
        raise AppError("Invalid title", status_code=status.HTTP_400_BAD_REQUEST)
    category_id = new_id()
    await conn.execute(text("INSERT INTO categories (id, title) VALUES (:id, :title)"), {"id": category_id, "title": title})
    await conn.commit()
    return {"_id": category_id, "title": title}


async def get_categories(conn: AsyncConnection) -> List[dict]:
    q = await conn.execute(text("SELECT id, title FROM categories ORDER BY title"))
    return [{"_id": r["id"], "title": r["title"]} for r in q.mappings().all()]


async def get_category_by_id(conn: AsyncConnection, category_id: str) -> Optional[dict]:
    q = await conn.execute(text("SELECT id, title FROM categories WHERE id = :id"), {"id": category_id})
    row = q.mappings().first()
    if not row:
        return None
    return {"_id": row["id"], "title": row["title"]}


async def update_category(conn: AsyncConnection, category_id: str, title: str) -> Optional[dict]:
    if not await get_category_by_id(conn, category_id):
        return None
    title = (title or "").strip()
    if not title:
        raise AppError("Invalid title", status_code=status.HTTP_400_BAD_REQUEST)
    await conn.execute(text("UPDATE categories SET title = :t WHERE id = :id"), {"t": title, "id": category_id})
    await conn.commit()
    return await get_category_by_id(conn, category_id)


async def delete_category(conn: AsyncConnection, category_id: str) -> bool:
    if not await get_category_by_id(conn, category_id):
        return False
    # books keep existing, without a category
    await conn.execute(text("UPDATE books SET category_id = NULL WHERE category_id = :id"), {"id": category_id})
    await conn.execute(text("DELETE FROM categories WHERE id = :id"), {"id": category_id})
    await conn.commit()
    return True


async def _ensure_category(conn: AsyncConnection, category_id: str):
    if not await get_category_by_id(conn, category_id):
        raise AppError("Unknown category", status_code=status.HTTP_400_BAD_REQUEST, details={"category": category_id})


async def create_book(conn: AsyncConnection, data: dict) -> dict:
    await _ensure_category(conn, data["category"])
    book_id = new_id()
    await conn.execute(
        text(
            "INSERT INTO books (id, title, author, description, price, pages, category_id) "
            "VALUES (:id, :title, :author, :description, :price, :pages, :category)"
        ),
        {**data, "id": book_id}
    )
    await conn.commit()
    return await get_book_by_id(conn, book_id)


async def get_books(conn: AsyncConnection) -> List[dict]:
    q = await conn.execute(text(_BOOK_SELECT + " ORDER BY b.title"))
    return [_book_to_dict(r) for r in q.mappings().all()]


async def get_book_by_id(conn: AsyncConnection, book_id: str) -> Optional[dict]:
    q = await conn.execute(text(_BOOK_SELECT + " WHERE b.id = :id"), {"id": book_id})
    row = q.mappings().first()
    if not row:
        return None
    return _book_to_dict(row)


async def update_book(conn: AsyncConnection, book_id: str, data: dict) -> Optional[dict]:
    if not await get_book_by_id(conn, book_id):
        return None
    changes = {k: v for k, v in data.items() if k in BOOK_COLUMNS and v is not None}
    if not changes:
        raise AppError("No fields provided for update", status_code=status.HTTP_400_BAD_REQUEST, details={"book_id": book_id})
    for key in ("title", "author"):
        if key in changes and not str(changes[key]).strip():
            raise AppError(f"Invalid {key}", status_code=status.HTTP_400_BAD_REQUEST)
    if "category" in changes:
        await _ensure_category(conn, changes["category"])
    assignments = ", ".join(f"{BOOK_COLUMNS[k]} = :{k}" for k in changes)
    await conn.execute(text(f"UPDATE books SET {assignments} WHERE id = :id"), {**changes, "id": book_id})
    await conn.commit()
    return await get_book_by_id(conn, book_id)


async def delete_book(conn: AsyncConnection, book_id: str) -> bool:
    if not await get_book_by_id(conn, book_id):
        return False
    await conn.execute(text("DELETE FROM books WHERE id = :id"), {"id": book_id})
    await conn.commit()
    return True
