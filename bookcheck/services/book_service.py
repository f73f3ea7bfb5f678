from typing import List

import httpx

from bookcheck.errors import FixtureNotFoundError
from bookcheck.http import bearer
from bookcheck.schemas.book_schema import BookCreate, BookUpdate

PATH = "book"


async def create_book(client: httpx.AsyncClient, token: str, payload: BookCreate) -> httpx.Response:
    return await client.post(PATH, json=payload.model_dump(), headers=bearer(token))


async def get_books(client: httpx.AsyncClient) -> httpx.Response:
    return await client.get(PATH)


async def get_book(client: httpx.AsyncClient, book_id: str) -> httpx.Response:
    return await client.get(f"{PATH}/{book_id}")


async def update_book(client: httpx.AsyncClient, token: str, book_id: str, payload: BookUpdate) -> httpx.Response:
    # only the fields set on the payload are sent
    return await client.put(f"{PATH}/{book_id}", json=payload.model_dump(exclude_unset=True), headers=bearer(token))


async def delete_book(client: httpx.AsyncClient, token: str, book_id: str) -> httpx.Response:
    return await client.delete(f"{PATH}/{book_id}", headers=bearer(token))


def find_by_title(books: List[dict], title: str) -> dict:
    """Return the first book whose title matches exactly.

    Raises FixtureNotFoundError when no book carries that title.
    """
    for book in books:
        if isinstance(book, dict) and book.get("title") == title:
            return book
    raise FixtureNotFoundError("Book", "title", title)
