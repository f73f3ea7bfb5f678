import httpx

from bookcheck.http import bearer
from bookcheck.schemas.category_schema import CategoryCreate, CategoryUpdate

PATH = "category"


async def create_category(client: httpx.AsyncClient, token: str, payload: CategoryCreate) -> httpx.Response:
    return await client.post(PATH, json=payload.model_dump(), headers=bearer(token))


async def get_categories(client: httpx.AsyncClient) -> httpx.Response:
    return await client.get(PATH)


async def get_category(client: httpx.AsyncClient, category_id: str) -> httpx.Response:
    return await client.get(f"{PATH}/{category_id}")


async def update_category(client: httpx.AsyncClient, token: str, category_id: str, payload: CategoryUpdate) -> httpx.Response:
    return await client.put(f"{PATH}/{category_id}", json=payload.model_dump(), headers=bearer(token))


async def delete_category(client: httpx.AsyncClient, token: str, category_id: str) -> httpx.Response:
    return await client.delete(f"{PATH}/{category_id}", headers=bearer(token))


def first_category_id(categories: list) -> str | None:
    for category in categories:
        if isinstance(category, dict) and category.get("_id"):
            return str(category["_id"])
    return None
