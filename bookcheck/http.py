from contextlib import asynccontextmanager

import httpx

from bookcheck.config import settings


def create_client(base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url or settings.base_url,
        timeout=settings.request_timeout,
        transport=transport,
    )


@asynccontextmanager
async def get_client(base_url: str | None = None):
    async with create_client(base_url) as client:
        yield client


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def is_empty_body(response: httpx.Response) -> bool:
    return response.text.strip() in ("", "null")
