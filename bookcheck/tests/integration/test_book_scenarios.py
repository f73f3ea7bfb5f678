import pytest

from bookcheck.errors import FixtureNotFoundError
from bookcheck.scenarios.base import ScenarioContext
from bookcheck.scenarios.book_scenarios import (
    add_book,
    delete_book,
    find_book_by_title,
    list_all_books,
    update_book,
)
from bookcheck.scenarios.runner import run_scenarios
from bookcheck.services import book_service, category_service


@pytest.fixture
def ctx(client_fixture, token):
    return ScenarioContext(client=client_fixture, token=token)


@pytest.mark.asyncio
async def test_list_all_books(ctx):
    await list_all_books(ctx)


@pytest.mark.asyncio
async def test_find_book_by_title(ctx):
    await find_book_by_title(ctx)


@pytest.mark.asyncio
async def test_add_book(ctx):
    await add_book(ctx)


@pytest.mark.asyncio
async def test_update_book(ctx):
    await update_book(ctx)


@pytest.mark.asyncio
async def test_delete_book(ctx):
    await delete_book(ctx)


@pytest.mark.asyncio
async def test_missing_title_fails_explicitly(client_fixture):
    resp = await book_service.get_books(client_fixture)
    assert resp.status_code == 200
    with pytest.raises(FixtureNotFoundError):
        book_service.find_by_title(resp.json(), "No Such Book 5f0c1e")


@pytest.mark.asyncio
async def test_scenarios_leave_no_fixtures_behind(ctx, reference_only):
    results = await run_scenarios(ctx.client, ctx.token)
    assert all(r.passed for r in results), [r.failures for r in results]

    books = await book_service.get_books(ctx.client)
    categories = await category_service.get_categories(ctx.client)
    assert books.json() == []
    assert categories.json() == []
