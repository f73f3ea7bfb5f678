import pytest

from bookcheck.factories import CategoryFactory, Factories
from bookcheck.scenarios.base import ScenarioContext
from bookcheck.scenarios.category_scenarios import category_lifecycle
from bookcheck.services import category_service


@pytest.mark.asyncio
async def test_category_lifecycle(client_fixture, token):
    await category_lifecycle(ScenarioContext(client=client_fixture, token=token))


@pytest.mark.asyncio
async def test_category_lifecycle_with_literal_titles(client_fixture, token, reference_only):
    factories = Factories(categories=CategoryFactory(unique=False))
    await category_lifecycle(ScenarioContext(client=client_fixture, token=token, factories=factories))

    resp = await category_service.get_categories(client_fixture)
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_failed_lifecycle_cleans_up(client_fixture, reference_only):
    # a bogus token makes the create step fail before anything is stored
    with pytest.raises(AssertionError):
        await category_lifecycle(ScenarioContext(client=client_fixture, token="not-a-token"))

    resp = await category_service.get_categories(client_fixture)
    assert resp.json() == []
