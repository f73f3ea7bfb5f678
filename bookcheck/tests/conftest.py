import pytest
import pytest_asyncio
from httpx import ASGITransport
from bookcheck.config import settings
from bookcheck.http import create_client
from bookcheck.services.auth_service import authenticate
from bookcheck.stub.main import app, init_models
from bookcheck.stub.db import get_conn, make_engine

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def stub_engine():
    engine_test = make_engine(TEST_DATABASE_URL)
    await init_models(engine_test)

    async def override_get_conn():
        async with engine_test.connect() as conn:
            yield conn

    app.dependency_overrides[get_conn] = override_get_conn
    yield engine_test
    app.dependency_overrides.pop(get_conn, None)
    await engine_test.dispose()


@pytest_asyncio.fixture
async def stub_client(stub_engine):
    async with create_client("http://test", transport=ASGITransport(app=app)) as client:
        yield client


@pytest_asyncio.fixture
async def client_fixture(stub_engine):
    # BOOKCHECK_LIVE=true points the suite at settings.base_url
    if settings.live:
        client = create_client()
    else:
        client = create_client("http://test", transport=ASGITransport(app=app))
    async with client:
        yield client


@pytest_asyncio.fixture
async def token(client_fixture):
    return await authenticate(client_fixture)


@pytest_asyncio.fixture
async def db_conn(stub_engine):
    async with stub_engine.connect() as conn:
        yield conn


@pytest.fixture
def reference_only():
    if settings.live:
        pytest.skip("checks the reference service only")
