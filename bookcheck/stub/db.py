from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.pool import StaticPool
from bookcheck.config import settings


def make_engine(url: str) -> AsyncEngine:
    if url.startswith("sqlite"):
        # one shared connection keeps an in-memory database alive
        return create_async_engine(url, future=True, echo=False, poolclass=StaticPool,
                                   connect_args={"check_same_thread": False})
    return create_async_engine(url, future=True, echo=False)


engine: AsyncEngine = make_engine(settings.stub_database_url)


async def get_conn():
    async with engine.connect() as conn:
        yield conn
