import functools
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict

import httpx

from bookcheck.checks import Step
from bookcheck.factories import Factories
from bookcheck.schemas.book_schema import BookCreate
from bookcheck.services import book_service, category_service

logger = logging.getLogger(__name__)

SCENARIOS: Dict[str, Callable[["ScenarioContext"], Awaitable[None]]] = {}


@dataclass
class ScenarioContext:
    client: httpx.AsyncClient
    token: str
    factories: Factories = field(default_factory=Factories)


class ScenarioRun:
    """One execution of a scenario: its steps and the fixtures it must remove."""

    def __init__(self, name: str, ctx: ScenarioContext):
        self.name = name
        self.ctx = ctx
        self._books: list[str] = []
        self._categories: list[str] = []

    @property
    def client(self) -> httpx.AsyncClient:
        return self.ctx.client

    @property
    def token(self) -> str:
        return self.ctx.token

    @property
    def factories(self) -> Factories:
        return self.ctx.factories

    def step(self, label: str) -> Step:
        return Step(f"{self.name}: {label}")

    def track_category(self, category_id: str):
        self._categories.append(category_id)

    def track_book(self, book_id: str):
        self._books.append(book_id)

    def forget(self, resource_id: str):
        for tracked in (self._books, self._categories):
            if resource_id in tracked:
                tracked.remove(resource_id)

    async def teardown(self):
        # books reference categories, so they go first
        pending = [("book", book_service.delete_book, bid) for bid in reversed(self._books)]
        pending += [("category", category_service.delete_category, cid) for cid in reversed(self._categories)]
        for resource, delete, resource_id in pending:
            try:
                resp = await delete(self.client, self.token, resource_id)
            except httpx.HTTPError as e:
                logger.warning("%s: cleanup of %s %s failed: %s", self.name, resource, resource_id, e)
                continue
            if resp.status_code != httpx.codes.OK:
                logger.warning("%s: cleanup of %s %s returned %s", self.name, resource, resource_id, resp.status_code)
            self.forget(resource_id)


def scenario(name: str):
    def decorator(fn: Callable[[ScenarioRun], Awaitable[None]]):
        @functools.wraps(fn)
        async def wrapper(ctx: ScenarioContext):
            run = ScenarioRun(name, ctx)
            logger.info("Scenario %s started", name)
            try:
                await fn(run)
            finally:
                await run.teardown()
            logger.info("Scenario %s passed", name)

        wrapper.scenario_name = name
        SCENARIOS[name] = wrapper
        return wrapper
    return decorator


async def provision_category(run: ScenarioRun) -> str:
    payload = run.factories.categories.build()
    with run.step("provision category") as s:
        resp = await category_service.create_category(run.client, run.token, payload)
        s.status(resp)
        body = s.json(resp, dict, "Expected the created category as a JSON object")
        category_id = body.get("_id")
        if s.not_empty(category_id, "Category ID should not be null or empty"):
            run.track_category(str(category_id))
    return str(category_id)


async def provision_book(run: ScenarioRun, category_id: str) -> tuple[str, BookCreate]:
    payload = run.factories.books.build(category_id)
    with run.step("provision book") as s:
        resp = await book_service.create_book(run.client, run.token, payload)
        s.status(resp)
        body = s.json(resp, dict, "Expected the created book as a JSON object")
        book_id = body.get("_id")
        if s.not_empty(book_id, "Created book didn't have an Id."):
            run.track_book(str(book_id))
    return str(book_id), payload
