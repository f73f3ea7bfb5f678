"""Grouped checks for a single scenario step.

Every check inside a step is evaluated; when the step ends, all failures
are raised together as one CheckFailedError.
"""
import logging
from typing import Any

import httpx

from bookcheck.errors import CheckFailedError

logger = logging.getLogger(__name__)

_MISSING = object()


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return not value
    return False


class Step:
    def __init__(self, name: str):
        self.name = name
        self.failures: list[str] = []

    def __enter__(self):
        logger.info("Step: %s", self.name)
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.raise_for_failures()
        elif self.failures:
            logger.warning("Step '%s' aborted with pending failures: %s", self.name, "; ".join(self.failures))
        return False

    def check(self, condition: bool, message: str) -> bool:
        if not condition:
            self.failures.append(message)
        return bool(condition)

    def equal(self, actual: Any, expected: Any, message: str) -> bool:
        return self.check(actual == expected, f"{message} (expected {expected!r}, got {actual!r})")

    def number_equal(self, actual: Any, expected: float, message: str) -> bool:
        try:
            ok = actual is not None and not isinstance(actual, bool) and float(actual) == float(expected)
        except (TypeError, ValueError):
            ok = False
        return self.check(ok, f"{message} (expected {expected!r}, got {actual!r})")

    def integer_equal(self, actual: Any, expected: int, message: str) -> bool:
        ok = isinstance(actual, int) and not isinstance(actual, bool) and actual == expected
        return self.check(ok, f"{message} (expected {expected!r}, got {actual!r})")

    def not_empty(self, value: Any, message: str) -> bool:
        return self.check(not is_blank(value), message)

    def status(self, response: httpx.Response, expected: int = httpx.codes.OK, message: str | None = None) -> bool:
        message = message or f"Expected status code {httpx.codes.get_reason_phrase(expected)} ({expected})"
        return self.equal(response.status_code, int(expected), message)

    def json(self, response: httpx.Response, kind: type, message: str) -> Any:
        """Parse the response body as JSON of the given kind.

        The step cannot go on without a body, so a parse failure ends it.
        """
        try:
            body = response.json()
        except ValueError:
            body = _MISSING
        if body is _MISSING or not isinstance(body, kind):
            self.failures.append(f"{message} (body: {response.text[:200]!r})")
            self.raise_for_failures()
        return body

    def raise_for_failures(self):
        if self.failures:
            failures, self.failures = self.failures, []
            raise CheckFailedError(self.name, failures)


def step(name: str) -> Step:
    return Step(name)
