import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import httpx
from tabulate import tabulate

from bookcheck.errors import ScenarioError, UnknownScenarioError
from bookcheck.factories import Factories
from bookcheck.scenarios.base import SCENARIOS, ScenarioContext
# registers the scenarios
from bookcheck.scenarios import book_scenarios, category_scenarios  # noqa: F401

logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    name: str
    passed: bool
    failures: List[str] = field(default_factory=list)
    duration: float = 0.0


def resolve(names: Optional[Iterable[str]] = None) -> List[str]:
    if not names:
        return list(SCENARIOS)
    selected = []
    for name in names:
        if name not in SCENARIOS:
            raise UnknownScenarioError(name, sorted(SCENARIOS))
        selected.append(name)
    return selected


async def run_scenarios(
    client: httpx.AsyncClient,
    token: str,
    names: Optional[Iterable[str]] = None,
    factories: Optional[Factories] = None,
) -> List[ScenarioResult]:
    """Run the selected scenarios one after the other.

    A failing scenario does not stop the run; its failures land in its result.
    """
    ctx = ScenarioContext(client=client, token=token, factories=factories or Factories())
    results = []
    for name in resolve(names):
        started = time.perf_counter()
        try:
            await SCENARIOS[name](ctx)
        except ScenarioError as e:
            failures = getattr(e, "failures", None) or [e.message]
            if getattr(e, "step", None):
                failures = [f"[{e.step}] {f}" for f in failures]
            logger.error("Scenario %s failed: %s", name, e.message)
            result = ScenarioResult(name, False, failures)
        except httpx.HTTPError as e:
            logger.error("Scenario %s failed on transport: %s", name, e)
            result = ScenarioResult(name, False, [f"{type(e).__name__}: {e}"])
        else:
            result = ScenarioResult(name, True)
        result.duration = time.perf_counter() - started
        results.append(result)
    return results


def format_report(results: List[ScenarioResult]) -> str:
    rows = []
    for r in results:
        rows.append([r.name, "PASS" if r.passed else "FAIL", f"{r.duration:.2f}s", "\n".join(r.failures)])
    passed = sum(1 for r in results if r.passed)
    table = tabulate(rows, headers=["Scenario", "Status", "Time", "Failures"], tablefmt="grid")
    return f"{table}\n{passed}/{len(results)} scenarios passed"
