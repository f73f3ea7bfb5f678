import argparse
import asyncio
import logging
import sys

from bookcheck.config import settings
from bookcheck.errors import AuthenticationError, UnknownScenarioError
from bookcheck.http import get_client
from bookcheck.scenarios.base import SCENARIOS
from bookcheck.scenarios.runner import format_report, resolve, run_scenarios
from bookcheck.services.auth_service import authenticate

logger = logging.getLogger("bookcheck")


async def run(args) -> int:
    names = resolve(args.scenario)
    async with get_client(args.base_url) as client:
        token = await authenticate(client, args.email, args.password)
        results = await run_scenarios(client, token, names)
    print(format_report(results))
    return 0 if all(r.passed for r in results) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bookcheck", description="Run end-to-end checks against a book catalog API")
    parser.add_argument("--base-url", default=settings.base_url, help="Catalog API base URL")
    parser.add_argument("--email", default=settings.auth_email, help="Login email")
    parser.add_argument("--password", default=settings.auth_password, help="Login password")
    parser.add_argument("-s", "--scenario", action="append", help="Scenario to run (repeatable, default: all)")
    parser.add_argument("--list", action="store_true", help="List scenarios and exit")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )
    if args.list:
        for name in SCENARIOS:
            print(name)
        return 0
    try:
        return asyncio.run(run(args))
    except UnknownScenarioError as e:
        logger.error("%s (known: %s)", e.message, ", ".join(e.details["known"]))
        return 2
    except AuthenticationError as e:
        logger.error(e.message)
        return 2


if __name__ == "__main__":
    sys.exit(main())
