"""CLI interface for resultkit.

Provides a single command:
- demo: Walk a success or failure through the constructors and combinators
  and print a JSON summary
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from src.resultkit.config import get_settings
from src.resultkit.result import Result, err, from_awaitable, ok


def get_number(fail: bool = False) -> Result[int, Exception]:
    """Sample fallible operation."""
    if fail:
        return err(ValueError("foo"))
    return ok(10)


async def fetch_number(fail: bool = False) -> int:
    """Sample fallible coroutine."""
    await asyncio.sleep(0)
    if fail:
        raise ValueError("boom")
    return 10


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="resultkit - explicit success/failure values"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    demo_parser = subparsers.add_parser("demo", help="Run a complete demo")
    demo_parser.add_argument(
        "--fail", action="store_true", help="Drive the failure path"
    )
    demo_parser.add_argument(
        "--default", type=int, default=100, help="Fallback for unwrap_or_default"
    )

    args = parser.parse_args()

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"ERROR: invalid settings: {e}")
        sys.exit(1)
    logging.basicConfig(level=settings.log_level.value)

    if args.command == "demo":
        run_demo(args.fail, args.default)
    else:
        parser.print_help()
        sys.exit(1)


def run_demo(fail: bool, default: int) -> None:
    """Run every operation once and print what came out."""
    number = get_number(fail)
    bridged = asyncio.run(from_awaitable(fetch_number(fail)))

    chained = (
        number.map_err(lambda e: f"wrapped: {e}")
        .map_ok(lambda n: n * 2)
        .unwrap_or_default(default)
    )
    message = (
        err(Exception("hello"))
        .map_err(lambda e: Exception(f"{e} world"))
        .unwrap_err()
    )

    output = {
        "number": number.match(
            ok=lambda n: {"ok": n},
            err=lambda e: {"err": str(e)},
        ),
        "bridged": bridged.match(
            ok=lambda n: {"ok": n},
            err=lambda e: {"err": f"{type(e).__name__}: {e}"},
        ),
        "chained": chained,
        "recovered": number.unwrap_or_else(lambda e: len(str(e))),
        "message": str(message),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
