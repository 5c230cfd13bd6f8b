"""Basic resultkit example.

Demonstrates parsing user input into Results, recovering from failures,
and bridging a coroutine.

Usage:
    python examples/basic_usage.py
"""

import asyncio

from src.resultkit import Err, Ok, Result, from_awaitable, try_call


def parse_port(raw: str) -> Result[int, ValueError]:
    parsed = try_call(int, raw)
    if parsed.is_err():
        return Err(ValueError(f"not a number: {raw!r}"))
    port = parsed.unwrap()
    if not 0 < port < 65536:
        return Err(ValueError(f"out of range: {port}"))
    return Ok(port)


async def lookup_host(name: str) -> str:
    await asyncio.sleep(0)
    if not name:
        raise LookupError("empty host name")
    return f"{name}.internal"


def main() -> None:
    # 1. Branch explicitly on each outcome
    for raw in ["8080", "http", "70000"]:
        message = parse_port(raw).match(
            ok=lambda port: f"listening on {port}",
            err=lambda e: f"rejected: {e}",
        )
        print(f"{raw!r:>8} -> {message}")

    # 2. Fall back without branching
    port = parse_port("http").map_ok(lambda p: p + 1).unwrap_or_default(8000)
    print(f"Fallback port: {port}")

    # 3. Bridge a coroutine
    for name in ["db", ""]:
        result = asyncio.run(from_awaitable(lookup_host(name)))
        print(result.unwrap_or_else(lambda e: f"lookup failed: {e}"))


if __name__ == "__main__":
    main()
