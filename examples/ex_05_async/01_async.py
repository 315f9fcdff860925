"""Async lazy values.

``AsyncLazyValue`` awaits ``async def`` factories and uses the resolver's
``aresolve`` method for keys. Concurrent first awaits share one invocation.
"""

from __future__ import annotations

import asyncio
from typing import Any

from lazywire import AsyncLazyValue


class Database:
    pass


class AsyncMiniResolver:
    def __init__(self) -> None:
        self.calls = 0

    async def aresolve(self, dependency: Any) -> Any:
        self.calls += 1
        await asyncio.sleep(0)
        return dependency()


async def main() -> None:
    connects = 0

    async def connect() -> Database:
        nonlocal connects
        connects += 1
        await asyncio.sleep(0.01)
        return Database()

    lazy_database = AsyncLazyValue(connect)
    results = await asyncio.gather(*(lazy_database.aget_instance() for _ in range(5)))
    print(f"connects={connects}")  # => connects=1
    print(f"shared={all(result is results[0] for result in results)}")  # => shared=True

    resolver = AsyncMiniResolver()
    lazy_resolved = AsyncLazyValue(Database, resolver)
    first = await lazy_resolved.aget_instance()
    second = await lazy_resolved.aget_instance()
    print(f"aresolve_calls={resolver.calls} same={first is second}")  # => aresolve_calls=1 same=True
    print(f"lock_mode={lazy_resolved.lock_mode.value}")  # => lock_mode=async


if __name__ == "__main__":
    asyncio.run(main())
