"""Resolve the wrapped value through an external resolver.

Pass a resolver (anything with ``resolve(key)``, such as a DI container) and
the strategy becomes a key. The resolver is only called on first access.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from lazywire import LazyValue, StrategyKind


class MiniResolver:
    def __init__(self) -> None:
        self._factories: dict[Any, Callable[[], Any]] = {}
        self.calls = 0

    def add(self, key: Any, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory

    def resolve(self, dependency: Any) -> Any:
        self.calls += 1
        return self._factories[dependency]()


class ReportService:
    pass


class ReportServiceMock(ReportService):
    pass


def main() -> None:
    resolver = MiniResolver()
    resolver.add(ReportService, ReportServiceMock)
    resolver.add("reports", ReportService)

    by_type = LazyValue(ReportService, resolver)
    print(f"kind={by_type.strategy_kind.value}")  # => kind=key
    print(f"resolver_calls_before={resolver.calls}")  # => resolver_calls_before=0

    service = by_type.get_instance()
    print(f"resolved={type(service).__name__}")  # => resolved=ReportServiceMock
    print(f"same={by_type.get_instance() is service}")  # => same=True

    by_alias: LazyValue[ReportService] = LazyValue("reports", resolver)
    print(f"alias={type(by_alias.get_instance()).__name__}")  # => alias=ReportService
    print(f"resolver_calls_after={resolver.calls}")  # => resolver_calls_after=2

    direct = LazyValue(ReportService)
    print(f"without_resolver={direct.strategy_kind is StrategyKind.FACTORY}")  # => without_resolver=True


if __name__ == "__main__":
    main()
