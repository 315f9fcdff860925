from __future__ import annotations

from typing import Any, Protocol, TypeVar, overload, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class ResolverProtocol(Protocol):
    """Protocol for an external resolver that builds values from keys.

    Any dependency-injection container exposing ``resolve`` satisfies it; the
    lazy value never looks a resolver up globally, it is always passed in.
    """

    @overload
    def resolve(self, dependency: type[T]) -> T: ...

    @overload
    def resolve(self, dependency: Any) -> Any: ...

    def resolve(self, dependency: Any) -> Any:
        """Resolve the given key and return its instance.

        Args:
            dependency: Opaque key identifying the value to build.

        """


@runtime_checkable
class AsyncResolverProtocol(Protocol):
    """Protocol for an external resolver that builds values from keys asynchronously."""

    @overload
    async def aresolve(self, dependency: type[T]) -> T: ...

    @overload
    async def aresolve(self, dependency: Any) -> Any: ...

    async def aresolve(self, dependency: Any) -> Any:
        """Resolve the given key asynchronously and return its instance.

        Args:
            dependency: Opaque key identifying the value to build.

        """
