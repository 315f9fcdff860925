from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, get_origin

from typing_extensions import TypeIs

from lazywire.exceptions import LazyWireConfigurationError


class StrategyKind(Enum):
    """How a lazy value produces its instance."""

    FACTORY = "factory"
    """Call a zero-argument callable."""

    KEY = "key"
    """Pass a key to an external resolver."""


def is_plain_factory(candidate: object) -> TypeIs[Callable[[], Any]]:
    """Return true for callables that can only be factories, never resolver keys.

    Classes and parametrized typing constructs are callable too, but they are
    the usual keys of a dependency-injection container.

    Args:
        candidate: Strategy input being classified.

    """
    if isinstance(candidate, type):
        return False
    if get_origin(candidate) is not None:
        return False
    return callable(candidate)


@dataclass(frozen=True, slots=True)
class FactoryStrategy:
    factory: Callable[[], Any]

    @property
    def kind(self) -> StrategyKind:
        return StrategyKind.FACTORY

    def invoke(self) -> Any:
        return self.factory()

    async def ainvoke(self) -> Any:
        result = self.factory()
        if inspect.isawaitable(result):
            return await result
        return result

    def describe(self) -> str:
        return f"factory={_describe_callable(self.factory)}"


@dataclass(frozen=True, slots=True)
class KeyStrategy:
    key: Any
    resolver: Any

    @property
    def kind(self) -> StrategyKind:
        return StrategyKind.KEY

    def invoke(self) -> Any:
        return self.resolver.resolve(self.key)

    async def ainvoke(self) -> Any:
        aresolve = getattr(self.resolver, "aresolve", None)
        if callable(aresolve):
            result = aresolve(self.key)
        else:
            result = self.resolver.resolve(self.key)
        if inspect.isawaitable(result):
            return await result
        return result

    def describe(self) -> str:
        return f"key={self.key!r}"


Strategy = FactoryStrategy | KeyStrategy


def classify_strategy(
    strategy: object,
    resolver: object | None,
    *,
    resolver_methods: tuple[str, ...],
) -> Strategy:
    """Turn constructor input into a factory or key strategy without invoking it.

    Args:
        strategy: Zero-argument callable or resolver key.
        resolver: External resolver used for keys, or ``None``.
        resolver_methods: Method names of which the resolver must expose at least one.

    """
    if strategy is None:
        msg = "Lazy value strategy cannot be None; pass a zero-argument callable or a key."
        raise LazyWireConfigurationError(msg)

    if resolver is None:
        if not callable(strategy):
            msg = (
                f"Lazy value strategy {strategy!r} is not callable and no resolver was "
                "given to resolve it as a key."
            )
            raise LazyWireConfigurationError(msg)
        return build_factory_strategy(strategy)

    if is_plain_factory(strategy):
        msg = (
            f"Lazy value strategy {_describe_callable(strategy)} is a factory but a "
            "resolver was also given. Use from_factory() or from_key() to disambiguate."
        )
        raise LazyWireConfigurationError(msg)
    return build_key_strategy(strategy, resolver, resolver_methods=resolver_methods)


def build_factory_strategy(factory: object) -> FactoryStrategy:
    """Build a factory strategy from any callable.

    Args:
        factory: Callable invoked with no arguments on first access.

    """
    if not callable(factory):
        msg = f"Lazy value factory must be callable, got {factory!r}."
        raise LazyWireConfigurationError(msg)
    return FactoryStrategy(factory=factory)


def build_key_strategy(
    key: object,
    resolver: object,
    *,
    resolver_methods: tuple[str, ...],
) -> KeyStrategy:
    """Build a key strategy after checking the resolver can serve it.

    Args:
        key: Opaque key handed to the resolver on first access.
        resolver: External resolver.
        resolver_methods: Method names of which the resolver must expose at least one.

    """
    if key is None:
        msg = "Lazy value key cannot be None."
        raise LazyWireConfigurationError(msg)

    if resolver is None or not any(
        callable(getattr(resolver, name, None)) for name in resolver_methods
    ):
        expected = " or ".join(f"'{name}'" for name in resolver_methods)
        msg = f"Resolver {resolver!r} does not provide a callable {expected} method."
        raise LazyWireConfigurationError(msg)

    return KeyStrategy(key=key, resolver=resolver)


def _describe_callable(candidate: object) -> str:
    qualname = getattr(candidate, "__qualname__", None)
    if qualname is None:
        return repr(candidate)
    module = getattr(candidate, "__module__", None)
    if module is None:
        return qualname
    return f"{module}.{qualname}"
