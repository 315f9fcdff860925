from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar, cast, overload

from lazywire._internal.initialization_stack import initialization_guard
from lazywire._internal.locks import (
    LockModeInput,
    build_async_lock,
    build_thread_lock,
    normalize_lock_mode,
)
from lazywire._internal.strategy import (
    Strategy,
    StrategyKind,
    build_factory_strategy,
    build_key_strategy,
    classify_strategy,
)
from lazywire.defaults import DEFAULT_LOCK_MODE
from lazywire.lock_mode import LockMode
from lazywire.resolvers import AsyncResolverProtocol, ResolverProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING_INSTANCE: Any = object()

_SYNC_RESOLVER_METHODS = ("resolve",)
_ASYNC_RESOLVER_METHODS = ("aresolve", "resolve")
_SYNC_LOCK_MODES = frozenset({LockMode.THREAD, LockMode.NONE})
_ASYNC_LOCK_MODES = frozenset({LockMode.ASYNC, LockMode.NONE})


class LazyValue(Generic[T]):
    """Defer and memoize construction of an expensive value.

    The strategy is classified when the lazy value is created and invoked on the
    first ``get_instance()`` call. Every later call returns the identical cached
    object without invoking the strategy again.

    When the strategy raises, the exception propagates unchanged and nothing is
    cached, so the next ``get_instance()`` call retries the strategy.

    Examples:
        .. code-block:: python

            report = LazyValue(build_report)
            report.get_instance()  # builds
            report.get_instance()  # cached

            service = LazyValue(BloatedService, container)
            service.get_instance()  # container.resolve(BloatedService)

    """

    __slots__ = ("_instance", "_lock", "_lock_mode", "_strategy")

    @overload
    def __init__(
        self,
        strategy: Callable[[], T],
        resolver: None = None,
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> None: ...

    @overload
    def __init__(
        self,
        strategy: type[T],
        resolver: ResolverProtocol,
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> None: ...

    @overload
    def __init__(
        self,
        strategy: Any,
        resolver: ResolverProtocol,
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> None: ...

    def __init__(
        self,
        strategy: Any,
        resolver: ResolverProtocol | None = None,
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> None:
        """Create the lazy wrapper without invoking the strategy.

        Args:
            strategy: Zero-argument callable (function, lambda, bound method, class)
                producing the value, or a key resolved through ``resolver``.
            resolver: External resolver with a ``resolve(key)`` method. When given,
                ``strategy`` is treated as a key.
            lock_mode: ``"auto"``, ``LockMode.THREAD`` or ``LockMode.NONE``.

        Raises:
            LazyWireConfigurationError: If the strategy cannot be classified, the
                resolver has no ``resolve`` method, or the lock mode is unsupported.

        """
        self._init_state(
            classify_strategy(
                strategy,
                resolver,
                resolver_methods=_SYNC_RESOLVER_METHODS,
            ),
            lock_mode,
        )

    def _init_state(self, strategy: Strategy, lock_mode: LockModeInput) -> None:
        self._strategy = strategy
        self._lock_mode = normalize_lock_mode(
            lock_mode,
            auto_mode=LockMode.THREAD,
            supported=_SYNC_LOCK_MODES,
        )
        self._lock = build_thread_lock(self._lock_mode)
        self._instance: T = _MISSING_INSTANCE

    @classmethod
    def from_factory(
        cls,
        factory: Callable[[], T],
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> LazyValue[T]:
        """Create a lazy value that calls ``factory`` with no arguments on first access.

        Args:
            factory: Any zero-argument callable, classes included.
            lock_mode: ``"auto"``, ``LockMode.THREAD`` or ``LockMode.NONE``.

        """
        lazy_value = cls.__new__(cls)
        lazy_value._init_state(build_factory_strategy(factory), lock_mode)
        return lazy_value

    @classmethod
    def from_key(
        cls,
        key: Any,
        resolver: ResolverProtocol,
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> LazyValue[Any]:
        """Create a lazy value that resolves ``key`` through ``resolver`` on first access.

        Unlike the constructor, any non-``None`` key is accepted, including
        plain functions registered as keys in a container.

        Args:
            key: Opaque key passed to ``resolver.resolve``.
            resolver: External resolver with a ``resolve(key)`` method.
            lock_mode: ``"auto"``, ``LockMode.THREAD`` or ``LockMode.NONE``.

        """
        lazy_value = cls.__new__(cls)
        lazy_value._init_state(
            build_key_strategy(key, resolver, resolver_methods=_SYNC_RESOLVER_METHODS),
            lock_mode,
        )
        return lazy_value

    def get_instance(self) -> T:
        """Return the wrapped value, creating it on the first call.

        Raises:
            Exception: Whatever the factory or resolver raised, unchanged. The value
                stays uncreated and the next call retries.
            LazyWireReentrantAccessError: If the strategy calls back into this lazy
                value while it is being created.

        """
        instance = self._instance
        if instance is not _MISSING_INSTANCE:
            return instance

        with initialization_guard(self, self._strategy.describe()):
            lock = self._lock
            if lock is None:
                return self._create()

            with lock:
                instance = self._instance
                if instance is not _MISSING_INSTANCE:
                    return instance
                return self._create()

    def _create(self) -> T:
        instance = cast("T", self._strategy.invoke())
        self._instance = instance
        logger.debug("Lazy value created from %s", self._strategy.describe())
        return instance

    @property
    def is_initialized(self) -> bool:
        """Return whether the value has been created and cached."""
        return self._instance is not _MISSING_INSTANCE

    @property
    def lock_mode(self) -> LockMode:
        """Return the lock mode guarding first initialization."""
        return self._lock_mode

    @property
    def strategy_kind(self) -> StrategyKind:
        """Return whether the value comes from a factory or a resolver key."""
        return self._strategy.kind

    def __repr__(self) -> str:
        state = "initialized" if self.is_initialized else "uninitialized"
        return f"{type(self).__name__}({self._strategy.describe()}, {state})"


class AsyncLazyValue(Generic[T]):
    """Defer and memoize construction of a value that may need awaiting.

    Factories may be ``async def`` functions or plain callables; awaitable
    results are awaited. Keys are resolved with the resolver's ``aresolve``
    method when it has one, falling back to ``resolve``.

    Memoization, identity and retry-on-failure rules match ``LazyValue``.
    """

    __slots__ = ("_instance", "_lock", "_lock_mode", "_strategy")

    @overload
    def __init__(
        self,
        strategy: Callable[[], Awaitable[T]] | Callable[[], T],
        resolver: None = None,
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> None: ...

    @overload
    def __init__(
        self,
        strategy: type[T],
        resolver: AsyncResolverProtocol | ResolverProtocol,
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> None: ...

    @overload
    def __init__(
        self,
        strategy: Any,
        resolver: AsyncResolverProtocol | ResolverProtocol,
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> None: ...

    def __init__(
        self,
        strategy: Any,
        resolver: AsyncResolverProtocol | ResolverProtocol | None = None,
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> None:
        """Create the async lazy wrapper without invoking the strategy.

        Args:
            strategy: Zero-argument callable or coroutine function producing the
                value, or a key resolved through ``resolver``.
            resolver: External resolver with an ``aresolve(key)`` or ``resolve(key)``
                method. When given, ``strategy`` is treated as a key.
            lock_mode: ``"auto"``, ``LockMode.ASYNC`` or ``LockMode.NONE``.

        Raises:
            LazyWireConfigurationError: If the strategy cannot be classified, the
                resolver has neither method, or the lock mode is unsupported.

        """
        self._init_state(
            classify_strategy(
                strategy,
                resolver,
                resolver_methods=_ASYNC_RESOLVER_METHODS,
            ),
            lock_mode,
        )

    def _init_state(self, strategy: Strategy, lock_mode: LockModeInput) -> None:
        self._strategy = strategy
        self._lock_mode = normalize_lock_mode(
            lock_mode,
            auto_mode=LockMode.ASYNC,
            supported=_ASYNC_LOCK_MODES,
        )
        self._lock = build_async_lock(self._lock_mode)
        self._instance: T = _MISSING_INSTANCE

    @classmethod
    def from_factory(
        cls,
        factory: Callable[[], Awaitable[T]] | Callable[[], T],
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> AsyncLazyValue[T]:
        """Create an async lazy value that calls ``factory`` on first access.

        Args:
            factory: Any zero-argument callable or coroutine function, classes included.
            lock_mode: ``"auto"``, ``LockMode.ASYNC`` or ``LockMode.NONE``.

        """
        lazy_value = cls.__new__(cls)
        lazy_value._init_state(build_factory_strategy(factory), lock_mode)
        return lazy_value

    @classmethod
    def from_key(
        cls,
        key: Any,
        resolver: AsyncResolverProtocol | ResolverProtocol,
        *,
        lock_mode: LockModeInput = DEFAULT_LOCK_MODE,
    ) -> AsyncLazyValue[Any]:
        """Create an async lazy value that resolves ``key`` through ``resolver``.

        Args:
            key: Opaque key passed to ``resolver.aresolve`` or ``resolver.resolve``.
            resolver: External resolver with an ``aresolve`` or ``resolve`` method.
            lock_mode: ``"auto"``, ``LockMode.ASYNC`` or ``LockMode.NONE``.

        """
        lazy_value = cls.__new__(cls)
        lazy_value._init_state(
            build_key_strategy(key, resolver, resolver_methods=_ASYNC_RESOLVER_METHODS),
            lock_mode,
        )
        return lazy_value

    async def aget_instance(self) -> T:
        """Return the wrapped value, creating it on the first await.

        Raises:
            Exception: Whatever the factory or resolver raised, unchanged. The value
                stays uncreated and the next call retries.
            LazyWireReentrantAccessError: If the strategy calls back into this lazy
                value while it is being created.

        """
        instance = self._instance
        if instance is not _MISSING_INSTANCE:
            return instance

        with initialization_guard(self, self._strategy.describe()):
            lock = self._lock
            if lock is None:
                return await self._acreate()

            async with lock:
                instance = self._instance
                if instance is not _MISSING_INSTANCE:
                    return instance
                return await self._acreate()

    async def _acreate(self) -> T:
        instance = cast("T", await self._strategy.ainvoke())
        self._instance = instance
        logger.debug("Async lazy value created from %s", self._strategy.describe())
        return instance

    @property
    def is_initialized(self) -> bool:
        """Return whether the value has been created and cached."""
        return self._instance is not _MISSING_INSTANCE

    @property
    def lock_mode(self) -> LockMode:
        """Return the lock mode guarding first initialization."""
        return self._lock_mode

    @property
    def strategy_kind(self) -> StrategyKind:
        """Return whether the value comes from a factory or a resolver key."""
        return self._strategy.kind

    def __repr__(self) -> str:
        state = "initialized" if self.is_initialized else "uninitialized"
        return f"{type(self).__name__}({self._strategy.describe()}, {state})"
