from lazywire._internal.strategy import StrategyKind
from lazywire.exceptions import (
    LazyWireConfigurationError,
    LazyWireError,
    LazyWireReentrantAccessError,
)
from lazywire.lazy import AsyncLazyValue, LazyValue
from lazywire.lock_mode import LockMode
from lazywire.resolvers import AsyncResolverProtocol, ResolverProtocol

__all__ = [
    "AsyncLazyValue",
    "AsyncResolverProtocol",
    "LazyValue",
    "LazyWireConfigurationError",
    "LazyWireError",
    "LazyWireReentrantAccessError",
    "LockMode",
    "ResolverProtocol",
    "StrategyKind",
]
