from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from lazywire.exceptions import LazyWireReentrantAccessError

# Ids of lazy values whose first initialization is running in the current
# thread or task. Tasks created during initialization inherit the tuple.
_initializing: ContextVar[tuple[int, ...]] = ContextVar(
    "lazywire_initializing",
    default=(),
)


@contextmanager
def initialization_guard(owner: object, description: str) -> Iterator[None]:
    """Mark ``owner`` as initializing and reject re-entrant initialization.

    Args:
        owner: Lazy value entering its slow path.
        description: Human-readable strategy description used in the error.

    """
    stack = _initializing.get()
    owner_id = id(owner)
    if owner_id in stack:
        msg = (
            f"Re-entrant access to a lazy value ({description}) while it is "
            "still being created; the strategy depends on its own result."
        )
        raise LazyWireReentrantAccessError(msg)

    token = _initializing.set((*stack, owner_id))
    try:
        yield
    finally:
        _initializing.reset(token)
