from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior around first-time lazy initialization.

    Lazy value constructors also accept ``"auto"``: ``LazyValue`` maps it to
    ``THREAD`` and ``AsyncLazyValue`` maps it to ``ASYNC``.

    Use ``NONE`` only when the lazy value is never shared between threads or
    tasks; racing first calls may then invoke the strategy more than once.
    """

    THREAD = "thread"
    """Guard initialization with ``threading.Lock`` in synchronous paths."""

    ASYNC = "async"
    """Guard initialization with ``asyncio.Lock`` in asynchronous paths."""

    NONE = "none"
    """Disable locking around initialization."""
