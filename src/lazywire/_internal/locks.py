from __future__ import annotations

import asyncio
import threading
from typing import Literal

from lazywire.exceptions import LazyWireConfigurationError
from lazywire.lock_mode import LockMode

LockModeInput = LockMode | Literal["auto"] | str


def normalize_lock_mode(
    lock_mode: LockModeInput,
    *,
    auto_mode: LockMode,
    supported: frozenset[LockMode],
) -> LockMode:
    """Map user lock mode input to a concrete ``LockMode``.

    Args:
        lock_mode: ``LockMode`` member, its string value, or ``"auto"``.
        auto_mode: Mode that ``"auto"`` resolves to for the calling lazy value flavor.
        supported: Modes the calling lazy value flavor can honor.

    """
    if lock_mode == "auto":
        return auto_mode

    if isinstance(lock_mode, LockMode):
        resolved = lock_mode
    else:
        try:
            resolved = LockMode(lock_mode)
        except ValueError:
            msg = (
                f"Invalid lock_mode {lock_mode!r}; expected 'auto' or one of "
                f"{', '.join(repr(mode.value) for mode in LockMode)}."
            )
            raise LazyWireConfigurationError(msg) from None

    if resolved not in supported:
        allowed = ", ".join(sorted(repr(mode.value) for mode in supported))
        msg = f"lock_mode {resolved.value!r} is not supported here; use 'auto' or one of {allowed}."
        raise LazyWireConfigurationError(msg)
    return resolved


def build_thread_lock(lock_mode: LockMode) -> threading.Lock | None:
    """Return a thread lock for ``THREAD`` mode, or ``None`` when locking is disabled.

    Args:
        lock_mode: Normalized lock mode.

    """
    if lock_mode is LockMode.THREAD:
        return threading.Lock()
    return None


def build_async_lock(lock_mode: LockMode) -> asyncio.Lock | None:
    """Return an asyncio lock for ``ASYNC`` mode, or ``None`` when locking is disabled.

    Args:
        lock_mode: Normalized lock mode.

    """
    if lock_mode is LockMode.ASYNC:
        return asyncio.Lock()
    return None
