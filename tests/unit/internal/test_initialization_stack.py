from __future__ import annotations

import pytest

from lazywire._internal.initialization_stack import initialization_guard
from lazywire.exceptions import LazyWireReentrantAccessError


def test_nested_guard_for_same_owner_raises() -> None:
    owner = object()

    with initialization_guard(owner, "factory=demo"):
        with pytest.raises(LazyWireReentrantAccessError, match=r"\(factory=demo\)"):
            with initialization_guard(owner, "factory=demo"):
                pass


def test_guard_is_released_after_exit() -> None:
    owner = object()

    with initialization_guard(owner, "factory=demo"):
        pass

    with initialization_guard(owner, "factory=demo"):
        pass


def test_guard_is_released_after_error() -> None:
    owner = object()

    with pytest.raises(ValueError, match="boom"):
        with initialization_guard(owner, "factory=demo"):
            raise ValueError("boom")

    with initialization_guard(owner, "factory=demo"):
        pass


def test_different_owners_nest() -> None:
    with initialization_guard(object(), "key='outer'"):
        with initialization_guard(object(), "key='inner'"):
            pass
