"""Failures propagate unchanged and nothing is cached.

A strategy that raises leaves the lazy value uninitialized, so the next
``get_instance()`` call runs the strategy again. Ambiguous configuration fails
fast at construction with ``LazyWireConfigurationError``, and a strategy that
needs its own result raises ``LazyWireReentrantAccessError`` instead of blocking.
"""

from __future__ import annotations

from lazywire import LazyValue, LazyWireConfigurationError, LazyWireReentrantAccessError


class Connection:
    pass


class MiniResolver:
    def resolve(self, dependency: object) -> object:
        msg = f"{dependency!r} is not registered"
        raise LookupError(msg)


def main() -> None:
    attempts = 0

    def connect() -> Connection:
        nonlocal attempts
        attempts += 1
        if attempts == 1:
            msg = "database is starting"
            raise ConnectionError(msg)
        return Connection()

    lazy_connection = LazyValue(connect)
    try:
        lazy_connection.get_instance()
    except ConnectionError as error:
        print(f"first_call={type(error).__name__}: {error}")  # => first_call=ConnectionError: database is starting

    print(f"initialized={lazy_connection.is_initialized}")  # => initialized=False
    lazy_connection.get_instance()
    print(f"attempts={attempts} initialized={lazy_connection.is_initialized}")  # => attempts=2 initialized=True

    missing = LazyValue("cache", MiniResolver())
    try:
        missing.get_instance()
    except LookupError as error:
        print(f"resolver={type(error).__name__}: {error}")  # => resolver=LookupError: 'cache' is not registered

    try:
        LazyValue("cache")
    except LazyWireConfigurationError as error:
        print(f"config={type(error).__name__}")  # => config=LazyWireConfigurationError

    try:
        LazyValue(connect, MiniResolver())
    except LazyWireConfigurationError as error:
        print(f"ambiguous={type(error).__name__}")  # => ambiguous=LazyWireConfigurationError

    holder: list[LazyValue[object]] = []
    holder.append(LazyValue(lambda: holder[0].get_instance()))
    try:
        holder[0].get_instance()
    except LazyWireReentrantAccessError as error:
        print(f"self_reference={type(error).__name__}")  # => self_reference=LazyWireReentrantAccessError


if __name__ == "__main__":
    main()
