class LazyWireError(Exception):
    """Represent a base class for all lazywire-specific failures.

    Catch this type when you want to handle any error raised by lazywire itself.
    Failures raised by a wrapped factory or resolver are never converted into
    this type; they reach the caller unchanged.
    """


class LazyWireConfigurationError(LazyWireError):
    """Signal an invalid or ambiguous lazy value configuration.

    Raised by ``LazyValue`` and ``AsyncLazyValue`` constructors when the strategy
    cannot be classified, when the resolver does not expose the expected
    ``resolve``/``aresolve`` method, or when ``lock_mode`` is not supported by
    the lazy value flavor.

    Typical fixes include passing a zero-argument callable without a resolver,
    passing a key together with a resolver, or using the explicit
    ``from_factory``/``from_key`` constructors when the input is ambiguous.
    """


class LazyWireReentrantAccessError(LazyWireError):
    """Signal that a strategy asked for the value it is still building.

    Raised by ``get_instance``/``aget_instance`` when the factory or resolver,
    directly or through a dependency cycle, calls back into the same lazy value
    while its first initialization is running in the same thread or task.

    Nothing is cached, so the lazy value can be retried once the cycle is
    broken. Typical fixes include removing the self-reference from the factory
    or breaking the resolver cycle with a second lazy value.
    """
