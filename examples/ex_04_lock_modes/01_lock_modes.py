"""Lock modes for concurrent first access.

1. Default ``lock_mode="auto"`` uses a thread lock for ``LazyValue``: racing
   first calls wait for one factory invocation and share its result.
2. ``lock_mode=LockMode.NONE`` disables locking; racing first calls may each
   run the factory.
"""

from __future__ import annotations

import threading
import time

from lazywire import LazyValue, LockMode


class ExpensiveService:
    pass


def _two_thread_stats(lock_mode: LockMode | str) -> tuple[int, bool]:
    calls = 0
    calls_lock = threading.Lock()
    factory_started = threading.Event()
    factory_release = threading.Event()
    results: list[ExpensiveService | None] = [None, None]

    def factory() -> ExpensiveService:
        nonlocal calls
        with calls_lock:
            calls += 1
            factory_started.set()
        factory_release.wait(timeout=2.0)
        return ExpensiveService()

    lazy = LazyValue(factory, lock_mode=lock_mode)

    def worker(index: int) -> None:
        results[index] = lazy.get_instance()

    thread_0 = threading.Thread(target=worker, args=(0,))
    thread_0.start()

    if not factory_started.wait(timeout=2.0):
        msg = "Factory was not called within timeout."
        raise RuntimeError(msg)

    thread_1 = threading.Thread(target=worker, args=(1,))
    thread_1.start()

    deadline = time.monotonic() + 0.5
    while True:
        with calls_lock:
            current_calls = calls
        if current_calls >= 2 or time.monotonic() >= deadline:
            break
        time.sleep(0.001)

    factory_release.set()

    for thread in (thread_0, thread_1):
        thread.join(timeout=2.0)
        if thread.is_alive():
            msg = "Worker thread did not finish within timeout."
            raise RuntimeError(msg)

    with calls_lock:
        total_calls = calls

    return total_calls, results[0] is results[1]


def main() -> None:
    auto_calls, auto_shared = _two_thread_stats("auto")
    print(f"auto=calls={auto_calls} shared={auto_shared}")  # => auto=calls=1 shared=True

    none_calls, none_shared = _two_thread_stats(LockMode.NONE)
    print(f"none=calls={none_calls} shared={none_shared}")  # => none=calls=2 shared=False

    print(f"default_mode={LazyValue(ExpensiveService).lock_mode.value}")  # => default_mode=thread


if __name__ == "__main__":
    main()
