"""Quickstart: defer an expensive construction until it is first needed.

``LazyValue`` stores a zero-argument factory and calls it on the first
``get_instance()``. Later calls return the cached object.
"""

from __future__ import annotations

from lazywire import LazyValue


class BloatedService:
    build_count = 0

    def __init__(self) -> None:
        type(self).build_count += 1

    def work_on(self, item: str) -> str:
        return f"worked on {item}"


class SiteController:
    def __init__(self, expensive_service: LazyValue[BloatedService]) -> None:
        self._expensive_service = expensive_service

    def index(self, needs_work: bool) -> str:
        if not needs_work:
            return "nothing to do"
        return self._expensive_service.get_instance().work_on("index")


def main() -> None:
    BloatedService.build_count = 0
    controller = SiteController(LazyValue(BloatedService))

    print(controller.index(needs_work=False))  # => nothing to do
    print(f"builds_after_cheap_request={BloatedService.build_count}")  # => builds_after_cheap_request=0

    print(controller.index(needs_work=True))  # => worked on index
    print(controller.index(needs_work=True))  # => worked on index
    print(f"builds_after_two_requests={BloatedService.build_count}")  # => builds_after_two_requests=1

    counter = iter(range(1, 100))
    lazy_number = LazyValue(lambda: next(counter))
    print(f"first={lazy_number.get_instance()} second={lazy_number.get_instance()}")  # => first=1 second=1


if __name__ == "__main__":
    main()
