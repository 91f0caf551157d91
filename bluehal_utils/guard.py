"""Context manager that runs one callback on creation and another on exit."""

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Guard(Generic[T]):
    """Calls ``on_entry(item)`` when constructed and ``on_exit(item)`` when the
    ``with`` block ends, however it ends.
    """

    def __init__(self, item: T, on_entry: Callable[[T], object], on_exit: Callable[[T], object]) -> None:
        self.item = item
        self._on_exit: Callable[[T], object] | None = on_exit
        on_entry(item)

    def __enter__(self) -> T:
        return self.item

    def __exit__(self, exc_type, exc, tb) -> bool:
        on_exit, self._on_exit = self._on_exit, None
        if on_exit is not None:
            on_exit(self.item)
        return False