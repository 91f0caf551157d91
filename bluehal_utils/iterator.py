"""Generic iterator utilities."""

from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_NOTHING = object()


def all_unique(iterable: Iterable[Any]) -> bool:
    """Return True if no two elements of ``iterable`` compare equal."""
    hashable_seen: set = set()
    seen: list = []
    for element in iterable:
        if isinstance(element, Hashable):
            try:
                if element in hashable_seen:
                    return False
                hashable_seen.add(element)
                seen.append(element)
                continue
            except TypeError:
                pass
        if any(element == other for other in seen):
            return False
        seen.append(element)
    return True


class UntilSequence(Iterator[T], Generic[T]):
    """Yields items of an iterable until ``sequence`` appears, stopping before it.

    Items that start to match the sequence but then diverge are yielded as
    they were received.
    """

    def __init__(self, iterable: Iterable[T], sequence: Sequence[T]) -> None:
        self._inner = iter(iterable)
        self._sequence = tuple(sequence)
        self._head = 0
        self._tail = 0
        self._divergent: Any = _NOTHING

    def __iter__(self) -> "UntilSequence[T]":
        return self

    def __next__(self) -> T:
        while True:
            if self._tail == len(self._sequence):
                raise StopIteration
            if self._divergent is not _NOTHING:
                return self._replay()
            try:
                candidate = next(self._inner)
            except StopIteration:
                return self._replay()
            if candidate == self._sequence[self._tail]:
                self._tail += 1
            else:
                self._divergent = candidate

    def _replay(self) -> T:
        """Yield the buffered partial match, then the divergent item."""
        if self._head == self._tail:
            divergent, self._divergent = self._divergent, _NOTHING
            self._head = self._tail = 0
            if divergent is _NOTHING:
                raise StopIteration
            return divergent
        self._head += 1
        return self._sequence[self._head - 1]

    def contains_sequence(self) -> bool:
        """Consume the rest of the input and report whether the sequence was found."""
        for _ in self:
            pass
        return self._tail == len(self._sequence)


def until_sequence(iterable: Iterable[T], sequence: Sequence[T]) -> UntilSequence[T]:
    """Return an iterator over ``iterable`` that stops before ``sequence``."""
    return UntilSequence(iterable, sequence)