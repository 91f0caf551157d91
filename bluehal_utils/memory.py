"""Helpers for splitting a memory block across a sequence of address regions."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Protocol


def kb(value: int) -> int:
    """Return ``value`` kibibytes expressed in bytes."""
    return value * 1024


def mb(value: int) -> int:
    """Return ``value`` mebibytes expressed in bytes."""
    return value * 1024 * 1024


class _Containing(Protocol):
    def contains(self, address: int) -> bool: ...


@dataclass(frozen=True)
class Region:
    """Contiguous address range starting at ``start`` and spanning ``size`` bytes."""

    start: int
    size: int

    def contains(self, address: int) -> bool:
        """Return True if ``address`` falls inside this region."""
        return self.start <= address < self.start + self.size


@dataclass(frozen=True)
class Overlap:
    """Part of a memory block that lies within a region, and its start address."""

    block: bytes
    region: Any
    address: int

    def __iter__(self) -> Iterator[Any]:
        return iter((self.block, self.region, self.address))


def overlaps(regions: Iterable[_Containing], memory: bytes, base_address: int) -> Iterator[Overlap]:
    """Yield, for each region in turn, the part of ``memory`` it covers.

    ``memory`` is taken to start at ``base_address``. Only the first contiguous
    run of covered bytes is yielded per region; regions that cover none of the
    block are skipped.
    """
    length = len(memory)
    for region in regions:
        start = next(
            (index for index in range(length) if region.contains(base_address + index)),
            None,
        )
        if start is None:
            continue
        end = start + 1
        while end < length and region.contains(base_address + end):
            end += 1
        yield Overlap(bytes(memory[start:end]), region, base_address + start)