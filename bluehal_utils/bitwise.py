"""Convenience bitwise operations on integers and integer sequences."""

from collections.abc import Sequence

_WORD_BITS = 32


def is_set(value: int, bit: int) -> bool:
    """Return True if ``bit`` (0-31) is set in ``value``."""
    if not 0 <= bit < _WORD_BITS:
        raise ValueError(f"bit index must be in range 0..{_WORD_BITS - 1}, got {bit}")
    return bool(value & (1 << bit))


def is_clear(value: int, bit: int) -> bool:
    """Return True if ``bit`` (0-31) is cleared in ``value``."""
    return not is_set(value, bit)


def is_subset_of(value: int, other: int) -> bool:
    """Return True if every '1' bit in ``value`` is also '1' in ``other``."""
    return (value | other) == other


def slice_is_subset_of(values: Sequence[int], others: Sequence[int]) -> bool:
    """Return True if each element of ``values`` is a bit subset of the matching element of ``others``.

    A sequence longer than ``others`` is never a subset.
    """
    if len(values) > len(others):
        return False
    return all(is_subset_of(a, b) for a, b in zip(values, others))