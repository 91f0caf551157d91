"""Utilities for filling preallocated buffers from iterables."""

from collections.abc import Iterable, MutableSequence
from itertools import islice
from typing import Any, TypeVar

T = TypeVar("T")


def collect_into(iterable: Iterable[T], target: MutableSequence[T]) -> int:
    """Write items from ``iterable`` into ``target`` from its start.

    Stops when either runs out; no more items are drawn than ``target`` can
    hold. Returns the number of items written.
    """
    count = 0
    for count, item in enumerate(islice(iterable, len(target)), start=1):
        target[count - 1] = item
    return count


def try_collect_into(results: Iterable[Any], target: MutableSequence[Any]) -> int:
    """Like :func:`collect_into`, but items that are exceptions are raised.

    Items written before the failing one stay in ``target``. Returns the
    number of items written when no exception is met.
    """
    count = 0
    for count, item in enumerate(islice(results, len(target)), start=1):
        if isinstance(item, BaseException):
            raise item
        target[count - 1] = item
    return count