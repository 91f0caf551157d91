import pytest

from bluehal_utils.buffer import collect_into, try_collect_into

ELEMENTS = 10


class CollectError(Exception):
    pass


def test_collecting_various_types_in_slices():
    ints = [0] * ELEMENTS
    assert collect_into(range(ELEMENTS), ints) == ELEMENTS
    assert ints[5] == 5

    letters = ["a"] * ELEMENTS
    assert collect_into((chr(ord("a") + i) for i in range(3)), letters) == 3
    assert letters[2] == "c"
    assert letters[3] == "a"


def test_collecting_into_bytearray():
    buffer = bytearray(4)
    assert collect_into(b"\x01\x02", buffer) == 2
    assert buffer == bytearray(b"\x01\x02\x00\x00")


def test_collect_does_not_overdraw_iterator():
    source = iter(range(5))
    target = [None] * 3
    assert collect_into(source, target) == 3
    assert target == [0, 1, 2]
    assert next(source) == 3


def test_collect_into_empty_target():
    assert collect_into([1, 2, 3], []) == 0


def test_collecting_fallibly():
    ints = [0] * ELEMENTS
    with pytest.raises(CollectError):
        try_collect_into([3, 2, CollectError()], ints)
    assert ints[:2] == [3, 2]

    ints = [0] * ELEMENTS
    assert try_collect_into([3, 2, 1], ints) == 3
    assert ints[:3] == [3, 2, 1]


def test_error_beyond_target_length_is_not_reached():
    target = [0, 0]
    assert try_collect_into([1, 2, CollectError()], target) == 2
    assert target == [1, 2]