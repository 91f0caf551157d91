import pytest

from bluehal_utils.memory import Overlap, Region, kb, mb, overlaps


def test_iterating_over_regions_starting_before_them():
    memory = bytes([0xFF] * 0x50)
    base_address = 0x20
    regions = [Region(start=0x30, size=0x10), Region(start=0x40, size=0x05)]

    pairs = list(overlaps(regions, memory, base_address))

    assert len(pairs) == 2
    block, region, address = pairs[0]
    assert block == memory[0x10:0x20]
    assert region == regions[0]
    assert address == regions[0].start
    block, region, address = pairs[1]
    assert block == memory[0x20:0x25]
    assert region == regions[1]
    assert address == regions[1].start


def test_iterating_over_regions_starting_in_the_middle():
    memory = bytes(30)
    base_address = 15
    regions = [Region(start=10, size=20), Region(start=30, size=100)]

    pairs = list(overlaps(regions, memory, base_address))

    assert len(pairs) == 2
    block, region, address = pairs[0]
    assert block == memory[0:15]
    assert region == regions[0]
    assert address == base_address
    block, region, address = pairs[1]
    assert block == memory[15:30]
    assert region == regions[1]
    assert address == regions[1].start


def test_single_byte():
    memory = bytes(1)
    base_address = 15
    regions = [Region(start=10, size=20), Region(start=30, size=100)]

    pairs = list(overlaps(regions, memory, base_address))

    assert pairs == [Overlap(memory[0:1], regions[0], base_address)]


def test_overlap_keeps_distinct_bytes():
    memory = bytes(range(16))
    regions = [Region(start=4, size=4)]

    (overlap,) = overlaps(regions, memory, 0)

    assert overlap.block == bytes([4, 5, 6, 7])
    assert overlap.address == 4


@pytest.mark.parametrize(
    "address, expected",
    [(9, False), (10, True), (29, True), (30, False)],
)
def test_region_contains_bounds(address, expected):
    assert Region(start=10, size=20).contains(address) is expected


def test_conversion_helpers():
    assert kb(16) == 0x4000
    assert mb(1) == 0x100000