# bluehal_utils

Small, dependency-free helpers for working with firmware images, flash memory
and the XMODEM serial transfer protocol.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `bluehal_utils.bitwise`

Bit checks on integers and on sequences of integers.

```python
from bluehal_utils.bitwise import is_set, is_clear, is_subset_of, slice_is_subset_of

is_set(3, 1)                 # True
is_clear(2, 0)               # True
is_subset_of(0xAA, 0xFF)     # True: every 1 bit in 0xAA is also 1 in 0xFF
slice_is_subset_of([0x12, 0x34], [0xFF, 0xFF])  # True
slice_is_subset_of([0xFF, 0xFF], [0xFF])        # False: longer than the other
```

`is_set` and `is_clear` accept bit indices 0 to 31 and raise `ValueError`
for any other index. `slice_is_subset_of` is handy for checking whether data
can be written over flash without erasing it first.

### `bluehal_utils.buffer`

Fill an existing mutable sequence from an iterable.

```python
from bluehal_utils.buffer import collect_into, try_collect_into

target = [0] * 10
collect_into(range(3), target)        # 3; target now starts 0, 1, 2

target = [0] * 10
try_collect_into([3, 2, 1], target)   # 3
try_collect_into([3, 2, ValueError("bad")], target)  # raises ValueError
```

Both write from the start of `target`, stop when either the iterable or the
target runs out, and return the number of items written. `try_collect_into`
raises any item that is an exception; items written before it stay in place.

### `bluehal_utils.guard`

`Guard(item, on_entry, on_exit)` calls `on_entry(item)` as soon as it is
constructed and `on_exit(item)` when the `with` block is left, whether it
ends normally or with an exception. Exceptions are not suppressed, and
`on_exit` runs at most once. Entering the guard gives back the item.

```python
from bluehal_utils.guard import Guard

log = []
with Guard(log, lambda l: l.append("on"), lambda l: l.append("off")) as item:
    item.append("working")
# log == ["on", "working", "off"]
```

### `bluehal_utils.iterator`

```python
from bluehal_utils.iterator import all_unique, until_sequence

all_unique([3, 4, 1, 5])          # True
all_unique([None, 3, 5, None])    # False

list(until_sequence([3, 4, 1, 5, 2, 3, 7, 8], [2, 3, 7]))   # [3, 4, 1, 5]
list(until_sequence([3, 4, 1, 5, 2, 3], [2, 3, 7]))         # [3, 4, 1, 5, 2, 3]
until_sequence([3, 4, 1, 5, 2, 3, 7, 8], [2, 3, 7]).contains_sequence()  # True
```

`until_sequence` returns an `UntilSequence` iterator that yields items until
the given sequence appears, stopping before it. Items that begin to match
the sequence but then diverge are yielded as received.
`contains_sequence()` consumes the rest of the input and reports whether the
sequence was found.

### `bluehal_utils.memory`

Unit conversions and splitting of a memory block across address regions.

```python
from bluehal_utils.memory import kb, mb, Region, overlaps

kb(16)   # 0x4000
mb(1)    # 0x100000

memory = bytes(0x50)
regions = [Region(start=0x30, size=0x10), Region(start=0x40, size=0x05)]
for block, region, address in overlaps(regions, memory, 0x20):
    print(hex(address), len(block))
# 0x30 16
# 0x40 5
```

`overlaps` yields an `Overlap` (with `block`, `region` and `address`
attributes, also unpackable as a tuple) for each region that covers part of
the block, in the order the regions are given. Regions that cover none of
it are skipped. Any object with a `contains(address)` method can serve as a
region.

### `bluehal_utils.xmodem`

Parse XMODEM messages from the start of a byte buffer.

```python
from bluehal_utils.xmodem import parse_message, Chunk, Control, IncompleteError

try:
    message, rest = parse_message(data)
except IncompleteError as error:
    ...  # wait for error.needed more bytes
```

A message is either a `Chunk` (`block_number` and a 128-byte `payload`) or
a `Control` value: `END_OF_TRANSMISSION`, `END_OF_TRANSMISSION_BLOCK` or
`CANCEL`. `parse_message` returns the message and the bytes that follow it,
so a buffer holding several messages can be parsed in a loop.

Errors derive from `XmodemError`: `IncompleteError` when more bytes are
needed, `InvalidMessageError` for an unknown header byte, a block number
whose complement does not match, or a wrong checksum.

The protocol constants `SOH`, `EOT`, `ETB`, `CAN`, `ACK`, `NAK`,
`PAYLOAD_SIZE`, `MAX_PACKET_SIZE` and `DEFAULT_TIMEOUT_SECONDS` are
available from the module.

## What this package does not do

The XMODEM module only parses incoming messages. It does not open serial
ports, send `ACK`/`NAK` replies, handle timeouts or drive a transfer; that
is left to the calling code. There is no command-line tool.