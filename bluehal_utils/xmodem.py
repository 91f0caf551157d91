"""Xmodem protocol message parser."""

from dataclasses import dataclass
from enum import IntEnum

PAYLOAD_SIZE = 128
MAX_PACKET_SIZE = 132
DEFAULT_TIMEOUT_SECONDS = 3

ACK = 0x06
NAK = 0x15
SOH = 0x01
EOT = 0x04
ETB = 0x17
CAN = 0x18


class XmodemError(Exception):
    """Base class for Xmodem parsing errors."""


class IncompleteError(XmodemError):
    """More input is needed before a message can be parsed."""

    def __init__(self, needed: int) -> None:
        super().__init__(f"incomplete message: {needed} more byte(s) needed")
        self.needed = needed


class InvalidMessageError(XmodemError):
    """The input does not start with a valid Xmodem message."""


class Control(IntEnum):
    """Single-byte control messages."""

    END_OF_TRANSMISSION = EOT
    END_OF_TRANSMISSION_BLOCK = ETB
    CANCEL = CAN


@dataclass(frozen=True)
class Chunk:
    """A data packet carrying a block number and a fixed-size payload."""

    block_number: int
    payload: bytes


def _require(data: bytes, count: int) -> None:
    if len(data) < count:
        raise IncompleteError(count - len(data))


def _parse_chunk(data: bytes) -> tuple[Chunk, bytes]:
    # Header byte is already known to be SOH.
    _require(data, 2)
    block_number = data[1]
    _require(data, 3)
    if data[2] != (~block_number & 0xFF):
        raise InvalidMessageError("block number complement mismatch")
    payload_end = 3 + PAYLOAD_SIZE
    _require(data, payload_end)
    payload = data[3:payload_end]
    _require(data, payload_end + 1)
    if data[payload_end] != sum(payload) & 0xFF:
        raise InvalidMessageError("checksum mismatch")
    return Chunk(block_number, payload), data[payload_end + 1:]


def parse_message(data: bytes) -> tuple[Chunk | Control, bytes]:
    """Parse one message from the start of ``data``.

    Returns the message and the unconsumed remainder. Raises
    :class:`IncompleteError` if more bytes are needed and
    :class:`InvalidMessageError` if the input is not a valid message.
    """
    data = bytes(data)
    _require(data, 1)
    header = data[0]
    if header == SOH:
        return _parse_chunk(data)
    try:
        control = Control(header)
    except ValueError:
        raise InvalidMessageError(f"unexpected header byte 0x{header:02x}") from None
    return control, data[1:]