"""Big-endian binary reading and writing helpers shared by the table modules."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1904, 1, 1)
_SECONDS_PER_DAY = 86400


class DeserializationError(ValueError):
    """Raised when binary data cannot be decoded."""


class SerializationError(ValueError):
    """Raised when a structure cannot be encoded to binary."""


class Reader:
    """A cursor over a byte string that decodes big-endian values.

    ``base`` is the position that offsets read from this table are relative to.
    """

    def __init__(self, data: bytes, pos: int = 0) -> None:
        self.data = bytes(data)
        if not 0 <= pos <= len(self.data):
            raise DeserializationError(f"Position {pos} is outside the data")
        self.pos = pos
        self.base = pos

    def _take(self, size: int) -> bytes:
        end = self.pos + size
        if size < 0 or end > len(self.data):
            raise DeserializationError(
                f"Wanted {size} bytes at position {self.pos}, "
                f"but only {len(self.data) - self.pos} remain"
            )
        chunk = self.data[self.pos:end]
        self.pos = end
        return chunk

    def read(self, fmt: str):
        """Read values laid out as the ``struct`` format ``fmt``.

        A single value is returned bare; several come back as a tuple.
        """
        layout = struct.Struct(">" + fmt)
        values = layout.unpack(self._take(layout.size))
        return values[0] if len(values) == 1 else values

    def read_array(self, fmt: str, count: int) -> list:
        """Read ``count`` values of the single ``struct`` code ``fmt``."""
        if count < 0:
            raise DeserializationError(f"Negative array length {count}")
        layout = struct.Struct(f">{count}{fmt}")
        return list(layout.unpack(self._take(layout.size)))

    def read_bytes(self, count: int) -> bytes:
        """Read ``count`` raw bytes."""
        return self._take(count)

    def peek(self, count: int) -> bytes:
        """Return the next ``count`` bytes without moving the cursor."""
        end = self.pos + count
        if count < 0 or end > len(self.data):
            raise DeserializationError(f"Cannot peek {count} bytes at position {self.pos}")
        return self.data[self.pos:end]

    def seek(self, pos: int) -> None:
        """Move the cursor to an absolute position."""
        if not 0 <= pos <= len(self.data):
            raise DeserializationError(f"Position {pos} is outside the data")
        self.pos = pos

    def follow(self, offset: int) -> Reader:
        """Return a reader for the subtable at ``offset`` from this table's base."""
        return Reader(self.data, self.base + offset)


def pack_offset_table(parts: Iterable[bytes | Sequence[bytes]]) -> bytes:
    """Lay out a table whose header points at subtables with 16-bit offsets.

    Each item of ``parts`` is either ``bytes``, written in place, or a
    sequence of subtable byte strings, written as consecutive 16-bit offsets.
    The subtables follow the header in the order their offsets appear, and
    offsets count from the start of the table.
    """
    parts = list(parts)
    header_size = sum(
        len(part) if isinstance(part, (bytes, bytearray)) else 2 * len(part)
        for part in parts
    )
    head = bytearray()
    tail = bytearray()
    for part in parts:
        if isinstance(part, (bytes, bytearray)):
            head += part
            continue
        for subtable in part:
            offset = header_size + len(tail)
            if offset > 0xFFFF:
                raise SerializationError(f"Offset {offset} does not fit in 16 bits")
            head += struct.pack(">H", offset)
            tail += subtable
    return bytes(head + tail)


def f2dot14_to_float(raw: int) -> float:
    """Convert a signed 2.14 fixed-point integer to a float."""
    return raw / 16384


def float_to_f2dot14(value: float) -> int:
    """Convert a float to a signed 2.14 fixed-point integer."""
    raw = round(value * 16384)
    if not -0x8000 <= raw <= 0x7FFF:
        raise SerializationError(f"{value} is out of range for F2DOT14")
    return raw


def fixed_to_float(raw: int) -> float:
    """Convert a signed 16.16 fixed-point integer to a float."""
    return raw / 65536


def float_to_fixed(value: float) -> int:
    """Convert a float to a signed 16.16 fixed-point integer."""
    raw = round(value * 65536)
    if not -0x80000000 <= raw <= 0x7FFFFFFF:
        raise SerializationError(f"{value} is out of range for Fixed")
    return raw


def longdatetime_to_datetime(seconds: int) -> datetime:
    """Convert seconds since 1904-01-01 00:00 to a naive datetime."""
    return _EPOCH + timedelta(seconds=seconds)


def datetime_to_longdatetime(moment: datetime) -> int:
    """Convert a datetime to whole seconds since 1904-01-01 00:00 UTC."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    delta = moment - _EPOCH
    return delta.days * _SECONDS_PER_DAY + delta.seconds