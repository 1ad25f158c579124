"""GPOS value records."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields, replace
from enum import IntFlag
from functools import reduce
from operator import or_

from otfont.binary import Reader, SerializationError


class ValueRecordFlags(IntFlag):
    """Which fields a value record carries."""

    X_PLACEMENT = 0x0001
    Y_PLACEMENT = 0x0002
    X_ADVANCE = 0x0004
    Y_ADVANCE = 0x0008
    X_PLACEMENT_DEVICE = 0x0010
    Y_PLACEMENT_DEVICE = 0x0020
    X_ADVANCE_DEVICE = 0x0040
    Y_ADVANCE_DEVICE = 0x0080


_FIELD_FLAGS = {
    "x_placement": ValueRecordFlags.X_PLACEMENT,
    "y_placement": ValueRecordFlags.Y_PLACEMENT,
    "x_advance": ValueRecordFlags.X_ADVANCE,
    "y_advance": ValueRecordFlags.Y_ADVANCE,
}


@dataclass(frozen=True)
class ValueRecord:
    """Positioning adjustments; ``None`` marks a field that is not present."""

    x_placement: int | None = None
    y_placement: int | None = None
    x_advance: int | None = None
    y_advance: int | None = None

    def _present(self):
        for item in fields(self):
            value = getattr(self, item.name)
            if value is not None:
                yield item.name, value

    def flags(self) -> ValueRecordFlags:
        """Return the format flags describing the fields present."""
        result = ValueRecordFlags(0)
        for name, _ in self._present():
            result |= _FIELD_FLAGS[name]
        return result

    @classmethod
    def read(cls, reader: Reader, flags) -> ValueRecord:
        """Decode a value record whose layout is given by ``flags``."""
        flags = ValueRecordFlags(flags)
        values = {
            name: reader.read("h")
            for name, flag in _FIELD_FLAGS.items()
            if flags & flag
        }
        return cls(**values)

    def to_bytes(self) -> bytes:
        """Encode the fields that are present."""
        values = [value for _, value in self._present()]
        try:
            return struct.pack(f">{len(values)}h", *values)
        except struct.error as exc:
            raise SerializationError(f"Cannot encode value record: {exc}") from exc

    def simplified(self) -> ValueRecord:
        """Return a copy with zero-valued fields removed."""
        return replace(
            self, **{name: None for name, value in self._present() if value == 0}
        )

    def coerced(self, flags) -> ValueRecord:
        """Return a copy with any field named by ``flags`` but missing set to zero.

        Fields are only ever added, never removed.
        """
        flags = ValueRecordFlags(flags)
        return replace(
            self,
            **{
                name: 0
                for name, flag in _FIELD_FLAGS.items()
                if flags & flag and getattr(self, name) is None
            },
        )


def highest_format(records) -> ValueRecordFlags:
    """Return the union of the formats of ``records``."""
    return reduce(or_, (record.flags() for record in records), ValueRecordFlags(0))


def coerce_to_same_format(records) -> list[ValueRecord]:
    """Return the records, all widened to a common format."""
    records = list(records)
    if len({record.flags() for record in records}) <= 1:
        return records
    maximum = highest_format(records)
    return [record.coerced(maximum) for record in records]