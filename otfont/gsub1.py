"""GSUB lookup type 1: single substitution."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from otfont.binary import DeserializationError, Reader, SerializationError, pack_offset_table
from otfont.coverage import Coverage


def _wrap16(value: int) -> int:
    """Wrap an integer into the signed 16-bit range."""
    return ((value + 0x8000) & 0xFFFF) - 0x8000


@dataclass
class SingleSubst:
    """Maps each input glyph ID to the glyph ID replacing it."""

    mapping: dict[int, int] = field(default_factory=dict)

    def _best_format(self) -> tuple[int, int]:
        items = sorted(self.mapping.items())
        if not items:
            return 2, 0
        first_left, first_right = items[0]
        delta = _wrap16(_wrap16(first_right) - _wrap16(first_left))
        if all(_wrap16(_wrap16(left) + delta) == _wrap16(right) for left, right in items[1:]):
            return 1, delta
        return 2, delta

    @classmethod
    def read(cls, reader: Reader) -> SingleSubst:
        """Decode a single substitution subtable at the reader's position."""
        table = Reader(reader.data, reader.pos)
        fmt = table.read("H")
        if fmt == 1:
            coverage_offset, delta = table.read("Hh")
            coverage = Coverage.read(table.follow(coverage_offset))
            return cls({glyph: (glyph + delta) & 0xFFFF for glyph in coverage.glyphs})
        if fmt == 2:
            coverage_offset, count = table.read("HH")
            substitutes = table.read_array("H", count)
            coverage = Coverage.read(table.follow(coverage_offset))
            return cls(dict(zip(coverage.glyphs, substitutes)))
        raise DeserializationError(f"Bad single substitution format {fmt}")

    @classmethod
    def from_bytes(cls, data: bytes) -> SingleSubst:
        """Decode a binary single substitution subtable."""
        return cls.read(Reader(data))

    def to_bytes(self) -> bytes:
        """Encode this subtable, as a delta (format 1) where that is possible."""
        inputs = sorted(self.mapping)
        fmt, delta = self._best_format()
        try:
            coverage = Coverage(inputs).to_bytes()
            if fmt == 1:
                tail = struct.pack(">h", delta)
            else:
                substitutes = [self.mapping[glyph] for glyph in inputs]
                tail = struct.pack(f">H{len(substitutes)}H", len(substitutes), *substitutes)
            return pack_offset_table([struct.pack(">H", fmt), [coverage], tail])
        except struct.error as exc:
            raise SerializationError(f"Cannot encode single substitution: {exc}") from exc