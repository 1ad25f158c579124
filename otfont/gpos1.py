"""GPOS lookup type 1: single positioning."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from otfont.binary import DeserializationError, Reader, SerializationError, pack_offset_table
from otfont.coverage import Coverage
from otfont.valuerecord import ValueRecord, coerce_to_same_format


@dataclass
class SinglePos:
    """Maps each input glyph ID to the value record adjusting it."""

    mapping: dict[int, ValueRecord] = field(default_factory=dict)

    @classmethod
    def read(cls, reader: Reader) -> SinglePos:
        """Decode a single positioning subtable at the reader's position."""
        table = Reader(reader.data, reader.pos)
        fmt, coverage_offset, value_format = table.read("HHH")
        coverage = Coverage.read(table.follow(coverage_offset))
        if fmt == 1:
            record = ValueRecord.read(table, value_format).simplified()
            return cls({glyph: record for glyph in coverage.glyphs})
        if fmt == 2:
            table.read("H")
            return cls(
                {
                    glyph: ValueRecord.read(table, value_format).simplified()
                    for glyph in coverage.glyphs
                }
            )
        raise DeserializationError(f"Bad single positioning format {fmt}")

    @classmethod
    def from_bytes(cls, data: bytes) -> SinglePos:
        """Decode a binary single positioning subtable."""
        return cls.read(Reader(data))

    def to_bytes(self) -> bytes:
        """Encode this subtable, using format 1 when every record is the same."""
        if not self.mapping:
            raise SerializationError("Single positioning subtable needs at least one glyph")
        glyphs = sorted(self.mapping)
        records = [self.mapping[glyph].simplified() for glyph in glyphs]
        try:
            coverage = Coverage(glyphs).to_bytes()
            if all(record == records[0] for record in records):
                record = records[0]
                return pack_offset_table(
                    [
                        struct.pack(">H", 1),
                        [coverage],
                        struct.pack(">H", int(record.flags())),
                        record.to_bytes(),
                    ]
                )
            records = coerce_to_same_format(records)
            return pack_offset_table(
                [
                    struct.pack(">H", 2),
                    [coverage],
                    struct.pack(">HH", int(records[0].flags()), len(records)),
                    b"".join(record.to_bytes() for record in records),
                ]
            )
        except struct.error as exc:
            raise SerializationError(f"Cannot encode single positioning: {exc}") from exc