"""GSUB lookup type 2: multiple (one-to-many) substitution."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from otfont.binary import DeserializationError, Reader, SerializationError, pack_offset_table
from otfont.coverage import Coverage


@dataclass
class MultipleSubst:
    """Maps each input glyph ID to the sequence of glyph IDs replacing it."""

    mapping: dict[int, list[int]] = field(default_factory=dict)

    @classmethod
    def read(cls, reader: Reader) -> MultipleSubst:
        """Decode a multiple substitution subtable at the reader's position."""
        table = reader.follow(0)
        fmt, coverage_offset, count = table.read("HHH")
        if fmt != 1:
            raise DeserializationError(f"Bad multiple substitution format {fmt}")
        sequence_offsets = table.read_array("H", count)
        coverage = Coverage.read(table.follow(coverage_offset))
        mapping: dict[int, list[int]] = {}
        for glyph, offset in zip(coverage.glyphs, sequence_offsets):
            sequence = table.follow(offset)
            mapping[glyph] = sequence.read_array("H", sequence.read("H"))
        return cls(mapping)

    @classmethod
    def from_bytes(cls, data: bytes) -> MultipleSubst:
        """Decode a binary multiple substitution subtable."""
        return cls.read(Reader(data))

    def to_bytes(self) -> bytes:
        """Encode this subtable in format 1."""
        inputs = sorted(self.mapping)
        try:
            coverage = Coverage(inputs).to_bytes()
            sequences = [
                struct.pack(f">H{len(seq)}H", len(seq), *seq)
                for seq in (self.mapping[glyph] for glyph in inputs)
            ]
            return pack_offset_table(
                [
                    struct.pack(">H", 1),
                    [coverage],
                    struct.pack(">H", len(sequences)),
                    sequences,
                ]
            )
        except struct.error as exc:
            raise SerializationError(f"Cannot encode multiple substitution: {exc}") from exc