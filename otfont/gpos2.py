"""GPOS lookup type 2: pair positioning."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from otfont.binary import DeserializationError, Reader, SerializationError, pack_offset_table
from otfont.coverage import Coverage
from otfont.valuerecord import ValueRecord, highest_format


@dataclass
class PairPos:
    """Maps pairs of glyph IDs to the value records adjusting the first and second glyph."""

    mapping: dict[tuple[int, int], tuple[ValueRecord, ValueRecord]] = field(
        default_factory=dict
    )

    @classmethod
    def read(cls, reader: Reader) -> PairPos:
        """Decode a pair positioning subtable at the reader's position."""
        table = Reader(reader.data, reader.pos)
        fmt, coverage_offset, format1, format2 = table.read("HHHH")
        if fmt == 2:
            raise DeserializationError("Class-based pair positioning is not supported")
        if fmt != 1:
            raise DeserializationError(f"Bad pair positioning format {fmt}")
        pair_set_offsets = table.read_array("H", table.read("H"))
        coverage = Coverage.read(table.follow(coverage_offset))
        mapping: dict[tuple[int, int], tuple[ValueRecord, ValueRecord]] = {}
        for left, offset in zip(coverage.glyphs, pair_set_offsets):
            pair_set = table.follow(offset)
            for _ in range(pair_set.read("H")):
                right = pair_set.read("H")
                first = ValueRecord.read(pair_set, format1).simplified()
                second = ValueRecord.read(pair_set, format2).simplified()
                mapping[(left, right)] = (first, second)
        return cls(mapping)

    @classmethod
    def from_bytes(cls, data: bytes) -> PairPos:
        """Decode a binary pair positioning subtable."""
        return cls.read(Reader(data))

    def to_bytes(self) -> bytes:
        """Encode this subtable in format 1."""
        split: dict[int, dict[int, tuple[ValueRecord, ValueRecord]]] = {}
        for (left, right), (first, second) in sorted(self.mapping.items()):
            split.setdefault(left, {})[right] = (first.simplified(), second.simplified())
        all_pairs = [pair for rights in split.values() for pair in rights.values()]
        format1 = highest_format(first for first, _ in all_pairs)
        format2 = highest_format(second for _, second in all_pairs)
        lefts = sorted(split)
        try:
            coverage = Coverage(lefts).to_bytes()
            pair_sets = []
            for left in lefts:
                rights = split[left]
                records = b"".join(
                    struct.pack(">H", right)
                    + first.coerced(format1).to_bytes()
                    + second.coerced(format2).to_bytes()
                    for right, (first, second) in rights.items()
                )
                pair_sets.append(struct.pack(">H", len(rights)) + records)
            return pack_offset_table(
                [
                    struct.pack(">H", 1),
                    [coverage],
                    struct.pack(">HHH", int(format1), int(format2), len(pair_sets)),
                    pair_sets,
                ]
            )
        except struct.error as exc:
            raise SerializationError(f"Cannot encode pair positioning: {exc}") from exc