"""GSUB lookup type 4: ligature (many-to-one) substitution."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from otfont.binary import DeserializationError, Reader, SerializationError, pack_offset_table
from otfont.coverage import Coverage


def _read_ligature(reader: Reader) -> tuple[int, list[int]]:
    ligature_glyph, component_count = reader.read("HH")
    if component_count < 1:
        raise DeserializationError("Ligature must have at least one component")
    return ligature_glyph, reader.read_array("H", component_count - 1)


@dataclass
class LigatureSubst:
    """Maps sequences of input glyph IDs to the ligature glyph replacing them."""

    mapping: dict[tuple[int, ...], int] = field(default_factory=dict)

    @classmethod
    def read(cls, reader: Reader) -> LigatureSubst:
        """Decode a ligature substitution subtable at the reader's position."""
        table = Reader(reader.data, reader.pos)
        fmt, coverage_offset, count = table.read("HHH")
        if fmt != 1:
            raise DeserializationError(f"Bad ligature substitution format {fmt}")
        set_offsets = table.read_array("H", count)
        coverage = Coverage.read(table.follow(coverage_offset))
        mapping: dict[tuple[int, ...], int] = {}
        for first, set_offset in zip(coverage.glyphs, set_offsets):
            ligature_set = table.follow(set_offset)
            ligature_offsets = ligature_set.read_array("H", ligature_set.read("H"))
            for offset in ligature_offsets:
                ligature_glyph, components = _read_ligature(ligature_set.follow(offset))
                mapping[(first, *components)] = ligature_glyph
        return cls(mapping)

    @classmethod
    def from_bytes(cls, data: bytes) -> LigatureSubst:
        """Decode a binary ligature substitution subtable."""
        return cls.read(Reader(data))

    def to_bytes(self) -> bytes:
        """Encode this subtable in format 1."""
        by_first: dict[int, list[tuple[int, ...]]] = {}
        for sequence in sorted(tuple(key) for key in self.mapping):
            if not sequence:
                raise SerializationError("Ligature input sequence must not be empty")
            by_first.setdefault(sequence[0], []).append(sequence)
        firsts = sorted(by_first)
        try:
            coverage = Coverage(firsts).to_bytes()
            ligature_sets = []
            for first in firsts:
                ligatures = [
                    struct.pack(
                        f">HH{len(sequence) - 1}H",
                        self.mapping[sequence],
                        len(sequence),
                        *sequence[1:],
                    )
                    for sequence in by_first[first]
                ]
                ligature_sets.append(
                    pack_offset_table([struct.pack(">H", len(ligatures)), ligatures])
                )
            return pack_offset_table(
                [
                    struct.pack(">H", 1),
                    [coverage],
                    struct.pack(">H", len(ligature_sets)),
                    ligature_sets,
                ]
            )
        except struct.error as exc:
            raise SerializationError(f"Cannot encode ligature substitution: {exc}") from exc