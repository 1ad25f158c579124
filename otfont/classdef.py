"""OpenType Layout class definition tables."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from otfont.binary import DeserializationError, Reader, SerializationError


def _runs(pairs: list[tuple[int, int]]) -> list[list[tuple[int, int]]]:
    """Split sorted (glyph, class) pairs into runs of consecutive glyphs sharing a class."""
    runs: list[list[tuple[int, int]]] = []
    for glyph, klass in pairs:
        if runs and runs[-1][-1][0] + 1 == glyph and runs[-1][-1][1] == klass:
            runs[-1].append((glyph, klass))
        else:
            runs.append([(glyph, klass)])
    return runs


@dataclass
class ClassDef:
    """A mapping from glyph IDs to glyph classes."""

    classes: dict[int, int] = field(default_factory=dict)

    @classmethod
    def read(cls, reader: Reader) -> ClassDef:
        """Decode a class definition table at the reader's position."""
        fmt = reader.read("H")
        classes: dict[int, int] = {}
        if fmt == 1:
            start, count = reader.read("HH")
            for offset, klass in enumerate(reader.read_array("H", count)):
                classes[start + offset] = klass
        elif fmt == 2:
            count = reader.read("H")
            for _ in range(count):
                start, end, klass = reader.read("HHH")
                for glyph in range(start, end + 1):
                    classes[glyph] = klass
        else:
            raise DeserializationError(f"Bad class definition format {fmt}")
        return cls(classes)

    @classmethod
    def from_bytes(cls, data: bytes) -> ClassDef:
        """Decode a binary class definition table."""
        return cls.read(Reader(data))

    def to_bytes(self) -> bytes:
        """Encode the table in whichever format is smaller."""
        if not self.classes:
            return struct.pack(">HHH", 1, 0, 0)
        pairs = sorted(self.classes.items())
        runs = _runs(pairs)
        first_gid = pairs[0][0]
        last_gid = pairs[-1][0]
        try:
            if len(runs) * 3 > 2 + last_gid - first_gid:
                values = [self.classes.get(gid, 0) for gid in range(first_gid, last_gid + 1)]
                return struct.pack(
                    f">HHH{len(values)}H", 1, first_gid, len(values), *values
                )
            parts = [struct.pack(">HH", 2, len(runs))]
            parts.extend(
                struct.pack(">HHH", run[0][0], run[-1][0], run[0][1]) for run in runs
            )
            return b"".join(parts)
        except struct.error as exc:
            raise SerializationError(f"Cannot encode class definition: {exc}") from exc