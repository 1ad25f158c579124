"""OpenType Layout coverage tables."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from itertools import pairwise

from otfont.binary import DeserializationError, Reader, SerializationError


def _consecutive_runs(glyphs: list[int]) -> list[list[int]]:
    runs: list[list[int]] = []
    for glyph in glyphs:
        if runs and runs[-1][-1] + 1 == glyph:
            runs[-1].append(glyph)
        else:
            runs.append([glyph])
    return runs


@dataclass
class Coverage:
    """The glyphs affected by a lookup, in coverage-index order."""

    glyphs: list[int] = field(default_factory=list)

    @classmethod
    def read(cls, reader: Reader) -> Coverage:
        """Decode a coverage table at the reader's position."""
        fmt = reader.read("H")
        count = reader.read("H")
        if fmt == 1:
            return cls(reader.read_array("H", count))
        if fmt == 2:
            glyphs: list[int] = []
            for _ in range(count):
                start, end, _index = reader.read("HHH")
                glyphs.extend(range(start, end + 1))
            return cls(glyphs)
        raise DeserializationError(f"Bad coverage format {fmt}")

    @classmethod
    def from_bytes(cls, data: bytes) -> Coverage:
        """Decode a binary coverage table."""
        return cls.read(Reader(data))

    def _format(self, runs: list[list[int]]) -> int:
        is_sorted = all(a <= b for a, b in pairwise(self.glyphs))
        if not self.glyphs or not is_sorted or len(runs) * 3 >= len(self.glyphs):
            return 1
        return 2

    def to_bytes(self) -> bytes:
        """Encode the table in whichever format is smaller."""
        runs = _consecutive_runs(self.glyphs)
        try:
            if self._format(runs) == 1:
                count = len(self.glyphs)
                return struct.pack(f">HH{count}H", 1, count, *self.glyphs)
            parts = [struct.pack(">HH", 2, len(runs))]
            index = 0
            for run in runs:
                parts.append(struct.pack(">HHH", run[0], run[-1], index))
                index += len(run)
            return b"".join(parts)
        except struct.error as exc:
            raise SerializationError(f"Cannot encode coverage table: {exc}") from exc