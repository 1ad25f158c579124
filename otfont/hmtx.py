"""The ``hmtx`` (horizontal metrics) table."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from otfont.binary import DeserializationError, Reader, SerializationError


@dataclass
class Metric:
    """A single horizontal metric."""

    advance_width: int
    lsb: int


@dataclass
class Hmtx:
    """Horizontal metrics, one per glyph in glyph order."""

    metrics: list[Metric] = field(default_factory=list)

    def to_bytes(self) -> tuple[bytes, int]:
        """Encode the table, returning the bytes and the ``numberOfHMetrics`` value.

        Trailing glyphs sharing the final advance width are written as bare
        side bearings.
        """
        if not self.metrics:
            raise SerializationError("hmtx table needs at least one metric")
        end = len(self.metrics) - 1
        while end > 0 and self.metrics[end - 1].advance_width == self.metrics[end].advance_width:
            end -= 1
        try:
            long_part = b"".join(
                struct.pack(">Hh", metric.advance_width, metric.lsb)
                for metric in self.metrics[: end + 1]
            )
            short_part = b"".join(
                struct.pack(">h", metric.lsb) for metric in self.metrics[end + 1:]
            )
        except struct.error as exc:
            raise SerializationError(f"Cannot encode hmtx table: {exc}") from exc
        return long_part + short_part, end + 1


def from_bytes(data: bytes, number_of_h_metrics: int) -> Hmtx:
    """Decode a binary ``hmtx`` table given ``numberOfHMetrics`` from ``hhea``."""
    reader = Reader(data)
    metrics = [Metric(*reader.read("Hh")) for _ in range(number_of_h_metrics)]
    if not metrics:
        raise DeserializationError("hmtx table must hold at least one advance width")
    rest = reader.data[reader.pos:]
    if len(rest) % 2 == 0:
        last_advance = metrics[-1].advance_width
        lsbs = struct.unpack(f">{len(rest) // 2}h", rest)
        metrics.extend(Metric(last_advance, lsb) for lsb in lsbs)
    return Hmtx(metrics)