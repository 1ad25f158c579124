"""The ``hhea`` (horizontal header) table."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from otfont.binary import DeserializationError, SerializationError

_LAYOUT = struct.Struct(">HHhhhHhhhhhhhhhhhH")


@dataclass
class Hhea:
    """The horizontal header table."""

    major_version: int
    minor_version: int
    ascender: int
    descender: int
    line_gap: int
    advance_width_max: int
    min_left_side_bearing: int
    min_right_side_bearing: int
    x_max_extent: int
    caret_slope_rise: int
    caret_slope_run: int
    caret_offset: int
    reserved0: int
    reserved1: int
    reserved2: int
    reserved3: int
    metric_data_format: int
    number_of_h_metrics: int

    @classmethod
    def from_bytes(cls, data: bytes) -> Hhea:
        """Decode a binary ``hhea`` table."""
        if len(data) < _LAYOUT.size:
            raise DeserializationError(
                f"hhea table needs {_LAYOUT.size} bytes, got {len(data)}"
            )
        return cls(*_LAYOUT.unpack_from(data))

    def to_bytes(self) -> bytes:
        """Encode this table to binary."""
        try:
            return _LAYOUT.pack(
                self.major_version,
                self.minor_version,
                self.ascender,
                self.descender,
                self.line_gap,
                self.advance_width_max,
                self.min_left_side_bearing,
                self.min_right_side_bearing,
                self.x_max_extent,
                self.caret_slope_rise,
                self.caret_slope_run,
                self.caret_offset,
                self.reserved0,
                self.reserved1,
                self.reserved2,
                self.reserved3,
                self.metric_data_format,
                self.number_of_h_metrics,
            )
        except struct.error as exc:
            raise SerializationError(f"Cannot encode hhea table: {exc}") from exc