"""The ``head`` (font header) table."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import datetime, timezone

from otfont.binary import (
    DeserializationError,
    SerializationError,
    datetime_to_longdatetime,
    fixed_to_float,
    float_to_fixed,
    longdatetime_to_datetime,
)

_LAYOUT = struct.Struct(">HHiIIHHqqhhhhHHhhh")


@dataclass
class Head:
    """The font header table."""

    major_version: int
    minor_version: int
    font_revision: float
    checksum_adjustment: int
    magic_number: int
    flags: int
    units_per_em: int
    created: datetime
    modified: datetime
    x_min: int
    y_min: int
    x_max: int
    y_max: int
    mac_style: int
    lowest_rec_ppem: int
    font_direction_hint: int
    index_to_loc_format: int
    glyph_data_format: int

    @classmethod
    def new(cls, font_revision, upm, x_min, y_min, x_max, y_max) -> Head:
        """Create a header with default settings, stamped with the current time."""
        now = datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)
        return cls(
            major_version=1,
            minor_version=0,
            font_revision=font_revision,
            checksum_adjustment=0,
            magic_number=0x5F0F3CF5,
            flags=3,
            units_per_em=upm,
            created=now,
            modified=now,
            x_min=x_min,
            y_min=y_min,
            x_max=x_max,
            y_max=y_max,
            mac_style=0,
            lowest_rec_ppem=6,
            font_direction_hint=2,
            index_to_loc_format=0,
            glyph_data_format=0,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Head:
        """Decode a binary ``head`` table."""
        if len(data) < _LAYOUT.size:
            raise DeserializationError(
                f"head table needs {_LAYOUT.size} bytes, got {len(data)}"
            )
        (
            major, minor, revision, checksum, magic, flags, upm,
            created, modified, x_min, y_min, x_max, y_max,
            mac_style, lowest_ppem, direction, loc_format, data_format,
        ) = _LAYOUT.unpack_from(data)
        return cls(
            major_version=major,
            minor_version=minor,
            font_revision=fixed_to_float(revision),
            checksum_adjustment=checksum,
            magic_number=magic,
            flags=flags,
            units_per_em=upm,
            created=longdatetime_to_datetime(created),
            modified=longdatetime_to_datetime(modified),
            x_min=x_min,
            y_min=y_min,
            x_max=x_max,
            y_max=y_max,
            mac_style=mac_style,
            lowest_rec_ppem=lowest_ppem,
            font_direction_hint=direction,
            index_to_loc_format=loc_format,
            glyph_data_format=data_format,
        )

    def to_bytes(self) -> bytes:
        """Encode this table to binary."""
        try:
            return _LAYOUT.pack(
                self.major_version,
                self.minor_version,
                float_to_fixed(self.font_revision),
                self.checksum_adjustment,
                self.magic_number,
                self.flags,
                self.units_per_em,
                datetime_to_longdatetime(self.created),
                datetime_to_longdatetime(self.modified),
                self.x_min,
                self.y_min,
                self.x_max,
                self.y_max,
                self.mac_style,
                self.lowest_rec_ppem,
                self.font_direction_hint,
                self.index_to_loc_format,
                self.glyph_data_format,
            )
        except struct.error as exc:
            raise SerializationError(f"Cannot encode head table: {exc}") from exc