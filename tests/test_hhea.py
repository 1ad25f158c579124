import pytest

from otfont.binary import DeserializationError, SerializationError
from otfont.hhea import Hhea

BINARY_HHEA = bytes(
    [
        0x00, 0x01, 0x00, 0x00, 0x02, 0xC1, 0xFF, 0x4C, 0x00, 0x00, 0x05, 0x1F, 0xFE, 0x82,
        0xFE, 0x82, 0x04, 0xDD, 0x00, 0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x04, 0x5D,
    ]
)


def make_hhea() -> Hhea:
    return Hhea(
        major_version=1,
        minor_version=0,
        ascender=705,
        descender=-180,
        line_gap=0,
        advance_width_max=1311,
        min_left_side_bearing=-382,
        min_right_side_bearing=-382,
        x_max_extent=1245,
        caret_slope_rise=1,
        caret_slope_run=0,
        caret_offset=0,
        reserved0=0,
        reserved1=0,
        reserved2=0,
        reserved3=0,
        metric_data_format=0,
        number_of_h_metrics=1117,
    )


def test_hhea_ser():
    assert make_hhea().to_bytes() == BINARY_HHEA


def test_hhea_de():
    assert Hhea.from_bytes(BINARY_HHEA) == make_hhea()


def test_short_data_rejected():
    with pytest.raises(DeserializationError):
        Hhea.from_bytes(BINARY_HHEA[:-1])


def test_out_of_range_value_rejected():
    table = make_hhea()
    table.number_of_h_metrics = -1
    with pytest.raises(SerializationError):
        table.to_bytes()