import pytest

from otfont.binary import DeserializationError
from otfont.gpos2 import PairPos
from otfont.valuerecord import ValueRecord

BINARY_POS = bytes([
    0x00, 0x01, 0x00, 0x0E, 0x00, 0x04, 0x00, 0x00, 0x00, 0x02, 0x00, 0x16, 0x00, 0x20,
    0x00, 0x01, 0x00, 0x02, 0x00, 0x00, 0x01, 0x4C, 0x00, 0x02, 0x01, 0x21, 0xFF, 0xA6,
    0x01, 0x4C, 0xFF, 0x6A, 0x00, 0x01, 0x03, 0x41, 0x00, 0x64,
])

KERNS = {
    (0, 289): (ValueRecord(x_advance=-90), ValueRecord()),
    (0, 332): (ValueRecord(x_advance=-150), ValueRecord()),
    (332, 833): (ValueRecord(x_advance=100), ValueRecord()),
}


def test_some_kerns_de():
    assert PairPos.from_bytes(BINARY_POS) == PairPos(KERNS)


def test_some_kerns_ser():
    assert PairPos(dict(KERNS)).to_bytes() == BINARY_POS


def test_mixed_formats_round_trip():
    pos = PairPos({
        (1, 2): (ValueRecord(x_advance=5), ValueRecord()),
        (1, 3): (ValueRecord(x_placement=3), ValueRecord(y_advance=-4)),
        (7, 2): (ValueRecord(x_advance=0), ValueRecord()),
    })
    expected = PairPos({
        (1, 2): (ValueRecord(x_advance=5), ValueRecord()),
        (1, 3): (ValueRecord(x_placement=3), ValueRecord(y_advance=-4)),
        (7, 2): (ValueRecord(), ValueRecord()),
    })
    assert PairPos.from_bytes(pos.to_bytes()) == expected


def test_format2_not_supported():
    binary = bytes([0x00, 0x02, 0x00, 0x0A, 0x00, 0x04, 0x00, 0x00, 0x00, 0x00])
    with pytest.raises(DeserializationError):
        PairPos.from_bytes(binary)


def test_bad_format_rejected():
    binary = bytes([0x00, 0x05, 0x00, 0x0A, 0x00, 0x04, 0x00, 0x00, 0x00, 0x00])
    with pytest.raises(DeserializationError):
        PairPos.from_bytes(binary)