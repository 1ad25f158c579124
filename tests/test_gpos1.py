import pytest

from otfont.binary import DeserializationError, SerializationError
from otfont.gpos1 import SinglePos
from otfont.valuerecord import ValueRecord


def test_single_pos_1_1_serde():
    pos = SinglePos({66: ValueRecord(x_advance=10)})
    binary = bytes([0x00, 0x01, 0x00, 0x08, 0x00, 0x04, 0x00, 0x0A, 0x00, 0x01, 0x00, 0x01, 0x00, 66])
    assert pos.to_bytes() == binary
    assert SinglePos.from_bytes(binary) == pos


def test_single_pos_1_1_serde2():
    pos = SinglePos({
        66: ValueRecord(x_advance=10),
        67: ValueRecord(x_advance=10, y_placement=0),
    })
    binary = bytes([
        0x00, 0x01, 0x00, 0x08, 0x00, 0x04, 0x00, 0x0A, 0x00, 0x01, 0x00, 0x02, 0x00, 66, 0x00, 67,
    ])
    assert pos.to_bytes() == binary
    assert SinglePos.from_bytes(binary) == SinglePos({
        66: ValueRecord(x_advance=10),
        67: ValueRecord(x_advance=10),
    })


def test_single_pos_1_2_serde():
    pos = SinglePos({66: ValueRecord(x_advance=10), 67: ValueRecord(x_advance=-20)})
    binary = bytes([
        0x00, 0x02, 0x00, 0x0C, 0x00, 0x04, 0x00, 0x02, 0x00, 0x0A, 0xFF, 0xEC,
        0x00, 0x01, 0x00, 0x02, 0x00, 66, 0x00, 67,
    ])
    assert pos.to_bytes() == binary
    assert SinglePos.from_bytes(binary) == pos


def test_single_pos_1_2_serde2():
    pos = SinglePos({66: ValueRecord(x_advance=10), 67: ValueRecord(x_placement=-20)})
    binary = bytes([
        0x00, 0x02, 0x00, 0x10, 0x00, 0x05, 0x00, 0x02,
        0x00, 0x00, 0x00, 0x0A, 0xFF, 0xEC, 0x00, 0x00,
        0x00, 0x01, 0x00, 0x02, 0x00, 66, 0x00, 67,
    ])
    assert pos.to_bytes() == binary
    assert SinglePos.from_bytes(binary) == pos


def test_empty_mapping_rejected():
    with pytest.raises(SerializationError):
        SinglePos().to_bytes()


def test_bad_format_rejected():
    binary = bytes([0x00, 0x03, 0x00, 0x06, 0x00, 0x04, 0x00, 0x01, 0x00, 0x00])
    with pytest.raises(DeserializationError):
        SinglePos.from_bytes(binary)