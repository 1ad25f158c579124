import struct

import pytest

from otfont.binary import DeserializationError, SerializationError
from otfont.hmtx import Hmtx, Metric, from_bytes

BINARY_HMTX = bytes(
    [
        0x02, 0xF4, 0x00, 0x05, 0x02, 0xF4, 0x00, 0x05, 0x02, 0x98, 0x00, 0x1E, 0x02, 0xF4,
        0x00, 0x05, 0x00, 0xC8, 0x00, 0x00, 0x02, 0x58, 0x00, 0x1D, 0x02, 0x58, 0x00, 0x1D,
        0x00, 0x0A, 0xFF, 0x73,
    ]
)

EXPECTED = [
    Metric(756, 5),
    Metric(756, 5),
    Metric(664, 30),
    Metric(756, 5),
    Metric(200, 0),
    Metric(600, 29),
    Metric(600, 29),
    Metric(10, -141),
]


def test_hmtx_de_16bit():
    assert from_bytes(BINARY_HMTX, 8).metrics == EXPECTED


def test_hmtx_ser_full():
    data, count = Hmtx(list(EXPECTED)).to_bytes()
    assert count == 8
    assert data == BINARY_HMTX


def test_hmtx_trailing_advances_compressed():
    table = Hmtx([Metric(500, 1), Metric(600, 2), Metric(600, 3), Metric(600, -4)])
    data, count = table.to_bytes()
    assert count == 2
    assert data == struct.pack(">HhHhhh", 500, 1, 600, 2, 3, -4)
    assert from_bytes(data, count) == table


def test_hmtx_fewer_long_metrics_extends_last_advance():
    data = struct.pack(">Hhhh", 300, 7, 8, 9)
    assert from_bytes(data, 1).metrics == [Metric(300, 7), Metric(300, 8), Metric(300, 9)]


def test_hmtx_empty_raises():
    with pytest.raises(SerializationError):
        Hmtx([]).to_bytes()
    with pytest.raises(DeserializationError):
        from_bytes(b"", 0)


def test_hmtx_short_data_raises():
    with pytest.raises(DeserializationError):
        from_bytes(BINARY_HMTX[:6], 2)