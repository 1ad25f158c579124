import pytest

from otfont.binary import DeserializationError, SerializationError
from otfont.gsub4 import LigatureSubst

BINARY_LIG = bytes([
    0, 1, 0, 10, 0, 2, 0, 18, 0, 40,
    0, 1, 0, 2, 0, 10, 0, 20, 0, 2, 0, 6, 0, 14, 0, 11, 0, 3, 0, 20, 0, 30, 0, 12, 0, 3, 0,
    20, 0, 31, 0, 2, 0, 6, 0, 12, 0, 21, 0, 2, 0, 30, 0, 22, 0, 3, 0, 40, 0, 50,
])

MAPPING = {
    (10, 20, 30): 11,
    (10, 20, 31): 12,
    (20, 30): 21,
    (20, 40, 50): 22,
}


def test_ligature_ser():
    assert LigatureSubst(dict(MAPPING)).to_bytes() == BINARY_LIG


def test_ligature_de():
    assert LigatureSubst.from_bytes(BINARY_LIG) == LigatureSubst(MAPPING)


def test_single_glyph_ligature_round_trip():
    subst = LigatureSubst({(5,): 9, (5, 6): 10})
    assert LigatureSubst.from_bytes(subst.to_bytes()) == subst


def test_bad_format_rejected():
    with pytest.raises(DeserializationError):
        LigatureSubst.from_bytes(bytes([0, 2, 0, 6, 0, 0]))


def test_empty_sequence_rejected():
    with pytest.raises(SerializationError):
        LigatureSubst({(): 3}).to_bytes()