"""GSUB lookup type 3: alternate substitution."""

from __future__ import annotations

from dataclasses import dataclass, field

from otfont.binary import Reader
from otfont.gsub2 import MultipleSubst


@dataclass
class AlternateSubst:
    """Maps each input glyph ID to the glyph IDs it may be replaced with.

    The binary layout is identical to a multiple substitution subtable.
    """

    mapping: dict[int, list[int]] = field(default_factory=dict)

    @classmethod
    def read(cls, reader: Reader) -> AlternateSubst:
        """Decode an alternate substitution subtable at the reader's position."""
        return cls(MultipleSubst.read(reader).mapping)

    @classmethod
    def from_bytes(cls, data: bytes) -> AlternateSubst:
        """Decode a binary alternate substitution subtable."""
        return cls.read(Reader(data))

    def to_bytes(self) -> bytes:
        """Encode this subtable in format 1."""
        return MultipleSubst(self.mapping).to_bytes()