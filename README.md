# otfont

A pure-Python library for reading, manipulating and writing individual
OpenType font tables and layout subtables. It has no dependencies outside the
standard library.

## What it covers

| Module | Contents |
| --- | --- |
| `otfont.binary` | `Reader` (big-endian cursor), `DeserializationError`, `SerializationError`, `pack_offset_table`, F2DOT14 / Fixed / LONGDATETIME conversions |
| `otfont.head` | `Head`, the font header table |
| `otfont.hhea` | `Hhea`, the horizontal header table |
| `otfont.hmtx` | `Metric`, `Hmtx` and `from_bytes` for horizontal metrics |
| `otfont.point` | `Point` (contour point) and `Affine` (2D affine transform) |
| `otfont.contourutils` | `insert_explicit_oncurves`, `remove_implied_oncurves`, `contour_to_path` |
| `otfont.coverage` | `Coverage` tables (formats 1 and 2) |
| `otfont.classdef` | `ClassDef` tables (formats 1 and 2) |
| `otfont.valuerecord` | `ValueRecord`, `ValueRecordFlags`, `highest_format`, `coerce_to_same_format` |
| `otfont.gsub1` | `SingleSubst` (GSUB type 1) |
| `otfont.gsub2` | `MultipleSubst` (GSUB type 2) |
| `otfont.gsub3` | `AlternateSubst` (GSUB type 3) |
| `otfont.gsub4` | `LigatureSubst` (GSUB type 4) |
| `otfont.gpos1` | `SinglePos` (GPOS type 1) |
| `otfont.gpos2` | `PairPos` (GPOS type 2) |

When writing, coverage and class definition tables pick whichever format is
smaller, and single substitutions use the delta format (format 1) when every
glyph is shifted by the same amount.

## Installation

```
pip install otfont
```

## Usage

### Header tables and metrics

```python
from otfont.head import Head
from otfont.hhea import Hhea
from otfont import hmtx

head = Head.new(1.0, 1000, 0, -200, 800, 900)   # stamped with the current time
head_bytes = head.to_bytes()
assert Head.from_bytes(head_bytes) == head

hhea = Hhea.from_bytes(hhea_data)
metrics = hmtx.from_bytes(hmtx_data, hhea.number_of_h_metrics)
hmtx_bytes, number_of_h_metrics = metrics.to_bytes()
```

`Hmtx.to_bytes` returns the encoded table together with the
`numberOfHMetrics` value to store in `hhea`; trailing glyphs that share the
last advance width are written as bare side bearings.

### Contours

```python
from otfont.point import Affine, Point
from otfont.contourutils import insert_explicit_oncurves, contour_to_path

contour = [
    Point(0, 0, True),
    Point(100, 0, False),
    Point(100, 100, False),
    Point(0, 100, True),
]
explicit = insert_explicit_oncurves(contour)   # adds Point(100, 50, True)
moved = [p.transform(Affine(e=10, f=20)) for p in contour]
ops = contour_to_path(contour)                 # ("moveTo", ...), ("qCurveTo", ...), ...
```

The contour helpers return new lists and leave their input untouched.

### Layout subtables

Subtables are built from plain mappings of glyph IDs and round-trip through
`to_bytes` / `from_bytes`:

```python
from otfont.gsub1 import SingleSubst
from otfont.gsub4 import LigatureSubst
from otfont.gpos1 import SinglePos
from otfont.gpos2 import PairPos
from otfont.valuerecord import ValueRecord

single = SingleSubst(mapping={66: 67, 68: 69})
assert SingleSubst.from_bytes(single.to_bytes()) == single

ligatures = LigatureSubst(mapping={(10, 20, 30): 11, (20, 30): 21})
assert LigatureSubst.from_bytes(ligatures.to_bytes()) == ligatures

pos = SinglePos(mapping={66: ValueRecord(x_advance=10)})
kerns = PairPos(mapping={(0, 289): (ValueRecord(x_advance=-90), ValueRecord())})
```

Value records read back from binary are simplified: fields equal to zero
become `None`.

Each subtable class also has a `read(reader)` class method that decodes from
an `otfont.binary.Reader` positioned at the start of the subtable.

### Errors

Malformed or truncated input raises `otfont.binary.DeserializationError`;
values that cannot be encoded (out of range, offsets beyond 16 bits) raise
`otfont.binary.SerializationError`. Both are subclasses of `ValueError`.

## What it does not do

- It does not load or save whole font files; each table is read from and
  written to its own bytes.
- It does not decode glyph outline data (the `glyf` table, simple or
  composite glyphs), recompute glyph bounding boxes, or gather `maxp`
  statistics.
- Pair positioning is read and written in format 1 (glyph pairs) only;
  class-based pair positioning (format 2) raises `DeserializationError`.
- Device and variation-index tables in value records are not supported.
- Only the GSUB types 1–4 and GPOS types 1–2 subtables are handled; script,
  feature and lookup lists are not.

## Running the tests

```
pip install -e ".[test]"
pytest
```