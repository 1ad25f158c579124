"""Read, manipulate and write OpenType head, hhea and hmtx tables and GSUB/GPOS subtables."""

__version__ = "0.1.0"