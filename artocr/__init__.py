"""
Read ASCII-art capital letters (6-row and 10-row fonts) back into text.
"""

from .catalogue import Catalogue, ReferenceSheet, default_catalogue, load_sheet, parse_sheet
from .decoder import SENTINEL, Decoder, decode
from .errors import ArtOcrError, CatalogueError, InvalidShape
from .grid import (
    FILL,
    FlatBoolGrid,
    FlatCharGrid,
    Grid,
    RowBoolGrid,
    RowCharGrid,
    TextGrid,
    normalize,
    trim_canonical,
)
from .segment import FIXED_WIDTH_BY_HEIGHT, Segment, column_bits, glyph_ids, segment

__version__ = "0.1.0"

__all__ = [
    "decode",
    "Decoder",
    "SENTINEL",
    "Catalogue",
    "ReferenceSheet",
    "default_catalogue",
    "load_sheet",
    "parse_sheet",
    "ArtOcrError",
    "CatalogueError",
    "InvalidShape",
    "FILL",
    "Grid",
    "TextGrid",
    "FlatBoolGrid",
    "FlatCharGrid",
    "RowBoolGrid",
    "RowCharGrid",
    "normalize",
    "trim_canonical",
    "FIXED_WIDTH_BY_HEIGHT",
    "Segment",
    "segment",
    "glyph_ids",
    "column_bits",
]
