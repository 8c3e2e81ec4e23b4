"""Glyph segmentation and encoding.

Scans a trimmed canonical grid column by column. Runs of non-blank
columns form one letter; each letter's columns are packed, left to right
and top to bottom, into a single integer (first cell = most significant
bit). Blank columns separate letters.
"""

from dataclasses import dataclass

import numpy as np

from artocr.errors import InvalidShape
from artocr.grid import FILL
from artocr.logging import get_logger

log = get_logger("segment")

# Heights whose glyphs have a known fixed width. Letters at these heights
# may touch their right-hand neighbour with no blank column in between
# (the 6-row "Y" is five columns wide and is drawn flush against the next
# letter in real puzzle output), so a letter is closed once it reaches the
# fixed width. Only the 6-row font is known to need this.
FIXED_WIDTH_BY_HEIGHT: dict[int, int] = {6: 5}


@dataclass(frozen=True)
class Segment:
    """One letter-sized run of columns."""
    start: int       # first column index
    width: int       # number of columns
    glyph_id: int


def to_matrix(text: str) -> np.ndarray:
    """Parse trimmed canonical text into a boolean (height, width) matrix.

    The width is the length of the first row. Shorter rows are padded with
    off cells and longer rows are cut, so cells never bleed between rows.

    Raises:
        InvalidShape: the text has no line break, so no width can be found.
    """
    width = text.find("\n")
    if width < 0:
        raise InvalidShape("Grid has no line break; row width cannot be determined")
    rows = text.split("\n")
    matrix = np.zeros((len(rows), width), dtype=bool)
    for y, row in enumerate(rows):
        for x, cell in enumerate(row[:width]):
            matrix[y, x] = cell == FILL
    return matrix


def _fold_column(acc: int, column: np.ndarray) -> int:
    for cell in column:
        acc = (acc << 1) | int(cell)
    return acc


def segment(text: str) -> list[Segment]:
    """Split a trimmed canonical grid into letter segments, left to right."""
    return segment_matrix(to_matrix(text))


def segment_matrix(matrix: np.ndarray) -> list[Segment]:
    """Split a boolean (height, width) matrix into letter segments."""
    height, width = matrix.shape
    fixed_width = FIXED_WIDTH_BY_HEIGHT.get(height)

    segments: list[Segment] = []
    glyph_id = 0
    start = 0
    columns = 0

    for x in range(width):
        column = matrix[:, x]
        if not column.any():
            if columns:
                segments.append(Segment(start, columns, glyph_id))
            glyph_id = 0
            columns = 0
            continue

        if fixed_width is not None and columns == fixed_width:
            segments.append(Segment(start, columns, glyph_id))
            glyph_id = 0
            columns = 0
        if not columns:
            start = x
        glyph_id = _fold_column(glyph_id, column)
        columns += 1

    if columns:
        segments.append(Segment(start, columns, glyph_id))

    log.debug("Segmented %dx%d grid into %d glyph(s)", width, height, len(segments))
    return segments


def glyph_ids(text: str) -> list[int]:
    """Identifiers of every letter in a trimmed canonical grid, left to right."""
    return [s.glyph_id for s in segment(text)]


def column_bits(glyph_id: int, height: int) -> list[list[bool]]:
    """Unpack an identifier back into its columns (each top to bottom).

    Inverse of the packing in :func:`segment` for glyphs whose leftmost
    column has at least one on cell, which every segmented glyph does.
    """
    if height <= 0:
        raise ValueError(f"height must be positive, got {height}")
    n_columns = max(1, -(-glyph_id.bit_length() // height))
    columns = []
    for c in range(n_columns):
        shift = (n_columns - 1 - c) * height
        bits = (glyph_id >> shift) & ((1 << height) - 1)
        columns.append([bool((bits >> (height - 1 - y)) & 1) for y in range(height)])
    return columns
