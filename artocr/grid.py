"""Grid normalization: every supported input shape becomes canonical text.

Canonical text is one character per cell, ``#`` for an "on" cell and any
other character for "off", each row terminated by exactly one ``\\n``.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from artocr.errors import InvalidShape
from artocr.logging import get_logger

log = get_logger("grid")

FILL = "#"
BLANK = "."


# ---------------------------------------------------------------------------
# Input variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextGrid:
    """Text already laid out as rows separated by line breaks."""
    text: str


@dataclass(frozen=True)
class FlatBoolGrid:
    """Row-major booleans (``True`` = on) with an explicit row width."""
    data: Sequence[bool]
    width: int


@dataclass(frozen=True)
class FlatCharGrid:
    """Row-major single characters (``#`` = on) with an explicit row width."""
    data: Sequence[str]
    width: int


@dataclass(frozen=True)
class RowBoolGrid:
    """A sequence of rows, each a sequence of booleans."""
    rows: Sequence[Sequence[bool]]


@dataclass(frozen=True)
class RowCharGrid:
    """A sequence of rows, each a sequence of single characters."""
    rows: Sequence[Sequence[str]]


Grid = TextGrid | FlatBoolGrid | FlatCharGrid | RowBoolGrid | RowCharGrid


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

def _bool_row(cells) -> str:
    return "".join(FILL if cell else BLANK for cell in cells)


def _char_row(cells) -> str:
    return "".join(cells)


def _split_flat(data: Sequence, width: int) -> list[Sequence]:
    """Cut a flat row-major sequence into rows of *width* cells."""
    if isinstance(width, bool) or not isinstance(width, (int, np.integer)) or width <= 0:
        raise InvalidShape(f"Row width must be a positive integer, got {width!r}")
    if len(data) % width:
        raise InvalidShape(f"{len(data)} cells do not divide into rows of width {width}")
    return [data[i:i + width] for i in range(0, len(data), width)]


def normalize(image: Grid | str | np.ndarray) -> str:
    """Convert any supported grid representation into canonical text.

    Accepts the five grid dataclasses, a bare ``str`` (treated as
    :class:`TextGrid`) or a 2-D numpy array: bool and integer arrays are
    treated as :class:`RowBoolGrid`, string arrays as :class:`RowCharGrid`.
    Text is passed through untouched; trimming is the decoder's job.

    Raises:
        InvalidShape: flat data whose length is not a multiple of ``width``,
            or a numpy array that is not 2-D.
        TypeError: an object that is none of the supported shapes, or an
            array whose dtype is neither boolean, integer nor string.
    """
    if isinstance(image, str):
        return image
    if isinstance(image, TextGrid):
        return image.text
    if isinstance(image, np.ndarray):
        if image.ndim != 2:
            raise InvalidShape(f"Expected a 2-D array, got {image.ndim} dimension(s)")
        if image.dtype.kind in "US":
            rows = [_char_row(row) for row in image.astype(str)]
        elif image.dtype.kind in "biu":
            rows = [_bool_row(row) for row in image.astype(bool)]
        else:
            raise TypeError(f"Unsupported array dtype: {image.dtype}")
    elif isinstance(image, FlatBoolGrid):
        rows = [_bool_row(row) for row in _split_flat(image.data, image.width)]
    elif isinstance(image, FlatCharGrid):
        rows = [_char_row(row) for row in _split_flat(image.data, image.width)]
    elif isinstance(image, RowBoolGrid):
        rows = [_bool_row(row) for row in image.rows]
    elif isinstance(image, RowCharGrid):
        rows = [_char_row(row) for row in image.rows]
    else:
        raise TypeError(f"Unsupported grid type: {type(image).__name__}")

    log.debug("Normalized %s into %d row(s)", type(image).__name__, len(rows))
    return "".join(row + "\n" for row in rows)


def trim_canonical(text: str) -> str:
    """Drop whitespace-only lines at both ends and the final line break.

    Characters inside the remaining rows are kept as-is, so a space used
    as an "off" marker at the start of the first row survives. Rows split on
    ``\\n`` only, like :func:`artocr.segment.to_matrix`, so any other
    character (form feed included) stays an off cell.

    A grid drawn entirely in spaces has no non-blank line and trims to
    ``""``, which the decoder reports as malformed (``None``) rather than
    as an empty result. Use a visible off marker such as ``.`` for blank
    grids.
    """
    lines = text.split("\n")
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end])
