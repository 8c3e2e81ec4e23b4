"""Raster input: read a letter grid out of a bitmap image."""

from pathlib import Path

import numpy as np
from PIL import Image

from artocr.grid import RowBoolGrid
from artocr.logging import audit, get_logger, trace

log = get_logger("imaging")


@trace
def grid_from_image(
    image: Image.Image | str | Path,
    *,
    cell_size: int = 1,
    threshold: int = 128,
) -> RowBoolGrid:
    """Convert a bitmap of dark-on-light letters into a :class:`RowBoolGrid`.

    Args:
        image: PIL image or a path to one.
        cell_size: Pixels per grid cell along each axis. The image is
            downscaled with nearest-neighbour sampling; partial cells at the
            right and bottom edges are dropped.
        threshold: Pixels with grayscale brightness ``<= threshold`` are "on".
    """
    if cell_size < 1:
        raise ValueError(f"cell_size must be a positive integer, got {cell_size}")
    if not isinstance(image, Image.Image):
        image = Image.open(image)

    gray = image.convert("L")
    cols, rows = gray.size[0] // cell_size, gray.size[1] // cell_size
    if cols == 0 or rows == 0:
        raise ValueError(f"Image {gray.size[0]}x{gray.size[1]} is smaller than one {cell_size}px cell")
    if cell_size > 1:
        gray = gray.crop((0, 0, cols * cell_size, rows * cell_size)).resize((cols, rows), Image.NEAREST)

    on = np.asarray(gray) <= threshold
    audit("image.gridded", logger=log, cols=cols, rows=rows, cell_size=cell_size, on=int(on.sum()))
    return RowBoolGrid(rows=tuple(tuple(bool(c) for c in row) for row in on))
