"""Decoder facade: normalize, segment, look up, join."""

from artocr.catalogue import Catalogue, default_catalogue
from artocr.errors import InvalidShape
from artocr.grid import normalize, trim_canonical
from artocr.logging import audit, get_logger, trace
from artocr.segment import segment_matrix, to_matrix

log = get_logger("decoder")

SENTINEL = "?"


class Decoder:
    """Turns letter grids into strings using one catalogue.

    Args:
        catalogue: Glyph lookup to use. ``None`` selects the packaged
            catalogue, built on first decode.
        sentinel: Character emitted for glyphs missing from the catalogue.
    """

    def __init__(self, catalogue: Catalogue | None = None, sentinel: str = SENTINEL):
        if len(sentinel) != 1:
            raise ValueError(f"sentinel must be a single character, got {sentinel!r}")
        self._catalogue = catalogue
        self.sentinel = sentinel

    @property
    def catalogue(self) -> Catalogue:
        if self._catalogue is None:
            self._catalogue = default_catalogue()
        return self._catalogue

    @trace
    def decode(self, image) -> str | None:
        """Decode *image* (any supported grid shape) into its letters.

        Returns ``None`` when the input cannot be laid out as a grid, and
        an empty string when the grid holds no letters.
        """
        try:
            text = trim_canonical(normalize(image))
            matrix = to_matrix(text)
            segments = segment_matrix(matrix)
        except InvalidShape as e:
            audit("decode.invalid_shape", logger=log, reason=str(e))
            return None

        height = matrix.shape[0]
        catalogue = self.catalogue
        letters = []
        unknown = 0
        for seg in segments:
            letter = catalogue.lookup(height, seg.glyph_id)
            if letter is None:
                unknown += 1
                log.debug("No glyph for id=%#x at column %d (height %d)", seg.glyph_id, seg.start, height)
                letter = self.sentinel
            letters.append(letter)

        result = "".join(letters)
        if unknown:
            audit("decode.unrecognized", logger=log, height=height, unknown=unknown, total=len(segments))
        audit("decode.result", logger=log, height=height, letters=len(result), text=result)
        return result


def decode(image, *, catalogue: Catalogue | None = None, sentinel: str = SENTINEL) -> str | None:
    """Decode a letter grid with a one-off :class:`Decoder`."""
    return Decoder(catalogue, sentinel=sentinel).decode(image)
