"""Error taxonomy shared by the normalizer, segmenter and catalogue."""


class ArtOcrError(Exception):
    """Base class for artocr errors."""


class InvalidShape(ArtOcrError, ValueError):
    """The input cannot be laid out as a grid.

    Raised when no row width can be determined (no line break in the
    canonical text) or when a flat sequence does not divide evenly into
    rows of the declared width.
    """


class CatalogueError(ArtOcrError, RuntimeError):
    """A reference sheet is missing, malformed or inconsistent.

    Fatal: it means the packaged (or supplied) font data is broken, not
    that a particular input was bad.
    """
