"""Font catalogue: glyph identifier to letter, learned from reference sheets.

A reference sheet is a text file holding the letters it depicts on the
first line, a blank line, then those letters drawn as a canonical grid::

    ABC

    .##..###...##.
    #..#.#..#.#..#
    ...

Segmenting the drawing yields one identifier per letter, which is paired
positionally with the letter line.
"""

import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from artocr.errors import CatalogueError, InvalidShape
from artocr.grid import trim_canonical
from artocr.logging import audit, get_logger, trace
from artocr.segment import glyph_ids, to_matrix

log = get_logger("catalogue")

FONT_DIR = Path(__file__).parent / "fonts"
FONT6_PATH = FONT_DIR / "font6.txt"
FONT10_PATH = FONT_DIR / "font10.txt"


@dataclass(frozen=True)
class ReferenceSheet:
    """Ground-truth letters paired with their rendering."""
    letters: str
    rendering: str   # trimmed canonical text
    height: int
    source: str = "<memory>"


@trace
def parse_sheet(text: str, source: str = "<memory>") -> ReferenceSheet:
    """Parse a reference sheet blob into a :class:`ReferenceSheet`."""
    text = text.replace("\r\n", "\n")
    header, sep, body = text.partition("\n\n")
    if not sep:
        raise CatalogueError(f"{source}: no blank line between letters and rendering")
    letters = header.strip()
    if not letters:
        raise CatalogueError(f"{source}: letter line is empty")
    rendering = trim_canonical(body)
    try:
        height = to_matrix(rendering).shape[0]
    except InvalidShape as e:
        raise CatalogueError(f"{source}: rendering is not a grid ({e})") from e
    return ReferenceSheet(letters=letters, rendering=rendering, height=height, source=source)


def load_sheet(path: str | Path) -> ReferenceSheet:
    """Read and parse a reference sheet file (UTF-8)."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogueError(f"Cannot read reference sheet {path}: {e}") from e
    return parse_sheet(text, source=str(path))


class Catalogue:
    """Immutable ``(height, glyph_id) -> letter`` lookup.

    Entries are partitioned by grid height, so a 6-row and a 10-row glyph
    that happen to share an identifier never shadow each other.
    """

    def __init__(self, entries: dict[tuple[int, int], str]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    @trace
    def from_sheets(cls, sheets: Iterable[ReferenceSheet]) -> "Catalogue":
        """Build a catalogue from reference sheets.

        Raises:
            CatalogueError: a sheet's drawing does not segment into exactly
                one glyph per ground-truth letter.
        """
        entries: dict[tuple[int, int], str] = {}
        for sheet in sheets:
            ids = glyph_ids(sheet.rendering)
            if len(ids) != len(sheet.letters):
                raise CatalogueError(
                    f"{sheet.source}: {len(ids)} glyph(s) drawn for "
                    f"{len(sheet.letters)} letter(s) {sheet.letters!r}"
                )
            for glyph_id, letter in zip(ids, sheet.letters):
                entries[(sheet.height, glyph_id)] = letter
            audit("catalogue.sheet_loaded", logger=log,
                  source=sheet.source, height=sheet.height, letters=sheet.letters)
        return cls(entries)

    @classmethod
    def from_files(cls, *paths: str | Path) -> "Catalogue":
        return cls.from_sheets(load_sheet(p) for p in paths)

    def lookup(self, height: int, glyph_id: int) -> str | None:
        return self._entries.get((height, glyph_id))

    def entries(self, height: int | None = None) -> Iterator[tuple[int, int, str]]:
        """Yield ``(height, glyph_id, letter)`` sorted by height then letter."""
        items = sorted(self._entries.items(), key=lambda kv: (kv[0][0], kv[1]))
        for (h, glyph_id), letter in items:
            if height is None or h == height:
                yield h, glyph_id, letter

    @property
    def heights(self) -> tuple[int, ...]:
        return tuple(sorted({h for h, _ in self._entries}))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"Catalogue({len(self)} glyphs, heights={list(self.heights)})"


_default: Catalogue | None = None
_default_lock = threading.Lock()


def default_catalogue() -> Catalogue:
    """The catalogue built from the packaged sheets, constructed once."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Catalogue.from_files(FONT6_PATH, FONT10_PATH)
                log.info("Built default catalogue: %r", _default)
    return _default
