"""Tests for grid normalization and trimming."""

import numpy as np
import pytest

from artocr.errors import InvalidShape
from artocr.grid import (
    FlatBoolGrid,
    FlatCharGrid,
    RowBoolGrid,
    RowCharGrid,
    TextGrid,
    normalize,
    trim_canonical,
)

PATTERN = [
    [True, False, True],
    [False, True, False],
]
EXPECTED = "#.#\n.#.\n"


def test_text_passes_through_untouched():
    text = "\n  #.#\n.#.   \n"
    assert normalize(text) == text
    assert normalize(TextGrid(text)) == text


def test_flat_bools():
    data = [cell for row in PATTERN for cell in row]
    assert normalize(FlatBoolGrid(data, 3)) == EXPECTED


def test_flat_chars_are_copied_verbatim():
    assert normalize(FlatCharGrid(list("#.#x#x"), 3)) == "#.#\nx#x\n"
    assert normalize(FlatCharGrid("#.#.#.", 3)) == EXPECTED


def test_row_bools():
    assert normalize(RowBoolGrid(PATTERN)) == EXPECTED


def test_row_chars():
    assert normalize(RowCharGrid([list("#.#"), list(".#.")])) == EXPECTED


def test_numpy_array():
    assert normalize(np.array(PATTERN)) == EXPECTED
    assert normalize(np.array(PATTERN, dtype=np.uint8)) == EXPECTED


def test_every_row_ends_with_one_line_break():
    out = normalize(RowBoolGrid([[False]] * 4))
    assert out == ".\n.\n.\n.\n"
    assert not out.endswith("\n\n")


def test_flat_length_not_divisible_by_width():
    with pytest.raises(InvalidShape):
        normalize(FlatBoolGrid([True] * 7, 3))
    with pytest.raises(InvalidShape):
        normalize(FlatCharGrid(list("#.#.#"), 2))


@pytest.mark.parametrize("width", [0, -3, True, 2.0])
def test_flat_width_must_be_positive_integer(width):
    with pytest.raises(InvalidShape):
        normalize(FlatBoolGrid([True, False], width))


def test_three_dimensional_array_rejected():
    with pytest.raises(InvalidShape):
        normalize(np.zeros((2, 2, 2), dtype=bool))


def test_unsupported_type():
    with pytest.raises(TypeError):
        normalize(42)


def test_invalid_shape_is_a_value_error():
    with pytest.raises(ValueError):
        normalize(FlatBoolGrid([True], 2))


def test_trim_drops_blank_edge_lines_and_final_break():
    assert trim_canonical("\n   \n#.#\n.#.\n  \n") == "#.#\n.#."


def test_trim_keeps_leading_off_cells():
    assert trim_canonical("\n  #\n # \n") == "  #\n # "


def test_trim_whitespace_only():
    assert trim_canonical(" \n \n\t\n") == ""


def test_numpy_char_array_is_read_as_characters():
    assert normalize(np.array([list("#.#"), list(".#.")])) == EXPECTED
    assert normalize(np.array([list("#.#"), list(".#.")], dtype="S1")) == EXPECTED


def test_numpy_float_array_rejected():
    with pytest.raises(TypeError):
        normalize(np.zeros((2, 2)))


def test_trim_splits_on_line_feed_only():
    assert trim_canonical("\n#\x0c#\n.\x1c.\n") == "#\x0c#\n.\x1c."
