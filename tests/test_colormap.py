import pytest

from tilemaze.maze import Colormap, InvalidDimensions, InvalidPattern, generate_colormap
from tilemaze.maze.colormap import normalize_pattern


def test_row_templates_cycle_per_row():
    cm = generate_colormap([[2, 1], [1, 0]], 4, 4, True)
    assert cm.rows[0] == (2, 1, 2, 1)
    assert cm.rows[1] == (1, 0, 1, 0)
    assert cm.rows[2] == cm.rows[0]
    assert cm.rows[3] == cm.rows[1]


def test_flat_pattern_with_line_reset_repeats_every_row():
    cm = generate_colormap([1, 2, 2, 1, 0], 5, 5, True)
    assert all(row == (1, 2, 2, 1, 0) for row in cm.rows)


def test_line_reset_realigns_each_row():
    # Width 3 truncates the 5-wide template; the next row starts over at column 0
    cm = generate_colormap([1, 2, 2, 1, 0], 3, 2, True)
    assert cm.rows == ((1, 2, 2), (1, 2, 2))


def test_flat_pattern_wraps_across_rows():
    cm = generate_colormap([1, 2, 2, 1, 0], 3, 3, False)
    assert cm.rows == ((1, 2, 2), (1, 0, 1), (2, 2, 1))


def test_short_template_repeats_to_fill_width():
    cm = generate_colormap([[0, 2, 2], [1, 1, 2], [1, 2, 1]], 7, 4, True)
    assert cm.rows[0] == (0, 2, 2, 0, 2, 2, 0)
    assert cm.rows[1] == (1, 1, 2, 1, 1, 2, 1)
    assert cm.rows[2] == (1, 2, 1, 1, 2, 1, 1)
    assert cm.rows[3] == cm.rows[0]


def test_nested_pattern_without_line_reset_is_flattened():
    cm = generate_colormap([[2, 1], [1, 0]], 3, 2, False)
    assert cm.rows == ((2, 1, 1), (0, 2, 1))


def test_dimensions_are_exact():
    cm = generate_colormap([1, 0], 7, 3, False)
    assert cm.width == 7 and cm.height == 3
    assert len(cm.rows) == 3
    assert all(len(r) == 7 for r in cm.rows)


def test_colormap_is_immutable():
    cm = generate_colormap([1, 0], 4, 2, False)
    assert isinstance(cm.rows, tuple)
    with pytest.raises(TypeError):
        cm.rows[0][0] = 5


def test_cells_iterate_row_major():
    cm = Colormap([[1, 0], [2, 3]], 2, 2)
    assert list(cm.cells()) == [(0, 0, 1), (0, 1, 0), (1, 0, 2), (1, 1, 3)]


def test_border_detection():
    cm = generate_colormap([0], 4, 3, False)
    assert cm.is_border(0, 2)
    assert cm.is_border(2, 1)
    assert cm.is_border(1, 0)
    assert cm.is_border(1, 3)
    assert not cm.is_border(1, 1)


@pytest.mark.parametrize(
    "pattern",
    [
        [],
        [[]],
        [[1, 0], []],
        [1, [0, 1]],
        [1, -1],
        [1, "2"],
        [True, 0],
        "1,0",
        None,
    ],
)
def test_invalid_patterns_rejected(pattern):
    with pytest.raises(InvalidPattern):
        generate_colormap(pattern, 5, 5, True)


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-3, 4), (2.5, 4), (True, 4), ("5", 5)])
def test_invalid_dimensions_rejected(width, height):
    with pytest.raises(InvalidDimensions):
        generate_colormap([1, 0], width, height, False)


def test_invalid_pattern_is_value_error():
    # Callers that only know about ValueError still catch configuration errors
    with pytest.raises(ValueError):
        generate_colormap([], 3, 3, False)


def test_normalize_pattern_shapes():
    assert normalize_pattern([1, 0], False) == ((1, 0),)
    assert normalize_pattern([1, 0], True) == ((1, 0),)
    assert normalize_pattern([[1], [0, 2]], True) == ((1,), (0, 2))
    assert normalize_pattern([[1], [0, 2]], False) == ((1, 0, 2),)


def test_mismatched_rows_rejected():
    with pytest.raises(InvalidDimensions):
        Colormap([[1, 0], [1]], 2, 2)
