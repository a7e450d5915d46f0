"""Colormap generation: tile a category pattern across the grid.

A colormap is a grid of small non-negative integers. Zero marks a room cell;
each positive value is a wall category. The pattern is either one flat
sequence repeated across the whole grid in row-major order, or a list of row
templates cycled per row (``line_reset``), each row restarting its own
template from the first cell.
"""
from __future__ import annotations

from itertools import cycle, islice
from typing import Iterator, Sequence, Tuple

from .cells import Pattern
from .errors import InvalidDimensions, InvalidPattern

Row = Tuple[int, ...]


def _is_category(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_row(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def check_dimensions(width, height) -> None:
    for label, value in (("width", width), ("height", height)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidDimensions(f"{label} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidDimensions(f"{label} must be > 0, got {value}")


def normalize_pattern(pattern: Pattern, line_reset: bool) -> Tuple[Row, ...]:
    """Validate ``pattern`` and return it as a tuple of row templates.

    Without ``line_reset`` the result holds exactly one template: the whole
    pattern flattened (nested rows are concatenated). With ``line_reset`` a
    flat pattern becomes a single template reused on every row.

    Raises:
        InvalidPattern: empty pattern, empty row, mixed ints and rows, or a
            value that is not a non-negative integer.
    """
    if not _is_row(pattern) or len(pattern) == 0:
        raise InvalidPattern("pattern must be a non-empty sequence")
    nested = [_is_row(p) for p in pattern]
    if any(nested) and not all(nested):
        raise InvalidPattern("pattern mixes categories and row templates")
    rows = [tuple(p) for p in pattern] if all(nested) else [tuple(pattern)]
    for i, row in enumerate(rows):
        if not row:
            raise InvalidPattern(f"pattern row {i} is empty and cannot fill a grid row")
        bad = [v for v in row if not _is_category(v)]
        if bad:
            raise InvalidPattern(f"pattern row {i} has non-category values {bad!r}")
    if not line_reset and len(rows) > 1:
        return (tuple(v for row in rows for v in row),)
    return tuple(rows)


class Colormap:
    """Immutable ``height x width`` grid of category labels."""
    __slots__ = ("rows", "width", "height")

    def __init__(self, rows: Sequence[Sequence[int]], width: int, height: int):
        if len(rows) != height or any(len(r) != width for r in rows):
            raise InvalidDimensions(f"colormap rows do not match {width}x{height}")
        self.rows: Tuple[Row, ...] = tuple(tuple(r) for r in rows)
        self.width = width
        self.height = height

    def __getitem__(self, row: int) -> Row:
        return self.rows[row]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Colormap):
            return NotImplemented
        return self.rows == other.rows

    def __hash__(self) -> int:
        return hash(self.rows)

    def __repr__(self) -> str:
        return f"Colormap({self.width}x{self.height})"

    def category(self, row: int, col: int) -> int:
        return self.rows[row][col]

    def is_border(self, row: int, col: int) -> bool:
        return row in (0, self.height - 1) or col in (0, self.width - 1)

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(row, col, category)`` in row-major order."""
        for i, row in enumerate(self.rows):
            for j, c in enumerate(row):
                yield i, j, c


def generate_colormap(pattern: Pattern, width: int, height: int, line_reset: bool) -> Colormap:
    check_dimensions(width, height)
    templates = normalize_pattern(pattern, line_reset)
    if not line_reset:
        flat = list(islice(cycle(templates[0]), width * height))
        rows = [flat[i * width:(i + 1) * width] for i in range(height)]
    else:
        # Row i always uses template i mod len(templates), realigned at column 0
        rows = [list(islice(cycle(templates[i % len(templates)]), width)) for i in range(height)]
    return Colormap(rows, width, height)


__all__ = ["Colormap", "generate_colormap", "normalize_pattern", "check_dimensions"]
