"""Flat binary tilemap and its composition from carving results.

The tilemap is a row-major sequence of ``WALL`` (1) and ``OPEN`` (0) with an
associated width. It is built once and never patched; widening produces a
new tilemap.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from .cells import Coord2D, Wall
from .colormap import Colormap
from .tiles import OPEN, WALL


class Tilemap:
    __slots__ = ("cells", "width")

    def __init__(self, cells: Iterable[int], width: int):
        cells = tuple(cells)
        if width <= 0 or len(cells) % width:
            raise ValueError(f"{len(cells)} cells do not form rows of width {width}")
        self.cells: Tuple[int, ...] = cells
        self.width = width

    @property
    def height(self) -> int:
        return len(self.cells) // self.width

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[int]:
        return iter(self.cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tilemap):
            return NotImplemented
        return self.width == other.width and self.cells == other.cells

    def __hash__(self) -> int:
        return hash((self.width, self.cells))

    def __repr__(self) -> str:
        return f"Tilemap({self.width}x{self.height})"

    def index_to_row_col(self, i: int) -> Coord2D:
        return divmod(i, self.width)

    def row_col_to_index(self, row: int, col: int) -> int:
        return row * self.width + col

    def at(self, row: int, col: int) -> int:
        return self.cells[self.row_col_to_index(row, col)]

    def rows(self) -> List[Tuple[int, ...]]:
        w = self.width
        return [self.cells[i:i + w] for i in range(0, len(self.cells), w)]

    def count(self, value: int) -> int:
        return self.cells.count(value)

    def to_dict(self):
        return {"width": self.width, "height": self.height, "tiles": list(self.cells)}


def compose_tilemap(
    colormap: Colormap,
    walls: Sequence[Wall],
    open_walls: Iterable[int],
    rooms: Sequence[Coord2D],
) -> Tilemap:
    """Everything starts as wall; opened walls and rooms are cleared."""
    width = colormap.width
    tiles = [WALL] * (width * colormap.height)
    for index in open_walls:
        for r, c in walls[index]:
            tiles[r * width + c] = OPEN
    for r, c in rooms:
        tiles[r * width + c] = OPEN
    return Tilemap(tiles, width)


__all__ = ["Tilemap", "compose_tilemap"]
