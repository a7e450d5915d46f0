from typing import Iterator, List, Sequence, Tuple, Union

Coord2D = Tuple[int, int]
Pattern = Union[Sequence[int], Sequence[Sequence[int]]]

# Orthogonal neighbour offsets as (drow, dcol); no diagonals anywhere in the pipeline
NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Wall:
    """A 4-connected region of one wall category, coordinates kept in discovery order."""
    __slots__ = ("category", "coords", "_members")

    def __init__(self, category: int, coords: Sequence[Coord2D]):
        self.category = category
        self.coords: Tuple[Coord2D, ...] = tuple(coords)
        self._members = frozenset(self.coords)

    def __iter__(self) -> Iterator[Coord2D]:
        return iter(self.coords)

    def __len__(self) -> int:
        return len(self.coords)

    def __contains__(self, coord) -> bool:
        return coord in self._members

    def __eq__(self, other) -> bool:
        if not isinstance(other, Wall):
            return NotImplemented
        return self.category == other.category and self.coords == other.coords

    def __hash__(self) -> int:
        return hash((self.category, self.coords))

    def __repr__(self) -> str:
        return f"Wall(category={self.category}, coords={list(self.coords)})"

    def to_dict(self):
        return {"category": self.category, "coords": [list(c) for c in self.coords]}


WallList = List[Wall]
RoomList = List[Coord2D]
