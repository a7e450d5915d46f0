"""Region extraction: split a colormap into walls and rooms.

Walls are flood-filled 4-connected components of one positive category.
Rooms are zero-category cells strictly inside the border; border zeros are
dropped so the finished map has no half-open edges.
"""
from __future__ import annotations

from collections import deque
from typing import List, Tuple

from .cells import NEIGHBOURS, Coord2D, RoomList, Wall, WallList
from .colormap import Colormap
from .tiles import ROOM_CATEGORY


def flood_wall(colormap: Colormap, start: Coord2D, claimed: List[List[bool]]) -> Wall:
    """Collect the same-category component containing ``start``.

    Every collected cell is marked in ``claimed`` as soon as it is queued, so
    each cell is visited at most once even when the region contains cycles.
    """
    sr, sc = start
    category = colormap.category(sr, sc)
    coords: List[Coord2D] = []
    claimed[sr][sc] = True
    q = deque([start])
    while q:
        r, c = q.popleft()
        coords.append((r, c))
        for dr, dc in NEIGHBOURS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < colormap.height and 0 <= nc < colormap.width and not claimed[nr][nc]:
                if colormap.category(nr, nc) == category:
                    claimed[nr][nc] = True
                    q.append((nr, nc))
    return Wall(category, coords)


def extract_regions(colormap: Colormap) -> Tuple[WallList, RoomList]:
    """Return ``(walls, rooms)`` from a single row-major scan.

    Ordering follows the scan, so wall and room indices are reproducible for
    a given colormap.
    """
    claimed = [[False] * colormap.width for _ in range(colormap.height)]
    walls: WallList = []
    rooms: RoomList = []
    for r, c, category in colormap.cells():
        if category == ROOM_CATEGORY:
            if not colormap.is_border(r, c):
                rooms.append((r, c))
        elif not claimed[r][c]:
            walls.append(flood_wall(colormap, (r, c), claimed))
    return walls, rooms


__all__ = ["extract_regions", "flood_wall"]
