"""Tile widening for gameplay-scale maps.

Carved corridors are one tile wide, which is cramped for a game. Widening
turns every source tile into a 2x2 block of the same value: each cell is
emitted twice, then the finished widened row is emitted again below itself.
The value is always copied as-is; no look-ahead at neighbouring cells.
"""
from __future__ import annotations

from typing import List

from .tilemap import Tilemap


def widen_tilemap(tilemap: Tilemap) -> Tilemap:
    out: List[int] = []
    for row in tilemap.rows():
        wide: List[int] = []
        for value in row:
            wide.extend((value, value))
        out.extend(wide)
        out.extend(wide)
    return Tilemap(out, tilemap.width * 2)


__all__ = ["widen_tilemap"]
