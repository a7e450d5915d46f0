"""
project: tilemaze
module: __init__.py
License: MIT

Procedural maze tilemaps for tile-based games.

A repeating category pattern is tiled into a colormap, flood filled into
walls and rooms, carved with randomized Prim's algorithm and flattened into
a binary tilemap (1 = wall, 0 = open), optionally widened to 2x2 blocks.
Drawing is left to a renderer; ``tilemaze.render`` ships a terminal one.
"""

from pathlib import Path


def _load_version() -> str:
    try:
        return (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()
