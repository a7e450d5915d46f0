"""Public maze package interface.

Stage functions are exported individually so callers can run part of the
pipeline; ``Maze`` runs all of it.
"""

from .carver import MazeCarver, carve
from .cells import Wall
from .colormap import Colormap, generate_colormap
from .config import MazeConfig
from .errors import ConfigError, EmptyRoomList, InvalidDimensions, InvalidPattern, MazeError
from .patterns import PRESETS, get_preset
from .pipeline import Maze, MazeContext, generate_tilemap
from .regions import extract_regions
from .rng import RandomSource, SeededRandomSource
from .tilemap import Tilemap, compose_tilemap
from .tiles import OPEN, ROOM_CATEGORY, WALL
from .widen import widen_tilemap  # noqa: F401

__all__ = [
    "Maze",
    "MazeConfig",
    "MazeContext",
    "MazeCarver",
    "Colormap",
    "Tilemap",
    "Wall",
    "RandomSource",
    "SeededRandomSource",
    "generate_colormap",
    "extract_regions",
    "carve",
    "compose_tilemap",
    "widen_tilemap",
    "generate_tilemap",
    "PRESETS",
    "get_preset",
    "MazeError",
    "ConfigError",
    "InvalidPattern",
    "InvalidDimensions",
    "EmptyRoomList",
    "OPEN",
    "WALL",
    "ROOM_CATEGORY",
]
