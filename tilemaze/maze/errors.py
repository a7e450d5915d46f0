"""Exception hierarchy for maze generation.

Configuration problems are detected before any grid is allocated and are
raised straight to the caller; nothing in the pipeline retries or recovers.
"""


class MazeError(Exception):
    """Base class for every error raised by the maze pipeline."""


class ConfigError(MazeError, ValueError):
    """Generation settings are unusable."""


class InvalidPattern(ConfigError):
    """Pattern is empty, malformed, or contains a row that cannot be tiled."""


class InvalidDimensions(ConfigError):
    """Width or height is not a positive integer."""


class EmptyRoomList(MazeError):
    """No interior room cells survive border exclusion (raised in strict mode only)."""


__all__ = ["MazeError", "ConfigError", "InvalidPattern", "InvalidDimensions", "EmptyRoomList"]
