"""Named colormap patterns.

Different patterns grow different kinds of maze. ``grid`` gives classic
one-cell corridors; ``stripes`` and ``weave`` flood into long irregular walls
so fewer of them qualify as doors.
"""
import copy
from typing import Dict, Tuple

from .cells import Pattern
from .errors import InvalidPattern

PRESETS: Dict[str, Tuple[Pattern, bool]] = {
    "grid": ([[2, 1], [1, 0]], True),
    "stripes": ([1, 2, 2, 1, 0], False),
    "weave": ([[0, 2, 2], [1, 1, 2], [1, 2, 1]], True),
}

DEFAULT_PRESET = "grid"


def get_preset(name: str) -> Tuple[Pattern, bool]:
    """Return ``(pattern, line_reset)`` for a preset name; the pattern is a fresh copy."""
    try:
        pattern, line_reset = PRESETS[name.lower()]
    except KeyError:
        raise InvalidPattern(f"unknown preset {name!r} (choose from {', '.join(sorted(PRESETS))})") from None
    return copy.deepcopy(pattern), line_reset


def parse_pattern(text: str) -> Pattern:
    """Parse ``"2,1;1,0"`` style text. ``;`` separates row templates."""
    text = text.strip()
    if not text:
        raise InvalidPattern("pattern text is empty")
    try:
        rows = [[int(v) for v in part.split(",") if v.strip()] for part in text.split(";")]
    except ValueError:
        raise InvalidPattern(f"pattern text {text!r} is not comma separated integers") from None
    if not any(rows):
        raise InvalidPattern(f"pattern text {text!r} has no categories")
    if ";" in text:
        return rows
    return rows[0]


__all__ = ["PRESETS", "DEFAULT_PRESET", "get_preset", "parse_pattern"]
