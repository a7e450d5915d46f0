"""Terminal renderer for finished tilemaps.

Any object with ``render(tilemap, width)`` can consume a maze; this one turns
the flat tile sequence into text, one line per row.
"""
from __future__ import annotations

from typing import Optional, Sequence, TextIO

from colorama import Fore, Style

from .maze.tiles import WALL


class TextRenderer:
    def __init__(
        self,
        wall_glyph: str = "#",
        open_glyph: str = " ",
        color: bool = False,
        stream: Optional[TextIO] = None,
    ):
        self.wall_glyph = wall_glyph
        self.open_glyph = open_glyph
        self.color = color
        self.stream = stream

    def _glyph(self, value: int) -> str:
        if value != WALL:
            return self.open_glyph
        if self.color:
            return f"{Style.BRIGHT}{Fore.BLUE}{self.wall_glyph}{Style.RESET_ALL}"
        return self.wall_glyph

    def render_lines(self, tilemap: Sequence[int], width: int) -> list[str]:
        if width <= 0 or len(tilemap) % width:
            raise ValueError(f"{len(tilemap)} tiles do not form rows of width {width}")
        return [
            "".join(self._glyph(v) for v in tilemap[i:i + width])
            for i in range(0, len(tilemap), width)
        ]

    def render(self, tilemap: Sequence[int], width: int) -> str:
        text = "\n".join(self.render_lines(tilemap, width))
        if self.stream is not None:
            print(text, file=self.stream)
        return text


__all__ = ["TextRenderer"]
