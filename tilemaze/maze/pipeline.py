"""Pipeline orchestration for maze generation.

Stages run strictly forward, each a plain function of the previous outputs:

    pattern -> colormap -> (walls, rooms) -> open walls -> tilemap -> widened tilemap

A ``MazeContext`` carries every intermediate result so callers and tests can
inspect any stage after the run. ``Maze`` is the public entry point.
"""
from __future__ import annotations

import copy
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..logging_utils import get_logger
from .carver import MazeCarver, OpenWalls
from .cells import RoomList, WallList
from .colormap import Colormap, generate_colormap
from .config import MazeConfig
from .errors import EmptyRoomList
from .metrics import init_metrics
from .regions import extract_regions
from .rng import RandomSource, SeededRandomSource, draw_seed
from .tilemap import Tilemap, compose_tilemap
from .tiles import OPEN, WALL
from .widen import widen_tilemap

log = get_logger("tilemaze.pipeline")


@dataclass
class MazeContext:
    config: MazeConfig
    rng: RandomSource
    seed: Optional[int] = None
    colormap: Optional[Colormap] = None
    walls: WallList = field(default_factory=list)
    rooms: RoomList = field(default_factory=list)
    open_walls: OpenWalls = field(default_factory=list)
    visited_rooms: List[int] = field(default_factory=list)
    start_room: Optional[int] = None
    tilemap: Optional[Tilemap] = None
    base_tilemap: Optional[Tilemap] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


def build_colormap(ctx: MazeContext) -> None:
    cfg = ctx.config
    ctx.colormap = generate_colormap(cfg.pattern, cfg.width, cfg.height, cfg.line_reset)


def build_regions(ctx: MazeContext) -> None:
    ctx.walls, ctx.rooms = extract_regions(ctx.colormap)
    log.debug(event="regions", walls=len(ctx.walls), rooms=len(ctx.rooms))
    if not ctx.rooms and ctx.config.strict:
        raise EmptyRoomList(
            f"pattern leaves no interior rooms on a {ctx.config.width}x{ctx.config.height} grid"
        )


def carve_walls(ctx: MazeContext) -> None:
    carver = MazeCarver(ctx.walls, ctx.rooms, ctx.rng)
    ctx.open_walls = carver.run()
    ctx.visited_rooms = carver.visited
    ctx.start_room = carver.start_room
    if ctx.config.enable_metrics:
        ctx.metrics['walls_frontier_peak'] = carver.frontier_peak


def compose(ctx: MazeContext) -> None:
    ctx.base_tilemap = compose_tilemap(ctx.colormap, ctx.walls, ctx.open_walls, ctx.rooms)
    ctx.tilemap = ctx.base_tilemap


def widen(ctx: MazeContext) -> None:
    ctx.tilemap = widen_tilemap(ctx.base_tilemap)


def _collect_counts(ctx: MazeContext) -> None:
    m = ctx.metrics
    m['walls'] = len(ctx.walls)
    m['rooms'] = len(ctx.rooms)
    m['rooms_visited'] = len(ctx.visited_rooms)
    m['rooms_isolated'] = len(ctx.rooms) - len(ctx.visited_rooms)
    m['walls_opened'] = len(ctx.open_walls)
    m['tiles_open'] = ctx.tilemap.count(OPEN)
    m['tiles_wall'] = ctx.tilemap.count(WALL)
    m['widened'] = ctx.tilemap is not ctx.base_tilemap


def run_pipeline(ctx: MazeContext) -> MazeContext:
    """Execute ordered generation phases with per-phase timing.

    Timing lands in ``metrics['phase_ms']`` (phase name -> ms) and the total
    in ``metrics['runtime_ms']`` when metrics are enabled.
    """
    cfg = ctx.config
    if cfg.enable_metrics:
        ctx.metrics = init_metrics()
        phase_times: Dict[str, float] = {}
        start = time.perf_counter()

        def _phase(label, fn, *a):
            ps = time.perf_counter()
            r = fn(*a)
            phase_times[label] = round((time.perf_counter() - ps) * 1000, 3)
            return r
    else:
        def _phase(label, fn, *a):
            return fn(*a)

    # Configuration errors surface before any grid is allocated
    cfg.validate()
    _phase('colormap', build_colormap, ctx)
    _phase('regions', build_regions, ctx)
    _phase('carve', carve_walls, ctx)
    _phase('compose', compose, ctx)
    if cfg.widen:
        _phase('widen', widen, ctx)

    if cfg.enable_metrics:
        _collect_counts(ctx)
        ctx.metrics['runtime_ms'] = round((time.perf_counter() - start) * 1000, 3)
        ctx.metrics['phase_ms'] = phase_times
    log.info(
        event="maze_generated",
        seed=ctx.seed,
        width=ctx.tilemap.width,
        height=ctx.tilemap.height,
        walls=len(ctx.walls),
        rooms=len(ctx.rooms),
        opened=len(ctx.open_walls),
    )
    return ctx


class Maze:
    """Generate a maze tilemap.

    Accepts either a ``MazeConfig`` or the shorthand ``seed=``/``size=(w, h)``
    keywords; the config is copied, never modified. A custom ``rng`` replaces
    the seeded source entirely and leaves ``self.seed`` as None; otherwise
    a missing seed is drawn at random and recorded on ``self.seed`` so the
    same maze can be regenerated.
    """

    def __init__(
        self,
        config: MazeConfig | None = None,
        *,
        seed: int | None = None,
        size: Tuple[int, int] | None = None,
        rng: RandomSource | None = None,
    ):
        # Work on a copy so a reused config keeps asking for a fresh seed
        config = MazeConfig() if config is None else copy.deepcopy(config)
        if seed is not None:
            config.seed = seed
        if size is not None:
            config.width, config.height = size[0], size[1]
        self.config = config
        if rng is None:
            if self.config.seed is None:
                self.config.seed = draw_seed()
            rng = SeededRandomSource(self.config.seed)
            self.seed = self.config.seed
        else:
            # Configured seed is unused when the caller supplies the source
            self.seed = None
        self.context = run_pipeline(MazeContext(config=self.config, rng=rng, seed=self.seed))

    @property
    def tilemap(self) -> Tilemap:
        return self.context.tilemap

    @property
    def width(self) -> int:
        return self.context.tilemap.width

    @property
    def height(self) -> int:
        return self.context.tilemap.height

    @property
    def colormap(self) -> Colormap:
        return self.context.colormap

    @property
    def walls(self) -> WallList:
        return self.context.walls

    @property
    def rooms(self) -> RoomList:
        return self.context.rooms

    @property
    def open_walls(self) -> OpenWalls:
        return self.context.open_walls

    @property
    def metrics(self) -> Dict[str, Any]:
        return self.context.metrics

    def render(self, renderer):
        """Hand the final tiles to any object exposing ``render(tilemap, width)``."""
        return renderer.render(self.tilemap.cells, self.tilemap.width)

    def to_dict(self):
        data = self.tilemap.to_dict()
        data["seed"] = self.seed
        return data


def generate_tilemap(config: MazeConfig | None = None, rng: RandomSource | None = None) -> Tilemap:
    return Maze(config, rng=rng).tilemap


__all__ = ["Maze", "MazeContext", "run_pipeline", "generate_tilemap"]
