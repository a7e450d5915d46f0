"""Randomized Prim's carving over the room/wall adjacency graph.

A wall is a door candidate only when it touches exactly two rooms. Growth
starts from one random room; each round picks a random frontier entry and
opens it when it leads to exactly one unvisited room. Opening a wall never
joins two rooms that are already connected, so the doors form a spanning
tree over every room reachable from the start.

The frontier is a list, not a set: a wall queued from two rooms appears twice
and is twice as likely to be drawn. Once drawn, every copy is retired.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from ..logging_utils import get_logger

from .cells import NEIGHBOURS, Coord2D, Wall
from .rng import RandomSource

OpenWalls = List[int]

log = get_logger("tilemaze.carver")


def build_adjacency(
    walls: Sequence[Wall], rooms: Sequence[Coord2D]
) -> Tuple[List[List[int]], List[List[int]]]:
    """Return ``(room_walls, wall_rooms)`` index lists, both sorted ascending."""
    owner: Dict[Coord2D, int] = {}
    for wi, wall in enumerate(walls):
        for coord in wall:
            owner[coord] = wi
    room_walls: List[List[int]] = []
    wall_rooms: List[List[int]] = [[] for _ in walls]
    for ri, (r, c) in enumerate(rooms):
        adjacent = sorted({owner[(r + dr, c + dc)] for dr, dc in NEIGHBOURS if (r + dr, c + dc) in owner})
        room_walls.append(adjacent)
        for wi in adjacent:
            wall_rooms[wi].append(ri)
    return room_walls, wall_rooms


class MazeCarver:
    def __init__(self, walls: Sequence[Wall], rooms: Sequence[Coord2D], rng: RandomSource):
        self.walls = walls
        self.rooms = rooms
        self.rng = rng
        self.room_walls, self.wall_rooms = build_adjacency(walls, rooms)
        self.start_room: Optional[int] = None
        self.visited: List[int] = []
        self.open_walls: OpenWalls = []
        self.frontier_peak = 0
        self.draws = 0

    def _visit(self, room_index: int, frontier: List[int], seen: set) -> None:
        seen.add(room_index)
        self.visited.append(room_index)
        frontier.extend(self.room_walls[room_index])
        self.frontier_peak = max(self.frontier_peak, len(frontier))

    def run(self) -> OpenWalls:
        if not self.rooms:
            log.debug(event="carve_skipped", reason="no_rooms")
            return self.open_walls
        seen: set = set()
        frontier: List[int] = []
        self.start_room = self.rng.next_int(len(self.rooms))
        self._visit(self.start_room, frontier, seen)
        while frontier:
            wall_index = frontier[self.rng.next_int(len(frontier))]
            self.draws += 1
            adjacent = self.wall_rooms[wall_index]
            if len(adjacent) == 2:
                unvisited = [ri for ri in adjacent if ri not in seen]
                if len(unvisited) == 1:
                    self.open_walls.append(wall_index)
                    self._visit(unvisited[0], frontier, seen)
            frontier = [wi for wi in frontier if wi != wall_index]
        log.debug(
            event="carve_done",
            start_room=self.start_room,
            opened=len(self.open_walls),
            visited=len(self.visited),
            draws=self.draws,
        )
        return self.open_walls


def carve(walls: Sequence[Wall], rooms: Sequence[Coord2D], rng: RandomSource) -> OpenWalls:
    """Return the indices of opened walls, in the order they were opened."""
    return MazeCarver(walls, rooms, rng).run()


__all__ = ["MazeCarver", "carve", "build_adjacency", "OpenWalls"]
