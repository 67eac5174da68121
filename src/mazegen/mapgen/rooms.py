# src/mazegen/mapgen/rooms.py
# Room pre-pass and the doorway pass that joins rooms to the grown corridors.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..cell import CORRIDOR, Direction, Region, room_region
from ..config import RoomSpec
from ..grid import Coord, Grid
from ..rng import RandomSource, choice, randint

log = logging.getLogger(__name__)


@dataclass
class Room:
    x: int
    y: int
    w: int
    h: int
    room_id: int

    @property
    def region(self) -> Region:
        return room_region(self.room_id)

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h

    def cells(self) -> Iterator[Coord]:
        for iy in range(self.y, self.y + self.h):
            for ix in range(self.x, self.x + self.w):
                yield Coord(ix, iy)

    def boundary(self) -> Iterator[Tuple[Coord, Direction]]:
        """Every (cell, direction) pair whose wall faces out of the room."""
        for c in self.cells():
            for d in Direction:
                dx, dy = d.delta
                if not self.contains(c.x + dx, c.y + dy):
                    yield c, d


def _overlaps_room(grid: Grid, x: int, y: int, w: int, h: int) -> bool:
    # Footprint plus a one-cell margin on every side.
    for iy in range(y - 1, y + h + 1):
        for ix in range(x - 1, x + w + 1):
            if grid.in_bounds(ix, iy) and grid.cells[grid.offset(ix, iy)].is_part_of_room():
                return True
    return False


def _carve_room(grid: Grid, room: Room) -> None:
    region = room.region
    for c in room.cells():
        grid.cells[grid.offset(*c)].region = region
    for c in room.cells():
        if room.contains(c.x + 1, c.y):
            grid.carve(c.x, c.y, Direction.EAST, region)
        if room.contains(c.x, c.y + 1):
            grid.carve(c.x, c.y, Direction.SOUTH, region)


def place_rooms(grid: Grid, room_spec: RoomSpec, rng: RandomSource) -> List[Room]:
    """
    Make ``room_spec.count`` placement attempts. A rejected attempt is not retried,
    so fewer rooms than requested is normal. Returns the rooms placed, with
    ids 1, 2, ... in placement order. A 1x1 room has no interior wall and
    stays uncarved, so later corridor growth may pass through it and retag it.
    """
    rooms: List[Room] = []
    for attempt in range(room_spec.count):
        w = randint(rng, room_spec.min_w, room_spec.max_w)
        h = randint(rng, room_spec.min_h, room_spec.max_h)
        # Leave room for the margin between the room and the grid edge.
        if grid.cols - w - 1 < 1 or grid.rows - h - 1 < 1:
            log.debug("attempt %d: %dx%d room does not fit", attempt, w, h)
            continue
        x = randint(rng, 1, grid.cols - w - 1)
        y = randint(rng, 1, grid.rows - h - 1)
        if _overlaps_room(grid, x, y, w, h):
            log.debug("attempt %d: %dx%d at (%d, %d) overlaps", attempt, w, h, x, y)
            continue
        room = Room(x, y, w, h, room_id=len(rooms) + 1)
        _carve_room(grid, room)
        rooms.append(room)

    log.debug("placed %d of %d rooms", len(rooms), room_spec.count)
    return rooms


def _is_open_to_outside(grid: Grid, room: Room) -> bool:
    for c, d in room.boundary():
        if grid.neighbor(c.x, c.y, d) is not None and not grid.cells[grid.offset(*c)].walls[d]:
            return True
    return False


def doorway_candidates(grid: Grid, room: Room) -> List[Tuple[Coord, Direction]]:
    """Corridor cells bordering the room, with the direction that faces into it."""
    out = []
    for c, d in room.boundary():
        n = grid.neighbor(c.x, c.y, d)
        if n is None:
            continue
        outside = grid.cells[grid.offset(*n)]
        if outside.is_carved() and not outside.is_part_of_room():
            out.append((n, d.opposite))
    return out


def connect_rooms(grid: Grid, rooms: List[Room], rng: RandomSource) -> int:
    """Open one doorway into every room that is still sealed. Returns doors opened."""
    doors = 0
    for room in rooms:
        if _is_open_to_outside(grid, room):
            continue
        candidates = doorway_candidates(grid, room)
        if not candidates:
            log.warning("room %d at (%d, %d) has no corridor to connect to", room.room_id, room.x, room.y)
            continue
        door, d = choice(rng, candidates)
        grid.carve(door.x, door.y, d, CORRIDOR, carve_out=True)
        doors += 1

    log.debug("opened %d doorways", doors)
    return doors
