# src/mazegen/cell.py
# Directions, region tags and the four-walled cell.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Tuple

from .errors import IllegalDirectionError


class Direction(IntEnum):
    # Values index Cell.walls.
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTA[self]


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_DELTA = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

NUM_DIRECTIONS = len(Direction)


def as_direction(value) -> Direction:
    """Coerce an int-like value to a Direction or raise IllegalDirectionError."""
    if isinstance(value, bool):
        raise IllegalDirectionError(f"Can't build wall in illegal direction {value!r}")
    try:
        return Direction(value)
    except ValueError:
        raise IllegalDirectionError(f"Can't build wall in illegal direction {value!r}") from None


class RegionKind(Enum):
    UNCARVED = "uncarved"
    CORRIDOR = "corridor"
    ROOM = "room"


@dataclass(frozen=True)
class Region:
    kind: RegionKind
    room_id: int = 0

    def is_room(self) -> bool:
        return self.kind is RegionKind.ROOM

    def as_int(self) -> int:
        # Legacy encoding: 0 uncarved, -1 corridor, n for room n.
        if self.kind is RegionKind.ROOM:
            return self.room_id
        return -1 if self.kind is RegionKind.CORRIDOR else 0


UNCARVED = Region(RegionKind.UNCARVED)
CORRIDOR = Region(RegionKind.CORRIDOR)


def room_region(room_id: int) -> Region:
    if room_id < 1:
        raise ValueError(f"room ids start at 1, got {room_id}")
    return Region(RegionKind.ROOM, room_id)


@dataclass
class Cell:
    walls: List[bool] = field(default_factory=lambda: [True] * NUM_DIRECTIONS)
    region: Region = UNCARVED

    def has_wall(self, direction) -> bool:
        return self.walls[as_direction(direction)]

    def break_wall(self, direction) -> None:
        self.walls[as_direction(direction)] = False

    def build_wall(self, direction) -> None:
        self.walls[as_direction(direction)] = True

    def is_carved(self) -> bool:
        return not all(self.walls)

    def is_part_of_room(self) -> bool:
        return self.region.is_room()

    def open_directions(self) -> List[Direction]:
        return [d for d in Direction if not self.walls[d]]
