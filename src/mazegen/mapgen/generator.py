# src/mazegen/mapgen/generator.py
# Full pipeline: rooms, corridors, doorways, pruning.

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..config import MazeConfig, RoomSpec
from ..grid import Grid
from ..rng import PMRandom, RandomSource
from .carve import grow_tree
from .connectivity import carved_coords, flood_fill
from .pruning import remove_dead_ends
from .rooms import Room, connect_rooms, place_rooms

log = logging.getLogger(__name__)


def generate_perfect(grid: Grid, rng: RandomSource, start: Tuple[int, int] = (0, 0)) -> None:
    """Carve a perfect maze (one path between any two cells) over the whole grid."""
    grow_tree(grid, rng, start)


def generate(
    grid: Grid,
    room_spec: RoomSpec,
    rng: RandomSource,
    start: Tuple[int, int] = (0, 0),
    connect: bool = True,
) -> List[Room]:
    """Place rooms, grow corridors around them, then cut a doorway into each room."""
    rooms = place_rooms(grid, room_spec, rng)
    grow_tree(grid, rng, start)
    if connect and rooms:
        connect_rooms(grid, rooms, rng)
    return rooms


def generate_maze(config: MazeConfig, rng: Optional[RandomSource] = None) -> Grid:
    if rng is None:
        rng = PMRandom.from_seed(config.seed)
    grid = Grid.empty(config.rows, config.cols)

    if config.has_rooms:
        rooms = generate(grid, config.rooms, rng, config.start, connect=config.connect_rooms)
        log.info("generated %dx%d maze with %d rooms", grid.rows, grid.cols, len(rooms))
    else:
        generate_perfect(grid, rng, config.start)
        log.info("generated %dx%d perfect maze", grid.rows, grid.cols)

    if config.dead_end_passes:
        filled = remove_dead_ends(grid, config.dead_end_passes)
        log.info("pruned %d dead ends in %d passes", filled, config.dead_end_passes)

    if log.isEnabledFor(logging.DEBUG):
        reached = flood_fill(grid, *config.start) if grid.cell(*config.start).is_carved() else set()
        log.debug("%d of %d carved cells reachable from %s",
                  len(reached), len(carved_coords(grid)), config.start)
    return grid
