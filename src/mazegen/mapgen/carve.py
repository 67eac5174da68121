# src/mazegen/mapgen/carve.py
# Growing-tree corridor carver: depth-first, explicit backtracking stack.

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..cell import CORRIDOR, Direction
from ..errors import GenerationError, OutOfBoundsError
from ..grid import Coord, Grid
from ..rng import RandomSource, choice

log = logging.getLogger(__name__)


def candidate_directions(grid: Grid, x: int, y: int) -> List[Direction]:
    """Directions whose neighbour is inside the grid and still uncarved."""
    out = []
    for d in Direction:
        n = grid.neighbor(x, y, d)
        if n is not None and not grid.cells[grid.offset(*n)].is_carved():
            out.append(d)
    return out


def pick_direction(grid: Grid, x: int, y: int, rng: RandomSource) -> Optional[Direction]:
    dirs = candidate_directions(grid, x, y)
    if not dirs:
        return None
    return choice(rng, dirs)


def _step(grid: Grid, cur: Coord, d: Direction) -> Coord:
    dest = grid.neighbor(cur.x, cur.y, d)
    # Growing into a room must not overwrite the room's id.
    carve_out = grid.cells[grid.offset(*dest)].is_part_of_room()
    return grid.carve(cur.x, cur.y, d, CORRIDOR, carve_out=carve_out)


def grow_tree(grid: Grid, rng: RandomSource, start: Tuple[int, int] = (0, 0)) -> int:
    """
    Carve corridors from ``start`` until every uncarved cell reachable from it
    has been joined. Already-carved cells (rooms) count as visited.
    Returns the number of cells carved into.
    """
    if not grid.cells:
        return 0
    cur = Coord(*start)
    if not grid.in_bounds(cur.x, cur.y):
        raise OutOfBoundsError(f"start ({cur.x}, {cur.y}) is outside the maze")

    d = pick_direction(grid, cur.x, cur.y, rng)
    if d is None:
        raise GenerationError(f"Unable to pick initial direction at ({cur.x}, {cur.y})")

    visited: List[Coord] = []
    carved = 0
    while True:
        if d is not None:
            visited.append(cur)
            cur = _step(grid, cur, d)
            carved += 1
        elif visited:
            cur = visited.pop()
        else:
            break
        d = pick_direction(grid, cur.x, cur.y, rng)

    log.debug("grow_tree from %s carved %d cells", tuple(start), carved)
    return carved
