# src/mazegen/mapgen/pruning.py
# Sparseness pass: fill corridor dead ends back in.

from __future__ import annotations

import logging
from typing import List

from ..cell import UNCARVED
from ..grid import Coord, Grid

log = logging.getLogger(__name__)


def dead_ends(grid: Grid) -> List[Coord]:
    """Corridor cells with exactly one open wall. Room cells never count."""
    out = []
    for c in grid.coords():
        cell = grid.cells[grid.offset(*c)]
        if cell.is_part_of_room():
            continue
        if len(cell.open_directions()) == 1:
            out.append(c)
    return out


def remove_dead_ends(grid: Grid, passes: int) -> int:
    """
    Run up to ``passes`` rounds; each round fills every dead end found at its
    start. Filling a leaf never disconnects the rest of the maze.
    Returns the number of cells filled.
    """
    if passes < 0:
        raise ValueError(f"passes must not be negative, got {passes}")
    filled = 0
    for n in range(passes):
        ends = dead_ends(grid)
        if not ends:
            break
        for c in ends:
            cell = grid.cells[grid.offset(*c)]
            # A two-cell stub loses its shared wall to whichever end goes first.
            for d in cell.open_directions():
                grid.fill(c.x, c.y, d)
            cell.region = UNCARVED
            filled += 1
        log.debug("prune pass %d filled %d dead ends", n + 1, len(ends))
    return filled
