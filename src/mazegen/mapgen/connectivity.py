"""Reachability over open walls: flood fill and a whole-maze connectivity check."""
from __future__ import annotations

from collections import deque
from typing import Set

from ..grid import Coord, Grid


def flood_fill(grid: Grid, x: int, y: int) -> Set[Coord]:
    start = Coord(x, y)
    grid.cell(x, y)  # raises OutOfBoundsError
    seen = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        for d in grid.cells[grid.offset(*cur)].open_directions():
            n = grid.neighbor(cur.x, cur.y, d)
            if n is not None and n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def carved_coords(grid: Grid) -> Set[Coord]:
    return {c for c in grid.coords() if grid.cells[grid.offset(*c)].is_carved()}


def is_connected(grid: Grid) -> bool:
    """True when every carved cell can reach every other one."""
    carved = carved_coords(grid)
    if not carved:
        return True
    first = min(carved, key=lambda c: (c.y, c.x))
    return flood_fill(grid, *first) == carved
