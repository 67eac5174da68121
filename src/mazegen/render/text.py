# src/mazegen/render/text.py
"""
Text renderer. Two characters per cell: 'X' for wall, ' ' for passage.
Each maze row becomes a side-wall line followed by a bottom-wall line.
"""

from __future__ import annotations

from typing import Iterator

from ..cell import Direction
from ..grid import Grid

WALL = "X"
OPEN = " "


def _open_room_floor(grid: Grid, x: int, y: int) -> bool:
    # Both this cell and its east neighbour are room floor open to the south.
    if x + 1 >= grid.cols:
        return False
    here = grid.cells[grid.offset(x, y)]
    east = grid.cells[grid.offset(x + 1, y)]
    return (
        here.is_part_of_room()
        and east.is_part_of_room()
        and not here.has_wall(Direction.SOUTH)
        and not east.has_wall(Direction.SOUTH)
    )


def render_lines(grid: Grid) -> Iterator[str]:
    yield WALL + WALL * 2 * grid.cols
    for y in range(grid.rows):
        side = [WALL]
        bottom = [WALL]
        for x in range(grid.cols):
            cell = grid.cells[grid.offset(x, y)]
            side.append(OPEN + (WALL if cell.has_wall(Direction.EAST) else OPEN))
            if cell.has_wall(Direction.SOUTH):
                bottom.append(WALL + WALL)
            elif _open_room_floor(grid, x, y):
                bottom.append(OPEN + OPEN)  # no pillar inside a room
            else:
                bottom.append(OPEN + WALL)
        yield "".join(side)
        yield "".join(bottom)


def render_text(grid: Grid) -> str:
    return "\n".join(render_lines(grid))
