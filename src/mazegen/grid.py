# src/mazegen/grid.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional

from .cell import CORRIDOR, Cell, Direction, Region, as_direction
from .errors import OutOfBoundsError, WallExitsMazeError


class Coord(NamedTuple):
    x: int
    y: int


@dataclass
class Grid:
    rows: int
    cols: int
    cells: List[Cell]

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Grid":
        # Every wall present, every cell uncarved.
        if rows < 0 or cols < 0:
            raise ValueError(f"grid dimensions must not be negative, got {rows}x{cols}")
        return cls(rows=rows, cols=cols, cells=[Cell() for _ in range(rows * cols)])

    def offset(self, x: int, y: int) -> int:
        return y * self.cols + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"({x}, {y}) is outside the {self.rows}x{self.cols} maze")
        return self.cells[self.offset(x, y)]

    def neighbor(self, x: int, y: int, direction) -> Optional[Coord]:
        dx, dy = as_direction(direction).delta
        nx, ny = x + dx, y + dy
        if self.in_bounds(nx, ny):
            return Coord(nx, ny)
        return None

    def coords(self) -> Iterator[Coord]:
        for y in range(self.rows):
            for x in range(self.cols):
                yield Coord(x, y)

    def _wall_pair(self, x: int, y: int, direction):
        # Validate everything before either caller touches a wall.
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"Can't carve outside of maze at ({x}, {y})")
        d = as_direction(direction)
        dest = self.neighbor(x, y, d)
        if dest is None:
            raise WallExitsMazeError(f"Can't build {d.name.lower()} wall at ({x}, {y})")
        return d, self.cells[self.offset(x, y)], self.cells[self.offset(*dest)]

    def carve(
        self,
        x: int,
        y: int,
        direction: Direction,
        region: Region = CORRIDOR,
        carve_out: bool = False,
    ) -> Coord:
        """
        Break the wall of (x, y) facing ``direction`` and the matching wall of
        the neighbour on the other side. The origin always takes ``region``;
        the neighbour only when ``carve_out`` is false, so carving into a room
        from outside leaves the room's tag alone. Returns the neighbour.
        """
        d, origin, dest = self._wall_pair(x, y, direction)
        origin.break_wall(d)
        dest.break_wall(d.opposite)
        origin.region = region
        if not carve_out:
            dest.region = region
        dx, dy = d.delta
        return Coord(x + dx, y + dy)

    def fill(self, x: int, y: int, direction: Direction) -> Coord:
        """Rebuild the wall pair that ``carve`` would break. Regions are untouched."""
        d, origin, dest = self._wall_pair(x, y, direction)
        origin.build_wall(d)
        dest.build_wall(d.opposite)
        dx, dy = d.delta
        return Coord(x + dx, y + dy)
