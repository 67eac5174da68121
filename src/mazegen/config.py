from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class RoomSpec:
    # Attempts, not a guaranteed count: rejected placements are not retried.
    count: int
    min_w: int
    min_h: int
    max_w: int
    max_h: int

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"room count must not be negative, got {self.count}")
        if self.count == 0:
            # nothing will be placed; "0 0 0 0 0" on the command line means no rooms
            return
        if self.min_w < 1 or self.min_h < 1:
            raise ValueError("minimum room size must be at least 1x1")
        if self.min_w > self.max_w or self.min_h > self.max_h:
            raise ValueError(
                f"room size range is inverted: {self.min_w}x{self.min_h}..{self.max_w}x{self.max_h}"
            )


@dataclass(frozen=True)
class MazeConfig:
    rows: int
    cols: int
    rooms: Optional[RoomSpec] = None
    start: Tuple[int, int] = (0, 0)
    connect_rooms: bool = True
    dead_end_passes: int = 0
    seed: Optional[int] = None

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"maze size must be positive, got {self.rows}x{self.cols}")
        x, y = self.start
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise ValueError(f"start {self.start} is outside the {self.rows}x{self.cols} maze")
        if self.dead_end_passes < 0:
            raise ValueError("dead_end_passes must not be negative")

    @property
    def has_rooms(self) -> bool:
        return self.rooms is not None and self.rooms.count > 0
