import pytest

from mazegen.cell import (
    CORRIDOR, UNCARVED, Cell, Direction, RegionKind, as_direction, room_region,
)
from mazegen.errors import IllegalDirectionError


def test_fresh_cell():
    c = Cell()
    assert c.walls == [True, True, True, True]
    assert c.region == UNCARVED
    assert not c.is_carved()
    assert not c.is_part_of_room()


def test_break_and_build_wall():
    c = Cell()
    c.break_wall(Direction.NORTH)
    assert c.walls == [False, True, True, True]
    assert c.is_carved()
    c.build_wall(Direction.NORTH)
    assert c.walls == [True, True, True, True]
    assert not c.is_carved()


def test_break_every_wall_and_again():
    c = Cell()
    for d, want in [
        (Direction.NORTH, [False, True, True, True]),
        (Direction.SOUTH, [False, False, True, True]),
        (Direction.EAST, [False, False, False, True]),
        (Direction.WEST, [False, False, False, False]),
        (Direction.NORTH, [False, False, False, False]),
    ]:
        c.break_wall(d)
        assert c.walls == want
    assert c.open_directions() == list(Direction)


def test_is_carved_iff_any_wall_missing():
    for mask in range(16):
        c = Cell(walls=[bool(mask & (1 << i)) for i in range(4)])
        assert c.is_carved() == (mask != 0b1111)


def test_illegal_direction():
    c = Cell()
    with pytest.raises(IllegalDirectionError):
        c.break_wall(17)
    with pytest.raises(IllegalDirectionError):
        as_direction(-1)
    assert c.walls == [True, True, True, True]
    assert as_direction(2) is Direction.EAST


def test_opposites_and_deltas():
    assert Direction.NORTH.opposite is Direction.SOUTH
    assert Direction.EAST.opposite is Direction.WEST
    for d in Direction:
        dx, dy = d.delta
        ox, oy = d.opposite.delta
        assert (dx + ox, dy + oy) == (0, 0)


def test_region_tags():
    r = room_region(3)
    assert r.kind is RegionKind.ROOM and r.room_id == 3
    assert r.as_int() == 3
    assert CORRIDOR.as_int() == -1
    assert UNCARVED.as_int() == 0
    assert Cell(region=r).is_part_of_room()
    assert not Cell(region=CORRIDOR).is_part_of_room()
    with pytest.raises(ValueError):
        room_region(0)
