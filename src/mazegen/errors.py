# src/mazegen/errors.py
"""Exceptions raised by grid primitives and the generators."""


class MazeError(Exception):
    """Base class for every maze failure."""


class OutOfBoundsError(MazeError):
    """Cell coordinates outside the grid."""


class IllegalDirectionError(MazeError):
    """A value that is not one of the four directions."""


class WallExitsMazeError(IllegalDirectionError):
    """Carving toward the edge would open the maze to the outside."""


class GenerationError(MazeError):
    """The corridor carver could not take its first step."""
