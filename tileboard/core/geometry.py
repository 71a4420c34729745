"""
Grid geometry for the 2048 board: cells, direction vectors and the direction table.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Cell(NamedTuple):
    """A position on the board, ``x`` is the column and ``y`` the row."""

    x: int
    y: int


class Vector(NamedTuple):
    """Unit displacement of a move."""

    x: int
    y: int


class Direction(str, Enum):
    """Directions a move can take."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


# ##: Direction to displacement, y grows downwards.
VECTORS: dict[Direction, Vector] = {
    Direction.UP: Vector(0, -1),
    Direction.DOWN: Vector(0, 1),
    Direction.RIGHT: Vector(1, 0),
    Direction.LEFT: Vector(-1, 0),
}


def resolve_direction(direction: Direction | str) -> Vector | None:
    """
    Resolve a direction, or its name, to its vector.

    Parameters
    ----------
    direction : Direction | str
        The direction to resolve. Names are case-insensitive.

    Returns
    -------
    Vector | None
        The displacement of the direction, None if the direction is unknown.
    """
    if isinstance(direction, str) and not isinstance(direction, Direction):
        try:
            direction = Direction(direction.lower())
        except ValueError:
            return None
    return VECTORS.get(direction)


def neighbour(cell: Cell, vector: Vector) -> Cell:
    """Return the cell one step away from ``cell`` along ``vector``."""
    return Cell(cell.x + vector.x, cell.y + vector.y)
