"""
Order in which cells are visited during a move, and how far a tile can slide.
"""

from __future__ import annotations

from typing import NamedTuple

from tileboard.core.geometry import Cell, Vector, neighbour
from tileboard.core.grid import Grid


class Traversal(NamedTuple):
    """Column order and row order of a move."""

    x: list[int]
    y: list[int]


def build_traversal(vector: Vector, size: int) -> Traversal:
    """
    Build the visiting order of a move.

    Parameters
    ----------
    vector : Vector
        The direction of the move.
    size : int
        The size of the grid.

    Returns
    -------
    Traversal
        Column and row orders, each a permutation of ``range(size)``.

    Notes
    -----
    An axis moving towards its high edge is walked backwards, so the tile closest to the edge
    the tiles slide to is always resolved first.
    """
    traversal = Traversal(x=list(range(size)), y=list(range(size)))
    if vector.x == 1:
        traversal.x.reverse()
    if vector.y == 1:
        traversal.y.reverse()
    return traversal


def find_farthest_position(grid: Grid, cell: Cell, vector: Vector) -> tuple[Cell, Cell]:
    """
    Slide from a cell along a vector until a border or a tile is hit.

    Parameters
    ----------
    grid : Grid
        The grid to slide on.
    cell : Cell
        The starting cell.
    vector : Vector
        The direction of the slide.

    Returns
    -------
    farthest : Cell
        The last empty cell reached, ``cell`` itself if the first step is blocked.
    next : Cell
        The first cell after ``farthest``, either occupied or out of bounds.
    """
    previous = cell
    following = neighbour(previous, vector)
    while grid.is_within_bounds(following) and grid.is_available(following):
        previous = following
        following = neighbour(previous, vector)
    return previous, following
