"""
Move availability for the 2048 board: terminal state detection and per-direction legality.
"""

from __future__ import annotations

from tileboard.core.geometry import VECTORS, Direction, neighbour
from tileboard.core.grid import Grid
from tileboard.core.traversal import find_farthest_position


def tile_matches_available(grid: Grid) -> bool:
    """
    Check whether two orthogonal neighbours hold the same value.

    Parameters
    ----------
    grid : Grid
        The grid to scan.

    Returns
    -------
    bool
        True as soon as one tile has an equal neighbour.
    """
    for cell, tile in grid.each_cell():
        if tile is None:
            continue
        for vector in VECTORS.values():
            other = grid.cell_at(neighbour(cell, vector))
            if other is not None and other.value == tile.value:
                return True
    return False


def moves_available(grid: Grid) -> bool:
    """
    Check whether any move could still change the grid.

    Parameters
    ----------
    grid : Grid
        The grid to check.

    Returns
    -------
    bool
        True if there is an empty cell or two adjacent tiles of equal value.

    Notes
    -----
    The check has no side effect, calling it on an unchanged grid is harmless.
    """
    return bool(grid.available_cells()) or tile_matches_available(grid)


def can_move(grid: Grid, direction: Direction) -> bool:
    """
    Check whether moving towards a direction would change the grid.

    Parameters
    ----------
    grid : Grid
        The grid to check.
    direction : Direction
        The direction of the move.

    Returns
    -------
    bool
        True as soon as one tile can slide or runs into a tile of equal value.
    """
    vector = VECTORS[direction]
    for cell, tile in grid.tiles():
        farthest, following = find_farthest_position(grid, cell, vector)
        if farthest != cell:
            return True
        target = grid.cell_at(following)
        if target is not None and target.value == tile.value:
            return True
    return False


def legal_directions(grid: Grid) -> list[Direction]:
    """
    Determine the directions that would change the grid.

    Parameters
    ----------
    grid : Grid
        The grid to check.

    Returns
    -------
    list[Direction]
        Legal directions, in the order up, down, left, right.
    """
    return [direction for direction in Direction if can_move(grid, direction)]
