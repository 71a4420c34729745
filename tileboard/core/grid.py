"""
The N x N grid holding the tiles of a game, the single source of truth for positions.
"""

from __future__ import annotations

from collections.abc import Iterator

from numpy import int64, ndarray, zeros

from tileboard.core.geometry import Cell
from tileboard.core.tile import Tile


class Grid:
    """
    Square matrix of cells, each holding at most one tile.

    Cells are stored row by row, ``cells[y][x]``.
    """

    def __init__(self, size: int):
        self.size = size
        self.cells: list[list[Tile | None]] = [[None] * size for _ in range(size)]

    def is_within_bounds(self, cell: Cell) -> bool:
        """Check that a cell lies on the grid."""
        return 0 <= cell.x < self.size and 0 <= cell.y < self.size

    def cell_at(self, cell: Cell) -> Tile | None:
        """
        Get the tile in a cell.

        Parameters
        ----------
        cell : Cell
            The cell to look into.

        Returns
        -------
        Tile | None
            The tile, or None if the cell is empty or out of bounds.
        """
        if self.is_within_bounds(cell):
            return self.cells[cell.y][cell.x]
        return None

    def is_occupied(self, cell: Cell) -> bool:
        """Check that a cell holds a tile."""
        return self.cell_at(cell) is not None

    def is_available(self, cell: Cell) -> bool:
        """Check that a cell holds no tile."""
        return not self.is_occupied(cell)

    def available_cells(self) -> list[Cell]:
        """
        List the empty cells.

        Returns
        -------
        list[Cell]
            Empty cells in row-major order (y ascending, then x ascending).
        """
        return [Cell(x, y) for y in range(self.size) for x in range(self.size) if self.cells[y][x] is None]

    def each_cell(self) -> Iterator[tuple[Cell, Tile | None]]:
        """Iterate every cell with its content, column by column."""
        for x in range(self.size):
            for y in range(self.size):
                yield Cell(x, y), self.cells[y][x]

    def tiles(self) -> list[tuple[Cell, Tile]]:
        """List occupied cells with their tile, in row-major order."""
        return [
            (Cell(x, y), tile)
            for y, row in enumerate(self.cells)
            for x, tile in enumerate(row)
            if tile is not None
        ]

    def place(self, tile: Tile, cell: Cell) -> None:
        """Put a tile into a cell, ignored when the cell is out of bounds."""
        if self.is_within_bounds(cell):
            self.cells[cell.y][cell.x] = tile

    def remove(self, cell: Cell) -> None:
        """Empty a cell, ignored when the cell is out of bounds."""
        if self.is_within_bounds(cell):
            self.cells[cell.y][cell.x] = None

    def move_tile(self, tile: Tile, start: Cell, end: Cell) -> None:
        """
        Move a tile from ``start`` to ``end``.

        Nothing changes unless both cells lie on the grid.
        """
        if self.is_within_bounds(start) and self.is_within_bounds(end):
            self.remove(start)
            self.place(tile, end)

    def clear(self) -> None:
        """Empty every cell."""
        for row in self.cells:
            row[:] = [None] * self.size

    def values(self) -> ndarray:
        """
        Get the tile values as a matrix.

        Returns
        -------
        ndarray
            ``(size, size)`` int64 array indexed ``[y, x]``, 0 for empty cells.
        """
        board = zeros((self.size, self.size), dtype=int64)
        for cell, tile in self.tiles():
            board[cell.y, cell.x] = tile.value
        return board
