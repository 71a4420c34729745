# -*-  coding: utf-8 -*-
"""
Set of test for the Grid and the tile factory.
"""
from unittest import TestCase, main

import numpy as np

from tileboard.core.geometry import Cell
from tileboard.core.grid import Grid
from tileboard.core.tile import TileFactory


class TestGrid(TestCase):
    """Queries and mutators of the grid."""

    def setUp(self):
        """Initialize an empty grid before each test."""
        self.grid = Grid(size=4)
        self.factory = TileFactory()

    def test_bounds(self):
        """Cells outside the grid are rejected."""
        self.assertTrue(self.grid.is_within_bounds(Cell(0, 0)))
        self.assertTrue(self.grid.is_within_bounds(Cell(3, 3)))
        self.assertFalse(self.grid.is_within_bounds(Cell(-1, 0)))
        self.assertFalse(self.grid.is_within_bounds(Cell(0, 4)))

    def test_cell_at_out_of_bounds(self):
        """Looking outside the grid returns None."""
        self.assertIsNone(self.grid.cell_at(Cell(4, 0)))
        self.assertIsNone(self.grid.cell_at(Cell(0, -1)))

    def test_occupancy(self):
        """Occupied and available are exact complements."""
        tile = self.factory.create(2)
        self.grid.place(tile, Cell(1, 2))
        for cell in (Cell(1, 2), Cell(0, 0)):
            self.assertNotEqual(self.grid.is_occupied(cell), self.grid.is_available(cell))
        self.assertIs(self.grid.cell_at(Cell(1, 2)), tile)

    def test_available_cells_row_major(self):
        """Empty cells come row by row, left to right."""
        grid = Grid(size=2)
        grid.place(self.factory.create(2), Cell(0, 0))
        self.assertEqual(grid.available_cells(), [Cell(1, 0), Cell(0, 1), Cell(1, 1)])

    def test_available_cells_full(self):
        """A full grid has no empty cell."""
        grid = Grid(size=2)
        for cell in [Cell(0, 0), Cell(1, 0), Cell(0, 1), Cell(1, 1)]:
            grid.place(self.factory.create(2), cell)
        self.assertEqual(grid.available_cells(), [])

    def test_move_tile(self):
        """Moving a tile empties its origin."""
        tile = self.factory.create(4)
        self.grid.place(tile, Cell(0, 0))
        self.grid.move_tile(tile, Cell(0, 0), Cell(3, 0))
        self.assertIsNone(self.grid.cell_at(Cell(0, 0)))
        self.assertIs(self.grid.cell_at(Cell(3, 0)), tile)

    def test_mutators_ignore_out_of_bounds(self):
        """Negative or too large cells never wrap onto another cell."""
        tile = self.factory.create(2)
        self.grid.place(tile, Cell(-1, 0))
        self.grid.place(tile, Cell(0, 4))
        self.assertEqual(len(self.grid.available_cells()), 16)

        self.grid.place(tile, Cell(3, 0))
        self.grid.remove(Cell(-1, 0))
        self.grid.move_tile(tile, Cell(3, 0), Cell(-4, 0))
        self.assertIs(self.grid.cell_at(Cell(3, 0)), tile)
        self.assertIsNone(self.grid.cell_at(Cell(0, 0)))
        self.assertEqual(len(self.grid.available_cells()), 15)

    def test_values(self):
        """Values are indexed by row then column."""
        self.grid.place(self.factory.create(8), Cell(3, 1))
        expected = np.zeros((4, 4), dtype=np.int64)
        expected[1, 3] = 8
        np.testing.assert_array_equal(self.grid.values(), expected)

    def test_clear(self):
        """Clearing empties every cell."""
        self.grid.place(self.factory.create(2), Cell(2, 2))
        self.grid.clear()
        self.assertEqual(len(self.grid.available_cells()), 16)
        self.assertEqual(self.grid.tiles(), [])


class TestTileFactory(TestCase):
    """Identifier allocation."""

    def test_ids_increase(self):
        """Ids start at zero and grow by one."""
        factory = TileFactory()
        self.assertEqual([factory.create(2).id for _ in range(3)], [0, 1, 2])

    def test_factories_are_independent(self):
        """Two factories never share a counter."""
        first, second = TileFactory(), TileFactory()
        first.create(2)
        self.assertEqual(second.create(2).id, 0)

    def test_reset(self):
        """Reset restarts ids from zero."""
        factory = TileFactory()
        factory.create(2)
        factory.reset()
        self.assertEqual(factory.next_id, 0)

    def test_merged_tile(self):
        """A merged tile records its sources and is not new."""
        tile = TileFactory().create(8, is_new=False, merged_from=(3, 1))
        self.assertFalse(tile.is_new)
        self.assertFalse(tile.marked_for_deletion)
        self.assertEqual(tile.merged_from, (3, 1))


if __name__ == "__main__":
    main()
