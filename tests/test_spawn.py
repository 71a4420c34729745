# -*-  coding: utf-8 -*-
"""
Set of test for random tile spawning and board configuration.
"""
from unittest import TestCase, main

from tileboard.core.geometry import Cell
from tileboard.core.grid import Grid
from tileboard.core.spawn import add_random_tile, choose_value, make_generator
from tileboard.core.tile import TileFactory
from tileboard.engine.config import TILE_SPAWN_PROBS, BoardConfig


class ScriptedRandom:
    """Random source replaying fixed draws."""

    def __init__(self, index, draw):
        self.index = index
        self.draw = draw

    def integers(self, high):
        return self.index

    def random(self):
        return self.draw


class TestSpawn(TestCase):
    """Random tile placement."""

    def test_choose_value_threshold(self):
        """Draws below 0.9 give a 2, the rest a 4."""
        self.assertEqual(choose_value(ScriptedRandom(0, 0.0), TILE_SPAWN_PROBS), 2)
        self.assertEqual(choose_value(ScriptedRandom(0, 0.8999), TILE_SPAWN_PROBS), 2)
        self.assertEqual(choose_value(ScriptedRandom(0, 0.9), TILE_SPAWN_PROBS), 4)
        self.assertEqual(choose_value(ScriptedRandom(0, 0.99), TILE_SPAWN_PROBS), 4)

    def test_distribution(self):
        """About nine tiles out of ten are 2s."""
        rng = make_generator(seed=42)
        draws = [choose_value(rng, TILE_SPAWN_PROBS) for _ in range(10_000)]
        ratio = draws.count(2) / len(draws)
        self.assertGreater(ratio, 0.87)
        self.assertLess(ratio, 0.93)

    def test_generator_reproducible(self):
        """Same seed gives the same draws."""
        first, second = make_generator(seed=3), make_generator(seed=3)
        self.assertEqual([first.integers(16) for _ in range(10)], [second.integers(16) for _ in range(10)])

    def test_add_random_tile_uses_index(self):
        """The drawn index selects among empty cells in row-major order."""
        grid = Grid(size=2)
        grid.place(TileFactory().create(2), Cell(0, 0))
        tile = add_random_tile(grid, TileFactory(), ScriptedRandom(1, 0.95), TILE_SPAWN_PROBS)
        self.assertIs(grid.cell_at(Cell(0, 1)), tile)
        self.assertEqual(tile.value, 4)
        self.assertTrue(tile.is_new)

    def test_full_grid_skips_spawn(self):
        """Nothing is spawned on a full grid."""
        grid = Grid(size=2)
        factory = TileFactory()
        for cell in [Cell(0, 0), Cell(1, 0), Cell(0, 1), Cell(1, 1)]:
            grid.place(factory.create(2), cell)
        self.assertIsNone(add_random_tile(grid, factory, ScriptedRandom(0, 0.0), TILE_SPAWN_PROBS))
        self.assertEqual(factory.next_id, 4)


class TestBoardConfig(TestCase):
    """Configuration validation."""

    def test_defaults(self):
        """Defaults describe the classic game."""
        config = BoardConfig()
        self.assertEqual(config.size, 4)
        self.assertEqual(config.win_value, 2048)
        self.assertEqual(dict(config.tile_spawn_probs), {2: 0.9, 4: 0.1})
        self.assertEqual(config.start_tiles, 2)

    def test_spawn_distribution_read_only(self):
        """The spawn distribution cannot be changed after validation."""
        probs = {2: 0.5, 4: 0.5}
        config = BoardConfig(tile_spawn_probs=probs)

        with self.assertRaises(TypeError):
            config.tile_spawn_probs[2] = 5.0

        # ##>: Changing the caller's dict does not leak into the configuration.
        probs[2] = 5.0
        self.assertEqual(dict(config.tile_spawn_probs), {2: 0.5, 4: 0.5})

    def test_hashable(self):
        """Configurations can be hashed and compared."""
        self.assertEqual(hash(BoardConfig()), hash(BoardConfig()))
        self.assertEqual(BoardConfig(), BoardConfig())
        self.assertNotEqual(BoardConfig(), BoardConfig(tile_spawn_probs={2: 1.0}))

    def test_invalid(self):
        """Inconsistent settings are refused."""
        for kwargs in (
            {"size": 1},
            {"win_value": 1000},
            {"win_value": 2},
            {"tile_spawn_probs": {}},
            {"tile_spawn_probs": {2: 0.5, 4: 0.4}},
            {"tile_spawn_probs": {3: 1.0}},
            {"start_tiles": 17},
        ):
            with self.subTest(**kwargs), self.assertRaises(ValueError):
                BoardConfig(**kwargs)


if __name__ == "__main__":
    main()
