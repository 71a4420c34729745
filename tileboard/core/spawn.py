"""
Random tile spawning with an injectable random source.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from numpy.random import PCG64DXSM, Generator, default_rng

from tileboard.core.grid import Grid
from tileboard.core.tile import Tile, TileFactory


class RandomSource(Protocol):
    """The subset of ``numpy.random.Generator`` the spawner draws from."""

    def integers(self, high: int) -> int:
        """Draw an integer in ``[0, high)``."""
        ...

    def random(self) -> float:
        """Draw a float in ``[0, 1)``."""
        ...


def make_generator(seed: int | None = None) -> Generator:
    """
    Build the default random source.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible games. A fresh entropy seed is used when omitted.

    Returns
    -------
    Generator
        A numpy generator backed by PCG64DXSM.
    """
    return default_rng(PCG64DXSM(seed))


def choose_value(rng: RandomSource, spawn_probs: Mapping[int, float]) -> int:
    """
    Draw the value of a new tile.

    Parameters
    ----------
    rng : RandomSource
        Source of randomness.
    spawn_probs : Mapping[int, float]
        Probability of each value, in drawing order.

    Returns
    -------
    int
        The drawn value.
    """
    draw = rng.random()
    cumulative = 0.0
    for value, probability in spawn_probs.items():
        cumulative += probability
        if draw < cumulative:
            return value

    # ##: Rounding can leave the cumulative sum a hair below one.
    return value


def add_random_tile(
    grid: Grid, factory: TileFactory, rng: RandomSource, spawn_probs: Mapping[int, float]
) -> Tile | None:
    """
    Put a new tile in a random empty cell.

    Parameters
    ----------
    grid : Grid
        The grid to fill. **Modified in-place.**
    factory : TileFactory
        Factory allocating the tile id.
    rng : RandomSource
        Source of randomness, the cell is drawn before the value.
    spawn_probs : Mapping[int, float]
        Probability of each tile value.

    Returns
    -------
    Tile | None
        The spawned tile, None when the grid is full.
    """
    cells = grid.available_cells()
    if not cells:
        return None

    cell = cells[int(rng.integers(len(cells)))]
    tile = factory.create(value=choose_value(rng, spawn_probs), is_new=True)
    grid.place(tile, cell)
    return tile
