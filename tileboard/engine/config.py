"""
Configuration of a board, fixed for the lifetime of a game.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from math import isclose
from types import MappingProxyType

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


@dataclass(frozen=True)
class BoardConfig:
    """
    Board configuration.

    Attributes
    ----------
    size : int
        Width and height of the square grid.
    win_value : int
        Tile value that wins the game once produced by a merge.
    tile_spawn_probs : Mapping[int, float]
        Probability of each value for spawned tiles, drawn in key order. Stored as a read-only copy.
    start_tiles : int
        Number of random tiles seeded by a new game.
    """

    size: int = 4
    win_value: int = 2048
    tile_spawn_probs: Mapping[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS), hash=False)
    start_tiles: int = 2

    def __post_init__(self):
        """Freeze the spawn distribution and validate the configuration."""
        object.__setattr__(self, 'tile_spawn_probs', MappingProxyType(dict(self.tile_spawn_probs)))

        if self.size < 2:
            raise ValueError(f'size must be at least 2, got {self.size}')
        if self.win_value < 4 or not _is_power_of_two(self.win_value):
            raise ValueError(f'win_value must be a power of two >= 4, got {self.win_value}')
        if not self.tile_spawn_probs:
            raise ValueError('tile_spawn_probs must not be empty')
        if any(not _is_power_of_two(value) or value < 2 for value in self.tile_spawn_probs):
            raise ValueError(f'spawned values must be powers of two >= 2, got {list(self.tile_spawn_probs)}')
        if any(probability < 0 for probability in self.tile_spawn_probs.values()):
            raise ValueError('tile_spawn_probs must not hold negative probabilities')
        if not isclose(sum(self.tile_spawn_probs.values()), 1.0):
            raise ValueError('tile_spawn_probs must sum to 1')
        if not 0 <= self.start_tiles <= self.size**2:
            raise ValueError(f'start_tiles must be between 0 and {self.size**2}, got {self.start_tiles}')
