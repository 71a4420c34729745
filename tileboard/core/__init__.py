# -*- coding: utf-8 -*-
"""
Building blocks of the 2048 board engine.

It includes the grid geometry, tiles and their factory, the grid itself, the traversal planning
used by moves, random tile spawning and the detection of available moves.
"""

from .gamemove import can_move, legal_directions, moves_available, tile_matches_available
from .geometry import VECTORS, Cell, Direction, Vector, neighbour, resolve_direction
from .grid import Grid
from .spawn import RandomSource, add_random_tile, choose_value, make_generator
from .tile import Tile, TileFactory
from .traversal import Traversal, build_traversal, find_farthest_position

__all__ = [
    "Cell",
    "Vector",
    "Direction",
    "VECTORS",
    "neighbour",
    "resolve_direction",
    "Tile",
    "TileFactory",
    "Grid",
    "Traversal",
    "build_traversal",
    "find_farthest_position",
    "RandomSource",
    "make_generator",
    "choose_value",
    "add_random_tile",
    "moves_available",
    "tile_matches_available",
    "legal_directions",
    "can_move",
]
