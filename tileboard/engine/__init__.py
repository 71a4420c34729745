# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 board engine.

This module provides the `Board` class, which owns the grid and session state of a game and resolves moves.
"""

from .board import Board, ReentrantCallError
from .config import TILE_SPAWN_PROBS, BoardConfig
from .state import SessionState, TileView

__all__ = ["Board", "ReentrantCallError", "BoardConfig", "TILE_SPAWN_PROBS", "SessionState", "TileView"]
