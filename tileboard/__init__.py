"""Rules engine of the 2048 sliding tile puzzle."""

from tileboard.core import Cell, Direction
from tileboard.engine import Board, BoardConfig, ReentrantCallError, SessionState, TileView

__all__ = ["Board", "BoardConfig", "Cell", "Direction", "ReentrantCallError", "SessionState", "TileView"]
