"""
Session bookkeeping and the read-only records handed to renderers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SessionState:
    """
    Score and termination flags of a game.

    Attributes
    ----------
    score : int
        Sum of every merged value since the game started.
    best_score : int
        Best score known to the caller, kept across new games.
    over : bool
        No move can change the grid anymore.
    won : bool
        The win value has been produced. Never reverts within a game.
    """

    score: int = 0
    best_score: int = 0
    over: bool = False
    won: bool = False

    def reset(self) -> None:
        """Start a new game, the best score is kept."""
        self.score = 0
        self.over = False
        self.won = False


@dataclass(frozen=True)
class TileView:
    """
    A tile as seen by a renderer.

    Ghost views are the two tiles consumed by a merge of the last move. They sit on the cell of
    the merged tile so the renderer can animate them converging.
    """

    id: int
    value: int
    x: int
    y: int
    is_new: bool = False
    merged_from: tuple[int, int] | None = None
    ghost: bool = False
