"""
Tiles and the factory handing out their identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tile:
    """
    A numbered piece sitting on the board.

    Attributes
    ----------
    id : int
        Identifier, unique for the lifetime of a game.
    value : int
        Power of two carried by the tile.
    is_new : bool
        Whether the tile was spawned rather than produced by a merge.
    marked_for_deletion : bool
        Set on the two tiles a merge consumes. Such tiles are no longer on the grid.
    merged_from : tuple[int, int] | None
        Ids of the moving and the target tile of the merge that produced this tile.
        Only meaningful during the move that created it.
    """

    id: int
    value: int
    is_new: bool = True
    marked_for_deletion: bool = False
    merged_from: tuple[int, int] | None = None


class TileFactory:
    """Create tiles with monotonically increasing ids."""

    def __init__(self):
        self._next_id = 0

    @property
    def next_id(self) -> int:
        """Id the next created tile will receive."""
        return self._next_id

    def create(self, value: int, is_new: bool = True, merged_from: tuple[int, int] | None = None) -> Tile:
        """
        Allocate the next id and build a tile.

        Parameters
        ----------
        value : int
            The tile value.
        is_new : bool, optional
            Whether the tile is a fresh spawn (default is True).
        merged_from : tuple[int, int], optional
            Ids of the two tiles merged into this one.

        Returns
        -------
        Tile
            The new tile.
        """
        tile = Tile(id=self._next_id, value=value, is_new=is_new, merged_from=merged_from)
        self._next_id += 1
        return tile

    def reset(self) -> None:
        """Restart ids from zero, only for a new game."""
        self._next_id = 0
