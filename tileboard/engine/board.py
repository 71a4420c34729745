"""2048 board engine: moves, merges, spawns and the session bookkeeping that follows."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import replace

from numpy import asarray, int64, ndarray

from tileboard.core.gamemove import legal_directions, moves_available
from tileboard.core.geometry import Cell, Direction, resolve_direction
from tileboard.core.grid import Grid
from tileboard.core.spawn import RandomSource, add_random_tile, make_generator
from tileboard.core.tile import Tile, TileFactory
from tileboard.core.traversal import build_traversal, find_farthest_position
from tileboard.engine.config import BoardConfig
from tileboard.engine.state import SessionState, TileView

logger = logging.getLogger(__name__)

Listener = Callable[['Board'], None]


class ReentrantCallError(RuntimeError):
    """A mutating call was made while another one was still running."""


class Board:
    """
    2048 board engine.

    The board owns the grid, the tile factory and the session state. Callers drive it through
    ``move`` and ``new_game`` and read it back through the session properties, ``tiles`` and
    ``render_list``.
    """

    def __init__(self, config: BoardConfig | None = None, rng: RandomSource | None = None, seed: int | None = None):
        """
        Initialize the board and start a game.

        Parameters
        ----------
        config : BoardConfig, optional
            Size, win value and spawn distribution (default is a classic 4x4 game).
        rng : RandomSource, optional
            Source of randomness for spawned tiles. Takes precedence over ``seed``.
        seed : int, optional
            Seed of the default generator, for reproducible games.
        """
        self.config = config if config is not None else BoardConfig()
        self._rng = rng if rng is not None else make_generator(seed)
        self._grid = Grid(self.config.size)
        self._factory = TileFactory()
        self._state = SessionState()

        # ##: Tiles consumed by the merges of the last move, by id.
        self._ghosts: dict[int, Tile] = {}

        self._listeners: list[Listener] = []
        self._busy = False

        self.new_game()

    @property
    def size(self) -> int:
        """Width and height of the grid."""
        return self.config.size

    @property
    def score(self) -> int:
        """Current score."""
        return self._state.score

    @property
    def best_score(self) -> int:
        """Best score, maintained by the caller."""
        return self._state.best_score

    @best_score.setter
    def best_score(self, value: int) -> None:
        self._state.best_score = value

    @property
    def over(self) -> bool:
        """Whether the last move left no possible move."""
        return self._state.over

    @property
    def won(self) -> bool:
        """Whether the win value has been reached."""
        return self._state.won

    @property
    def state(self) -> SessionState:
        """
        Get a snapshot of the session state.

        Returns
        -------
        SessionState
            A copy, later moves do not alter it.
        """
        return replace(self._state)

    def cell_at(self, cell: Cell) -> Tile | None:
        """Get the tile in a cell, None if empty or out of bounds."""
        return self._grid.cell_at(cell)

    def values(self) -> ndarray:
        """
        Get the tile values.

        Returns
        -------
        ndarray
            ``(size, size)`` int64 array indexed ``[y, x]``, 0 for empty cells.
        """
        return self._grid.values()

    def tiles(self) -> list[TileView]:
        """
        List the tiles on the grid.

        Returns
        -------
        list[TileView]
            One view per occupied cell, sorted by id.
        """
        views = [self._view(tile, cell) for cell, tile in self._grid.tiles()]
        return sorted(views, key=lambda view: view.id)

    def render_list(self) -> list[TileView]:
        """
        List what a renderer should draw for the current frame.

        Returns
        -------
        list[TileView]
            Every tile on the grid plus, for each merge of the last move, the two consumed tiles
            as ghosts placed on the merged cell. Sorted by id for stable diffing.
        """
        views = []
        for cell, tile in self._grid.tiles():
            if tile.merged_from is not None:
                for source_id in tile.merged_from:
                    views.append(self._view(self._ghosts[source_id], cell, ghost=True))
            views.append(self._view(tile, cell))
        return sorted(views, key=lambda view: view.id)

    def moves_available(self) -> bool:
        """Check whether any move could still change the grid."""
        return moves_available(self._grid)

    def legal_directions(self) -> list[Direction]:
        """List the directions that would change the grid."""
        return legal_directions(self._grid)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback run after every move and new game.

        Parameters
        ----------
        listener : Callable[[Board], None]
            Called with the board once the call has been applied.

        Returns
        -------
        Callable[[], None]
            Removes the listener when called.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def new_game(self) -> None:
        """
        Start a new game.

        The grid is cleared and seeded with the configured number of random tiles, ids restart
        from zero and the score and flags are reset. The best score is kept.
        """
        with self._exclusive():
            self._grid.clear()
            self._factory.reset()
            self._ghosts.clear()
            self._state.reset()

            for _ in range(self.config.start_tiles):
                add_random_tile(self._grid, self._factory, self._rng, self.config.tile_spawn_probs)

            logger.info('New %dx%d game started', self.size, self.size)
            self._notify()

    def load(self, values) -> None:
        """
        Replace the grid with tiles built from a value matrix.

        Parameters
        ----------
        values : array_like
            ``(size, size)`` matrix indexed ``[y, x]``, 0 for empty cells.

        Raises
        ------
        ValueError
            If the matrix is not made of integers, does not match the board shape or holds a value
            that is not a power of two.

        Notes
        -----
        Tiles get fresh ids and are not flagged as new. The session state is left untouched.
        """
        board = asarray(values)
        if board.dtype.kind not in 'iu':
            raise ValueError(f'Tile values must be integers, got dtype {board.dtype}')
        board = board.astype(int64)
        if board.shape != (self.size, self.size):
            raise ValueError(f'Expected a {self.size}x{self.size} matrix, got shape {board.shape}')
        if any(value < 0 or value == 1 or value & (value - 1) for value in board.ravel().tolist()):
            raise ValueError('Tile values must be 0 or powers of two >= 2')

        with self._exclusive():
            self._grid.clear()
            self._ghosts.clear()
            for y, row in enumerate(board.tolist()):
                for x, value in enumerate(row):
                    if value:
                        self._grid.place(self._factory.create(value=int(value), is_new=False), Cell(x, y))

    def move(self, direction: Direction | str) -> bool:
        """
        Slide every tile towards a direction, merging equal tiles on the way.

        Parameters
        ----------
        direction : Direction | str
            One of up, down, left, right.

        Returns
        -------
        bool
            Whether any tile moved. An unknown direction is ignored and returns False.

        Notes
        -----
        - A tile absorbs at most one other tile per move.
        - After a move that changed the grid, one random tile is spawned and the game is flagged
          over when no move remains. A move changing nothing spawns nothing and skips that check.
        """
        with self._exclusive():
            vector = resolve_direction(direction)
            if vector is None:
                logger.debug('Ignoring unknown direction %r', direction)
                return False

            traversal = build_traversal(vector, self.size)
            self._prepare_tiles()

            moved = False
            gained = 0
            for x in traversal.x:
                for y in traversal.y:
                    cell = Cell(x, y)
                    tile = self._grid.cell_at(cell)
                    if tile is None:
                        continue

                    farthest, next_cell = find_farthest_position(self._grid, cell, vector)
                    target = self._grid.cell_at(next_cell)

                    if target is not None and target.value == tile.value and target.merged_from is None:
                        gained += self._merge(tile, cell, target, next_cell)
                        destination = next_cell
                    else:
                        self._grid.move_tile(tile, cell, farthest)
                        destination = farthest

                    if destination != cell:
                        moved = True

            logger.debug('Move %s: moved=%s, gained=%d', direction, moved, gained)
            if moved:
                spawned = add_random_tile(self._grid, self._factory, self._rng, self.config.tile_spawn_probs)
                if spawned is not None:
                    logger.debug('Spawned tile %d with value %d', spawned.id, spawned.value)
                if not self.moves_available():
                    self._state.over = True
                    logger.info('Game over with score %d', self._state.score)

            self._check_invariants()
            self._notify()
            return moved

    def render(self) -> str:
        """
        Describe the board as plain text.

        Returns
        -------
        str
            One line per row, empty cells shown as ``.``, followed by the score and the flags.
        """
        width = max(len(str(value)) for value in self.values().ravel().tolist())
        lines = [
            ' '.join(str(tile.value if tile else '.').rjust(width) for tile in row) for row in self._grid.cells
        ]
        flags = [name for name, raised in (('won', self.won), ('over', self.over)) if raised]
        lines.append(f"score: {self.score}" + (f" ({', '.join(flags)})" if flags else ''))
        return '\n'.join(lines)

    def _merge(self, tile: Tile, cell: Cell, target: Tile, target_cell: Cell) -> int:
        """Merge a moving tile into the target it ran into, returning the merged value."""
        merged = self._factory.create(value=tile.value * 2, is_new=False, merged_from=(tile.id, target.id))
        self._grid.place(merged, target_cell)
        self._grid.remove(cell)

        tile.marked_for_deletion = True
        target.marked_for_deletion = True
        self._ghosts[tile.id] = tile
        self._ghosts[target.id] = target

        self._state.score += merged.value
        if merged.value == self.config.win_value and not self._state.won:
            self._state.won = True
            logger.info('Reached %d with score %d', merged.value, self._state.score)
        return merged.value

    def _prepare_tiles(self) -> None:
        """Forget the merges of the previous move."""
        self._ghosts.clear()
        for _, tile in self._grid.each_cell():
            if tile is not None:
                tile.merged_from = None

    def _check_invariants(self) -> None:
        placed = [tile for _, tile in self._grid.tiles()]
        ids = [tile.id for tile in placed]
        assert len(ids) == len(set(ids)), 'a tile occupies more than one cell'

        sources = [source_id for tile in placed if tile.merged_from for source_id in tile.merged_from]
        assert len(sources) == len(set(sources)), 'a tile merged twice in one move'
        for tile in placed:
            if tile.merged_from is not None:
                assert sum(self._ghosts[i].value for i in tile.merged_from) == tile.value, 'merge changed the total'

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        """Reject a mutating call made while another one runs."""
        if self._busy:
            raise ReentrantCallError('The board is already processing a call')
        self._busy = True
        try:
            yield
        finally:
            self._busy = False

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    @staticmethod
    def _view(tile: Tile, cell: Cell, ghost: bool = False) -> TileView:
        return TileView(
            id=tile.id,
            value=tile.value,
            x=cell.x,
            y=cell.y,
            is_new=tile.is_new,
            merged_from=tile.merged_from,
            ghost=ghost,
        )
