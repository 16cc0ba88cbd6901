"""2048 grid engine: the only owner of a game's board and score."""

import logging

from numpy import count_nonzero, ndarray
from numpy.random import Generator

from twentyfortyeight.core.gameboard import empty_board, latent_state, max_tile, spawn_tile
from twentyfortyeight.core.types import Direction, MoveResult, Tile
from twentyfortyeight.utils.config import GameConfig

logger = logging.getLogger(__name__)


class GridEngine:
    """
    2048 grid engine.

    This class holds the board and the score of one game, applies moves, and places new tiles.
    Callers only ever see copies of the board.
    """

    # ##: Current game state.
    _board: ndarray
    _score: int
    _merged_cells: list[Tile]

    def __init__(self, size: int = 4, win_value: int = 2048, generator: Generator | None = None):
        """
        Initialize the 2048 game board.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        win_value : int, optional
            The tile value that wins the game (default is 2048).
        generator : Generator, optional
            Random source for tile spawns. Inject a seeded one for reproducible games.

        Raises
        ------
        ConfigurationError
            If the size is below 2 or the win value is not a power of two.
        """
        self._generator = generator
        self.reset(size=size, win_value=win_value)

    @classmethod
    def from_config(cls, config: GameConfig, generator: Generator | None = None) -> 'GridEngine':
        """Build an engine from a game configuration."""
        return cls(size=config.size, win_value=config.win_value, generator=generator)

    @property
    def size(self) -> int:
        return self._config.size

    @property
    def win_value(self) -> int:
        return self._config.win_value

    @property
    def board(self) -> ndarray:
        """
        Get a snapshot of the game board.

        Returns
        -------
        ndarray
            A copy of the board; changing it does not affect the game.
        """
        return self._board.copy()

    @property
    def score(self) -> int:
        return self._score

    @property
    def merged_cells(self) -> list[Tile]:
        """Cells that received a merged tile during the last move."""
        return list(self._merged_cells)

    @property
    def max_tile(self) -> int:
        return max_tile(self._board)

    def reset(self, size: int | None = None, win_value: int | None = None) -> ndarray:
        """
        Start a new game on an empty board with two random tiles.

        Parameters
        ----------
        size : int, optional
            New board size. Keeps the current one when omitted.
        win_value : int, optional
            New winning tile. Keeps the current one when omitted.

        Returns
        -------
        ndarray
            A snapshot of the new board.
        """
        current = getattr(self, '_config', GameConfig())
        self._config = GameConfig(
            size=current.size if size is None else size,
            win_value=current.win_value if win_value is None else win_value,
        )

        self._board = empty_board(self._config.size)
        self._score = 0
        self._merged_cells = []
        self.spawn_tile()
        self.spawn_tile()

        logger.info('New %dx%d game, winning tile %d', self.size, self.size, self.win_value)
        return self.board

    def move(self, direction: Direction) -> MoveResult:
        """
        Slide every tile towards ``direction`` and merge equal neighbours.

        Parameters
        ----------
        direction : Direction
            The direction of the move.

        Returns
        -------
        MoveResult
            Whether the board changed, the merged cells, and the points earned.

        Raises
        ------
        TypeError
            If ``direction`` is not a ``Direction``.

        Notes
        -----
        - A blocked move leaves the board and the score untouched and reports ``changed=False``.
        - No tile is spawned here; callers spawn after a move that changed the board.
        """
        if not isinstance(direction, Direction):
            raise TypeError(f'`direction` must be a Direction, got {direction!r}.')

        new_board, merged_cells, score_delta, changed = latent_state(self._board, direction)
        if not changed:
            self._merged_cells = []
            logger.debug('Move %s is blocked', direction.name)
            return MoveResult(changed=False, merged_cells=[], score_delta=0)

        self._board = new_board
        self._score += score_delta
        self._merged_cells = merged_cells
        logger.debug('Move %s: %d merges, +%d points', direction.name, len(merged_cells), score_delta)
        return MoveResult(changed=True, merged_cells=list(merged_cells), score_delta=score_delta)

    def spawn_tile(self) -> bool:
        """
        Place a 2 (90%) or a 4 (10%) on a random empty cell.

        Returns
        -------
        bool
            True if a tile was placed, False if the board is full.
        """
        tile = spawn_tile(self._board, generator=self._generator)
        if tile is None:
            return False
        logger.debug('Spawned %d at (%d, %d)', tile.value, tile.row, tile.col)
        return True

    def count_tiles(self) -> int:
        """Return the number of non-empty cells."""
        return int(count_nonzero(self._board))

    def render(self) -> str:
        """
        Render the game board as text, one tab-separated line per row.
        """
        return '\n'.join(' \t'.join(map(str, row)) for row in self._board.tolist())
