"""A game session: one user action at a time, from move to status."""

import logging

from numpy import ndarray
from numpy.random import Generator

from twentyfortyeight.core.status import evaluate
from twentyfortyeight.core.types import Direction, GameStatus, MoveResult
from twentyfortyeight.envs.engine import GridEngine
from twentyfortyeight.utils.config import GameConfig
from twentyfortyeight.utils.storage import HighScoreStore, MemoryHighScoreStore

logger = logging.getLogger(__name__)


class GameSession:
    """
    Drive a grid engine for one player.

    Each call to ``play`` runs the whole chain of a user action: move, spawn a tile if the
    board changed, keep the high score, and classify the board. The session owns the sticky
    "already won" flag, so a win is reported once and the player may keep playing afterwards.

    Parameters
    ----------
    config : GameConfig, optional
        Board size, winning tile and storage key. Defaults to a 4x4 game won at 2048.
    store : HighScoreStore, optional
        Where the high score lives. Defaults to an in-memory store.
    generator : Generator, optional
        Random source for tile spawns.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: HighScoreStore | None = None,
        generator: Generator | None = None,
    ):
        self.config = config if config is not None else GameConfig()
        self.store = store if store is not None else MemoryHighScoreStore()
        self.engine = GridEngine.from_config(self.config, generator=generator)
        self.already_won = False
        self.status = GameStatus.IN_PROGRESS
        self.high_score = self.store.load()

    @property
    def board(self) -> ndarray:
        return self.engine.board

    @property
    def score(self) -> int:
        return self.engine.score

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.LOST

    def play(self, direction: Direction) -> MoveResult:
        """
        Apply one user action.

        Parameters
        ----------
        direction : Direction
            The direction chosen by the player.

        Returns
        -------
        MoveResult
            The result of the move. The new status is available as ``status``.

        Notes
        -----
        - A blocked move spawns nothing and leaves the status as it was.
        - Moves are still applied after a loss; they are all blocked by definition.
        """
        result = self.engine.move(direction)
        if not result.changed:
            return result

        self.engine.spawn_tile()
        if self.engine.score > self.high_score:
            self.high_score = self.store.submit(self.engine.score)

        self.status = evaluate(self.engine.board, self.config.win_value, self.already_won)
        if self.status is GameStatus.WON:
            self.already_won = True
            logger.info('Reached %d with a score of %d', self.config.win_value, self.engine.score)
        elif self.status is GameStatus.LOST:
            logger.info('Game over with a score of %d', self.engine.score)
        return result

    def keep_playing(self) -> None:
        """
        Dismiss a win and continue on the same board.

        The "already won" flag stays set until a new game starts. The winning move may have
        filled the board for good, so the board is classified again.
        """
        if self.status is GameStatus.WON:
            self.status = evaluate(self.engine.board, self.config.win_value, self.already_won)

    def new_game(self) -> ndarray:
        """
        Start over, keeping the configuration and the high score.

        Returns
        -------
        ndarray
            A snapshot of the new board.
        """
        self.high_score = self.store.submit(self.engine.score)
        self.already_won = False
        self.status = GameStatus.IN_PROGRESS
        return self.engine.reset()
