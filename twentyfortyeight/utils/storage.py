"""
High score persistence.

A store keeps a single integer and is only ever written when a better score comes in.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from twentyfortyeight.utils.config import DEFAULT_STORAGE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore(ABC):
    """Interface of a high score store."""

    @abstractmethod
    def load(self) -> int:
        """Return the stored high score, 0 when nothing was stored."""

    @abstractmethod
    def save(self, score: int) -> None:
        """Overwrite the stored high score."""

    def submit(self, score: int) -> int:
        """
        Offer a score to the store.

        Parameters
        ----------
        score : int
            The current score of a game.

        Returns
        -------
        int
            The high score after the submission.
        """
        best = self.load()
        if score > best:
            logger.info('New high score: %d (previous %d)', score, best)
            self.save(score)
            return score
        return best


class MemoryHighScoreStore(HighScoreStore):
    """Keep the high score in memory, for tests and throwaway sessions."""

    def __init__(self, score: int = 0):
        self._score = score

    def load(self) -> int:
        return self._score

    def save(self, score: int) -> None:
        self._score = score


class JsonHighScoreStore(HighScoreStore):
    """
    Keep the high score in a JSON file.

    The file holds an object mapping keys to integers, so several games can share it.

    Parameters
    ----------
    path : str | Path
        Location of the JSON file. Parent directories are created on save.
    key : str
        Key of this game's high score.
    """

    def __init__(self, path: str | Path, key: str = DEFAULT_STORAGE_KEY):
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            content = json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, ValueError) as error:
            logger.warning('Unreadable high score file %s: %s', self.path, error)
            return {}
        if not isinstance(content, dict):
            logger.warning('Unexpected high score content in %s, ignoring it', self.path)
            return {}
        return content

    def load(self) -> int:
        value = self._read().get(self.key, 0)
        try:
            return max(int(value), 0)
        except (TypeError, ValueError, OverflowError):
            logger.warning('Invalid high score %r under key %s, ignoring it', value, self.key)
            return 0

    def save(self, score: int) -> None:
        content = self._read()
        content[self.key] = int(score)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(content, indent=2), encoding='utf-8')
