"""
Configuration of a 2048 game.
"""

from dataclasses import dataclass

from twentyfortyeight.core.types import ConfigurationError

DEFAULT_STORAGE_KEY = 'espresso2048_highscore'


def is_power_of_two(value: int) -> bool:
    """Check if ``value`` is a positive power of two."""
    return value > 0 and value & (value - 1) == 0


@dataclass(frozen=True)
class GameConfig:
    """
    Game configuration.

    Attributes
    ----------
    size : int
        Side of the square board, at least 2.
    win_value : int
        Tile value that wins the game, a power of two reachable by merges (at least 4).
    storage_key : str
        Key under which the high score is stored.
    """

    size: int = 4
    win_value: int = 2048
    storage_key: str = DEFAULT_STORAGE_KEY

    def __post_init__(self):
        """Validate the configuration."""
        if not isinstance(self.size, int) or isinstance(self.size, bool) or self.size < 2:
            raise ConfigurationError(f'`size` must be an integer >= 2, got {self.size!r}.')
        if (
            not isinstance(self.win_value, int)
            or isinstance(self.win_value, bool)
            or self.win_value < 4
            or not is_power_of_two(self.win_value)
        ):
            raise ConfigurationError(f'`win_value` must be a power of two >= 4, got {self.win_value!r}.')
        if not self.storage_key:
            raise ConfigurationError('`storage_key` must be a non-empty string.')
