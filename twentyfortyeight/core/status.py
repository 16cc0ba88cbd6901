"""
Win and loss detection for the 2048 rules engine.

Every function here is read-only and total over any board. The sticky "already won" flag
belongs to the caller (see ``twentyfortyeight.envs.GameSession``) and is passed in.
"""

from numpy import any as np_any
from numpy import ndarray

from twentyfortyeight.core.types import GameStatus


def has_won(state: ndarray, win_value: int) -> bool:
    """Check whether any cell holds the winning tile."""
    return bool(np_any(state == win_value))


def is_done(state: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no adjacent cells have the same value.
    Each cell is compared with its right and bottom neighbours only.
    """
    if np_any(state == 0):
        return False
    return not (np_any(state[:, :-1] == state[:, 1:]) or np_any(state[:-1] == state[1:]))


def evaluate(state: ndarray, win_value: int, already_won: bool) -> GameStatus:
    """
    Classify a board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.
    win_value : int
        The tile value that wins the game.
    already_won : bool
        Whether a win was already reported in this session.

    Returns
    -------
    GameStatus
        WON if the board holds ``win_value`` and no win was reported yet, LOST if no move
        is possible, IN_PROGRESS otherwise.

    Notes
    -----
    Once ``already_won`` is set, a board holding the winning tile is classified like any
    other, so a player who keeps playing after a win can still lose.
    """
    if not already_won and has_won(state, win_value):
        return GameStatus.WON
    if is_done(state):
        return GameStatus.LOST
    return GameStatus.IN_PROGRESS
