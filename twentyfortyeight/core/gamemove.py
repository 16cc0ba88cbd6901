"""
Game move utilities for the 2048 rules engine, telling which directions would change a board.
"""

from numpy import ndarray

from twentyfortyeight.core.types import Direction


def can_move(board: ndarray, direction: Direction) -> bool:
    """
    Check if a move in the given direction would change the board.

    Parameters
    ----------
    board : ndarray
        The game board to check.
    direction : Direction
        The direction to check.

    Returns
    -------
    bool
        True if the move slides or merges at least one tile, False otherwise.

    Notes
    -----
    A move is possible if there's an empty cell on the near side of a non-empty cell,
    or if two adjacent cells along the direction have the same non-zero value.
    """
    if direction in (Direction.LEFT, Direction.RIGHT):
        near, far = board[:, :-1], board[:, 1:]
    else:
        near, far = board[:-1, :], board[1:, :]

    # ##>: Tiles travel from `far` to `near` for left/up, the other way for right/down.
    if direction in (Direction.RIGHT, Direction.DOWN):
        near, far = far, near

    can_slide = (near == 0) & (far != 0)
    can_merge = (near != 0) & (near == far)
    return bool(can_slide.any() or can_merge.any())


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        The legal directions, in ``Direction`` order.
    """
    return [direction for direction in Direction if can_move(board, direction)]


def illegal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that leave the board untouched.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        The blocked directions, in ``Direction`` order.
    """
    return [direction for direction in Direction if not can_move(board, direction)]
