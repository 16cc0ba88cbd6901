# -*- coding: utf-8 -*-
"""
Types shared by the 2048 rules engine.
"""
from enum import Enum
from typing import NamedTuple


class ConfigurationError(ValueError):
    """Raised when a game is built with an invalid size or win value."""


class Direction(Enum):
    """
    Direction of a move.

    The value of each member is the number of counter-clockwise quarter turns
    that bring its direction of travel to the left. The move algorithm only
    ever slides to the left and uses this value to rotate the board in and out.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


class GameStatus(Enum):
    """Classification of a board after a move."""

    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class Tile(NamedTuple):
    """A tile and the cell it occupies."""

    row: int
    col: int
    value: int


class MoveResult(NamedTuple):
    """
    Outcome of a single move.

    changed: whether any tile slid or merged.
    merged_cells: cells that hold a freshly merged tile, in row-major order.
    score_delta: points earned by the move.
    """

    changed: bool
    merged_cells: list[Tile]
    score_delta: int
