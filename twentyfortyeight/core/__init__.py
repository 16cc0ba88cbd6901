# -*- coding: utf-8 -*-
"""
This module provides the rules of a 2048-like game.

It includes functions for sliding and merging tiles in any direction, spawning new tiles,
checking which directions are legal, and classifying a board as won, lost or in progress.
"""

from .gameboard import TILE_SPAWN_PROBS, empty_board, latent_state, max_tile, merge_line, slide_and_merge, spawn_tile
from .gamemove import can_move, illegal_directions, legal_directions
from .status import evaluate, has_won, is_done
from .types import ConfigurationError, Direction, GameStatus, MoveResult, Tile

__all__ = [
    "TILE_SPAWN_PROBS",
    "ConfigurationError",
    "Direction",
    "GameStatus",
    "MoveResult",
    "Tile",
    "empty_board",
    "merge_line",
    "slide_and_merge",
    "latent_state",
    "spawn_tile",
    "max_tile",
    "can_move",
    "legal_directions",
    "illegal_directions",
    "evaluate",
    "has_won",
    "is_done",
]
