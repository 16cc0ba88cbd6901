# -*- coding: utf-8 -*-
"""
This module provides the peripheral pieces of a 2048 game.

It includes the game configuration, high score stores, and the mapping of keys and swipes to move directions.
"""

from .config import DEFAULT_STORAGE_KEY, GameConfig
from .controls import direction_from_key, direction_from_swipe
from .storage import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "GameConfig",
    "direction_from_key",
    "direction_from_swipe",
    "HighScoreStore",
    "JsonHighScoreStore",
    "MemoryHighScoreStore",
]
