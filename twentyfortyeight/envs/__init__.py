# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `GridEngine` class, which owns the board and score of a game, and the `GameSession`
class, which plays one user action at a time and tracks the game status and high score.
"""

from .engine import GridEngine
from .session import GameSession

__all__ = ["GridEngine", "GameSession"]
