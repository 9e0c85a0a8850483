# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `GameSession` class, which owns the board and drives the turns of the game.
"""

from .session import GameSession, Phase

__all__ = ["GameSession", "Phase"]
