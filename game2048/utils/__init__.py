# -*- coding: utf-8 -*-
"""
Input and display surfaces of a game session.

It includes the boundary contracts, a random tile generator, a scripted feed for testing, terminal
surfaces and a Matplotlib window.
"""

from .base import Display, InputSource
from .console import ConsoleDisplay, ConsoleInput, NullDisplay
from .scripted import ScriptedInput
from .tiles import TileGenerator

__all__ = ["Display", "InputSource", "ConsoleDisplay", "ConsoleInput", "NullDisplay", "ScriptedInput", "TileGenerator"]
