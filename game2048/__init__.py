"""2048 sliding tile puzzle: rules engine, game session and its surfaces."""

from .addons import GameConfig
from .envs import GameSession

__all__ = ["GameConfig", "GameSession"]
