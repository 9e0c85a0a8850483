from .config import SIZE, WINNING, GameConfig

__all__ = ["SIZE", "WINNING", "GameConfig"]
