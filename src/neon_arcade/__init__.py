"""
Neon Arcade: Neon Flappy and Star Catcher, two small pygame arcade games
built on a headless, frame-driven core.
"""

from .data_models import FlappyWorld, GameStatus, HighScoreRecord, StarWorld
from .frame_driver import FrameScheduler, FrameThrottle
from .games import FlappyGame, StarCatcherGame, normalize_player_name

__version__ = "0.1.0"

__all__ = [
    "FlappyGame",
    "FlappyWorld",
    "FrameScheduler",
    "FrameThrottle",
    "GameStatus",
    "HighScoreRecord",
    "StarCatcherGame",
    "StarWorld",
    "normalize_player_name",
]
