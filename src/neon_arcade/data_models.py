"""
data_models.py: Data structures for the game worlds and host-facing UI state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .constants import (
    BUCKET_WIDTH, DEFAULT_AVATAR, DEFAULT_PLAYER_NAME, MAX_LIVES,
    NO_RECORD_NAME, RESPAWN_Y, STAR_SPAWN_RATE, STARS_WIDTH
)

Color = Tuple[int, int, int]


class GameStatus(Enum):
    """Exactly one of these holds for a world at any time."""
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


class Modal(Enum):
    """Overlays the host can show on top of the playfield."""
    REGISTRATION = "registration"
    GAME_OVER = "game_over"


# ----------------- Neon Flappy -----------------

@dataclass
class Bird:
    """The controlled object. X is fixed at the playfield centre."""
    y: float = RESPAWN_Y
    velocity: float = 0.0


@dataclass
class Pipe:
    """A pipe pair: top segment [0, top_height), bottom segment [bottom_y, height)."""
    x: float
    top_height: float
    bottom_y: float
    passed: bool = False


@dataclass
class FlappyWorld:
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)   # Spawn order
    score: int = 0
    status: GameStatus = GameStatus.IDLE
    avatar: str = DEFAULT_AVATAR


# ----------------- Star Catcher -----------------

@dataclass
class Star:
    """A falling collectible, positioned by its centre."""
    x: float
    y: float
    color: Color


def _centred_bucket() -> float:
    return STARS_WIDTH / 2 - BUCKET_WIDTH / 2


@dataclass
class StarWorld:
    bucket_x: float = field(default_factory=_centred_bucket)   # Left edge
    stars: List[Star] = field(default_factory=list)
    score: int = 0
    lives: int = MAX_LIVES
    status: GameStatus = GameStatus.IDLE
    spawn_timer: int = 0
    spawn_rate: float = STAR_SPAWN_RATE
    player_name: str = DEFAULT_PLAYER_NAME


@dataclass
class HighScoreRecord:
    """Best Star Catcher score ever achieved and who achieved it."""
    score: int = 0
    name: str = NO_RECORD_NAME


# ----------------- Presentation -----------------

@dataclass
class UiState:
    """
    Everything the host shows outside the playfield. Written by the game
    controllers, read by the host; holds no game logic.
    """
    modal: Optional[Modal] = None
    start_label: str = "START (SPACE)"
    final_score: int = 0
    final_player: str = ""
    message: str = ""
    new_high_score: bool = False
    flash_until: float = 0.0               # Timestamp (ms) until which the border glows
    name_prefill: str = ""
