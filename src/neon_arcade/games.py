"""
games.py: Lifecycle controllers for Neon Flappy and Star Catcher.

Each controller owns its world and drives it as a small state machine
(IDLE -> RUNNING -> OVER -> RUNNING ...). The host feeds it input actions
and frame callbacks through a FrameScheduler; drawing goes through an
injected Renderer, so the controllers run headless in tests.
"""

import logging
from typing import Any, Optional, Protocol

from .constants import (
    AVATARS, DEFAULT_AVATAR, DEFAULT_PLAYER_NAME, FLAP_FLASH_MS,
    FRAME_DURATION_MS, MAX_NAME_LENGTH
)
from .data_models import FlappyWorld, GameStatus, Modal, StarWorld, UiState
from .frame_driver import FrameScheduler, FrameThrottle
from .physics_flappy import FlappyEngine
from .physics_stars import StarEngine
from .score_db import KeyValueStore, load_high_score, submit_score

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Draws a frozen snapshot of a world onto the playfield."""

    def draw(self, world: Any, ui: UiState) -> None: ...


def normalize_player_name(raw: Optional[str]) -> str:
    """Trims the name, falls back to the placeholder and clamps the length."""
    name = (raw or "").strip()
    if not name:
        return DEFAULT_PLAYER_NAME
    return name[:MAX_NAME_LENGTH]


class ArcadeGame:
    """Shared frame plumbing for both games."""

    world: Any

    def __init__(self, renderer: Renderer, scheduler: FrameScheduler):
        self.renderer = renderer
        self.scheduler = scheduler
        self.ui = UiState()
        self._frame_requested = False

    @property
    def status(self) -> GameStatus:
        return self.world.status

    @property
    def running(self) -> bool:
        return self.world.status is GameStatus.RUNNING

    def render(self):
        self.renderer.draw(self.world, self.ui)

    def request_frame(self):
        """Asks for the next frame unless one is already on its way."""
        if not self._frame_requested:
            self._frame_requested = True
            self.scheduler.request_frame(self.tick)

    def tick(self, timestamp: float):
        raise NotImplementedError


# ----------------- Neon Flappy -----------------

class FlappyGame(ArcadeGame):

    def __init__(self, renderer: Renderer, scheduler: FrameScheduler,
                 engine: Optional[FlappyEngine] = None, avatar: str = DEFAULT_AVATAR):
        super().__init__(renderer, scheduler)
        self.engine = engine or FlappyEngine()
        self.throttle = FrameThrottle(FRAME_DURATION_MS)
        self.world = FlappyWorld()
        self.select_avatar(avatar)

    def select_avatar(self, avatar: str):
        """Cosmetic only; kept across restarts."""
        if avatar not in AVATARS:
            raise ValueError(f"Unknown avatar {avatar!r}, expected one of {sorted(AVATARS)}")
        self.world.avatar = avatar
        logger.info("Avatar set to %s", avatar)

    def reset(self):
        self.world = FlappyWorld(status=GameStatus.RUNNING, avatar=self.world.avatar)
        self.ui.modal = None
        self.ui.start_label = "RESTART (SPACE)"
        logger.info("Flappy run started")
        self.request_frame()

    def start_game(self):
        """Starts from IDLE or restarts from OVER; ignored while running."""
        if not self.running:
            self.reset()

    def flap(self, timestamp: float = 0.0):
        """Jumps while running, otherwise starts a new run."""
        if self.running:
            self.world.bird.velocity = self.engine.flap()
            self.ui.flash_until = timestamp + FLAP_FLASH_MS
        else:
            self.start_game()

    def end_game(self):
        self.world.status = GameStatus.OVER
        self.ui.final_score = self.world.score
        self.ui.modal = Modal.GAME_OVER
        self.ui.start_label = "GAME OVER! (RESTART)"
        logger.info("Flappy game over, score %d", self.world.score)

    def tick(self, timestamp: float):
        self._frame_requested = False

        if not self.running:
            self.render()
            return

        # Throttled frames do no work but keep the loop alive
        if not self.throttle.ready(timestamp):
            self.request_frame()
            return

        if self.engine.update(self.world):
            self.end_game()
        self.render()
        self.request_frame()


# ----------------- Star Catcher -----------------

class StarCatcherGame(ArcadeGame):

    def __init__(self, renderer: Renderer, scheduler: FrameScheduler,
                 store: KeyValueStore, engine: Optional[StarEngine] = None):
        super().__init__(renderer, scheduler)
        self.store = store
        self.engine = engine or StarEngine()
        self.throttle = FrameThrottle(FRAME_DURATION_MS)
        self.world = StarWorld()
        self.high_score = load_high_score(store)
        self.ui.start_label = "Start Game"
        logger.info("Loaded high score %d by %s", self.high_score.score, self.high_score.name)
        self.show_registration()

    @property
    def player_name(self) -> str:
        return self.world.player_name

    def show_registration(self):
        self.ui.modal = Modal.REGISTRATION
        self.ui.name_prefill = "" if self.player_name == DEFAULT_PLAYER_NAME else self.player_name

    def register(self, raw_name: Optional[str]):
        """Confirms the name typed into the registration prompt and starts a run."""
        self.world.player_name = normalize_player_name(raw_name)
        self.ui.start_label = f"Start Game as {self.player_name}"
        logger.info("Registered player %s", self.player_name)
        self.reset()

    def reset(self):
        self.world = StarWorld(status=GameStatus.RUNNING, player_name=self.world.player_name)
        self.ui.modal = None
        logger.info("Star Catcher run started for %s", self.player_name)
        self.request_frame()

    def press_start(self):
        if self.status is GameStatus.OVER:
            self.show_registration()
        elif self.status is GameStatus.IDLE:
            self.reset()

    def restart_from_game_over(self):
        self.ui.modal = None
        self.show_registration()

    def pointer_move(self, x: float):
        if self.running:
            self.engine.move_bucket(self.world, x)

    def end_game(self):
        self.world.status = GameStatus.OVER
        is_new = submit_score(self.store, self.high_score, self.player_name, self.world.score)

        self.ui.final_player = self.player_name
        self.ui.final_score = self.world.score
        self.ui.new_high_score = is_new
        if is_new:
            self.ui.message = f"NEW HIGH SCORE by {self.player_name}!"
            logger.info("New high score %d by %s", self.world.score, self.player_name)
        else:
            self.ui.message = f"High Score: {self.high_score.name} - {self.high_score.score}"
        self.ui.modal = Modal.GAME_OVER
        self.ui.start_label = "Game Over (Restart)"
        logger.info("Star Catcher game over, score %d", self.world.score)

    def tick(self, timestamp: float):
        self._frame_requested = False

        if not self.running:
            self.render()
            return

        if not self.throttle.ready(timestamp):
            self.request_frame()
            return

        if self.engine.update(self.world):
            self.end_game()
        self.render()
        self.request_frame()
