"""
client.py

pygame host for both games: window, input mapping, playfield renderers,
HUD and modal overlays. All game logic lives in games.py; this module only
translates pygame events into controller actions and pixels.
"""

import logging
import math
import random
import time
from typing import List, Optional, Tuple

import pygame

from .constants import (
    AVATARS, BACKGROUND, BIRD_SIZE, BIRD_X, BUCKET_COLOR, BUCKET_HEIGHT,
    BUCKET_WIDTH, DB_FILE, FLAPPY_HEIGHT, FLAPPY_WIDTH, HUD_HEIGHT,
    MAX_NAME_LENGTH, NEON_BLUE, NEON_PURPLE, NEON_RED, PIPE_WIDTH,
    RENDER_FPS, STAR_SIZE, STARS_HEIGHT, STARS_WIDTH
)
from .data_models import FlappyWorld, Modal, StarWorld, UiState
from .frame_driver import FrameScheduler
from .games import ArcadeGame, FlappyGame, StarCatcherGame
from .physics_flappy import FlappyEngine, pipe_segments
from .physics_stars import StarEngine
from .score_db import Database

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)
GREY = (200, 200, 200)
PINK = (230, 169, 203)
GAMES = ("flappy", "stars")


def glow_rect(surface: pygame.Surface, color, rect: pygame.Rect, blur: int):
    """Fills rect with a soft halo, a stand-in for a canvas shadow blur."""
    halo = pygame.Surface((rect.width + blur * 2, rect.height + blur * 2), pygame.SRCALPHA)
    for step in range(blur, 0, -2):
        alpha = int(60 * (1 - step / blur)) + 10
        inner = pygame.Rect(blur - step, blur - step, rect.width + step * 2, rect.height + step * 2)
        pygame.draw.rect(halo, (*color, alpha), inner, border_radius=step)
    surface.blit(halo, (rect.x - blur, rect.y - blur))
    pygame.draw.rect(surface, color, rect)


def star_points(cx: float, cy: float, size: float) -> List[Tuple[float, float]]:
    """Vertices of a five-pointed star that fits a size x size box."""
    outer = size / 2
    inner = outer * 0.45
    points = []
    for i in range(10):
        radius = outer if i % 2 == 0 else inner
        angle = -math.pi / 2 + i * math.pi / 5
        points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points


# ----------------- Playfield Renderers -----------------

class PygameRenderer:
    """Draws onto an off-screen playfield surface that the host blits each frame."""

    def __init__(self, surface: pygame.Surface):
        pygame.font.init()
        self.surface = surface
        self.font = pygame.font.Font(None, 24)


class FlappyRenderer(PygameRenderer):

    def draw(self, world: FlappyWorld, ui: UiState):
        screen = self.surface
        screen.fill(BACKGROUND)

        for pipe in world.pipes:
            for seg in pipe_segments(pipe):
                rect = pygame.Rect(round(seg.left), round(seg.top), PIPE_WIDTH, round(seg.bottom - seg.top))
                if rect.height > 0:
                    glow_rect(screen, NEON_BLUE, rect, 8)

        color = AVATARS[world.avatar]
        center = (round(BIRD_X), round(world.bird.y))
        pygame.draw.circle(screen, color, center, BIRD_SIZE // 2)
        eye = (center[0] + BIRD_SIZE // 5, center[1] - BIRD_SIZE // 6)
        pygame.draw.circle(screen, BACKGROUND, eye, 3)


class StarRenderer(PygameRenderer):

    def draw(self, world: StarWorld, ui: UiState):
        screen = self.surface
        screen.fill(BACKGROUND)

        bucket = pygame.Rect(round(world.bucket_x), STARS_HEIGHT - BUCKET_HEIGHT, BUCKET_WIDTH, BUCKET_HEIGHT)
        glow_rect(screen, BUCKET_COLOR, bucket, 20)

        for star in world.stars:
            pygame.draw.polygon(screen, star.color, star_points(star.x, star.y, STAR_SIZE))

        name_tag = self.font.render(f"Player: {world.player_name}", True, WHITE)
        screen.blit(name_tag, (10, 10))


# ----------------- Host Window -----------------

class ArcadeClient:
    """Runs one game in a pygame window until the user quits."""

    def __init__(self, game_name: str, db_file: str = DB_FILE, seed: Optional[int] = None):
        if game_name not in GAMES:
            raise ValueError(f"Unknown game {game_name!r}, expected one of {GAMES}")
        pygame.init()
        self.game_name = game_name
        rng = random.Random(seed)
        self.scheduler = FrameScheduler()
        self.db: Optional[Database] = None

        if game_name == "flappy":
            size = (FLAPPY_WIDTH, FLAPPY_HEIGHT)
            self.playfield = pygame.Surface(size)
            self.game: ArcadeGame = FlappyGame(
                FlappyRenderer(self.playfield), self.scheduler, FlappyEngine(rng=rng))
            caption = "Neon Flappy"
        else:
            size = (STARS_WIDTH, STARS_HEIGHT)
            self.playfield = pygame.Surface(size)
            self.db = Database(db_file)
            self.game = StarCatcherGame(
                StarRenderer(self.playfield), self.scheduler, self.db, StarEngine(rng=rng))
            caption = "Star Catcher"

        self.screen = pygame.display.set_mode((size[0], size[1] + HUD_HEIGHT))
        pygame.display.set_caption(caption)
        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 40)
        self.font = pygame.font.Font(None, 24)

        self.start_button = pygame.Rect(size[0] - 230, 12, 220, HUD_HEIGHT - 24)
        self.modal_button: Optional[pygame.Rect] = None
        self.name_input = ""
        self._last_modal: Optional[Modal] = None

    def run(self):
        """The main client execution loop."""
        logger.info("Starting %s", self.game_name)
        self.game.render()

        running = True
        while running:
            self.clock.tick(RENDER_FPS)
            now = time.perf_counter() * 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif isinstance(self.game, FlappyGame):
                    self._handle_flappy_event(self.game, event, now)
                else:
                    self._handle_stars_event(self.game, event)

            self.advance(now)

        if self.db is not None:
            self.db.close()
        pygame.quit()

    def advance(self, now: float):
        """Runs the pending frame callbacks and redraws the window at time now (ms)."""
        self.scheduler.run_frame(now)
        self._sync_modal()
        self._present(now)

    # ---- input ----

    def _playfield_pos(self, pos) -> Tuple[int, int]:
        return pos[0], pos[1] - HUD_HEIGHT

    def _handle_flappy_event(self, game: FlappyGame, event, now: float):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                game.flap(now)
            elif event.key in (pygame.K_r, pygame.K_RETURN):
                game.start_game()
            elif pygame.K_1 <= event.key < pygame.K_1 + len(AVATARS):
                game.select_avatar(list(AVATARS)[event.key - pygame.K_1])
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if self.start_button.collidepoint(event.pos):
                game.start_game()
            elif event.pos[1] >= HUD_HEIGHT:
                game.flap(now)
        elif event.type == pygame.FINGERDOWN:
            game.flap(now)

    def _handle_stars_event(self, game: StarCatcherGame, event):
        modal = game.ui.modal

        if modal is Modal.REGISTRATION:
            if event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    game.register(self.name_input)
                elif event.key == pygame.K_BACKSPACE:
                    self.name_input = self.name_input[:-1]
                elif event.unicode and event.unicode.isprintable() and len(self.name_input) < MAX_NAME_LENGTH:
                    self.name_input += event.unicode
            elif event.type == pygame.MOUSEBUTTONDOWN and self.modal_button and self.modal_button.collidepoint(event.pos):
                game.register(self.name_input)
            return

        if modal is Modal.GAME_OVER:
            clicked = (event.type == pygame.MOUSEBUTTONDOWN and self.modal_button
                       and self.modal_button.collidepoint(event.pos))
            if clicked or (event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN):
                game.restart_from_game_over()
            elif event.type == pygame.MOUSEBUTTONDOWN and self.start_button.collidepoint(event.pos):
                game.press_start()
            return

        if event.type == pygame.MOUSEMOTION:
            game.pointer_move(self._playfield_pos(event.pos)[0])
        elif event.type == pygame.MOUSEBUTTONDOWN and self.start_button.collidepoint(event.pos):
            game.press_start()
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_r, pygame.K_RETURN):
            game.press_start()

    def _sync_modal(self):
        """Prefills the name field whenever the registration prompt opens."""
        modal = self.game.ui.modal
        if modal is Modal.REGISTRATION and self._last_modal is not Modal.REGISTRATION:
            self.name_input = self.game.ui.name_prefill
        self._last_modal = modal

    # ---- drawing ----

    def _present(self, now: float):
        screen = self.screen
        screen.fill((0, 0, 0))
        self._draw_hud()

        screen.blit(self.playfield, (0, HUD_HEIGHT))
        field_rect = pygame.Rect(0, HUD_HEIGHT, *self.playfield.get_size())
        border = 4 if now < self.game.ui.flash_until else 1
        pygame.draw.rect(screen, NEON_BLUE, field_rect, border)

        if self.game.ui.modal is not None:
            self._draw_modal()
        else:
            self.modal_button = None

        pygame.display.flip()

    def _draw_hud(self):
        game = self.game
        score_text = self.large_font.render(f"Score: {game.world.score}", True, WHITE)
        self.screen.blit(score_text, (10, 8))

        if isinstance(game, StarCatcherGame):
            info = self.font.render(
                f"Lives: {game.world.lives}   Best: {game.high_score.name} - {game.high_score.score}",
                True, GREY)
        else:
            info = self.font.render("Space / Click = Flap | 1-4 = Avatar | Esc = Quit", True, GREY)
        self.screen.blit(info, (10, 38))

        pygame.draw.rect(self.screen, NEON_RED, self.start_button, border_radius=6)
        label = self.font.render(game.ui.start_label, True, WHITE)
        self.screen.blit(label, label.get_rect(center=self.start_button.center))

    def _draw_modal(self):
        game = self.game
        ui = game.ui
        width, height = self.screen.get_size()

        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        self.screen.blit(shade, (0, 0))

        panel = pygame.Rect(0, 0, min(width - 40, 380), 220)
        panel.center = (width // 2, height // 2)
        pygame.draw.rect(self.screen, BACKGROUND, panel, border_radius=10)
        pygame.draw.rect(self.screen, NEON_PURPLE, panel, 2, border_radius=10)

        lines: List[Tuple[str, tuple]] = []
        button_label = None
        if ui.modal is Modal.REGISTRATION and isinstance(game, StarCatcherGame):
            lines.append(("Enter your name", WHITE))
            lines.append((f"High Score: {game.high_score.score} by {game.high_score.name}", GREY))
            lines.append((f"> {self.name_input}_", NEON_BLUE))
            button_label = "Start (Enter)"
        elif isinstance(game, StarCatcherGame):
            lines.append(("GAME OVER", NEON_RED))
            lines.append((f"{ui.final_player}: {ui.final_score}", WHITE))
            lines.append((ui.message, NEON_PURPLE if ui.new_high_score else PINK))
            button_label = "Play Again (Enter)"
        else:
            lines.append(("GAME OVER", NEON_RED))
            lines.append((f"Final Score: {ui.final_score}", WHITE))
            lines.append(("Press SPACE or click to restart", GREY))

        y = panel.top + 24
        for text, color in lines:
            surf = self.font.render(text, True, color)
            self.screen.blit(surf, (panel.centerx - surf.get_width() // 2, y))
            y += 36

        if button_label:
            self.modal_button = pygame.Rect(0, 0, 200, 36)
            self.modal_button.center = (panel.centerx, panel.bottom - 36)
            pygame.draw.rect(self.screen, NEON_PURPLE, self.modal_button, border_radius=6)
            label = self.font.render(button_label, True, WHITE)
            self.screen.blit(label, label.get_rect(center=self.modal_button.center))
        else:
            self.modal_button = None
