"""
physics_flappy.py: Neon Flappy world simulation (spawning, movement, collision, scoring).
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Tuple

from .constants import (
    BIRD_SIZE, BIRD_X, FLAPPY_HEIGHT, FLAPPY_WIDTH, PIPE_GAP,
    PIPE_MIN_HEIGHT, PIPE_SPACING, PIPE_SPEED, PIPE_WIDTH
)
from .data_models import FlappyWorld, Pipe
from .physics_core import Box, PhysicsCore, half_extent_box, overlaps

logger = logging.getLogger(__name__)


def bird_box(world: FlappyWorld) -> Box:
    return half_extent_box(BIRD_X, world.bird.y, BIRD_SIZE, BIRD_SIZE)


def pipe_segments(pipe: Pipe) -> Tuple[Box, Box]:
    """Top and bottom segment boxes of a pipe pair."""
    top = Box(pipe.x, 0, pipe.x + PIPE_WIDTH, pipe.top_height)
    bottom = Box(pipe.x, pipe.bottom_y, pipe.x + PIPE_WIDTH, FLAPPY_HEIGHT)
    return top, bottom


@dataclass
class FlappyEngine(PhysicsCore):
    """
    Advances a FlappyWorld one frame at a time.
    Inherits gravity and the flap impulse from PhysicsCore.
    """
    rng: random.Random = field(default_factory=random.Random)

    def should_spawn(self, world: FlappyWorld) -> bool:
        """A new pipe is due when none exist or the newest has moved far enough left."""
        return not world.pipes or world.pipes[-1].x < FLAPPY_WIDTH - PIPE_SPACING

    def spawn_pipe(self, world: FlappyWorld) -> Pipe:
        """Generates a new pipe at the right edge with a random gap position."""
        top_height = self.rng.randint(PIPE_MIN_HEIGHT, FLAPPY_HEIGHT - PIPE_GAP - PIPE_MIN_HEIGHT)
        pipe = Pipe(x=float(FLAPPY_WIDTH), top_height=top_height, bottom_y=top_height + PIPE_GAP)
        world.pipes.append(pipe)
        logger.debug("Spawned pipe with gap at %d-%d", pipe.top_height, pipe.bottom_y)
        return pipe

    def move(self, world: FlappyWorld):
        """Applies gravity to the bird and scrolls every pipe left."""
        world.bird.y, world.bird.velocity = self.apply_gravity_and_movement(
            world.bird.y, world.bird.velocity)
        for pipe in world.pipes:
            pipe.x -= PIPE_SPEED

    def update_score(self, world: FlappyWorld) -> int:
        """Scores each pipe once, when its right edge passes the bird's centre."""
        gained = 0
        for pipe in world.pipes:
            if pipe.x + PIPE_WIDTH < BIRD_X and not pipe.passed:
                pipe.passed = True
                gained += 1
        world.score += gained
        return gained

    def cull(self, world: FlappyWorld):
        """Removes pipes that have scrolled off the left edge."""
        world.pipes = [p for p in world.pipes if p.x + PIPE_WIDTH > 0]

    def check_collision(self, world: FlappyWorld) -> bool:
        """Checks for collisions with ceiling, floor, or pipes."""
        bird = bird_box(world)

        # 1. Ceiling / floor
        if bird.top < 0 or bird.bottom > FLAPPY_HEIGHT:
            return True

        # 2. Pipes
        for pipe in world.pipes:
            top, bottom = pipe_segments(pipe)
            if overlaps(bird, top) or overlaps(bird, bottom):
                return True

        return False

    def update(self, world: FlappyWorld) -> bool:
        """
        One frame: movement, scoring, culling, spawning, collision.
        Returns True on a terminal collision.
        """
        self.move(world)
        self.update_score(world)
        self.cull(world)
        if self.should_spawn(world):
            self.spawn_pipe(world)
        return self.check_collision(world)
