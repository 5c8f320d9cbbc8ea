"""
physics_stars.py: Star Catcher world simulation (spawn cadence, falling stars, catch/miss).
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .constants import (
    BUCKET_HEIGHT, BUCKET_WIDTH, STAR_COLORS, STAR_SIZE, STAR_SPAWN_RATE_MIN,
    STAR_SPAWN_RATE_STEP, STAR_SPEED, STARS_HEIGHT, STARS_WIDTH
)
from .data_models import Star, StarWorld
from .physics_core import Box, half_extent_box, touches

logger = logging.getLogger(__name__)


def bucket_box(world: StarWorld) -> Box:
    """The bucket sits on the bottom margin of the playfield."""
    return Box(world.bucket_x, STARS_HEIGHT - BUCKET_HEIGHT,
               world.bucket_x + BUCKET_WIDTH, STARS_HEIGHT)


def star_box(star: Star) -> Box:
    return half_extent_box(star.x, star.y, STAR_SIZE, STAR_SIZE)


@dataclass
class StarEngine:
    """
    Advances a StarWorld one frame at a time. The bucket has no physics:
    it is placed directly from pointer input.
    """
    rng: random.Random = field(default_factory=random.Random)

    def spawn_star(self, world: StarWorld) -> Star:
        star = Star(
            x=self.rng.random() * (STARS_WIDTH - STAR_SIZE) + STAR_SIZE / 2,
            y=-STAR_SIZE,
            color=self.rng.choice(STAR_COLORS),
        )
        world.stars.append(star)
        return star

    def tick_spawner(self, world: StarWorld) -> Optional[Star]:
        """
        Counts one frame towards the next spawn. When the timer reaches the
        spawn rate a star is spawned, the timer resets and the rate speeds up.
        """
        world.spawn_timer += 1
        if world.spawn_timer < world.spawn_rate:
            return None

        star = self.spawn_star(world)
        world.spawn_timer = 0
        world.spawn_rate = max(STAR_SPAWN_RATE_MIN, world.spawn_rate - STAR_SPAWN_RATE_STEP)
        logger.debug("Spawned star at x=%.1f, next rate %.1f", star.x, world.spawn_rate)
        return star

    def move_bucket(self, world: StarWorld, pointer_x: float):
        """Centres the bucket under the pointer, clamped to the playfield."""
        bucket_x = pointer_x - BUCKET_WIDTH / 2
        world.bucket_x = max(0, min(STARS_WIDTH - BUCKET_WIDTH, bucket_x))

    def is_caught(self, world: StarWorld, star: Star) -> bool:
        return touches(star_box(star), bucket_box(world))

    def is_missed(self, star: Star) -> bool:
        return star_box(star).top > STARS_HEIGHT

    def resolve_stars(self, world: StarWorld):
        """
        Moves every star down and settles catches and misses in spawn order.
        Stops at the miss that empties the last life.
        """
        remaining = []
        for index, star in enumerate(world.stars):
            star.y += STAR_SPEED

            if self.is_caught(world, star):
                world.score += 1
                continue

            if self.is_missed(star):
                world.lives -= 1
                if world.lives <= 0:
                    remaining.extend(world.stars[index + 1:])
                    break
                continue

            remaining.append(star)
        world.stars = remaining

    def update(self, world: StarWorld) -> bool:
        """
        One frame: move and resolve stars, then run the spawner.
        Returns True when the last life was lost.
        """
        self.resolve_stars(world)
        if world.lives <= 0:
            return True
        self.tick_spawner(world)
        return False
