"""
physics_core.py: The shared, deterministic kinematic functions and box collision logic.
"""

from dataclasses import dataclass
from typing import NamedTuple

from .constants import GRAVITY, JUMP_VELOCITY


class Box(NamedTuple):
    """Axis-aligned bounding box as edges."""
    left: float
    top: float
    right: float
    bottom: float


def half_extent_box(cx: float, cy: float, width: float, height: float) -> Box:
    """Builds a box of the given size around a centre point."""
    return Box(cx - width / 2, cy - height / 2, cx + width / 2, cy + height / 2)


@dataclass
class PhysicsCore:
    """
    Shared deterministic bird physics; Flappy engines inherit it.
    All quantities are per frame; there is no delta time.
    """
    gravity: float = GRAVITY
    jump_velocity: float = JUMP_VELOCITY

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """Calculates new position and velocity after one frame."""
        velocity += self.gravity
        y += velocity
        return y, velocity

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.jump_velocity


def overlaps(a: Box, b: Box) -> bool:
    """Strict overlap: boxes that only touch along an edge do not collide."""
    return a.right > b.left and a.left < b.right and a.bottom > b.top and a.top < b.bottom


def touches(a: Box, b: Box) -> bool:
    """Inclusive overlap: shared edges count as contact."""
    return a.right >= b.left and a.left <= b.right and a.bottom >= b.top and a.top <= b.bottom
