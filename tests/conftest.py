"""Shared fixtures for the neon_arcade test suite.

This module provides:
- A recording renderer that stands in for the pygame playfield
- A fresh frame scheduler per test
- Seeded engines so spawns are reproducible
- An in-memory SQLite store for high-score tests
"""

import random
from typing import Any, List

import pytest

from neon_arcade.data_models import UiState
from neon_arcade.frame_driver import FrameScheduler
from neon_arcade.physics_flappy import FlappyEngine
from neon_arcade.physics_stars import StarEngine
from neon_arcade.score_db import Database


class RecordingRenderer:
    """Renderer that remembers every frame it was asked to draw."""

    def __init__(self) -> None:
        self.frames: List[Any] = []

    def draw(self, world: Any, ui: UiState) -> None:
        self.frames.append(world)

    @property
    def draw_count(self) -> int:
        return len(self.frames)


class FixedRandom(random.Random):
    """Random source whose randint always returns the same value."""

    def __init__(self, value: int) -> None:
        super().__init__(0)
        self.value = value

    def randint(self, a: int, b: int) -> int:
        return self.value


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def scheduler() -> FrameScheduler:
    return FrameScheduler()


@pytest.fixture
def flappy_engine() -> FlappyEngine:
    return FlappyEngine(rng=random.Random(1234))


@pytest.fixture
def star_engine() -> StarEngine:
    return StarEngine(rng=random.Random(1234))


@pytest.fixture
def db():
    database = Database(":memory:")
    yield database
    database.close()
