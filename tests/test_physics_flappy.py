"""Unit tests for the Neon Flappy engine.

Tests cover:
- Spawn cadence and gap geometry
- Bird and pipe movement
- Ceiling, floor and pipe collisions
- Idempotent scoring and off-screen culling
"""

import random

import pytest

from conftest import FixedRandom
from neon_arcade.constants import (
    BIRD_X, FLAPPY_HEIGHT, FLAPPY_WIDTH, PIPE_GAP, PIPE_MIN_HEIGHT
)
from neon_arcade.data_models import Bird, FlappyWorld, GameStatus, Pipe
from neon_arcade.physics_flappy import FlappyEngine


def running_world(**overrides) -> FlappyWorld:
    world = FlappyWorld(status=GameStatus.RUNNING)
    for key, value in overrides.items():
        setattr(world, key, value)
    return world


class TestSpawner:
    """Tests for when and where pipes appear."""

    def test_spawns_when_empty(self, flappy_engine: FlappyEngine) -> None:
        assert flappy_engine.should_spawn(running_world())

    @pytest.mark.parametrize("x, expected", [
        (FLAPPY_WIDTH, False),
        (250.0, False),
        (249.0, True),
    ])
    def test_spacing_threshold(self, flappy_engine: FlappyEngine, x: float, expected: bool) -> None:
        world = running_world(pipes=[Pipe(x=x, top_height=100, bottom_y=230)])

        assert flappy_engine.should_spawn(world) is expected

    def test_only_newest_pipe_counts(self, flappy_engine: FlappyEngine) -> None:
        world = running_world(pipes=[
            Pipe(x=10.0, top_height=100, bottom_y=230),
            Pipe(x=400.0, top_height=100, bottom_y=230),
        ])

        assert not flappy_engine.should_spawn(world)

    def test_gap_geometry(self) -> None:
        """A top segment of 100 with a 130 gap puts the bottom segment at 230."""
        engine = FlappyEngine(rng=FixedRandom(100))
        world = running_world()

        pipe = engine.spawn_pipe(world)

        assert world.pipes == [pipe]
        assert pipe.x == FLAPPY_WIDTH
        assert pipe.top_height == 100
        assert pipe.bottom_y == 230
        assert not pipe.passed

    def test_top_height_range(self) -> None:
        engine = FlappyEngine(rng=random.Random(7))
        world = running_world()

        for _ in range(300):
            engine.spawn_pipe(world)

        heights = {p.top_height for p in world.pipes}
        assert min(heights) >= PIPE_MIN_HEIGHT
        assert max(heights) <= FLAPPY_HEIGHT - PIPE_GAP - PIPE_MIN_HEIGHT
        assert all(p.bottom_y == p.top_height + PIPE_GAP for p in world.pipes)


class TestMovement:
    """Tests for gravity on the bird and scrolling pipes."""

    def test_bird_falls_and_pipes_scroll(self, flappy_engine: FlappyEngine) -> None:
        world = running_world(pipes=[Pipe(x=450.0, top_height=100, bottom_y=230)])

        flappy_engine.move(world)

        assert world.bird.y == 200.5
        assert world.bird.velocity == 0.5
        assert world.pipes[0].x == 447.0

    def test_jump_moves_bird_up(self, flappy_engine: FlappyEngine) -> None:
        world = running_world(bird=Bird(y=200.0, velocity=flappy_engine.flap()))

        flappy_engine.move(world)

        assert world.bird.velocity == -8.5
        assert world.bird.y == 191.5


class TestCollision:
    """Tests for terminal collisions."""

    def test_bird_above_gap_hits_top_segment(self, flappy_engine: FlappyEngine) -> None:
        """Bird centred at 50 has its top edge at 35, above the 100 tall top segment."""
        world = running_world(
            bird=Bird(y=50.0),
            pipes=[Pipe(x=BIRD_X - 25, top_height=100, bottom_y=230)],
        )

        assert flappy_engine.check_collision(world)

    def test_bird_below_gap_hits_bottom_segment(self, flappy_engine: FlappyEngine) -> None:
        world = running_world(
            bird=Bird(y=220.0),
            pipes=[Pipe(x=BIRD_X - 25, top_height=100, bottom_y=230)],
        )

        assert flappy_engine.check_collision(world)

    def test_bird_inside_gap_is_safe(self, flappy_engine: FlappyEngine) -> None:
        world = running_world(
            bird=Bird(y=165.0),
            pipes=[Pipe(x=BIRD_X - 25, top_height=100, bottom_y=230)],
        )

        assert not flappy_engine.check_collision(world)

    def test_pipe_not_horizontally_aligned_is_ignored(self, flappy_engine: FlappyEngine) -> None:
        world = running_world(
            bird=Bird(y=50.0),
            pipes=[Pipe(x=BIRD_X + 15, top_height=100, bottom_y=230)],
        )

        assert not flappy_engine.check_collision(world)

    @pytest.mark.parametrize("y", [0.0, float(FLAPPY_HEIGHT)])
    def test_playfield_edges_are_terminal(self, flappy_engine: FlappyEngine, y: float) -> None:
        world = running_world(bird=Bird(y=y))

        assert flappy_engine.check_collision(world)

    def test_clear_sky_is_safe(self, flappy_engine: FlappyEngine) -> None:
        assert not flappy_engine.check_collision(running_world())


class TestScoring:
    """Tests for scoring and culling passed pipes."""

    def test_pipe_scores_once(self, flappy_engine: FlappyEngine) -> None:
        world = running_world(pipes=[Pipe(x=100.0, top_height=100, bottom_y=230)])

        assert flappy_engine.update_score(world) == 1
        assert flappy_engine.update_score(world) == 0
        assert world.score == 1
        assert world.pipes[0].passed

    def test_pipe_still_over_bird_does_not_score(self, flappy_engine: FlappyEngine) -> None:
        world = running_world(pipes=[Pipe(x=BIRD_X - 50, top_height=100, bottom_y=230)])

        flappy_engine.update_score(world)

        assert world.score == 0

    def test_cull_removes_offscreen_pipes(self, flappy_engine: FlappyEngine) -> None:
        gone = Pipe(x=-50.0, top_height=100, bottom_y=230)
        visible = Pipe(x=-49.0, top_height=100, bottom_y=230)
        world = running_world(pipes=[gone, visible])

        flappy_engine.cull(world)

        assert world.pipes == [visible]


class TestUpdate:
    """Tests for the full per-frame update."""

    def test_first_frame_spawns_a_pipe(self, flappy_engine: FlappyEngine) -> None:
        world = running_world()

        assert not flappy_engine.update(world)
        assert len(world.pipes) == 1

    def test_falling_through_floor_is_terminal(self, flappy_engine: FlappyEngine) -> None:
        world = running_world(bird=Bird(y=FLAPPY_HEIGHT - 15.0))

        assert flappy_engine.update(world)

    def test_score_never_decreases(self, flappy_engine: FlappyEngine) -> None:
        world = running_world()
        scores = []

        for frame in range(2000):
            if world.bird.y > 200:
                world.bird.velocity = flappy_engine.flap()
            if flappy_engine.update(world):
                break
            scores.append(world.score)

        assert scores == sorted(scores)
