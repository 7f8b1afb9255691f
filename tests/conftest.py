"""
Shared fixtures and fake collaborators for the Pongish tests
"""

import pytest

from pongish.core.entities import Sound
from pongish.core.physics import Ball
from pongish.utils.config import GameConfig


class ScriptedRandom:
    """Random source returning scripted values, or the middle of the range"""

    def __init__(self, uniforms: list[float] | None = None, bools: list[bool] | None = None):
        self.uniforms = list(uniforms or [])
        self.bools = list(bools or [])

    def uniform(self, low: float, high: float) -> float:
        if self.uniforms:
            return self.uniforms.pop(0)
        return (low + high) / 2

    def random_bool(self) -> bool:
        if self.bools:
            return self.bools.pop(0)
        return False


class RecordingSoundPlayer:
    """Sound player that remembers what it was asked to play"""

    def __init__(self) -> None:
        self.played: list[Sound] = []

    def play(self, sound: Sound) -> None:
        self.played.append(sound)


class RecordingRenderer:
    """Renderer that records draw calls"""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def clear(self) -> None:
        self.calls.append(("clear",))

    def draw_disc(self, position, color, radius) -> None:
        self.calls.append(("disc", position, color, radius))

    def draw_bat(self, x, y, width, thickness) -> None:
        self.calls.append(("bat", x, y, width, thickness))

    def draw_score(self, points) -> None:
        self.calls.append(("score", points))

    def draw_instructions(self, lines) -> None:
        self.calls.append(("instructions", lines))

    def present(self) -> None:
        self.calls.append(("present",))

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


def place_ball(
    ball: Ball,
    pos: tuple[float, float],
    vel: tuple[float, float],
    old_pos: tuple[float, float] | None = None,
) -> Ball:
    """Puts a ball in play at a given state"""
    old_pos = old_pos if old_pos is not None else pos
    ball.x.pos, ball.y.pos = pos
    ball.x.old_pos, ball.y.old_pos = old_pos
    ball.x.vel, ball.y.vel = vel
    ball.in_play = True
    return ball


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def sound_player() -> RecordingSoundPlayer:
    return RecordingSoundPlayer()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def ball(config, sound_player) -> Ball:
    return Ball((255, 255, 255), config, sound_player, ScriptedRandom())


@pytest.fixture
def place():
    return place_ball


@pytest.fixture
def scripted_random():
    return ScriptedRandom
