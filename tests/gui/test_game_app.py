"""
Tests for the PyGame application, run against SDL's dummy drivers
"""

import pygame
import pytest

from pongish.core.entities import GameMode
from pongish.gui.game_app import GAME_OVER_LINES, START_UP_LINES, PongishApp
from pongish.utils.config import GameConfig


def mouse_motion(dx: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEMOTION, rel=(dx, 0), pos=(0, 0), buttons=(0, 0, 0))


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    app = PongishApp(GameConfig(SOUND_ENABLED=False))
    yield app
    app.cleanup()


class TestPongishApp:
    """Test input routing and drawing"""

    def test_space_starts_round(self, app):
        """Releasing space starts a round"""
        app.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))

        assert app.game_engine.mode == GameMode.PLAYING

    def test_mouse_moves_bat_only_while_playing(self, app):
        """Mouse motion drives the bat during a round"""
        start = app.game_engine.bat_x
        app.handle_event(mouse_motion(20))
        assert app.game_engine.bat_x == start

        app.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))
        app.handle_event(mouse_motion(20))
        assert app.game_engine.bat_x == start + 20

    def test_escape_quits(self, app):
        """Escape stops the main loop"""
        app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))

        assert app.running is False

    def test_window_close_quits(self, app):
        """Closing the window stops the main loop"""
        app.handle_event(pygame.event.Event(pygame.QUIT))

        assert app.running is False

    def test_render_each_mode(self, app, monkeypatch):
        """Instructions are shown outside of a round"""
        shown = []
        monkeypatch.setattr(app.renderer, "draw_instructions", shown.append)

        app.render()
        app.game_engine.start_round()
        app.render()
        app.game_engine.mode = GameMode.GAME_OVER
        app.render()

        assert shown == [START_UP_LINES, GAME_OVER_LINES]
