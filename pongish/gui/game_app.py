"""
Main game application with PyGame GUI
"""

import logging

import pygame

from pongish.core.entities import GameMode
from pongish.core.game_engine import GameEngine
from pongish.core.interfaces import SilentSoundPlayer
from pongish.core.interfaces import SoundPlayerProtocol
from pongish.gui.pygame_renderer import PygameRenderer
from pongish.gui.sound import PygameSoundPlayer
from pongish.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)

MAX_UPDATES_PER_FRAME = 5

START_UP_LINES = [
    "Pongish - somewhat Pong-like",
    "Press space to play",
    "Use the mouse to control the bat",
    "Press escape to exit at any time",
]

GAME_OVER_LINES = [
    "Game Over",
    "Press space to play again",
    "Press escape to exit at any time",
]


class PongishApp:
    """Main application class for Pongish with PyGame GUI"""

    def __init__(self, config: GameConfig = game_config) -> None:
        """Initialize the application"""
        self.config = config
        self.renderer = PygameRenderer(config)

        sound_player: SoundPlayerProtocol
        if config.SOUND_ENABLED:
            sound_player = PygameSoundPlayer()
        else:
            sound_player = SilentSoundPlayer()

        self.game_engine = GameEngine(config, sound_player)
        self.dt = 1.0 / config.UPDATES_PER_SECOND
        self.running = True

        # The bat follows relative mouse motion, so keep the cursor inside the window
        pygame.mouse.set_visible(False)
        pygame.event.set_grab(True)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one input event"""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == pygame.KEYUP and event.key == pygame.K_SPACE:
            if self.game_engine.mode != GameMode.PLAYING:
                self.game_engine.start_round()
        elif event.type == pygame.MOUSEMOTION:
            if self.game_engine.mode == GameMode.PLAYING:
                self.game_engine.move_bat(event.rel[0])

    def render(self) -> None:
        """Render the current state"""
        self.renderer.clear()
        self.game_engine.render(self.renderer)

        if self.game_engine.mode == GameMode.START_UP:
            self.renderer.draw_instructions(START_UP_LINES)
        elif self.game_engine.mode == GameMode.GAME_OVER:
            self.renderer.draw_instructions(GAME_OVER_LINES)

        self.renderer.present()

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting Pongish at %d updates per second", self.config.UPDATES_PER_SECOND)

        lag = 0.0
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                lag += self.renderer.clock.get_time() / 1000.0
                updates = 0
                while lag >= self.dt and updates < MAX_UPDATES_PER_FRAME:
                    self.game_engine.update(self.dt)
                    lag -= self.dt
                    updates += 1
                # On overrun the game slows down instead of catching up
                if updates == MAX_UPDATES_PER_FRAME:
                    lag = 0.0

                self.render()
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        pygame.event.set_grab(False)
        pygame.mouse.set_visible(True)
        self.renderer.cleanup()
        pygame.quit()
        logger.info("Pongish closed properly.")


def main(config: GameConfig = game_config) -> None:
    """Main entry point"""
    app = PongishApp(config)
    app.run()
