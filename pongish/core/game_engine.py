"""
Pongish main game engine
"""

import logging
import time

from pongish.core.entities import GameMode, Score
from pongish.core.interfaces import RandomSource
from pongish.core.interfaces import RendererProtocol
from pongish.core.interfaces import SoundPlayerProtocol
from pongish.core.physics import BallSet
from pongish.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)


class GameEngine:
    """Drives a round: bat position, speed-up clock, balls and score"""

    def __init__(
        self,
        config: GameConfig = game_config,
        sound_player: SoundPlayerProtocol | None = None,
        rng: RandomSource | None = None,
    ):
        self.config = config
        self.mode = GameMode.START_UP
        self.score = Score(config.NEW_BALL_INTERVAL)
        self.balls = BallSet(config, sound_player, rng)
        self.bat_x = (config.COURT_WIDTH - config.BAT_WIDTH) / 2

        # Simulated time since the round started
        self.elapsed = 0.0
        self.start_time = 0.0
        self.rounds_played = 0

    @property
    def speedup(self) -> float:
        """Speed factor, growing linearly with the time spent in the round"""
        return 1.0 + self.elapsed / self.config.SPEEDUP_PERIOD

    def start_round(self) -> None:
        """Starts (or restarts) a round with a single ball"""
        if self.mode == GameMode.PLAYING:
            return

        self.score.reset()
        self.balls.reset()
        self.balls.serve_first(1.0)
        self.elapsed = 0.0
        self.start_time = time.time()
        self.mode = GameMode.PLAYING
        self.rounds_played += 1
        logger.info("Round %d started", self.rounds_played)

    def move_bat(self, dx: float) -> None:
        """Moves the bat horizontally, letting it hang off either side of the court"""
        self.bat_x = max(-self.config.BAT_WIDTH, min(self.config.COURT_WIDTH, self.bat_x + dx))

    def update(self, dt: float) -> None:
        """Advances the round by one tick"""
        if self.mode != GameMode.PLAYING:
            return

        self.balls.update(dt, self.bat_x, self.score, self.speedup)
        self.elapsed += dt

        if not self.balls.in_play():
            self._end_round()

    def _end_round(self) -> None:
        self.mode = GameMode.GAME_OVER
        wall_time = time.time() - self.start_time
        logger.info(
            "Game over with %d points, lost time: %.3fs of %.3fs",
            self.score.points,
            wall_time - self.elapsed,
            wall_time,
        )

    def render(self, renderer: RendererProtocol) -> None:
        """Draws the score, and while playing the balls and the bat"""
        if self.mode == GameMode.START_UP:
            return

        renderer.draw_score(self.score.points)
        if self.mode == GameMode.PLAYING:
            self.balls.render(renderer)
            renderer.draw_bat(
                self.bat_x, self.config.bat_y, self.config.BAT_WIDTH, self.config.BAT_THICKNESS
            )
