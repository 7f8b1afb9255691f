"""
Physics system for Pongish: balls and the ball pool
"""

import logging

from pongish.core.collision import rebound_bat_corner
from pongish.core.collision import rebound_bat_face
from pongish.core.collision import rebound_normal
from pongish.core.entities import AxisMotion, Court, Score, Sound
from pongish.core.interfaces import RandomSource
from pongish.core.interfaces import RendererProtocol
from pongish.core.interfaces import SilentSoundPlayer
from pongish.core.interfaces import SoundPlayerProtocol
from pongish.utils.config import Color, GameConfig, game_config
from pongish.utils.rng import NumpyRandomSource

logger = logging.getLogger(__name__)


class Ball:
    """Game ball"""

    def __init__(
        self,
        color: Color,
        config: GameConfig = game_config,
        sound_player: SoundPlayerProtocol | None = None,
        rng: RandomSource | None = None,
    ):
        self.config = config
        self.court = Court(config)
        self.color = color
        self.x = AxisMotion()
        self.y = AxisMotion()
        self.in_play = False
        self.sound_player = sound_player or SilentSoundPlayer()
        self.rng = rng or NumpyRandomSource()

    @property
    def position(self) -> tuple[float, float]:
        return (self.x.pos, self.y.pos)

    @property
    def velocity(self) -> tuple[float, float]:
        return (self.x.vel, self.y.vel)

    def serve(self, speedup: float) -> None:
        """Puts the ball in play somewhere in the upper third, falling"""
        x_vel = self.config.x_vel_normal * speedup
        if self.rng.random_bool():
            x_vel = -x_vel
        self.x.reset(self.rng.uniform(*self.config.serve_x_range), x_vel)
        self.y.reset(self.rng.uniform(*self.config.serve_y_range), self.config.Y_VEL * speedup)
        self.in_play = True
        logger.debug("Ball %s served at (%.1f, %.1f)", self.color, self.x.pos, self.y.pos)

    def update(self, dt: float, bat_x: float, score: Score, speedup: float) -> None:
        """
        Moves the ball by one step and resolves its collisions.

        The checks run in a fixed order: side walls, then top wall or bat
        face, then bat sides or corners. Each later check relies on the
        earlier ones not having consumed the step's collision.
        """
        if not self.in_play:
            return

        court = self.court
        radius = self.config.BALL_RADIUS

        self.x.advance(dt)
        self.y.advance(dt)

        if self.x.vel > 0 and rebound_normal(self.x, self.y, court.right_wall, radius):
            self.sound_player.play(Sound.TABLE_HIT)
        elif self.x.vel < 0 and rebound_normal(self.x, self.y, court.left_wall, radius):
            self.sound_player.play(Sound.TABLE_HIT)

        if self.y.vel < 0 and rebound_normal(self.y, self.x, court.top_wall, radius):
            self.sound_player.play(Sound.TABLE_HIT)
        elif (
            self.y.vel > 0
            and self.y.old_pos < court.bat_y - radius
            and rebound_bat_face(self, bat_x, speedup)
        ):
            self.sound_player.play(Sound.BAT_HIT)
            score.increment()

        if (
            self.y.pos >= court.bat_y
            and self.x.vel > 0
            and rebound_normal(self.x, self.y, court.bat_left_side(bat_x), radius)
        ):
            self.sound_player.play(Sound.BAT_HIT)
        elif (
            self.y.pos >= court.bat_y
            and self.x.vel < 0
            and rebound_normal(self.x, self.y, court.bat_right_side(bat_x), radius)
        ):
            self.sound_player.play(Sound.BAT_HIT)
        elif rebound_bat_corner(self, bat_x, speedup):
            self.sound_player.play(Sound.BAT_HIT)
            score.increment()

        if self.y.pos > court.height + radius:
            self.in_play = False
            logger.debug("Ball %s lost", self.color)

    def render(self, renderer: RendererProtocol) -> None:
        if self.in_play:
            renderer.draw_disc(self.position, self.color, self.config.BALL_RADIUS)


class BallSet:
    """Fixed pool of balls, one slot per ball color"""

    def __init__(
        self,
        config: GameConfig = game_config,
        sound_player: SoundPlayerProtocol | None = None,
        rng: RandomSource | None = None,
    ):
        self.config = config
        sound_player = sound_player or SilentSoundPlayer()
        rng = rng or NumpyRandomSource()
        self.balls = [Ball(color, config, sound_player, rng) for color in config.BALL_COLORS]

    def update(self, dt: float, bat_x: float, score: Score, speedup: float) -> None:
        """Updates every ball, then serves one more if the score asks for it"""
        for ball in self.balls:
            ball.update(dt, bat_x, score, speedup)

        if score.consume_new_ball_flag():
            self.serve_new_ball(speedup)

    def serve_new_ball(self, speedup: float) -> bool:
        """Serves into the first free slot. Returns False when every slot is in play"""
        for index, ball in enumerate(self.balls):
            if not ball.in_play:
                ball.serve(speedup)
                logger.debug("New ball served in slot %d", index)
                return True
        return False

    def serve_first(self, speedup: float) -> None:
        """Serves the first slot, used to start a round"""
        self.balls[0].serve(speedup)

    def reset(self) -> None:
        """Takes every ball out of play"""
        for ball in self.balls:
            ball.in_play = False

    def in_play(self) -> bool:
        return any(ball.in_play for ball in self.balls)

    def active_count(self) -> int:
        return sum(1 for ball in self.balls if ball.in_play)

    def render(self, renderer: RendererProtocol) -> None:
        for ball in self.balls:
            ball.render(renderer)
