"""
Pongish game entities: axis motion, edges, court geometry, score
"""

import math
from dataclasses import dataclass
from enum import Enum

from pongish.utils.config import GameConfig


class Sound(Enum):
    """Available sound effects"""

    TABLE_HIT = "table_hit"
    BAT_HIT = "bat_hit"


class GameMode(Enum):
    """Current phase of the game loop"""

    START_UP = "start_up"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class AxisMotion:
    """Kinematic state of a point along one axis"""

    pos: float = 0.0
    old_pos: float = 0.0
    vel: float = 0.0

    def advance(self, dt: float) -> None:
        """Starts a new step: remembers the position, then integrates velocity"""
        self.old_pos = self.pos
        self.pos += self.vel * dt

    def reset(self, pos: float, vel: float) -> None:
        self.pos = pos
        self.old_pos = pos
        self.vel = vel

    @property
    def displacement(self) -> float:
        """Distance covered during the current step"""
        return self.pos - self.old_pos


@dataclass(frozen=True)
class Edge:
    """
    A line at `pos` on one axis, struck only when the orthogonal coordinate at
    the crossing lies in [start, end]
    """

    pos: float
    start: float
    end: float

    @classmethod
    def infinite(cls, pos: float) -> "Edge":
        return cls(pos, -math.inf, math.inf)

    @classmethod
    def from_width(cls, pos: float, start: float, width: float) -> "Edge":
        return cls(pos, start, start + width)


class Court:
    """Static court geometry: table walls and the bat edges"""

    def __init__(self, config: GameConfig):
        self.width = config.COURT_WIDTH
        self.height = config.COURT_HEIGHT
        self.bat_y = config.bat_y
        self.bat_width = config.BAT_WIDTH
        self.bat_thickness = config.BAT_THICKNESS

        # The court is open at the bottom
        self.left_wall = Edge.infinite(0.0)
        self.right_wall = Edge.infinite(float(self.width))
        self.top_wall = Edge.infinite(0.0)

    def bat_face(self, bat_x: float) -> Edge:
        return Edge.from_width(self.bat_y, bat_x, self.bat_width)

    def bat_left_side(self, bat_x: float) -> Edge:
        return Edge.from_width(bat_x, self.bat_y, self.bat_thickness)

    def bat_right_side(self, bat_x: float) -> Edge:
        return Edge.from_width(bat_x + self.bat_width, self.bat_y, self.bat_thickness)

    def bat_corners(self, bat_x: float) -> tuple[tuple[float, float], tuple[float, float]]:
        """Returns the (left, right) corners of the bat face"""
        return (bat_x, self.bat_y), (bat_x + self.bat_width, self.bat_y)


class Score:
    """Points scored this round, and whether a new ball is due"""

    def __init__(self, new_ball_interval: int):
        self.new_ball_interval = new_ball_interval
        self.points = 0
        self.need_new_ball = False

    def reset(self) -> None:
        self.points = 0
        self.need_new_ball = False

    def increment(self) -> None:
        self.points += 1
        self.need_new_ball = self.points % self.new_ball_interval == 0

    def consume_new_ball_flag(self) -> bool:
        """Returns the new-ball flag and clears it, so each threshold serves once"""
        result = self.need_new_ball
        self.need_new_ball = False
        return result
