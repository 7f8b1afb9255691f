"""
Core module of Pongish game
"""

from pongish.core.entities import AxisMotion
from pongish.core.entities import Court
from pongish.core.entities import Edge
from pongish.core.entities import GameMode
from pongish.core.entities import Score
from pongish.core.entities import Sound
from pongish.core.game_engine import GameEngine
from pongish.core.physics import Ball
from pongish.core.physics import BallSet

__all__ = [
    "AxisMotion",
    "Ball",
    "BallSet",
    "Court",
    "Edge",
    "GameEngine",
    "GameMode",
    "Score",
    "Sound",
]
