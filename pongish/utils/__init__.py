"""
Pongish utility modules
"""

from pongish.utils.config import GameConfig
from pongish.utils.config import game_config
from pongish.utils.rng import NumpyRandomSource

__all__ = ["game_config", "GameConfig", "NumpyRandomSource"]
