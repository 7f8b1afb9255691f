"""
Random source protocol - defines interface for serve-time randomization
"""

from typing import Protocol


class RandomSource(Protocol):
    """
    Protocol for the randomness used when serving a ball.

    Lets tests script serves and lets the host pick a seeded generator.
    """

    def uniform(self, low: float, high: float) -> float:
        """
        Draw a real number uniformly from [low, high).

        Args:
            low: Lower bound
            high: Upper bound
        """
        ...

    def random_bool(self) -> bool:
        """Draw a fair coin toss"""
        ...
