"""
Default random source for serving balls
"""

import numpy as np


class NumpyRandomSource:
    """Random source backed by a numpy Generator"""

    def __init__(self, seed: int | None = None):
        self.generator = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        return float(self.generator.uniform(low, high))

    def random_bool(self) -> bool:
        return bool(self.generator.integers(0, 2))
