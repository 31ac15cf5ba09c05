"""Seeded coherent noise sampling."""

from __future__ import annotations

import random

import numpy as np
from opensimplex import OpenSimplex

# Seeds are drawn from the unsigned 32-bit range, upper bound exclusive.
SEED_LIMIT = 0xFFFFFFFF


def random_seed(rng: random.Random | None = None) -> int:
    rng = rng or random.Random()
    return rng.randrange(0, SEED_LIMIT)


class NoiseField:
    """2D OpenSimplex field sampled on a scaled pixel grid."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._noise = OpenSimplex(seed=seed)

    def sample(self, x: float, y: float) -> float:
        return float(self._noise.noise2(x, y))

    def grid(self, width: int, height: int, scale: float) -> np.ndarray:
        """Return a ``(height, width)`` array of noise at ``(x * scale, y * scale)``."""
        xs = np.arange(width, dtype=np.float64) * scale
        ys = np.arange(height, dtype=np.float64) * scale
        return np.asarray(self._noise.noise2array(xs, ys), dtype=np.float64)
