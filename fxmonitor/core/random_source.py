"""Injectable random source for the market simulation."""

from __future__ import annotations

import numpy as np


def create_rng(seed: int | None = None) -> np.random.Generator:
    """
    Build the generator every simulation function draws from.

    A fixed ``seed`` makes quotes and price series reproducible; ``None``
    pulls fresh entropy from the OS.
    """
    return np.random.default_rng(seed)
