from typing import List, Optional

import numpy as np

DEFAULT_SEED = 1111


class Randomizer:
    """
    Seedable source of randomness shared by one simulation.

    Every draw made by the field, the seeding policy and the organisms comes
    from the same generator, so resetting it reproduces a run exactly.
    """

    def __init__(self, seed: Optional[int] = DEFAULT_SEED):
        self.seed = seed
        self.rng: np.random.Generator = np.random.default_rng(seed)

    def reset(self) -> None:
        self.rng = np.random.default_rng(self.seed)

    def next_int(self, bound: int) -> int:
        """Uniform integer in [0, bound)."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return int(self.rng.integers(bound))

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        return float(self.rng.random())

    def shuffle(self, items: List) -> None:
        self.rng.shuffle(items)
