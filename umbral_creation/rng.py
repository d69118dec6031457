"""
Random Variate Source
=====================
Uniform integer draws for the trial runner. Every worker thread owns its own
source; instances carry no lock and must never be shared between threads.
"""

import random
from typing import List, Optional


class RandomVariateSource:
    """Uniform integers in a closed range, backed by a private ``random.Random``."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_in_range(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from ``[low, high]`` (both inclusive)."""
        if low > high:
            raise ValueError(f"empty draw range [{low}, {high}]")
        return self._rng.randint(low, high)


def spawn_sources(count: int, seed: Optional[int] = None) -> List[RandomVariateSource]:
    """
    Build ``count`` independent sources, one per worker.

    With a seed, each worker's seed is derived from it so a run's set of
    sources is reproducible. Without one, every source seeds itself from the OS.
    """
    if seed is None:
        return [RandomVariateSource() for _ in range(count)]

    master = random.Random(seed)
    return [RandomVariateSource(master.getrandbits(64)) for _ in range(count)]
