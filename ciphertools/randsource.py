"""Seedable random source shared by every search in one run.

All randomness in the breakers goes through one RandomSource instance so that
a fixed seed gives the exact same sequence of draws, and therefore the exact
same keys and decryptions, on every run.
"""

import random
import time
from typing import List, MutableSequence, Optional


class RandomSource:
    """Mersenne Twister wrapper exposing only the draws the breakers need."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random()
        self.last_seed = None
        self.seed(int(time.time()) if seed is None else seed)

    def seed(self, value: int) -> None:
        """Reset the internal state deterministically from an integer."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"seed must be an int, got {type(value).__name__}")
        self._rng.seed(value)
        self.last_seed = value

    def rand_int(self, max_inclusive: int) -> int:
        """Uniform integer in [0, max_inclusive]."""
        if max_inclusive < 0:
            raise ValueError("max_inclusive must be >= 0")
        return self._rng.randint(0, max_inclusive)

    def shuffle(self, items: MutableSequence) -> None:
        """Fisher-Yates shuffle in place, driven by rand_int."""
        for i in range(len(items) - 1, 0, -1):
            j = self.rand_int(i)
            items[i], items[j] = items[j], items[i]

    def spawn(self, count: int) -> List["RandomSource"]:
        """Draw `count` child seeds from this stream and build one source per seed."""
        seeds = [self.rand_int(2**31 - 1) for _ in range(count)]
        return [RandomSource(s) for s in seeds]
