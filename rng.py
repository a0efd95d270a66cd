"""
Unbiased integer sampling for entity placement
"""
import random
from typing import Tuple, Union

RAND_MAX = 2 ** 31 - 1


class RangeRandom:
    def __init__(self, source: Union[int, random.Random, None] = None):
        # Accept a seed or anything with getrandbits, e.g. random.Random
        if hasattr(source, "getrandbits"):
            self.source = source
        else:
            self.source = random.Random(source)

    def raw(self) -> int:
        """Raw draw in [0, RAND_MAX]"""
        return self.source.getrandbits(31)

    def uniform(self, low: int, high: int) -> int:
        """Integer in [low, high) using rejection sampling over equal buckets"""
        span = high - low
        if span <= 0:
            raise ValueError(f"empty range [{low}, {high})")

        bucket = RAND_MAX // span
        remainder = RAND_MAX % span
        while True:
            value = self.raw()
            if value == RAND_MAX:
                continue
            # Values past the last full bucket are discarded
            if value < RAND_MAX - remainder:
                return low + value // bucket

    def cell(self, width: int, height: int) -> Tuple[int, int]:
        """Random 1-indexed cell inside a width x height grid"""
        return self.uniform(1, width + 1), self.uniform(1, height + 1)
