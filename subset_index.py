import functools
import logging
from typing import Iterator, List

import numpy as np

logger = logging.getLogger(__name__)


# =========================
# Subset mask helpers
# =========================
# Bit j of a mask stands for non-source city j + 1.

def popcount(mask: int) -> int:
    # int.bit_count() once 3.10 is the floor
    return bin(mask).count("1")


def has_city(mask: int, j: int) -> bool:
    return (mask >> j) & 1 == 1


def with_city(mask: int, j: int) -> int:
    return mask | (1 << j)


def without_city(mask: int, j: int) -> int:
    return mask & ~(1 << j)


def members(mask: int) -> Iterator[int]:
    """Yield the bit indices set in mask, lowest first."""
    j = 0
    while mask:
        if mask & 1:
            yield j
        mask >>= 1
        j += 1


def full_mask(n: int) -> int:
    return (1 << n) - 1


def combinations(n: int, k: int) -> int:
    """
    Number of k-subsets of an n-set.
    Multiply and divide alternately so every intermediate value stays an
    exact binomial coefficient.
    """
    if k < 0 or k > n:
        return 0
    r = 1
    for i in range(k):
        r *= n - i
        r //= i + 1
    return r


# =========================
# Rank tables
# =========================

class SubsetIndex:
    """
    Dense ranking of every non-empty subset of the V - 1 non-source cities.

    group(c) lists the masks with popcount c in increasing order and
    rank(mask) is the position of mask inside its group, so that
    group(popcount(mask))[rank(mask)] == mask.
    """

    def __init__(self, n_cities: int):
        if n_cities < 1:
            raise ValueError("Number of cities must be at least 1")
        self.n_cities = n_cities
        self.n_bits = n_cities - 1
        set_size = 1 << self.n_bits

        self.rank_of = np.full(set_size, -1, dtype=np.int64)
        # index 0 is the empty cardinality, kept so groups are indexed by c
        self.group_members: List[np.ndarray] = [
            np.zeros(combinations(self.n_bits, c), dtype=np.int64)
            for c in range(self.n_bits + 1)
        ]

        # single pass; card_count keeps a running count per cardinality
        card_count = [0] * (self.n_bits + 1)
        for mask in range(1, set_size):
            c = popcount(mask)
            self.rank_of[mask] = card_count[c]
            self.group_members[c][card_count[c]] = mask
            card_count[c] += 1

        self.rank_of.setflags(write=False)
        for group in self.group_members:
            group.setflags(write=False)
        logger.debug("Indexed %d subsets of %d non-source cities", set_size - 1, self.n_bits)

    @classmethod
    @functools.lru_cache(maxsize=8)
    def for_cities(cls, n_cities: int) -> "SubsetIndex":
        return cls(n_cities)

    def rank(self, mask: int) -> int:
        return int(self.rank_of[mask])

    def group(self, c: int) -> np.ndarray:
        return self.group_members[c]

    def group_size(self, c: int) -> int:
        return len(self.group_members[c])

    def __len__(self):
        return len(self.rank_of) - 1
