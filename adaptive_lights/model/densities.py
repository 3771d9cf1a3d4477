import itertools
import random
from typing import Iterator, Optional, Tuple


DensityPair = Tuple[int, int]


def manual_densities(ns_density: int, ew_density: int) -> Iterator[DensityPair]:
    """Same pair for every cycle."""
    return itertools.repeat((ns_density, ew_density))


def random_densities(
    low: int = 0,
    high: int = 100,
    seed: Optional[int] = None,
) -> Iterator[DensityPair]:
    """
    Endless stream of pairs, each direction drawn independently and
    uniformly from [low, high].
    """
    rng = random.Random(seed)
    while True:
        ns_d = rng.randint(low, high)
        ew_d = rng.randint(low, high)
        yield ns_d, ew_d
