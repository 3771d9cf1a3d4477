import math
from typing import Tuple


def _round_half_up(x: float) -> int:
    # x is never negative here
    return int(math.floor(x + 0.5))


def allocate(
    ns_density: int,
    ew_density: int,
    min_green: int,
    max_green: int,
) -> Tuple[int, int]:
    """
    Split the green budget between the two directions proportionally
    to their densities.

    Every direction gets at least min_green; the remaining
    (max_green - min_green) seconds are shared by density weight.
    Ties round half away from zero, so allocate(50, 50, 5, 40) == (23, 23).

    :param ns_density: non-negative North-South density
    :param ew_density: non-negative East-West density
    :return: (ns_green, ew_green), both within [min_green, max_green]
    """
    total = ns_density + ew_density
    if total <= 0:
        # no data: equal minimal green
        return min_green, min_green

    extra_budget = max_green - min_green

    ns_green = min_green + _round_half_up(ns_density / total * extra_budget)
    ew_green = min_green + _round_half_up(ew_density / total * extra_budget)

    # rounding may push a value one unit out of bounds
    ns_green = min(max(ns_green, min_green), max_green)
    ew_green = min(max(ew_green, min_green), max_green)

    return ns_green, ew_green
