"""Checkout timing, minimal 3x3 block sums and vitamin dosing."""

from __future__ import annotations

import math
from itertools import accumulate
from typing import Iterable, Optional, Sequence


def checkout_time(distance: float, accel: float, decel: float, vmax: float, delay: float) -> float:
    """Return the least time to cover ``distance`` starting and ending at rest.

    The vehicle accelerates at ``accel``, brakes at ``decel``, never exceeds
    ``vmax`` and spends an extra ``delay`` at its peak speed.
    """
    if accel <= 0 or decel <= 0 or vmax <= 0:
        raise ValueError("accelerations and speed limit must be positive")
    a = (accel + decel) / (2 * accel * decel)
    delta = delay * delay + 4 * distance * a
    peak = (-delay + math.sqrt(delta)) / (2 * a)
    if peak <= vmax:
        return peak / accel + peak / decel + delay
    return distance / vmax + vmax / (2 * accel) + vmax / (2 * decel)


def min_square_sum(grid: Iterable[Sequence[int]]) -> int:
    """Return the smallest sum of any 3x3 block of ``grid``."""
    rows = [list(row) for row in grid]
    if len(rows) < 3 or any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid must be rectangular with at least 3 rows")
    if len(rows[0]) < 3:
        raise ValueError("grid must have at least 3 columns")
    horizontal = [[x + y + z for x, y, z in zip(row, row[1:], row[2:])] for row in rows]
    return min(
        x + y + z
        for top, middle, bottom in zip(horizontal, horizontal[1:], horizontal[2:])
        for x, y, z in zip(top, middle, bottom)
    )


def min_vitamin_steps(amounts: Sequence[int], target: int) -> Optional[int]:
    """Return the fewest steps to reach exactly ``target``, or None if impossible.

    Taking the first ``i`` doses together (for ``i`` below the last) costs
    ``i + 1`` steps; after that the last dose may be repeated at one step each.
    """
    amounts = list(amounts)
    if not amounts:
        raise ValueError("at least one amount is required")
    if any(amount <= 0 for amount in amounts):
        raise ValueError("amounts must be positive")
    if target < 0:
        raise ValueError("target must not be negative")

    prefix = list(accumulate(amounts[:-1]))
    last = amounts[-1]
    count = len(amounts)

    best = [0] + [math.inf] * target
    for cost, step in enumerate(prefix, start=2):
        for x in range(step, target + 1):
            candidate = best[x - step] + cost
            if candidate < best[x]:
                best[x] = candidate

    base = prefix[-1] if prefix else 0
    result = best[target]
    for x in range(target - base + 1):
        remainder = target - x - base
        if remainder % last == 0:
            result = min(result, best[x] + remainder // last + count)

    if result == math.inf:
        return None
    return int(result) - 1