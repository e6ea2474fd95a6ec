"""Stage pursuit, minimax strings, discounted purchases, adjacent products and odd-count strings."""

from __future__ import annotations

import string
from collections import Counter
from itertools import accumulate
from typing import Iterable, Sequence, Tuple

_LETTERS = frozenset(string.ascii_lowercase)
_FULL_SCORE = 100


def pursuit_stages(ours: Iterable[int], theirs: Iterable[int]) -> int:
    """Return the fewest extra stages needed for our total to catch up with theirs.

    Each total sums the best ``k - k // 4`` of the ``k`` stages held so far.
    In every extra stage we score the maximum and they score nothing.
    """
    mine = sorted(ours)
    other = sorted(theirs)
    n = len(mine)
    if n == 0 or n != len(other):
        raise ValueError("both sides need the same, non-zero number of stages")

    ours_prefix = list(accumulate(mine, initial=0))
    theirs_prefix = list(accumulate(other, initial=0))

    def our_best(stages: int) -> int:
        if stages <= n:
            return ours_prefix[stages]
        return ours_prefix[n] + (stages - n) * _FULL_SCORE

    def their_total(stages: int) -> int:
        extra = stages - n
        dropped = stages // 4
        if dropped <= extra:
            return theirs_prefix[n]
        return theirs_prefix[n] - theirs_prefix[dropped - extra]

    def ahead(extra: int) -> bool:
        stages = n + extra
        return our_best(stages) - our_best(stages // 4) >= their_total(stages)

    if ahead(0):
        return 0

    high = 1
    while not ahead(high):
        high *= 2
    low = 1
    while low < high:
        mid = (low + high) // 2
        if ahead(mid):
            high = mid
        else:
            low = mid + 1
    return low


def minimax_string(text: str) -> str:
    """Rearrange ``text`` to minimise its largest border, preferring the smallest such string."""
    if not text:
        raise ValueError("text must not be empty")
    if any(ch not in _LETTERS for ch in text):
        raise ValueError("text must hold lowercase latin letters only")

    counts = Counter(text)
    letters = sorted(counts)
    singles = [ch for ch in letters if counts[ch] == 1]

    if singles and singles[0] != "a":
        lead = singles[0]
        rest = Counter(text)
        rest[lead] -= 1
        return lead + "".join(sorted(rest.elements()))

    first = letters[0]
    first_count = counts[first]
    others = sorted(ch for ch in text if ch != first)

    if first_count <= 2 or len(letters) == 1:
        return "".join(sorted(text))

    if first_count - 2 <= len(others):
        out = [first, first]
        paired = first_count - 2
        for ch in others[:paired]:
            out.extend((ch, first))
        out.extend(others[paired:])
        return "".join(out)

    if len(letters) == 2:
        return first + "".join(others) + first * (first_count - 1)

    second, third = letters[1], letters[2]
    rest = Counter(others)
    rest[second] -= 1
    rest[third] -= 1
    return (
        first
        + second
        + first * (first_count - 1)
        + third
        + "".join(sorted(rest.elements()))
    )


def min_purchase_cost(products: Iterable[Tuple[int, int]]) -> int:
    """Return the least total cost of buying every item.

    ``products`` holds ``(count, threshold)``; an item costs 2 until
    ``threshold`` items in all have been bought, then 1.
    """
    needed: dict[int, int] = {}
    for count, threshold in products:
        if count < 0 or threshold < 0:
            raise ValueError("counts and thresholds must not be negative")
        needed[threshold] = needed.get(threshold, 0) + count

    thresholds = sorted(needed)
    remaining = [needed[t] for t in thresholds]
    bought = 0
    cost = 0
    j = len(thresholds) - 1
    for i, threshold in enumerate(thresholds):
        while bought < threshold and i <= j:
            delta = min(threshold - bought, remaining[j])
            bought += delta
            cost += delta * 2
            remaining[j] -= delta
            if remaining[j] == 0:
                j -= 1
        if i > j:
            break
        cost += remaining[i]
        bought += remaining[i]
    return cost


def max_adjacent_product(values: Sequence[int]) -> int:
    """Return the largest product of two neighbouring values, never below 0."""
    items = list(values)
    return max((x * y for x, y in zip(items, items[1:])), default=0) if len(items) > 1 else 0


def diane_string(n: int) -> str:
    """Return a string of length ``n`` in which every non-empty substring occurs an odd number of times."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 26:
        return string.ascii_lowercase[:n]
    pad = (n - 10) // 2
    middle = n - 2 * pad - 1
    return "a" * (pad + 1) + string.ascii_lowercase[1:middle + 1] + "a" * pad