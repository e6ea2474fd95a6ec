"""Influenced routes, coin partitions, fingerprints, pair grouping, divisors and rectangle search."""

from __future__ import annotations

import heapq
import math
from collections import deque
from math import isqrt
from typing import Callable, Iterable, Optional, Sequence, Tuple

Rectangle = Tuple[int, int, int, int]


def _influence(adjacency: list[list[tuple[int, int]]], influence: list[int], start: int, radius: int) -> int:
    """Sum the influence of every city between one and ``radius`` roads away from ``start``."""
    depth = {start: 0}
    queue = deque([start])
    total = 0
    while queue:
        u = queue.popleft()
        for v, _ in adjacency[u]:
            if v in depth:
                continue
            depth[v] = depth[u] + 1
            if depth[u] <= radius - 1:
                total += influence[v]
                if depth[u] < radius - 1:
                    queue.append(v)
    return total


def shortest_influenced_path(
    cities: Sequence[Tuple[str, int, int]],
    roads: Iterable[Tuple[str, str, int]],
    source: str,
    target: str,
    radius: int,
) -> Optional[Tuple[int, int]]:
    """Return ``(distance, stones)`` of the cheapest route from ``source`` to ``target``.

    ``cities`` holds ``(name, stones, influence)``; ``roads`` holds two-way
    ``(name, name, cost)``. Leaving a city costs the road plus the influence of
    every city within ``radius`` roads of it. Among the cheapest routes the one
    collecting the most stones is chosen. None means the target is unreachable.
    """
    index: dict[str, int] = {}
    stones: list[int] = []
    influence: list[int] = []
    for name, stone, influ in cities:
        if name in index:
            raise ValueError(f"duplicate city {name!r}")
        index[name] = len(stones)
        stones.append(stone)
        influence.append(influ)

    def lookup(name: str) -> int:
        try:
            return index[name]
        except KeyError:
            raise ValueError(f"unknown city {name!r}") from None

    adjacency: list[list[tuple[int, int]]] = [[] for _ in stones]
    for first, second, cost in roads:
        u, v = lookup(first), lookup(second)
        adjacency[u].append((v, cost))
        adjacency[v].append((u, cost))

    start, goal = lookup(source), lookup(target)
    toll = [_influence(adjacency, influence, city, radius) for city in range(len(stones))]

    dist: list[float] = [math.inf] * len(stones)
    gathered = [0] * len(stones)
    dist[start] = 0
    gathered[start] = stones[start]
    heap = [(0, start)]
    while heap:
        du, u = heapq.heappop(heap)
        if du != dist[u]:
            continue
        for v, cost in adjacency[u]:
            candidate = du + cost + toll[u]
            carried = gathered[u] + stones[v]
            if candidate < dist[v]:
                dist[v] = candidate
                gathered[v] = carried
                heapq.heappush(heap, (candidate, v))
            elif candidate == dist[v] and carried > gathered[v]:
                gathered[v] = carried

    if dist[goal] == math.inf:
        return None
    return int(dist[goal]), gathered[goal]


def count_partitions(total: int, coins: Iterable[int]) -> int:
    """Return the number of unordered ways to make ``total`` from the distinct ``coins``."""
    if total < 0:
        raise ValueError("total must not be negative")
    distinct = list(dict.fromkeys(coins))
    if any(coin <= 0 for coin in distinct):
        raise ValueError("coins must be positive")
    ways = [1] + [0] * total
    for coin in distinct:
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def check_fingerprints(
    known: Iterable[Sequence[int]], queries: Iterable[Sequence[int]]
) -> list[bool]:
    """Tell for each query whether it is new, that is, matches none of ``known``."""
    seen = {tuple(item) for item in known}
    return [tuple(query) not in seen for query in queries]


def min_groups(pairs: Iterable[Sequence[int]]) -> int:
    """Return how many consecutive groups the pairs split into greedily.

    Each group is a run of pairs that all contain one of two chosen values;
    every group is stretched as far as possible.
    """
    items = [tuple(pair) for pair in pairs]
    if any(len(pair) != 2 for pair in items):
        raise ValueError("every pair must hold exactly two values")
    count = len(items)

    def advance(i: int, *keys: int) -> int:
        while i < count and (items[i][0] in keys or items[i][1] in keys):
            i += 1
        return i

    groups = 0
    i = 0
    while i < count:
        reach = i
        for key in items[i]:
            start = advance(i, key)
            if start >= count:
                reach = max(reach, start)
                continue
            for other in items[start]:
                reach = max(reach, advance(start, key, other))
        i = reach
        groups += 1
    return groups


def consecutive_divisors(n: int) -> list[int]:
    """Return, in increasing order, every ``x >= 1`` such that ``x * (x + 1)`` divides ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    if n % 2:
        return []

    found = []
    x = 1
    while x ** 3 <= n:
        if n % x == 0 and n % (x + 1) == 0:
            found.append(x)
        x += 1

    k = 1
    while True:
        m = n // k
        x = (isqrt(1 + 4 * m) - 1) // 2
        if x == 0 or x ** 3 <= n:
            break
        if n % k == 0 and x * (x + 1) == m:
            found.append(x)
        k += 1
    return sorted(found)


def _first_reaching(probe: Callable[[int], int], area: int, size: int) -> int:
    left, right = 1, size
    while left < right:
        mid = (left + right) // 2
        if probe(mid) < area:
            left = mid + 1
        else:
            right = mid
    return left


def locate_rectangle(query: Callable[[int, int, int, int], int], size: int = 10**9) -> Rectangle:
    """Find a hidden rectangle in a ``size`` x ``size`` board.

    ``query(x1, y1, x2, y2)`` must return how many cells of the hidden
    rectangle lie inside the given one. Returns ``(lx, ly, rx, ry)``.
    """
    if size < 1:
        raise ValueError("size must be positive")
    area = query(1, 1, size, size)
    if area <= 0:
        raise ValueError("the hidden rectangle is empty")
    rx = _first_reaching(lambda mid: query(1, 1, mid, size), area, size)
    ry = _first_reaching(lambda mid: query(1, 1, size, mid), area, size)
    height = query(rx, 1, rx, size)
    if height <= 0:
        raise ValueError("query answers are inconsistent")
    return rx - area // height + 1, ry - height + 1, rx, ry