"""Tree cutting, angle coverage, number syntax and chessboard rearrangement."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, Tuple

_DIGITS = frozenset("0123456789")
_INF = 10**15


def min_tree_cost(n: int, k: int, edges: Sequence[Tuple[int, int]]) -> int:
    """Return the cheapest cost of keeping a connected group of ``k`` nodes with the root.

    ``edges`` holds ``(parent, cost)`` for nodes 2..n in order; cutting a node
    away from its parent costs that node's ``cost``.
    """
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError("expected one edge for every node except the root")
    if k < 1:
        raise ValueError("k must be at least 1")

    children: list[list[int]] = [[] for _ in range(n + 1)]
    weight = [0] * (n + 1)
    for node, (parent, cost) in enumerate(edges, start=2):
        if not 1 <= parent <= n:
            raise ValueError(f"parent {parent} out of range")
        children[parent].append(node)
        weight[node] = cost

    order: list[int] = []
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        if len(order) > n:
            raise ValueError("edges do not form a tree")
        stack.extend(children[node])

    size = [1] * (n + 1)
    tables: dict[int, list[int]] = {}
    for node in reversed(order):
        table = [weight[node], 0]
        current = 1
        for child in children[node]:
            child_table = tables.pop(child)
            child_size = size[child]
            merged = [table[0]] + [_INF] * min(k, current + child_size)
            for i in range(1, min(k, current) + 1):
                for j in range(min(child_size, k - i) + 1):
                    candidate = table[i] + child_table[j]
                    if candidate < merged[i + j]:
                        merged[i + j] = candidate
            table = merged
            current += child_size
        tables[node] = table
        size[node] = current

    root = tables[1]
    return root[k] if k < len(root) else 0


def butterfly_sum(values: Iterable[int]) -> int:
    """Return the sum of ``x + 1`` over the distinct values ``x``."""
    return sum(value + 1 for value in set(values))


def max_points_in_angle(
    points: Iterable[Tuple[float, float]], angle: float, origin: Tuple[float, float]
) -> int:
    """Return the most points seen from ``origin`` inside one sector of ``angle`` degrees.

    Points lying on the origin are always counted.
    """
    ox, oy = origin
    at_origin = 0
    bearings: list[float] = []
    for x, y in points:
        dx, dy = x - ox, y - oy
        if dx == 0 and dy == 0:
            at_origin += 1
        else:
            bearings.append(math.degrees(math.atan2(dy, dx)) % 360)

    bearings.sort()
    count = len(bearings)
    doubled = bearings + [b + 360 for b in bearings]
    best = 0
    j = 0
    for i, start in enumerate(bearings):
        while j < i + count and doubled[j] - start <= angle:
            j += 1
        best = max(best, j - i)
    return best + at_origin


def _strip_sign(text: str) -> str:
    return text[1:] if text[:1] in ("+", "-") else text


def _is_integer(text: str) -> bool:
    body = _strip_sign(text)
    return bool(body) and all(ch in _DIGITS for ch in body)


def _is_decimal(text: str) -> bool:
    body = _strip_sign(text)
    return (
        bool(body)
        and body.count(".") <= 1
        and all(ch in _DIGITS or ch == "." for ch in body)
    )


def is_number(text: str) -> bool:
    """Tell whether ``text`` is an integer, a decimal, or a decimal with an ``e`` exponent."""
    if _is_integer(text) or _is_decimal(text):
        return True
    return any(
        _is_decimal(text[:pos]) and _is_integer(text[pos + 1:])
        for pos, ch in enumerate(text)
        if ch == "e"
    )


def _to_cells(grid: Iterable[Iterable]) -> list[list[int]]:
    cells = [[int(ch) for ch in row] for row in grid]
    if any(len(row) != len(cells) for row in cells):
        raise ValueError("grid must be square")
    if any(value not in (0, 1) for row in cells for value in row):
        raise ValueError("grid cells must be 0 or 1")
    return cells


def _arrange(cells: list[list[int]], first: int) -> Optional[int]:
    board = [row[:] for row in cells]
    size = len(board)
    swaps = 0

    for i in range(size):
        want = first ^ (i & 1)
        if board[i][0] != want:
            other = next((r for r in range(i + 1, size) if board[r][0] == want), None)
            if other is None:
                return None
            board[i], board[other] = board[other], board[i]
            swaps += 1

    for i in range(size):
        want = first ^ (i & 1)
        if board[0][i] != want:
            other = next((c for c in range(i + 1, size) if board[0][c] == want), None)
            if other is None:
                return None
            for row in board:
                row[i], row[other] = row[other], row[i]
            swaps += 1

    for row in board:
        if any(x == y for x, y in zip(row, row[1:])):
            return None
    for upper, lower in zip(board, board[1:]):
        if any(x == y for x, y in zip(upper, lower)):
            return None
    return swaps


def min_chessboard_swaps(grid: Iterable[Iterable]) -> Optional[int]:
    """Return the fewest row and column swaps that turn ``grid`` into a chessboard.

    Rows and columns are fixed greedily from the top-left corner; None means
    no arrangement was found.
    """
    cells = _to_cells(grid)
    results = [r for r in (_arrange(cells, 0), _arrange(cells, 1)) if r is not None]
    return min(results) if results else None