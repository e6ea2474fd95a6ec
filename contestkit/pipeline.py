"""Decide whether pipe pieces in a 3D grid can all be connected."""

from __future__ import annotations

from typing import Iterable, Sequence

_DIRECTIONS = ((-1, 0, 0), (0, -1, 0), (0, 0, -1), (0, 0, 1), (0, 1, 0), (1, 0, 0))


def _openings(cell: str) -> int:
    if cell == "*":
        return 3
    if cell == "#":
        return 0
    return 2


def _augment(start: int, adjacency: list[list[int]], match: dict[int, int], visited: set[int]) -> bool:
    stack = [(start, iter(adjacency[start]))]
    via: list[int] = []
    while stack:
        u, choices = stack[-1]
        for v in choices:
            if v in visited:
                continue
            visited.add(v)
            owner = match.get(v)
            if owner is None:
                match[v] = u
                for (node, _), slot in zip(stack, via):
                    match[slot] = node
                return True
            via.append(v)
            stack.append((owner, iter(adjacency[owner])))
            break
        else:
            stack.pop()
            if via:
                via.pop()
    return False


def _matching_size(sources: list[int], adjacency: list[list[int]]) -> int:
    match: dict[int, int] = {}
    pending = list(sources)
    while pending:
        visited: set[int] = set()
        unmatched = [u for u in pending if not _augment(u, adjacency, match, visited)]
        if len(unmatched) == len(pending):
            break
        pending = unmatched
    return len(sources) - len(pending)


def pipeline_feasible(layers: Iterable[Sequence[str]]) -> bool:
    """Tell whether every opening of every piece can be joined to a neighbour's opening.

    ``layers`` is a list of layers, each a list of equal-length rows. A ``*``
    has three openings, ``#`` is blocked and any other cell has two.
    Neighbours share a face.
    """
    grid = [[str(row) for row in layer] for layer in layers]
    if grid:
        rows = len(grid[0])
        width = len(grid[0][0]) if rows else 0
        if any(len(layer) != rows or any(len(row) != width for row in layer) for layer in grid):
            raise ValueError("layers must all have the same shape")

    slots: dict[tuple[int, int, int], range] = {}
    odd: list[int] = []
    even: list[int] = []
    total = 0
    for l, layer in enumerate(grid):
        for r, row in enumerate(layer):
            for c, cell in enumerate(row):
                count = _openings(cell)
                if not count:
                    continue
                ids = range(total, total + count)
                total += count
                slots[(l, r, c)] = ids
                (odd if (l + r + c) % 2 else even).extend(ids)

    if total % 2 or len(odd) != len(even) or not odd:
        return False

    adjacency: list[list[int]] = [[] for _ in range(total)]
    for (l, r, c), ids in slots.items():
        for dl, dr, dc in _DIRECTIONS:
            other = slots.get((l + dl, r + dr, c + dc))
            if other:
                for slot in ids:
                    adjacency[slot].extend(other)

    if any(not edges for edges in adjacency):
        return False
    return _matching_size(odd, adjacency) == len(odd)