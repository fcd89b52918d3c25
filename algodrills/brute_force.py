"""Exhaustive search: subset sums, lake counting and maze shortest paths."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import compress

_FOUR_WAYS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_EIGHT_WAYS = _FOUR_WAYS + ((1, 1), (1, -1), (-1, 1), (-1, -1))


def subset_sum_bits(a: Sequence[int], k: int) -> bool:
    """Tell whether some subset of ``a`` sums to ``k``, enumerating bit masks."""
    n = len(a)
    return any(
        sum(compress(a, ((mask >> i) & 1 for i in range(n)))) == k
        for mask in range(1 << n)
    )


def subset_sum_recursive(a: Sequence[int], k: int) -> bool:
    """Tell whether some subset of ``a`` sums to ``k``, by depth-first search."""

    def search(i: int, total: int) -> bool:
        if i == len(a):
            return total == k
        return search(i + 1, total + a[i]) or search(i + 1, total)

    return search(0, 0)


def count_lakes(grid: Sequence[str]) -> int:
    """Count the groups of ``W`` cells connected in the eight directions."""
    water = {
        (i, j)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == "W"
    }
    lakes = 0
    while water:
        lakes += 1
        stack = [water.pop()]
        while stack:
            i, j = stack.pop()
            for di, dj in _EIGHT_WAYS:
                neighbour = (i + di, j + dj)
                if neighbour in water:
                    water.remove(neighbour)
                    stack.append(neighbour)
    return lakes


def maze_shortest_path(grid: Sequence[str]) -> int | None:
    """Return the fewest steps from ``S`` to ``G`` through ``.`` cells.

    Returns None when ``G`` cannot be reached; raises ValueError when the
    maze has no ``S`` or no ``G``.
    """
    cells = {
        (i, j): cell for i, row in enumerate(grid) for j, cell in enumerate(row)
    }
    start = next((p for p, c in cells.items() if c == "S"), None)
    goal = next((p for p, c in cells.items() if c == "G"), None)
    if start is None:
        raise ValueError("maze has no start cell 'S'")
    if goal is None:
        raise ValueError("maze has no goal cell 'G'")

    distance = {start: 0}
    queue = deque([start])
    while queue:
        i, j = queue.popleft()
        steps = distance[(i, j)] + 1
        for di, dj in _FOUR_WAYS:
            neighbour = (i + di, j + dj)
            if neighbour not in distance and cells.get(neighbour) in (".", "G"):
                distance[neighbour] = steps
                queue.append(neighbour)
    return distance.get(goal)