"""Problems solved with heaps and union-find: expedition and food chain."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from itertools import pairwise

from algodrills.dsu import DisjointSetUnion


def expedition(
    length: int, fuel: int, stations: Iterable[tuple[int, int]]
) -> int | None:
    """Return the fewest refuelling stops needed to travel ``length``.

    ``stations`` holds ``(position, amount)`` pairs. Returns None when the
    destination cannot be reached.
    """
    points = sorted([(0, 0), *stations, (length, 0)], key=lambda s: s[0])
    available: list[int] = []
    stops = 0
    for (previous, _), (position, amount) in pairwise(points):
        distance = position - previous
        while available and fuel < distance:
            fuel -= heapq.heappop(available)
            stops += 1
        if fuel < distance:
            return None
        fuel -= distance
        heapq.heappush(available, -amount)
    return stops


def food_chain(n: int, statements: Iterable[tuple[int, int, int]]) -> int:
    """Count the false statements about ``n`` animals.

    Each statement is ``(kind, x, y)`` with 1-based animals: kind 1 says
    ``x`` and ``y`` are of the same species, kind 2 says ``x`` eats ``y``.
    Any other kind is false. An animal numbered below 1 raises ValueError.
    """
    dsu = DisjointSetUnion(3 * n)
    false_count = 0
    for kind, x, y in statements:
        if kind not in (1, 2):
            false_count += 1
            continue
        if x < 1 or y < 1:
            raise ValueError(f"animals are numbered from 1, got {x} and {y}")
        x -= 1
        y -= 1
        if x >= n or y >= n:
            false_count += 1
            continue
        if kind == 1:
            if dsu.is_same(x, n + x) or dsu.is_same(x, 2 * n + y):
                false_count += 1
            else:
                for i in range(3):
                    dsu.unite(n * i + x, n * i + y)
        else:
            if dsu.is_same(x, y) or dsu.is_same(n + x, y):
                false_count += 1
            else:
                for i in range(3):
                    dsu.unite(n * i + x, n * ((i + 1) % 3) + y)
    return false_count