"""Graph problems: conscription, layout, bipartiteness and roadblocks."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from algodrills.dsu import DisjointSetUnion

_COST_PER_PERSON = 10000


def conscription(n: int, m: int, relations: Iterable[tuple[int, int, int]]) -> int:
    """Return the least cost to recruit ``n`` women and ``m`` men.

    ``relations`` holds 1-based ``(woman, man, discount)`` triples; each
    recruit costs 10000 less the discount through one already recruited.
    """
    dsu = DisjointSetUnion(n + m)
    saved = 0
    for woman, man, discount in sorted(relations, key=lambda r: r[2], reverse=True):
        u, v = woman - 1, man - 1 + m
        if not dsu.is_same(u, v):
            dsu.unite(u, v)
            saved += discount
    return _COST_PER_PERSON * (n + m) - saved


def layout(
    n: int,
    likes: Iterable[tuple[int, int, int]],
    dislikes: Iterable[tuple[int, int, int]],
) -> int | None:
    """Return the greatest possible distance between the first and last of ``n`` cows.

    ``likes`` holds 1-based ``(a, b, d)``: b at most d after a; ``dislikes``
    holds ``(a, b, d)``: b at least d after a. Returns None when the distance
    is unbounded and raises ValueError when no layout exists.
    """
    edges = [(i, i - 1, 0) for i in range(1, n)]
    edges += [(a - 1, b - 1, d) for a, b, d in likes]
    edges += [(b - 1, a - 1, -d) for a, b, d in dislikes]

    distance: list[int | None] = [None] * n
    distance[0] = 0
    for _ in range(n):
        updated = False
        for a, b, d in edges:
            start = distance[a]
            if start is None:
                continue
            if distance[b] is None or start + d < distance[b]:
                distance[b] = start + d
                updated = True
        if not updated:
            break
    else:
        raise ValueError("no layout satisfies the constraints")
    return distance[n - 1]


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Tell whether the graph on 1-based vertices ``1 .. n`` is two-colourable."""
    neighbours: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        neighbours[a - 1].append(b - 1)
        neighbours[b - 1].append(a - 1)

    colour: dict[int, int] = {}
    for origin in range(n):
        if origin in colour:
            continue
        colour[origin] = 0
        stack = [origin]
        while stack:
            u = stack.pop()
            for v in neighbours[u]:
                if v not in colour:
                    colour[v] = 1 - colour[u]
                    stack.append(v)
                elif colour[v] == colour[u]:
                    return False
    return True


def second_shortest_path(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> int | None:
    """Return the second shortest walk length from vertex 1 to vertex ``n``.

    ``edges`` are undirected, 1-based ``(a, b, length)``. Returns None when
    no such walk exists.
    """
    neighbours: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, d in edges:
        neighbours[a - 1].append((b - 1, d))
        neighbours[b - 1].append((a - 1, d))

    first: list[int | None] = [None] * n
    second: list[int | None] = [None] * n
    heap = [(0, 0)]
    while heap:
        d, u = heapq.heappop(heap)
        if first[u] is None:
            first[u] = d
        elif first[u] < d and second[u] is None:
            second[u] = d
        else:
            continue
        for v, length in neighbours[u]:
            heapq.heappush(heap, (d + length, v))
    return second[n - 1]