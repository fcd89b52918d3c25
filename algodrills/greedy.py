"""Greedy algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

COINS = (1, 5, 10, 50, 100, 500)


def best_cow_line(s: str) -> str:
    """Build the lexicographically smallest string by taking from either end."""
    left, right = 0, len(s)
    taken = []
    while left < right:
        window = s[left:right]
        if window < window[::-1]:
            taken.append(s[left])
            left += 1
        else:
            taken.append(s[right - 1])
            right -= 1
    return "".join(taken)


def fence_repair(lengths: Iterable[int]) -> int:
    """Return the least total cost of cutting a board into ``lengths``."""
    heap = list(lengths)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        joined = heapq.heappop(heap) + heapq.heappop(heap)
        cost += joined
        heapq.heappush(heap, joined)
    return cost


def coin_count(counts: Sequence[int], amount: int) -> int:
    """Return how many coins the greedy choice uses to pay ``amount``.

    ``counts`` gives how many coins of each value in ``COINS`` are at hand.
    """
    if len(counts) != len(COINS):
        raise ValueError(f"expected {len(COINS)} coin counts, got {len(counts)}")
    used = 0
    for coin, available in reversed(list(zip(COINS, counts))):
        take = min(available, amount // coin)
        amount -= take * coin
        used += take
    return used


def interval_scheduling(intervals: Iterable[tuple[int, int]]) -> int:
    """Return how many non-overlapping jobs can be chosen, earliest end first."""
    chosen = 0
    time = 0
    for start, end in sorted(intervals, key=lambda job: job[1]):
        if time < start:
            chosen += 1
            time = end
    return chosen


def sarumans_army(r: int, positions: Iterable[int]) -> int:
    """Count the marks placed by sweeping ``positions`` with reach ``r``."""
    ordered = sorted(positions)
    if not ordered:
        raise ValueError("positions must not be empty")
    mark = ordered[0]
    marks = 0
    for x in ordered:
        if x - mark >= r:
            mark = x
            marks += 1
    return marks