"""Dynamic programming: knapsacks, subsequences, partitions and subset sums."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable, Sequence


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")


def _check_modulus(modulus: int) -> None:
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")


def unbounded_knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Return the best total value when each ``(weight, value)`` item may be reused."""
    _check_capacity(capacity)
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight > capacity:
            continue
        for i in range(capacity - weight + 1):
            best[i + weight] = max(best[i + weight], best[i] + value)
    return max(best)


def longest_common_subsequence(s: Sequence, t: Sequence) -> int:
    """Return the length of the longest common subsequence of ``s`` and ``t``."""
    previous = [0] * (len(t) + 1)
    for a in s:
        current = [0]
        for j, b in enumerate(t):
            if a == b:
                current.append(previous[j] + 1)
            else:
                current.append(max(current[j], previous[j + 1]))
        previous = current
    return previous[-1]


def longest_increasing_subsequence(a: Iterable[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for x in a:
        position = bisect_left(tails, x)
        if position == len(tails):
            tails.append(x)
        else:
            tails[position] = x
    return len(tails)


def multiset_combinations(m: int, counts: Iterable[int], modulus: int) -> int:
    """Count the ways to pick ``m`` items from groups of identical items.

    ``counts`` gives the size of each group; the result is taken modulo
    ``modulus``.
    """
    _check_modulus(modulus)
    if m < 0:
        raise ValueError(f"m must not be negative, got {m}")
    ways = [1] + [0] * m
    for available in counts:
        running = 0
        following = []
        for j, w in enumerate(ways):
            dropped = ways[j - 1 - available] if j > available else 0
            running = (running + w - dropped) % modulus
            following.append(running)
        ways = following
    return ways[m]


def partition_count(n: int, m: int, modulus: int) -> int:
    """Count the partitions of ``n`` into at most ``m`` parts, modulo ``modulus``."""
    _check_modulus(modulus)
    if n < 0 or m < 0:
        raise ValueError(f"n and m must not be negative, got {n} and {m}")
    ways = [1] + [0] * n
    for j in range(1, m + 1):
        for i in range(n + 1):
            ways[i] = ((ways[i - j] if i >= j else 0) + ways[i]) % modulus
    return ways[n]


def bounded_subset_sum(items: Iterable[tuple[int, int]], k: int) -> bool:
    """Tell whether ``k`` is a sum of values taken from ``(value, copies)`` items."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    reachable = [True] + [False] * k
    for value, copies in items:
        # Fewest copies of this value needed on top of an earlier reachable sum.
        used = [0 if r else math.inf for r in reachable]
        for i in range(k - value + 1):
            used[i + value] = min(used[i + value], used[i] + 1)
        reachable = [u <= copies for u in used]
    return reachable[k]


def zero_one_knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Return the best total value of ``(weight, value)`` items, each used once."""
    _check_capacity(capacity)
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight > capacity:
            continue
        following = best.copy()
        for j in range(capacity - weight + 1):
            following[j + weight] = max(following[j + weight], best[j] + value)
        best = following
    return max(best)


def zero_one_knapsack_by_value(
    items: Iterable[tuple[int, int]], capacity: int
) -> int:
    """Solve the 0-1 knapsack by tabulating the least weight for each value.

    Suited to heavy items with small values.
    """
    _check_capacity(capacity)
    items = list(items)
    total = sum(value for _, value in items)
    least: list[float] = [0] + [math.inf] * total
    for weight, value in items:
        for i in reversed(range(total + 1 - value)):
            least[i + value] = min(least[i + value], least[i] + weight)
    return max(v for v, w in enumerate(least) if w <= capacity)