"""Contest problems: prisoners, crazy rows, millionaire and scalar product."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache

_MILLION = 1_000_000


def bribe_prisoners(p: int, released: Iterable[int]) -> int:
    """Return the fewest gold coins needed to release the given prisoners.

    ``p`` cells hold one prisoner each; ``released`` holds 1-based cells.
    """
    cells = (0, *sorted(released), p + 1)

    @lru_cache(maxsize=None)
    def cost(left: int, right: int) -> int:
        # Release cells[left:right] while cells[left - 1] and cells[right] are empty.
        if left == right:
            return 0
        split = min(cost(left, i) + cost(i + 1, right) for i in range(left, right))
        return split + cells[right] - cells[left - 1] - 2

    return cost(1, len(cells) - 1)


def crazy_rows(matrix: Sequence[Sequence[int]]) -> int:
    """Return the fewest adjacent row swaps making the matrix lower triangular.

    Raises ValueError when no order of the rows works.
    """
    last = [
        max((j + 1 for j, cell in enumerate(row) if cell == 1), default=0)
        for row in matrix
    ]
    swaps = 0
    for target in range(len(last)):
        offset = next(
            (p for p, x in enumerate(last[target:]) if x <= target + 1), None
        )
        if offset is None:
            raise ValueError("rows cannot be made lower triangular")
        swaps += offset
        last.insert(target, last.pop(target + offset))
    return swaps


def millionaire(rounds: int, p: float, x: int) -> float:
    """Return the chance of ending with a million after ``rounds`` bets.

    Each bet is won with probability ``p``; ``x`` is the starting money.
    """
    if not 0 <= x <= _MILLION:
        raise ValueError(f"starting money must be within 0..{_MILLION}, got {x}")
    n = 1 << rounds
    chance = [0.0] * n + [1.0]
    for _ in range(rounds):
        chance = [
            max(
                0.0,
                max(
                    p * chance[i + j] + (1.0 - p) * chance[i - j]
                    for j in range(min(i, n - i) + 1)
                ),
            )
            for i in range(n + 1)
        ]
    return chance[x * n // _MILLION]


def minimum_scalar_product(x: Sequence[int], y: Sequence[int]) -> int:
    """Return the least scalar product over all orderings of ``x`` and ``y``."""
    if len(x) != len(y):
        raise ValueError(f"vectors differ in length: {len(x)} and {len(y)}")
    return sum(a * b for a, b in zip(sorted(x), sorted(y, reverse=True)))