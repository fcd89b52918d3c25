"""Command line entry: solve a drill from whitespace-separated integers on stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from algodrills.brute_force import subset_sum_bits, subset_sum_recursive
from algodrills.greedy import interval_scheduling
from algodrills.number_theory import sugoroku


def _take(tokens: Iterator[int]) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("input ended early") from None


def _subset_sum(tokens: Iterator[int]) -> list[str]:
    n = _take(tokens)
    a = [_take(tokens) for _ in range(n)]
    k = _take(tokens)
    return [
        "Yes" if found else "No"
        for found in (subset_sum_bits(a, k), subset_sum_recursive(a, k))
    ]


def _scheduling(tokens: Iterator[int]) -> list[str]:
    n = _take(tokens)
    jobs = [(_take(tokens), _take(tokens)) for _ in range(n)]
    return [str(interval_scheduling(jobs))]


def _sugoroku(tokens: Iterator[int]) -> list[str]:
    moves = sugoroku(_take(tokens), _take(tokens))
    if moves is None:
        return ["-1"]
    return [" ".join(map(str, moves))]


_COMMANDS: dict[str, tuple[Callable[[Iterator[int]], list[str]], str]] = {
    "subset-sum": (_subset_sum, "n, then n numbers, then the target sum"),
    "scheduling": (_scheduling, "n, then n pairs of start and end times"),
    "sugoroku": (_sugoroku, "the two step lengths a and b"),
}


def main(argv: list[str] | None = None) -> int:
    """Run the chosen drill on standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="algodrills", description="Solve an algorithm drill read from stdin."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, summary) in _COMMANDS.items():
        commands.add_parser(name, help=summary, description=f"Input: {summary}.")
    args = parser.parse_args(argv)

    solve, _ = _COMMANDS[args.command]
    try:
        tokens = iter([int(token) for token in sys.stdin.read().split()])
        lines = solve(tokens)
    except ValueError as exc:
        print(f"algodrills: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())