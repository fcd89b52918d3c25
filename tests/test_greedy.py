import pytest

from algodrills.greedy import (
    best_cow_line,
    coin_count,
    fence_repair,
    interval_scheduling,
    sarumans_army,
)


def test_best_cow_line_sample():
    assert best_cow_line("ACDBCB") == "ABCBCD"


@pytest.mark.parametrize("s", ["ACDBCB", "ABBA", "ZYXWV", "BCABCA", "Q"])
def test_best_cow_line_invariants(s):
    result = best_cow_line(s)
    assert sorted(result) == sorted(s)
    assert result <= s
    assert result <= s[::-1]


def test_best_cow_line_empty():
    assert best_cow_line("") == ""


def test_fence_repair_sample():
    assert fence_repair([8, 5, 8]) == 34


def test_fence_repair_single_board_costs_nothing():
    assert fence_repair([7]) == fence_repair([])


def test_fence_repair_invariants():
    lengths = [3, 4, 5, 1, 2]
    cost = fence_repair(lengths)
    assert cost >= sum(lengths)
    assert fence_repair(sorted(lengths, reverse=True)) == cost


def test_coin_count_sample():
    assert coin_count([3, 2, 1, 3, 0, 2], 620) == 6


def test_coin_count_only_ones():
    amount = 37
    assert coin_count([amount, 0, 0, 0, 0, 0], amount) == amount


def test_coin_count_wrong_length():
    with pytest.raises(ValueError):
        coin_count([1, 2, 3], 10)


def test_interval_scheduling_disjoint():
    intervals = [(1, 2), (3, 4), (5, 6)]
    assert interval_scheduling(intervals) == len(intervals)


def test_interval_scheduling_order_and_bound():
    intervals = [(1, 3), (2, 5), (4, 7), (6, 9), (8, 10)]
    result = interval_scheduling(intervals)
    assert result <= len(intervals)
    assert interval_scheduling(list(reversed(intervals))) == result


def test_interval_scheduling_start_at_zero_not_taken():
    assert interval_scheduling([(0, 5)]) == interval_scheduling([])


def test_sarumans_army_unit_reach():
    positions = [9, 3, 1, 7, 5]
    assert sarumans_army(1, positions) == len(positions) - 1


def test_sarumans_army_order_and_bound():
    positions = [1, 7, 15, 20, 30, 50]
    result = sarumans_army(10, positions)
    assert result <= len(positions)
    assert sarumans_army(10, list(reversed(positions))) == result


def test_sarumans_army_empty():
    with pytest.raises(ValueError):
        sarumans_army(5, [])