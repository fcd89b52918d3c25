import pytest

from algodrills.data_structure import expedition, food_chain

STATIONS = [(10, 10), (14, 5), (20, 2), (21, 4)]


def test_expedition_sample():
    assert expedition(25, 10, STATIONS) == 2


def test_expedition_station_order_irrelevant():
    assert expedition(25, 10, list(reversed(STATIONS))) == expedition(
        25, 10, STATIONS
    )


def test_expedition_unreachable():
    assert expedition(25, 5, STATIONS) is None
    assert expedition(25, 10, []) is None


def test_expedition_more_fuel_never_needs_more_stops():
    results = [expedition(25, fuel, STATIONS) for fuel in range(10, 30)]
    assert None not in results
    assert all(a >= b for a, b in zip(results, results[1:]))
    assert all(r <= len(STATIONS) for r in results)


def test_expedition_enough_fuel_needs_no_stops():
    assert expedition(25, 25, STATIONS) == expedition(25, 40, [])


def test_food_chain_all_false():
    statements = [(2, 1, 1), (1, 4, 1), (3, 1, 2), (2, 1, 5)]
    assert food_chain(3, statements) == len(statements)


def test_food_chain_consistent_statements():
    assert food_chain(3, [(1, 1, 2), (2, 2, 3)]) == 0


def test_food_chain_reverse_eating_is_false():
    base = [(2, 1, 2)]
    assert food_chain(3, base + [(2, 2, 1)]) == food_chain(3, base) + 1


def test_food_chain_same_then_eats_is_false():
    base = [(1, 1, 2)]
    assert food_chain(3, base + [(2, 1, 2)]) == food_chain(3, base) + 1


def test_food_chain_false_statement_leaves_state_alone():
    invalid = [(2, 1, 1)]
    assert food_chain(3, invalid + [(2, 1, 2)]) == food_chain(3, invalid)


def test_food_chain_rejects_zero_index():
    with pytest.raises(ValueError):
        food_chain(3, [(1, 0, 1)])