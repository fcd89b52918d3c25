import pytest

from algodrills.dsu import DisjointSetUnion


def test_fresh_structure_has_singletons():
    n = 5
    dsu = DisjointSetUnion(n)
    assert dsu.count() == n
    assert all(dsu.root(v) == v for v in range(n))
    assert all(dsu.size(v) == 1 for v in range(n))


def test_unite_merges_two_elements():
    n = 4
    dsu = DisjointSetUnion(n)
    dsu.unite(0, 1)
    assert dsu.is_same(0, 1)
    assert dsu.is_same(1, 0)
    assert dsu.count() == n - 1
    assert dsu.size(0) == dsu.size(1) == len([0, 1])


def test_unite_twice_is_idempotent():
    n = 4
    dsu = DisjointSetUnion(n)
    dsu.unite(2, 3)
    before = dsu.count()
    dsu.unite(3, 2)
    dsu.unite(2, 3)
    assert dsu.count() == before


def test_chain_of_unions():
    n = 8
    members = [0, 2, 4, 6]
    dsu = DisjointSetUnion(n)
    for u, v in zip(members, members[1:]):
        dsu.unite(u, v)
    assert dsu.size(members[0]) == len(members)
    assert len({dsu.root(v) for v in members}) == 1
    assert dsu.count() == n - (len(members) - 1)
    assert not dsu.is_same(0, 1)


def test_sizes_of_roots_sum_to_n():
    n = 10
    dsu = DisjointSetUnion(n)
    for u, v in [(0, 1), (1, 2), (5, 6), (7, 9), (9, 6)]:
        dsu.unite(u, v)
    roots = {dsu.root(v) for v in range(n)}
    assert len(roots) == dsu.count()
    assert sum(dsu.size(r) for r in roots) == n


def test_root_out_of_range_raises():
    dsu = DisjointSetUnion(3)
    with pytest.raises(IndexError):
        dsu.root(3)