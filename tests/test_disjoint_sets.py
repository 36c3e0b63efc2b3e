from __future__ import annotations

import pytest

from wugraph import DisjointSets


def test_initially_singletons():
    ds = DisjointSets(4)
    assert len(ds) == 4
    assert ds.count() == 4
    assert [ds.find(i) for i in range(4)] == [0, 1, 2, 3]


def test_union_merges_components():
    ds = DisjointSets(5)
    ds.union(ds.find(0), ds.find(1))
    ds.union(ds.find(3), ds.find(4))
    ds.union(ds.find(1), ds.find(4))

    assert ds.count() == 2
    root = ds.find(0)
    assert all(ds.find(i) == root for i in (1, 3, 4))
    assert ds.find(2) == 2


def test_find_compresses_paths():
    ds = DisjointSets(6)
    for i in range(1, 6):
        ds.union(ds.find(0), ds.find(i))
    root = ds.find(5)
    assert all(ds.parent[i] == root for i in range(6))


def test_union_rejects_non_roots_and_same_root():
    ds = DisjointSets(3)
    ds.union(0, 1)
    child = 1 if ds.find(1) == 0 else 0
    with pytest.raises(ValueError):
        ds.union(child, 2)
    with pytest.raises(ValueError):
        ds.union(2, 2)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSets(-1)


def test_empty():
    ds = DisjointSets(0)
    assert len(ds) == 0
    assert ds.count() == 0
