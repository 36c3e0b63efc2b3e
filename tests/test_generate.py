from __future__ import annotations

import pytest

from wugraph import random_graph


def test_edge_count_follows_density():
    g = random_graph(10, density=0.5, seed=1)
    assert g.vertex_count() == 10
    assert g.edge_count() == int(0.5 * 10 * 9 / 2)


def test_no_self_edges_and_weights_in_range():
    g = random_graph(15, density=0.8, min_weight=3, max_weight=7, seed=2)
    for u, v, w in g.edges():
        assert u != v
        assert 3 <= w <= 7


def test_seed_is_reproducible():
    a = random_graph(12, density=0.3, seed=42)
    b = random_graph(12, density=0.3, seed=42)
    assert list(a.edges()) == list(b.edges())


@pytest.mark.parametrize("n", [0, 1])
def test_tiny_graphs(n):
    g = random_graph(n, density=1.0)
    assert g.vertex_count() == n
    assert g.edge_count() == 0


@pytest.mark.parametrize(
    "n, kwargs",
    [
        (-1, {}),
        (5, {"density": 1.5}),
        (5, {"density": -0.1}),
        (5, {"min_weight": 10, "max_weight": 1}),
    ],
)
def test_bad_arguments(n, kwargs):
    with pytest.raises(ValueError):
        random_graph(n, **kwargs)
