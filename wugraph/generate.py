from __future__ import annotations

import random
from typing import Optional

from .graph import WUGraph


def random_graph(
    n_vertices: int,
    *,
    density: float = 0.5,
    min_weight: int = 1,
    max_weight: int = 100,
    seed: Optional[int] = None,
) -> WUGraph:
    """Build a random graph on vertices 0..n-1 for demos and benchmarking.

    The graph gets int(density * n * (n - 1) / 2) distinct non-self edges with
    uniform integer weights in [min_weight, max_weight].
    """

    if n_vertices < 0:
        raise ValueError(f"n_vertices must be >= 0 (got {n_vertices})")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be within [0, 1] (got {density})")
    if min_weight > max_weight:
        raise ValueError(f"min_weight ({min_weight}) exceeds max_weight ({max_weight})")

    rng = random.Random(seed)
    g = WUGraph()
    for v in range(n_vertices):
        g.add_vertex(v)

    total_edges = int(density * n_vertices * (n_vertices - 1) / 2)
    while g.edge_count() < total_edges:
        # keep trying until an unoccupied pair is found
        i = rng.randint(0, n_vertices - 2)
        j = rng.randint(i + 1, n_vertices - 1)
        if g.is_edge(i, j):
            continue
        g.add_edge(i, j, rng.randint(min_weight, max_weight))

    return g
