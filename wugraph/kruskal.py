from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from .disjoint_sets import DisjointSets
from .graph import Vertex, Weight, WUGraph

logger = logging.getLogger(__name__)


def minimum_spanning_tree(graph: WUGraph) -> WUGraph:
    """Compute a minimum spanning forest of `graph` with Kruskal's algorithm.

    Returns a new WUGraph with the same vertices and only the tree edges; the
    input graph is not changed. For a connected graph of V vertices the result
    has V-1 edges. A disconnected graph yields one tree per component, and
    self-edges never appear in the result.
    """

    tree = WUGraph()
    vertices = graph.get_vertices()
    index: Dict[Vertex, int] = {}
    for i, vertex in enumerate(vertices):
        tree.add_vertex(vertex)
        index[vertex] = i

    # (weight, u, v) in scan order. Each non-self edge is seen from both of its
    # endpoints; only the occurrence from the lower-indexed endpoint is kept.
    candidates: List[Tuple[Weight, Vertex, Vertex]] = []
    for vertex in vertices:
        neighbors = graph.get_neighbors(vertex)
        if neighbors is None:
            continue
        i = index[vertex]
        for other, weight in neighbors:
            if index[other] < i:
                continue
            candidates.append((weight, vertex, other))

    # list.sort is stable, so equal weights keep scan order.
    candidates.sort(key=lambda c: c[0])

    sets = DisjointSets(len(vertices))
    for weight, u, v in candidates:
        root_u = sets.find(index[u])
        root_v = sets.find(index[v])
        if root_u != root_v:
            sets.union(root_u, root_v)
            tree.add_edge(u, v, weight)

    logger.debug(
        "MST: %d vertices, %d candidate edges, %d tree edges, %d component(s)",
        len(vertices),
        len(candidates),
        tree.edge_count(),
        sets.count(),
    )
    return tree


def spanning_tree_weight(graph: WUGraph) -> Weight:
    """Total weight of the minimum spanning forest of `graph`."""
    return minimum_spanning_tree(graph).total_weight()
