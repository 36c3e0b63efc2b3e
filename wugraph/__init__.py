from .disjoint_sets import DisjointSets
from .generate import random_graph
from .graph import Edge, Neighbors, Vertex, VertexPair, Weight, WUGraph
from .kruskal import minimum_spanning_tree, spanning_tree_weight

__all__ = [
    "DisjointSets",
    "Edge",
    "Neighbors",
    "Vertex",
    "VertexPair",
    "Weight",
    "WUGraph",
    "minimum_spanning_tree",
    "random_graph",
    "spanning_tree_weight",
]
