from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

Vertex = Hashable
Weight = Union[int, float]


@dataclass(frozen=True)
class VertexPair:
    """Unordered pair of vertex slots, used as the edge index key."""

    first: int
    second: int

    @staticmethod
    def of(u: int, v: int) -> "VertexPair":
        if u <= v:
            return VertexPair(u, v)
        return VertexPair(v, u)


@dataclass
class Edge:
    # ends[0] is the vertex whose adjacency list holds this record.
    ends: Tuple[int, int]
    weight: Weight
    twin: Optional[int] = None  # None => self-edge

    def other_end(self, slot: int) -> int:
        a, b = self.ends
        # Self-edges report the vertex itself.
        return b if a == slot else a


@dataclass
class Neighbors:
    neighbor_list: List[Vertex] = field(default_factory=list)
    weight_list: List[Weight] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.neighbor_list)

    def __iter__(self) -> Iterator[Tuple[Vertex, Weight]]:
        return iter(zip(self.neighbor_list, self.weight_list))


class WUGraph:
    """A weighted, undirected graph. Self-edges are permitted.

    Caller keys are mapped to dense vertex slots, and edge records live in an
    arena indexed by edge slot. A non-self edge is stored as two records, one
    in each endpoint's adjacency list, each naming the other as its twin. A
    self-edge is a single record with no twin.

    Invalid input never raises: queries return False/0/None and mutators leave
    the graph unchanged.
    """

    def __init__(self) -> None:
        self._slots: Dict[Vertex, int] = {}
        self._keys: List[Vertex] = []
        # Insertion-ordered dicts keyed by edge slot; values are unused.
        self._adj: List[Optional[Dict[int, None]]] = []
        self._free_vertex_slots: List[int] = []

        self._edges: List[Optional[Edge]] = []
        self._free_edge_slots: List[int] = []
        self._edge_index: Dict[VertexPair, int] = {}

    # -- counts -----------------------------------------------------------

    def vertex_count(self) -> int:
        return len(self._slots)

    def edge_count(self) -> int:
        return len(self._edge_index)

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, vertex: object) -> bool:
        return self.is_vertex(vertex)

    def __repr__(self) -> str:
        return f"WUGraph(vertices={self.vertex_count()}, edges={self.edge_count()})"

    # -- vertices ---------------------------------------------------------

    def get_vertices(self) -> List[Vertex]:
        """Return every vertex key once, in insertion order."""
        return list(self._slots)

    def add_vertex(self, vertex: Vertex) -> None:
        try:
            if vertex in self._slots:
                return
        except TypeError:
            # Unhashable keys can never be vertices.
            return
        if self._free_vertex_slots:
            slot = self._free_vertex_slots.pop()
            self._keys[slot] = vertex
            self._adj[slot] = {}
        else:
            slot = len(self._keys)
            self._keys.append(vertex)
            self._adj.append({})
        self._slots[vertex] = slot

    def remove_vertex(self, vertex: Vertex) -> None:
        slot = self._lookup(vertex)
        if slot is None:
            return
        adj = self._adjacency(slot)
        if adj:
            logger.debug("Removing %d edge(s) incident on %r", len(adj), vertex)
        for edge_slot in list(adj):
            edge = self._edge(edge_slot)
            self._drop_edge(slot, edge.other_end(slot))
        del self._slots[vertex]
        self._keys[slot] = None
        self._adj[slot] = None
        self._free_vertex_slots.append(slot)

    def is_vertex(self, vertex: object) -> bool:
        try:
            return vertex in self._slots
        except TypeError:
            # Unhashable keys can never be vertices.
            return False

    def degree(self, vertex: Vertex) -> int:
        slot = self._lookup(vertex)
        if slot is None:
            return 0
        return len(self._adjacency(slot))

    def get_neighbors(self, vertex: Vertex) -> Optional[Neighbors]:
        """Return the neighbours of `vertex` and the weights of the connecting edges.

        The two lists are parallel and follow adjacency-list order. A self-edge
        lists `vertex` as its own neighbour. Returns None (not an empty
        Neighbors) if `vertex` is not in the graph or has degree zero.
        """

        slot = self._lookup(vertex)
        if slot is None:
            return None
        adj = self._adjacency(slot)
        if not adj:
            return None

        out = Neighbors()
        for edge_slot in adj:
            edge = self._edge(edge_slot)
            out.neighbor_list.append(self._keys[edge.other_end(slot)])
            out.weight_list.append(edge.weight)
        return out

    # -- edges ------------------------------------------------------------

    def add_edge(self, u: Vertex, v: Vertex, weight: Weight) -> None:
        """Add edge (u, v), or update its weight if it already exists.

        Does nothing unless both u and v are vertices of the graph.
        """

        su = self._lookup(u)
        sv = self._lookup(v)
        if su is None or sv is None:
            return

        pair = VertexPair.of(su, sv)
        existing = self._edge_index.get(pair)
        if existing is not None:
            edge = self._edge(existing)
            edge.weight = weight
            if edge.twin is not None:
                self._edge(edge.twin).weight = weight
            return

        u_slot = self._new_edge(Edge(ends=(su, sv), weight=weight))
        self._adjacency(su)[u_slot] = None
        if su != sv:
            v_slot = self._new_edge(Edge(ends=(sv, su), weight=weight, twin=u_slot))
            self._adjacency(sv)[v_slot] = None
            self._edge(u_slot).twin = v_slot
        self._edge_index[pair] = u_slot

    def remove_edge(self, u: Vertex, v: Vertex) -> None:
        su = self._lookup(u)
        sv = self._lookup(v)
        if su is None or sv is None:
            return
        self._drop_edge(su, sv)

    def is_edge(self, u: Vertex, v: Vertex) -> bool:
        return self._find_edge(u, v) is not None

    def weight(self, u: Vertex, v: Vertex) -> Weight:
        """Return the weight of (u, v), or 0 if there is no such edge.

        0 is a sentinel; callers should check `is_edge` rather than treat it as
        a real weight.
        """

        edge = self._find_edge(u, v)
        if edge is None:
            return 0
        return edge.weight

    def edges(self) -> Iterator[Tuple[Vertex, Vertex, Weight]]:
        """Yield each logical edge once as (u, v, weight)."""
        for slot in self._slots.values():
            for edge_slot in self._adjacency(slot):
                edge = self._edge(edge_slot)
                # Non-self edges are yielded from the record whose twin comes later.
                if edge.twin is not None and edge.twin < edge_slot:
                    continue
                a, b = edge.ends
                yield (self._keys[a], self._keys[b], edge.weight)

    def total_weight(self) -> Weight:
        return sum(w for _, _, w in self.edges())

    def to_networkx(self):
        """Convert to a networkx.Graph for ad-hoc experimentation."""
        import networkx as nx

        g = nx.Graph()
        g.add_nodes_from(self._slots)
        for u, v, w in self.edges():
            g.add_edge(u, v, weight=w)
        return g

    # -- internals --------------------------------------------------------

    def _lookup(self, vertex: object) -> Optional[int]:
        try:
            return self._slots.get(vertex)  # type: ignore[arg-type]
        except TypeError:
            return None

    def _adjacency(self, slot: int) -> Dict[int, None]:
        adj = self._adj[slot]
        if adj is None:
            raise AssertionError(f"Vertex slot {slot} has no adjacency list")
        return adj

    def _edge(self, edge_slot: int) -> Edge:
        edge = self._edges[edge_slot]
        if edge is None:
            raise AssertionError(f"Edge slot {edge_slot} is not in use")
        return edge

    def _find_edge(self, u: object, v: object) -> Optional[Edge]:
        su = self._lookup(u)
        sv = self._lookup(v)
        if su is None or sv is None:
            return None
        edge_slot = self._edge_index.get(VertexPair.of(su, sv))
        if edge_slot is None:
            return None
        return self._edge(edge_slot)

    def _new_edge(self, edge: Edge) -> int:
        if self._free_edge_slots:
            edge_slot = self._free_edge_slots.pop()
            self._edges[edge_slot] = edge
        else:
            edge_slot = len(self._edges)
            self._edges.append(edge)
        return edge_slot

    def _release_edge(self, edge_slot: int) -> None:
        owner = self._edge(edge_slot).ends[0]
        adj = self._adjacency(owner)
        if edge_slot not in adj:
            raise AssertionError(f"Edge slot {edge_slot} missing from adjacency list of slot {owner}")
        del adj[edge_slot]
        self._edges[edge_slot] = None
        self._free_edge_slots.append(edge_slot)

    def _drop_edge(self, su: int, sv: int) -> None:
        edge_slot = self._edge_index.pop(VertexPair.of(su, sv), None)
        if edge_slot is None:
            return
        twin = self._edge(edge_slot).twin
        self._release_edge(edge_slot)
        if twin is not None:
            self._release_edge(twin)
