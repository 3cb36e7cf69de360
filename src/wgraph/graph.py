from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Tuple, TypeVar

from wgraph.exceptions import EdgeNotFoundError, InvalidEdgeError, VertexNotFoundError


V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True)
class Edge(Generic[V]):
    """Undirected weighted connection between two vertices."""
    u: V
    v: V
    weight: int = 1

    def other(self, x: V) -> V:
        if x == self.u:
            return self.v
        if x == self.v:
            return self.u
        raise VertexNotFoundError(x)


class WeightedGraph(Generic[V]):
    """Adjacency-map graph with undirected, positive integer weighted edges.

    Vertices: any hashable value, enumerated in insertion order
    Edges: at most one per vertex pair, no self-loops
    """

    def __init__(self) -> None:
        # vertex -> {neighbour: weight}; both directions are stored
        self._adj: Dict[V, Dict[V, int]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable, vertices: Iterable = ()) -> "WeightedGraph":
        """Build a graph from Edge objects or (u, v[, weight]) tuples.

        Vertices given separately are added first, so isolated vertices
        keep their place in the enumeration order.
        """
        g = cls()
        for x in vertices:
            g.add_vertex(x)
        for e in edges:
            if isinstance(e, Edge):
                g.add_edge(e.u, e.v, e.weight)
            else:
                g.add_edge(*e)
        return g

    # -- queries ---------------------------------------------------------

    @property
    def vertices(self) -> List[V]:
        return list(self._adj)

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._adj))

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, x: object) -> bool:
        return x in self._adj

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedGraph):
            return NotImplemented
        return self._adj == other._adj

    def __repr__(self) -> str:
        return f"WeightedGraph(vertices={self.num_vertices()}, edges={self.num_edges()})"

    def has_vertex(self, x: V) -> bool:
        return x in self._adj

    def num_vertices(self) -> int:
        return len(self._adj)

    def num_edges(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj.values()) // 2

    def total_edge_weight(self) -> int:
        return sum(e.weight for e in self.edges())

    def degree(self, x: V) -> int:
        return len(self._require(x))

    def neighbours(self, x: V) -> Iterator[Tuple[V, int]]:
        """Yield (neighbour, weight) pairs in the order the edges were added."""
        return iter(list(self._require(x).items()))

    def are_adjacent(self, u: V, v: V) -> bool:
        return u in self._adj and v in self._adj[u]

    def get_edge_weight(self, u: V, v: V) -> int:
        if not self.are_adjacent(u, v):
            raise EdgeNotFoundError(u, v)
        return self._adj[u][v]

    def edges(self) -> List[Edge]:
        """Each undirected edge once, oriented from the first-enumerated endpoint."""
        seen = set()
        out: List[Edge] = []
        for u, nbrs in self._adj.items():
            for v, w in nbrs.items():
                if v in seen:
                    continue
                out.append(Edge(u, v, w))
            seen.add(u)
        return out

    # -- mutation --------------------------------------------------------

    def add_vertex(self, x: V) -> None:
        self._adj.setdefault(x, {})

    def add_edge(self, u: V, v: V, weight: int = 1) -> None:
        if u == v:
            raise InvalidEdgeError(f"Self-loop on {u!r} is not allowed")
        if isinstance(weight, bool) or not isinstance(weight, Integral):
            raise InvalidEdgeError(f"Edge weight must be an integer, got {weight!r}")
        if weight <= 0:
            raise InvalidEdgeError(f"Edge weight must be positive, got {weight!r}")
        self.add_vertex(u)
        self.add_vertex(v)
        self._adj[u][v] = int(weight)
        self._adj[v][u] = int(weight)

    def remove_edge(self, u: V, v: V) -> None:
        if not self.are_adjacent(u, v):
            raise EdgeNotFoundError(u, v)
        del self._adj[u][v]
        del self._adj[v][u]

    def remove_vertex(self, x: V) -> None:
        """Remove a vertex together with all of its incident edges."""
        nbrs = self._require(x)
        for y in nbrs:
            del self._adj[y][x]
        del self._adj[x]

    def copy(self) -> "WeightedGraph":
        """Independent clone; mutating the copy never touches this graph."""
        g = type(self)()
        g._adj = {x: dict(nbrs) for x, nbrs in self._adj.items()}
        return g

    def _require(self, x: V) -> Dict[V, int]:
        try:
            return self._adj[x]
        except KeyError:
            raise VertexNotFoundError(x) from None
