from __future__ import annotations

import logging
import math
from typing import Dict, Iterator, List, Optional, Set, Tuple

from wgraph.graph import V, WeightedGraph
from wgraph.traversal import depth_first

logger = logging.getLogger(__name__)

# Distance of a vertex no path reaches. Never used in arithmetic.
UNREACHED = math.inf

ARTICULATION_METHODS = ("removal", "tarjan")


def is_empty(g: WeightedGraph) -> bool:
    return g.num_vertices() == 0


def is_connected(g: WeightedGraph) -> bool:
    """True for the empty graph, or when a DFS from the first vertex reaches every vertex."""
    if is_empty(g):
        return True
    start = next(iter(g))
    return len(depth_first(g, start)) == g.num_vertices()


def count_components(g: WeightedGraph) -> int:
    visited: Set[V] = set()
    count = 0
    for x in g:
        if x in visited:
            continue
        visited.update(depth_first(g, x))
        count += 1
    return count


def connected_components(g: WeightedGraph) -> List[WeightedGraph]:
    """Split ``g`` into maximal connected induced subgraphs.

    Components come back in discovery order, which follows the vertex
    enumeration order of ``g``. Each one is a new graph sharing no storage
    with ``g``.
    """
    components: List[WeightedGraph] = []
    visited: Set[V] = set()
    for x in g:
        if x in visited:
            continue
        reached = depth_first(g, x)
        comp = WeightedGraph()
        for y in reached:
            comp.add_vertex(y)
            visited.add(y)
        # every edge is seen from both endpoints; add_edge is idempotent
        for y in reached:
            for z, w in g.neighbours(y):
                comp.add_edge(y, z, w)
        components.append(comp)
    logger.debug("Found %d component(s) in %r", len(components), g)
    return components


def _min_distance(g: WeightedGraph, dist: Dict[V, float], spt_set: Set[V]) -> Optional[V]:
    # Linear scan. With <= an equal distance later in enumeration order takes
    # over, and an all-UNREACHED remainder still yields a vertex.
    best = None
    best_dist = UNREACHED
    for x in g:
        if x not in spt_set and dist[x] <= best_dist:
            best_dist = dist[x]
            best = x
    return best


def _dijkstra(g: WeightedGraph, source: V) -> Tuple[Dict[V, float], Dict[V, Optional[V]]]:
    dist: Dict[V, float] = {x: UNREACHED for x in g}
    prev: Dict[V, Optional[V]] = {x: None for x in g}
    spt_set: Set[V] = set()
    if not is_empty(g):
        dist[source] = 0

    for _ in range(g.num_vertices()):
        u = _min_distance(g, dist, spt_set)
        spt_set.add(u)
        if dist[u] == UNREACHED:
            continue
        for v, w in g.neighbours(u):
            if v not in spt_set and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                prev[v] = u
    return dist, prev


def dijkstra(g: WeightedGraph, source: V) -> Dict[V, float]:
    """Shortest distance from ``source`` to every vertex of ``g``.

    Vertices with no path from ``source`` map to ``UNREACHED``. An empty
    graph gives an empty mapping. ``source`` must be a vertex of ``g`` and
    weights must be non-negative; neither is checked here.

    Each round settles the unsettled vertex with the smallest distance. Among
    equal distances the later vertex in enumeration order is selected.
    """
    dist, _prev = _dijkstra(g, source)
    logger.debug("Dijkstra from %r settled %d vertex(es)", source, len(dist))
    return dist


def shortest_path(g: WeightedGraph, source: V, target: V) -> Optional[Tuple[float, List[V]]]:
    """(distance, path) from ``source`` to ``target``, or None if disconnected."""
    dist, prev = _dijkstra(g, source)
    if dist.get(target, UNREACHED) == UNREACHED:
        return None
    path = []
    cur: Optional[V] = target
    while cur is not None:
        path.append(cur)
        cur = prev.get(cur)
    path.reverse()
    return dist[target], path


def _articulation_points_removal(g: WeightedGraph) -> List[V]:
    # Connected input: a vertex is a cut vertex iff the remainder is disconnected.
    # Otherwise compare component counts so existing splits are not blamed on v.
    connected = is_connected(g)
    baseline = 1 if connected else count_components(g)
    points: List[V] = []
    for x in g:
        probe = g.copy()
        probe.remove_vertex(x)
        if connected:
            split = not is_connected(probe)
        else:
            split = count_components(probe) > baseline
        if split:
            points.append(x)
    return points


def _articulation_points_tarjan(g: WeightedGraph) -> List[V]:
    # Iterative low-link DFS
    time = 0
    disc: Dict[V, int] = {}
    low: Dict[V, int] = {}
    ap: Set[V] = set()

    for root in g:
        if root in disc:
            continue
        time += 1
        disc[root] = low[root] = time
        root_children = 0
        stack: List[Tuple[V, Optional[V], Iterator[Tuple[V, int]]]] = [(root, None, g.neighbours(root))]
        while stack:
            u, parent, it = stack[-1]
            advanced = False
            for v, _w in it:
                if v not in disc:
                    time += 1
                    disc[v] = low[v] = time
                    if u == root:
                        root_children += 1
                    stack.append((v, u, g.neighbours(v)))
                    advanced = True
                    break
                elif v != parent:
                    low[u] = min(low[u], disc[v])
            if advanced:
                continue
            stack.pop()
            if parent is not None:
                low[parent] = min(low[parent], low[u])
                # Non-root where subtree can't reach above parent
                if parent != root and low[u] >= disc[parent]:
                    ap.add(parent)
        # Root with 2+ children
        if root_children > 1:
            ap.add(root)

    return [x for x in g if x in ap]


def articulation_points(g: WeightedGraph, method: str = "removal") -> List[V]:
    """Vertices whose removal increases the number of connected components.

    ``removal`` clones the graph once per vertex, deletes the vertex and
    retests connectivity, O(V * (V + E)). ``tarjan`` is the linear low-link
    search. Both list the vertices in enumeration order.
    """
    if method == "removal":
        points = _articulation_points_removal(g)
    elif method == "tarjan":
        points = _articulation_points_tarjan(g)
    else:
        raise ValueError(f"Unknown articulation method {method!r}; expected one of {ARTICULATION_METHODS}")
    logger.debug("Articulation points (%s): %r", method, points)
    return points
