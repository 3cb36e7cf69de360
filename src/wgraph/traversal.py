from __future__ import annotations

from collections import deque
from typing import List, Set

from wgraph.exceptions import VertexNotFoundError
from wgraph.graph import V, WeightedGraph


def depth_first(g: WeightedGraph, start: V) -> List[V]:
    """Vertices reachable from ``start`` (inclusive) in depth-first visiting order.

    Iterative, so deep path graphs do not hit the recursion limit.
    """
    if not g.has_vertex(start):
        raise VertexNotFoundError(start)
    seen: Set[V] = set()
    order: List[V] = []
    stack = [start]
    while stack:
        x = stack.pop()
        if x in seen:
            continue
        seen.add(x)
        order.append(x)
        # reversed so neighbours are visited in the order they were added
        for y, _w in reversed(list(g.neighbours(x))):
            if y not in seen:
                stack.append(y)
    return order


def breadth_first(g: WeightedGraph, start: V) -> List[V]:
    """Vertices reachable from ``start`` (inclusive) in breadth-first order."""
    if not g.has_vertex(start):
        raise VertexNotFoundError(start)
    seen: Set[V] = {start}
    order: List[V] = []
    queue = deque([start])
    while queue:
        x = queue.popleft()
        order.append(x)
        for y, _w in g.neighbours(x):
            if y not in seen:
                seen.add(y)
                queue.append(y)
    return order


def is_path(g: WeightedGraph, u: V, v: V) -> bool:
    if not g.has_vertex(v):
        raise VertexNotFoundError(v)
    return v in set(depth_first(g, u))
