from .algorithms import (
    UNREACHED,
    articulation_points,
    connected_components,
    count_components,
    dijkstra,
    is_connected,
    is_empty,
    shortest_path,
)
from .exceptions import EdgeNotFoundError, GraphError, InvalidEdgeError, VertexNotFoundError
from .graph import Edge, WeightedGraph
from .traversal import breadth_first, depth_first, is_path

__all__ = [
    "Edge",
    "WeightedGraph",
    "GraphError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "InvalidEdgeError",
    "UNREACHED",
    "is_empty",
    "is_connected",
    "count_components",
    "connected_components",
    "dijkstra",
    "shortest_path",
    "articulation_points",
    "depth_first",
    "breadth_first",
    "is_path",
]
