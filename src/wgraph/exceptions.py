class GraphError(Exception):
    """Base exception for wgraph errors."""

    pass


class VertexNotFoundError(GraphError, KeyError):
    """Raised when an operation names a vertex the graph does not contain."""

    def __init__(self, vertex):
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Vertex {self.vertex!r} is not in the graph"


class EdgeNotFoundError(GraphError, KeyError):
    """Raised when an edge lookup is made between non-adjacent vertices."""

    def __init__(self, u, v):
        super().__init__((u, v))
        self.u = u
        self.v = v

    def __str__(self) -> str:
        return f"No edge between {self.u!r} and {self.v!r}"


class InvalidEdgeError(GraphError, ValueError):
    """Raised for self-loops and non-positive or non-integer weights."""

    pass
