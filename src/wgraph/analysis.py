from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional

from wgraph.algorithms import (
    ARTICULATION_METHODS,
    UNREACHED,
    articulation_points,
    connected_components,
    count_components,
    dijkstra,
    is_connected,
    is_empty,
)
from wgraph.exceptions import VertexNotFoundError
from wgraph.graph import WeightedGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisConfig:
    """Which queries a GraphAnalyzer runs and how."""

    source: Optional[Hashable] = None
    articulation_method: str = "removal"
    include_components: bool = True

    def __post_init__(self) -> None:
        if self.articulation_method not in ARTICULATION_METHODS:
            raise ValueError(
                f"articulation_method must be one of {ARTICULATION_METHODS}, got {self.articulation_method!r}"
            )


@dataclass
class GraphReport:
    """Structural summary of one graph."""

    num_vertices: int
    num_edges: int
    total_weight: int
    is_empty: bool
    is_connected: bool
    num_components: int
    articulation_points: List[Hashable]
    components: List[List[Hashable]] = field(default_factory=list)
    source: Optional[Hashable] = None
    distances: Optional[Dict[Hashable, float]] = None

    def to_dict(self) -> Dict[str, Any]:
        distances = None
        if self.distances is not None:
            # UNREACHED has no JSON form
            distances = {
                str(k): (None if d == UNREACHED else int(d)) for k, d in self.distances.items()
            }
        return {
            "num_vertices": self.num_vertices,
            "num_edges": self.num_edges,
            "total_weight": self.total_weight,
            "is_empty": self.is_empty,
            "is_connected": self.is_connected,
            "num_components": self.num_components,
            "components": [[str(x) for x in c] for c in self.components],
            "articulation_points": [str(x) for x in self.articulation_points],
            "source": None if self.source is None else str(self.source),
            "distances": distances,
        }


class GraphAnalyzer:
    """Runs the structural and distance queries over a graph."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def analyze(self, g: WeightedGraph) -> GraphReport:
        source = self.config.source
        if source is not None and not g.has_vertex(source):
            raise VertexNotFoundError(source)

        components: List[List[Hashable]] = []
        if self.config.include_components:
            components = [c.vertices for c in connected_components(g)]

        report = GraphReport(
            num_vertices=g.num_vertices(),
            num_edges=g.num_edges(),
            total_weight=g.total_edge_weight(),
            is_empty=is_empty(g),
            is_connected=is_connected(g),
            num_components=count_components(g),
            articulation_points=articulation_points(g, method=self.config.articulation_method),
            components=components,
            source=source,
            distances=dijkstra(g, source) if source is not None else None,
        )
        logger.info(
            "Analyzed %d vertex(es), %d edge(s): connected=%s, %d articulation point(s)",
            report.num_vertices,
            report.num_edges,
            report.is_connected,
            len(report.articulation_points),
        )
        return report
