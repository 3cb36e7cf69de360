import json

import pytest
from rich.console import Console

from wgraph import UNREACHED, VertexNotFoundError, WeightedGraph
from wgraph.analysis import AnalysisConfig, GraphAnalyzer
from wgraph.reports import JSONReporter, print_terminal_summary


def _network():
    g = WeightedGraph.from_edges(
        [("A", "B", 1), ("B", "C", 2), ("C", "D", 1), ("A", "D", 10), ("D", "E", 3), ("F", "G", 4)]
    )
    g.add_vertex("H")
    return g


def test_analyze_with_source():
    report = GraphAnalyzer(AnalysisConfig(source="A")).analyze(_network())
    assert report.num_vertices == 8
    assert report.num_edges == 6
    assert report.total_weight == 21
    assert not report.is_empty
    assert not report.is_connected
    assert report.num_components == 3
    assert report.components == [["A", "B", "C", "D", "E"], ["F", "G"], ["H"]]
    assert report.articulation_points == ["D"]
    assert report.distances["E"] == 7
    assert report.distances["F"] == UNREACHED


def test_analyze_without_source_or_components():
    config = AnalysisConfig(articulation_method="tarjan", include_components=False)
    report = GraphAnalyzer(config).analyze(_network())
    assert report.distances is None
    assert report.components == []
    assert report.num_components == 3
    assert report.articulation_points == ["D"]


def test_analyze_empty_graph():
    report = GraphAnalyzer().analyze(WeightedGraph())
    assert report.is_empty
    assert report.is_connected
    assert report.num_components == 0
    assert report.articulation_points == []


def test_unknown_source_rejected():
    with pytest.raises(VertexNotFoundError):
        GraphAnalyzer(AnalysisConfig(source="Z")).analyze(_network())


def test_unknown_method_rejected():
    with pytest.raises(ValueError):
        AnalysisConfig(articulation_method="fast")


def test_to_dict_renders_unreached_as_null():
    data = GraphAnalyzer(AnalysisConfig(source="A")).analyze(_network()).to_dict()
    assert data["distances"] == {
        "A": 0, "B": 1, "C": 3, "D": 4, "E": 7, "F": None, "G": None, "H": None,
    }
    assert data["source"] == "A"
    assert data["articulation_points"] == ["D"]


def test_json_reporter(tmp_path):
    report = GraphAnalyzer(AnalysisConfig(source="F")).analyze(_network())
    out = tmp_path / "report.json"
    JSONReporter().generate(report, str(out))
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["num_components"] == 3
    assert data["distances"]["G"] == 4
    assert data["distances"]["A"] is None


def test_terminal_summary():
    report = GraphAnalyzer(AnalysisConfig(source="A")).analyze(_network())
    console = Console(record=True, width=120)
    print_terminal_summary(report, console=console)
    text = console.export_text()
    assert "Graph Summary" in text
    assert "unreached" in text
    assert "Connected Components" in text
    assert "Graph is disconnected" in text
