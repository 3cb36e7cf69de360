import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from wgraph.algorithms import (
    ARTICULATION_METHODS,
    UNREACHED,
    articulation_points,
    connected_components,
    dijkstra,
    shortest_path,
)
from wgraph.analysis import AnalysisConfig, GraphAnalyzer
from wgraph.exceptions import GraphError, VertexNotFoundError
from wgraph.graph import WeightedGraph
from wgraph.io.csv_reader import load_edges_csv
from wgraph.reports.json_report import JSONReporter
from wgraph.reports.terminal_report import print_terminal_summary
from wgraph.viz import plot_graph


app = typer.Typer(add_completion=False)
console = Console()


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI output."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        force=True,
    )


def _load(edges_csv: str) -> WeightedGraph:
    csv_path = Path(edges_csv)
    if not csv_path.exists():
        raise typer.BadParameter(f"CSV file not found: {csv_path}")
    try:
        return load_edges_csv(str(csv_path))
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _check_method(method: str) -> str:
    if method not in ARTICULATION_METHODS:
        raise typer.BadParameter(f"Invalid --method. Use one of: {', '.join(ARTICULATION_METHODS)}")
    return method


def _fail(e: GraphError) -> None:
    console.print(f"[bold red]Error:[/bold red] {e}")
    raise typer.Exit(code=1)


@app.callback()
def _main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Structural and distance queries over weighted undirected graphs."""
    _setup_logging(verbose)


@app.command()
def analyze(
    edges_csv: str = typer.Argument(..., help="Path to edge-list CSV (u,v,weight)"),
    source: str = typer.Option(None, "--source", help="Compute distances from this vertex"),
    method: str = typer.Option("removal", "--method", help="Articulation point method: removal or tarjan"),
    out_json: str = typer.Option(None, "--out-json", help="Output JSON report path"),
    out_png: str = typer.Option(None, "--out-png", help="Output PNG drawing path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Run every query over a graph and print a summary."""
    if verbose:
        _setup_logging(verbose)
    g = _load(edges_csv)
    config = AnalysisConfig(source=source, articulation_method=_check_method(method))

    try:
        report = GraphAnalyzer(config).analyze(g)
    except GraphError as e:
        _fail(e)

    print_terminal_summary(report, console=console)

    if out_json:
        JSONReporter().generate(report, out_json)
        console.print(f"[green]✓[/green] JSON report saved to: {out_json}")

    if out_png:
        plot_graph(g, out_png, highlight=report.articulation_points)
        console.print(f"[green]✓[/green] Graph PNG: {out_png}")


@app.command("shortest-paths")
def shortest_paths(
    edges_csv: str = typer.Argument(..., help="Path to edge-list CSV (u,v,weight)"),
    source: str = typer.Argument(..., help="Source vertex"),
    target: str = typer.Option(None, "--target", help="Only report the path to this vertex"),
):
    """Shortest distances from SOURCE (Dijkstra)."""
    g = _load(edges_csv)
    try:
        for x in (source, target):
            if x is not None and not g.has_vertex(x):
                raise VertexNotFoundError(x)
    except GraphError as e:
        _fail(e)

    if target is not None:
        res = shortest_path(g, source, target)
        if res is None:
            console.print(f"[yellow]No path from {source} to {target}[/yellow]")
            raise typer.Exit(code=1)
        dist, path = res
        console.print(f"[bold]{source} → {target}[/bold]: {int(dist)} via {' → '.join(path)}")
        return

    t = Table(title=f"Distances from {source}")
    t.add_column("Vertex")
    t.add_column("Distance", justify="right")
    for v, d in dijkstra(g, source).items():
        t.add_row(str(v), "unreached" if d == UNREACHED else str(int(d)))
    console.print(t)


@app.command()
def components(
    edges_csv: str = typer.Argument(..., help="Path to edge-list CSV (u,v,weight)"),
):
    """List the connected components."""
    g = _load(edges_csv)
    comps = connected_components(g)

    t = Table(title="Connected Components")
    t.add_column("#", justify="right")
    t.add_column("Vertices", justify="right")
    t.add_column("Edges", justify="right")
    t.add_column("Members")
    for i, c in enumerate(comps, start=1):
        t.add_row(str(i), str(c.num_vertices()), str(c.num_edges()), ", ".join(str(x) for x in c))
    console.print(t)
    console.print(f"[bold]{len(comps)}[/bold] component(s)")


@app.command("articulation-points")
def articulation_points_cmd(
    edges_csv: str = typer.Argument(..., help="Path to edge-list CSV (u,v,weight)"),
    method: str = typer.Option("removal", "--method", help="removal or tarjan"),
):
    """List vertices whose removal disconnects the graph."""
    g = _load(edges_csv)
    points = articulation_points(g, method=_check_method(method))
    if not points:
        console.print("[bold green]No articulation points[/bold green]")
        return
    for x in points:
        console.print(f"[yellow]ARTICULATION[/yellow] {x}")


if __name__ == "__main__":
    app()
