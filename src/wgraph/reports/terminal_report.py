from __future__ import annotations

from rich.console import Console
from rich.table import Table

from wgraph.algorithms import UNREACHED


def print_terminal_summary(report, console: Console | None = None) -> None:
    """
    Prints a deterministic summary of a GraphReport to the terminal.
    Distances and components get their own tables when present.
    """
    console = console or Console()

    table = Table(title="Graph Summary")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Vertices", str(report.num_vertices))
    table.add_row("Edges", str(report.num_edges))
    table.add_row("Total weight", str(report.total_weight))
    table.add_row("Components", str(report.num_components))
    table.add_row("Articulation points", str(len(report.articulation_points)))

    console.print(table)

    if report.distances is not None:
        t = Table(title=f"Distances from {report.source}")
        t.add_column("Vertex")
        t.add_column("Distance", justify="right")
        for v, d in report.distances.items():
            t.add_row(str(v), "unreached" if d == UNREACHED else str(int(d)))
        console.print(t)

    if report.components:
        t = Table(title="Connected Components")
        t.add_column("#", justify="right")
        t.add_column("Size", justify="right")
        t.add_column("Vertices")
        for i, comp in enumerate(report.components, start=1):
            t.add_row(str(i), str(len(comp)), ", ".join(str(x) for x in comp))
        console.print(t)

    if report.articulation_points:
        aps = ", ".join(str(x) for x in report.articulation_points)
        console.print(f"[bold yellow]Single points of failure:[/bold yellow] {aps}")

    if report.is_connected:
        console.print("[bold green]Graph is connected[/bold green]")
    else:
        console.print("[bold red]Graph is disconnected[/bold red]")
