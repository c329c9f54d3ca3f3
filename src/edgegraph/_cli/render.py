"""Rich rendering utilities for CLI commands."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from edgegraph._graph import Graph


def render_order_table(order: Sequence[Hashable], console: Console) -> None:
    """Render a topological order as a numbered Rich table.

    Args:
        order: Vertex keys in topological order.
        console: Rich Console to output to.

    """
    if not order:
        console.print("[dim]Graph has no vertices[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Vertex")

    for position, vertex in enumerate(order, start=1):
        table.add_row(str(position), escape(str(vertex)))

    console.print(table)


def render_order_plain(order: Sequence[Hashable], console: Console) -> None:
    """Print a topological order one vertex per line, without markup."""
    for vertex in order:
        console.print(str(vertex), markup=False, highlight=False)


def render_graph_summary(graph: Graph[Hashable], title: str, console: Console) -> None:
    """Render vertex and edge counts of a graph as a Rich panel.

    Args:
        graph: The graph to summarize.
        title: Panel title (usually the DOT file name).
        console: Rich Console to output to.

    """
    sources = sum(1 for vertex in graph if graph.successors(vertex))
    table = Table(show_header=False, box=None)
    table.add_column("Property", style="bold")
    table.add_column("Value", justify="right", style="yellow")
    table.add_row("Vertices", str(len(graph)))
    table.add_row("Edges", str(graph.edge_count))
    table.add_row("Vertices with outgoing edges", str(sources))

    console.print(Panel(table, title=f"[bold]{escape(title)}[/bold]", border_style="cyan"))
