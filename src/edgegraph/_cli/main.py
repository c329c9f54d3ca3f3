import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from edgegraph._dot import read_dot
from edgegraph._errors import CyclicGraphError, DotFormatError, VertexNotFoundError
from edgegraph._graph import Graph, has_cycle, is_reachable, topological_sort

from .config import ConfigError, EdgegraphConfig, get_config
from .render import render_graph_summary, render_order_plain, render_order_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

# Exit code for unusable input (bad DOT file, bad config, unknown vertex)
EXIT_INPUT_ERROR = 2

DotFileArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to DOT file (defaults to [tool.edgegraph].graph in pyproject.toml)"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Edgegraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]✗ {escape(message)}[/red]")
    return typer.Exit(code=EXIT_INPUT_ERROR)


def _get_config() -> EdgegraphConfig:
    try:
        return get_config()
    except ConfigError as e:
        raise _fail(str(e)) from e


def _resolve_dot_file(dot_file: Path | None) -> tuple[Path, EdgegraphConfig | None]:
    """Return the DOT file to read, falling back to the configured one.

    The config is only loaded when no DOT file is given; it is returned
    alongside the path in that case and is None otherwise.
    """
    if dot_file is not None:
        return dot_file, None

    config = _get_config()
    if config.graph is None:
        msg = "No DOT file given and no [tool.edgegraph].graph configured"
        raise _fail(msg)
    logger.debug(f"Using DOT file from config: {config.graph}")
    return config.graph, config


def _load_graph(dot_file: Path | None) -> tuple[Path, Graph[str], EdgegraphConfig | None]:
    """Read a DOT file and build the graph it describes."""
    path, config = _resolve_dot_file(dot_file)
    err_console.print(f"[cyan]Loading graph from:[/cyan] {path}")

    try:
        sources, destinations = read_dot(path)
    except FileNotFoundError as e:
        msg = f"DOT file not found: {path}"
        raise _fail(msg) from e
    except OSError as e:
        msg = f"Cannot read DOT file ({e.strerror or e}): {path}"
        raise _fail(msg) from e
    except UnicodeDecodeError as e:
        msg = f"DOT file is not valid UTF-8 ({e.reason} at byte {e.start}): {path}"
        raise _fail(msg) from e
    except DotFormatError as e:
        raise _fail(str(e)) from e

    return path, Graph.from_edge_lists(sources, destinations), config


@app.command()
def cyclic(dot_file: DotFileArgument = None) -> None:
    """Check whether the graph contains a cycle (exit 1 if it does)."""
    _, graph, _ = _load_graph(dot_file)

    if has_cycle(graph):
        out_console.print("[yellow]Graph is cyclic[/yellow]")
        raise typer.Exit(code=1)

    out_console.print("[green]Graph is acyclic[/green]")


@app.command()
def connected(
    start: Annotated[str, typer.Argument(help="Vertex the path starts at")],
    destination: Annotated[str, typer.Argument(help="Vertex the path must reach")],
    dot_file: DotFileArgument = None,
) -> None:
    """Check whether a path leads from START to DESTINATION (exit 1 if not)."""
    _, graph, _ = _load_graph(dot_file)

    try:
        reachable = is_reachable(graph, start, destination)
    except VertexNotFoundError as e:
        raise _fail(str(e)) from e

    if not reachable:
        out_console.print(f"[yellow]No path from {escape(start)} to {escape(destination)}[/yellow]")
        raise typer.Exit(code=1)

    out_console.print(f"[green]{escape(start)} reaches {escape(destination)}[/green]")


@app.command(name="sort")
def sort_command(
    dot_file: DotFileArgument = None,
    *,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Print one vertex per line instead of a table"),
    ] = False,
) -> None:
    """Print the vertices in topological order (exit 1 if the graph is cyclic)."""
    _, graph, config = _load_graph(dot_file)

    try:
        order = topological_sort(graph)
    except CyclicGraphError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if plain or (config is not None and config.plain):
        render_order_plain(order, out_console)
    else:
        render_order_table(order, out_console)


@app.command()
def info(dot_file: DotFileArgument = None) -> None:
    """Show vertex and edge counts of the graph."""
    path, graph, _ = _load_graph(dot_file)
    render_graph_summary(graph, path.name, out_console)


def main() -> None:
    app()
