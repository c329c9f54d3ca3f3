"""Exceptions raised by edgegraph."""

from collections.abc import Hashable


class GraphError(Exception):
    """Base class for all edgegraph errors."""


class InputLengthMismatchError(GraphError, ValueError):
    """Raised when the sources and destinations sequences differ in length."""

    def __init__(self, sources_length: int, destinations_length: int) -> None:
        self.sources_length = sources_length
        self.destinations_length = destinations_length
        super().__init__(
            f"The number of sources ({sources_length}) and destinations ({destinations_length}) do not match",
        )


class VertexNotFoundError(GraphError, KeyError):
    """Raised when a vertex key does not exist in the graph."""

    def __init__(self, vertex: Hashable) -> None:
        self.vertex = vertex
        super().__init__(vertex)

    def __str__(self) -> str:
        return f"Vertex {self.vertex!r} does not exist in the graph"


class CyclicGraphError(GraphError, ValueError):
    """Raised when a topological order is requested for a graph with a cycle."""

    def __init__(self, sorted_count: int, vertex_count: int) -> None:
        self.sorted_count = sorted_count
        self.vertex_count = vertex_count
        super().__init__(
            f"Cycle detected in graph: only {sorted_count} of {vertex_count} vertices could be ordered",
        )


class DotFormatError(GraphError, ValueError):
    """Raised when DOT input does not follow the supported subset."""
