"""Edge-list entry points: each call builds its own graph and queries it."""

from collections.abc import Hashable, Sequence
from typing import TypeVar

from ._graph import Graph, has_cycle, is_reachable, topological_sort

T = TypeVar("T", bound=Hashable)


def is_cyclic(sources: Sequence[T], destinations: Sequence[T]) -> bool:
    """Determine whether the graph described by the edge lists contains a cycle.

    Args:
        sources: Source vertex of each edge.
        destinations: Destination vertex of each edge.

    Returns:
        True if the graph has at least one directed cycle.

    Raises:
        InputLengthMismatchError: If the sequences differ in length.

    """
    return has_cycle(Graph.from_edge_lists(sources, destinations))


def are_connected(
    sources: Sequence[T],
    destinations: Sequence[T],
    start: T,
    destination: T,
) -> bool:
    """Determine whether a path of one or more edges leads from start to destination.

    Args:
        sources: Source vertex of each edge.
        destinations: Destination vertex of each edge.
        start: The vertex the path starts at.
        destination: The vertex the path must reach.

    Returns:
        True if destination is reachable from start.

    Raises:
        InputLengthMismatchError: If the sequences differ in length.
        VertexNotFoundError: If start or destination appears in neither sequence.

    """
    return is_reachable(Graph.from_edge_lists(sources, destinations), start, destination)


def sort(sources: Sequence[T], destinations: Sequence[T]) -> list[T]:
    """Return the vertices of the graph in a topological order.

    Args:
        sources: Source vertex of each edge.
        destinations: Destination vertex of each edge.

    Returns:
        Every vertex exactly once, each edge pointing from an earlier to a later one.

    Raises:
        InputLengthMismatchError: If the sequences differ in length.
        CyclicGraphError: If the graph contains a cycle.

    """
    return topological_sort(Graph.from_edge_lists(sources, destinations))
