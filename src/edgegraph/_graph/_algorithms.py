"""Traversal and ordering algorithms over a Graph."""

import logging
from collections import deque
from collections.abc import Hashable
from typing import TypeVar
from enum import IntEnum

from edgegraph._errors import CyclicGraphError

from ._store import Graph

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class _Color(IntEnum):
    WHITE = 0  # not visited
    GRAY = 1  # on the current DFS path
    BLACK = 2  # fully explored


def has_cycle(graph: Graph[T]) -> bool:
    """Check whether the graph contains a directed cycle.

    Runs one depth-first search over every vertex, in insertion order, using
    an explicit stack so that long chains do not hit the recursion limit.
    An edge that leads back to a vertex still on the current search path
    closes a cycle. A self-loop is such an edge.

    Args:
        graph: The graph to inspect.

    Returns:
        True if at least one directed cycle exists, False otherwise.

    Example:
        >>> has_cycle(Graph.from_edge_lists(["a", "b", "c"], ["b", "c", "a"]))
        True

    """
    color = [_Color.WHITE] * len(graph)

    for root in range(len(graph)):
        if color[root] != _Color.WHITE:
            continue

        # Each frame is (vertex, position of the next neighbor to visit)
        color[root] = _Color.GRAY
        stack: list[tuple[int, int]] = [(root, 0)]
        while stack:
            vertex, position = stack[-1]
            neighbors = graph.neighbors(vertex)
            if position == len(neighbors):
                color[vertex] = _Color.BLACK
                stack.pop()
                continue

            stack[-1] = (vertex, position + 1)
            neighbor = neighbors[position]
            if color[neighbor] == _Color.GRAY:
                logger.debug(f"Back edge {graph.key(vertex)!r} -> {graph.key(neighbor)!r} closes a cycle")
                return True
            if color[neighbor] == _Color.WHITE:
                color[neighbor] = _Color.GRAY
                stack.append((neighbor, 0))

    return False


def is_reachable(graph: Graph[T], start: T, destination: T) -> bool:
    """Check whether a path of one or more edges leads from start to destination.

    Breadth-first search from ``start``. There is no implicit zero-length
    path: ``is_reachable(g, v, v)`` is True only when a cycle or self-loop
    leads back to ``v``.

    Args:
        graph: The graph to search.
        start: Key of the vertex the path starts at.
        destination: Key of the vertex the path must reach.

    Returns:
        True if destination can be reached from start, False otherwise.

    Raises:
        VertexNotFoundError: If start or destination is not a vertex of the graph.

    """
    start_index = graph.index_of(start)
    destination_index = graph.index_of(destination)

    seen = [False] * len(graph)
    queue = deque([start_index])
    while queue:
        vertex = queue.popleft()
        for neighbor in graph.neighbors(vertex):
            if neighbor == destination_index:
                return True
            if not seen[neighbor]:
                seen[neighbor] = True
                queue.append(neighbor)

    return False


def topological_sort(graph: Graph[T]) -> list[T]:
    """Sort the vertices topologically (every edge points forward in the result).

    Kahn's algorithm. Vertices without incoming edges are taken in insertion
    order, so the result is deterministic for a given graph, but any valid
    order is a correct answer.

    Args:
        graph: The graph to sort.

    Returns:
        List of all vertex keys such that for every edge ``u -> v``,
        ``u`` appears before ``v``.

    Raises:
        CyclicGraphError: If the graph contains a cycle. No partial order is
            returned.

    Example:
        >>> topological_sort(Graph.from_edge_lists(["a", "b"], ["b", "c"]))
        ['a', 'b', 'c']

    """
    # Calculate in-degree for each vertex, parallel edges included
    indegree = [0] * len(graph)
    for vertex in range(len(graph)):
        for neighbor in graph.neighbors(vertex):
            indegree[neighbor] += 1

    # Start with vertices that have no predecessors (in-degree 0)
    queue = deque(vertex for vertex, deg in enumerate(indegree) if deg == 0)
    order: list[T] = []

    while queue:
        vertex = queue.popleft()
        order.append(graph.key(vertex))
        for neighbor in graph.neighbors(vertex):
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                queue.append(neighbor)

    if len(order) != len(graph):
        raise CyclicGraphError(len(order), len(graph))

    return order
