"""Generic directed graph store built from parallel edge lists."""

import logging
from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, Self, TypeVar

from edgegraph._errors import InputLengthMismatchError, VertexNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


@dataclass(slots=True)
class Graph(Generic[T]):
    """A directed, unweighted graph over hashable vertex keys.

    Every distinct key is assigned a dense integer index the first time it is
    referenced, and adjacency lists store those indices. The vertex keys are
    the only identity the graph knows about: two keys that compare equal (and
    hash equally) name the same vertex.

    Edges are not deduplicated. Adding the same pair twice creates two
    adjacency entries, which the algorithms treat as two parallel edges.
    Self-loops are allowed.

    The graph holds no traversal state, so any number of queries may run on
    the same instance one after another. Mutating it while a query is running
    is not supported.

    Example:
        >>> graph = Graph.from_edge_lists(["a", "b"], ["b", "c"])
        >>> graph.vertices
        ('a', 'b', 'c')
        >>> graph.successors("a")
        ('b',)

    """

    _index: dict[T, int] = field(default_factory=dict)
    _keys: list[T] = field(default_factory=list)
    _adjacency: list[list[int]] = field(default_factory=list)
    _edge_count: int = 0

    @classmethod
    def from_edge_lists(cls, sources: Sequence[T], destinations: Sequence[T]) -> Self:
        """Build a graph from parallel source and destination sequences.

        The edge at position ``i`` goes from ``sources[i]`` to ``destinations[i]``.

        Args:
            sources: Source vertex of each edge.
            destinations: Destination vertex of each edge.

        Returns:
            A new Graph containing every referenced vertex and every edge.

        Raises:
            InputLengthMismatchError: If the two sequences differ in length.
                Nothing is built in that case.

        """
        if len(sources) != len(destinations):
            raise InputLengthMismatchError(len(sources), len(destinations))

        graph = cls()
        for src, dst in zip(sources, destinations, strict=True):
            graph.add_edge(src, dst)
        logger.debug(f"Built graph with {len(graph)} vertices and {graph.edge_count} edges")
        return graph

    def add_vertex(self, key: T) -> int:
        """Add a vertex if it is not present yet and return its index."""
        index = self._index.get(key)
        if index is None:
            index = len(self._keys)
            self._index[key] = index
            self._keys.append(key)
            self._adjacency.append([])
        return index

    def add_edge(self, src: T, dst: T) -> None:
        """Add a directed edge ``src -> dst``, creating missing vertices.

        Calling this twice with the same pair adds two parallel edges.
        """
        src_index = self.add_vertex(src)
        dst_index = self.add_vertex(dst)
        self._adjacency[src_index].append(dst_index)
        self._edge_count += 1

    def get(self, key: T) -> int | None:
        """Return the index of a vertex, or None if it does not exist."""
        return self._index.get(key)

    def index_of(self, key: T) -> int:
        """Return the index of a vertex.

        Raises:
            VertexNotFoundError: If no vertex with this key exists.

        """
        index = self._index.get(key)
        if index is None:
            raise VertexNotFoundError(key)
        return index

    def key(self, index: int) -> T:
        return self._keys[index]

    def neighbors(self, index: int) -> list[int]:
        return self._adjacency[index]

    @property
    def vertices(self) -> tuple[T, ...]:
        """All vertex keys, in order of first reference."""
        return tuple(self._keys)

    @property
    def edge_count(self) -> int:
        """Number of edges, counting parallel edges separately."""
        return self._edge_count

    def successors(self, key: T) -> tuple[T, ...]:
        """Destinations of the outgoing edges of a vertex, duplicates included.

        Raises:
            VertexNotFoundError: If no vertex with this key exists.

        """
        return tuple(self._keys[i] for i in self._adjacency[self.index_of(key)])

    def edges(self) -> Iterator[tuple[T, T]]:
        """Iterate over all ``(src, dst)`` edges, grouped by source vertex."""
        for src_index, targets in enumerate(self._adjacency):
            src = self._keys[src_index]
            for dst_index in targets:
                yield src, self._keys[dst_index]

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        """Check if a vertex is in the graph."""
        return key in self._index

    def __iter__(self) -> Iterator[T]:
        return iter(self._keys)
