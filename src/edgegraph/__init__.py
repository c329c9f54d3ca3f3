"""Cycle detection, reachability and topological ordering for edge-list graphs."""

__all__ = [
    "CyclicGraphError",
    "DotFormatError",
    "Graph",
    "GraphError",
    "InputLengthMismatchError",
    "VertexNotFoundError",
    "are_connected",
    "has_cycle",
    "is_cyclic",
    "is_reachable",
    "parse_dot",
    "read_dot",
    "sort",
    "topological_sort",
]

from ._dot import parse_dot, read_dot
from ._errors import (
    CyclicGraphError,
    DotFormatError,
    GraphError,
    InputLengthMismatchError,
    VertexNotFoundError,
)
from ._graph import Graph, has_cycle, is_reachable, topological_sort
from ._utility import are_connected, is_cyclic, sort
