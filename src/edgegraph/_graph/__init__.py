"""Graph module providing the edge-list graph store and its algorithms.

This module contains:
- Graph[T]: A generic directed graph built from parallel edge lists
- has_cycle, is_reachable, topological_sort: Traversal and ordering algorithms
"""

from ._algorithms import has_cycle, is_reachable, topological_sort
from ._store import Graph

__all__ = ["Graph", "has_cycle", "is_reachable", "topological_sort"]
