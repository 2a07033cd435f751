"""
results.py — Algorithm Result Records
======================================
Frozen snapshots returned by the path-finding and spanning-tree
algorithms.  The algorithm is the only writer; callers are pure readers.

"No valid answer" (negative cycle, disconnected graph, …) is never one of
these records — those algorithms return None instead.
"""

from dataclasses import dataclass, field
from typing import Hashable, List

from graph import Edge


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Attributes:
        path     : nodes from start to end inclusive; [] when not found.
        distance : total weight of `path`; inf when not found.
        found    : False when end is unreachable or either endpoint is missing.
    """

    path:     List[Hashable] = field(default_factory=list)
    distance: float          = float("inf")
    found:    bool           = False


@dataclass(frozen=True)
class PathInfo:
    """One entry of a single-source shortest-path tree (Bellman-Ford)."""

    distance: float
    path:     List[Hashable] = field(default_factory=list)


@dataclass(frozen=True)
class MSTResult:
    edges:  List[Edge] = field(default_factory=list)
    weight: float      = 0
