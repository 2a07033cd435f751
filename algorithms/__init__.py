"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engine exposes by name.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, params, required, tags, requires, …),
        …
    }

Every `fn` takes the graph as its first positional argument followed by
the keyword arguments named in `params`.  The HTTP layer uses `params` /
`required` to validate requests before calling `fn`; adding an algorithm
is: write the function, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.traversal     import bfs, dfs, dfs_iterative
from algorithms.shortest_path import dijkstra, bellman_ford, find_all_paths
from algorithms.structure     import (
    topological_sort,
    has_cycle,
    get_connected_components,
    get_strongly_connected_components,
    is_bipartite,
    get_articulation_points,
    get_bridges,
    is_tree,
    is_forest,
)
from algorithms.mst           import UnionFind, kruskal_mst, prim_mst
from algorithms.results       import ShortestPathResult, PathInfo, MSTResult


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    label:            str                    # human label, e.g. "Breadth-First Search"
    fn:               Callable               # fn(graph, **params)
    params:           List[str] = field(default_factory=list)   # accepted keyword args
    required:         List[str] = field(default_factory=list)   # subset of params that must be given
    tags:             List[str] = field(default_factory=list)   # e.g. ["traversal"]
    requires:         str       = ""         # "directed" / "undirected" / "" (either)
    complexity_time:  str       = ""         # e.g. "O(V + E)"
    complexity_space: str       = ""         # e.g. "O(V)"
    description:      str       = ""         # one-liner

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "params":           list(self.params),
            "required":         list(self.required),
            "tags":             list(self.tags),
            "requires":         self.requires,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=bfs,
        params=["start", "max_depth"], required=["start"],
        tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Level-order expansion from a start node.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search (recursive)", fn=dfs,
        params=["start", "max_depth"], required=["start"],
        tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Bounded by the recursion limit.",
    ),

    "dfs_iterative": AlgoInfo(
        key="dfs_iterative", label="Depth-First Search (iterative)", fn=dfs_iterative,
        params=["start", "max_depth"], required=["start"],
        tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V + E)",
        description="Explicit-stack DFS, safe on deep graphs.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=dijkstra,
        params=["start", "end"], required=["start", "end"],
        tags=["weighted", "shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily settles the closest node. Rejects negative weights.",
    ),

    "bellman_ford": AlgoInfo(
        key="bellman_ford", label="Bellman–Ford", fn=bellman_ford,
        params=["start"], required=["start"],
        tags=["weighted", "shortest-path", "negative-edges"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Handles negative edges. Returns null on a negative cycle.",
    ),

    "find_all_paths": AlgoInfo(
        key="find_all_paths", label="All Simple Paths", fn=find_all_paths,
        params=["start", "end", "max_length"], required=["start", "end"],
        tags=["paths"],
        complexity_time="O(V!) worst case", complexity_space="O(V)",
        description="Every simple path up to max_length nodes.",
    ),

    "topological_sort": AlgoInfo(
        key="topological_sort", label="Topological Sort", fn=topological_sort,
        tags=["ordering"], requires="directed",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Kahn's algorithm. Null when the graph has a cycle.",
    ),

    "has_cycle": AlgoInfo(
        key="has_cycle", label="Cycle Detection", fn=has_cycle,
        tags=["structure"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Kahn for directed graphs, parent-tracking DFS for undirected.",
    ),

    "connected_components": AlgoInfo(
        key="connected_components", label="Connected Components", fn=get_connected_components,
        tags=["components"], requires="undirected",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Partition of the nodes by reachability.",
    ),

    "strongly_connected_components": AlgoInfo(
        key="strongly_connected_components", label="Strongly Connected Components",
        fn=get_strongly_connected_components,
        tags=["components"], requires="directed",
        complexity_time="O(V + E)", complexity_space="O(V + E)",
        description="Kosaraju two-pass DFS over the graph and its transpose.",
    ),

    "is_bipartite": AlgoInfo(
        key="is_bipartite", label="Bipartite Check", fn=is_bipartite,
        tags=["structure"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="BFS two-colouring, edge direction ignored.",
    ),

    "articulation_points": AlgoInfo(
        key="articulation_points", label="Articulation Points", fn=get_articulation_points,
        tags=["structure", "connectivity"], requires="undirected",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Cut vertices via Tarjan low-link.",
    ),

    "bridges": AlgoInfo(
        key="bridges", label="Bridges", fn=get_bridges,
        tags=["structure", "connectivity"], requires="undirected",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Cut edges via Tarjan low-link.",
    ),

    "is_tree": AlgoInfo(
        key="is_tree", label="Tree Check", fn=is_tree,
        tags=["structure"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Connected and acyclic undirected graph.",
    ),

    "is_forest": AlgoInfo(
        key="is_forest", label="Forest Check", fn=is_forest,
        tags=["structure"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Acyclic undirected graph.",
    ),

    "kruskal_mst": AlgoInfo(
        key="kruskal_mst", label="Kruskal MST", fn=kruskal_mst,
        tags=["weighted", "mst"], requires="undirected",
        complexity_time="O(E log E)", complexity_space="O(V + E)",
        description="Sorted edges + union-find. Null when disconnected.",
    ),

    "prim_mst": AlgoInfo(
        key="prim_mst", label="Prim MST", fn=prim_mst,
        params=["start"],
        tags=["weighted", "mst"], requires="undirected",
        complexity_time="O(E log V)", complexity_space="O(V + E)",
        description="Grows one tree from a start node. Null when disconnected.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo", "REGISTRY", "get_algorithm", "list_algorithms", "algorithms_by_tag",
    "bfs", "dfs", "dfs_iterative",
    "dijkstra", "bellman_ford", "find_all_paths",
    "topological_sort", "has_cycle", "get_connected_components",
    "get_strongly_connected_components", "is_bipartite",
    "get_articulation_points", "get_bridges", "is_tree", "is_forest",
    "UnionFind", "kruskal_mst", "prim_mst",
    "ShortestPathResult", "PathInfo", "MSTResult",
]
