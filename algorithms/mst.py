"""
mst.py — Minimum Spanning Trees
================================
  • kruskal_mst  – sort edges by weight, greedily join components
                   (UnionFind with path compression + union by rank)
  • prim_mst     – grow one tree from a start node, always taking the
                   lightest frontier edge (heapq frontier)

Both are undirected-only and both work on a snapshot taken when they are
called (edge list for Kruskal, adjacency for Prim), so the live graph is
never re-read mid-computation.  A graph that cannot be spanned (it is
disconnected, or empty) yields None.
"""

import heapq
import itertools
import logging
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from graph import Edge, Graph
from graph.errors import require_undirected
from algorithms.results import MSTResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Union-Find
# ---------------------------------------------------------------------------
class UnionFind:
    """Disjoint sets over hashable items."""

    def __init__(self, items: Iterable[Hashable] = ()):
        self._parent: Dict[Hashable, Hashable] = {}
        self._rank:   Dict[Hashable, int]      = {}
        for item in items:
            self.add(item)

    def add(self, item: Hashable) -> None:
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item]   = 0

    def find(self, item: Hashable) -> Hashable:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        # path compression
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets holding a and b.  False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        rank_a, rank_b = self._rank[root_a], self._rank[root_b]
        if rank_a < rank_b:
            self._parent[root_a] = root_b
        elif rank_a > rank_b:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] = rank_a + 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)


# ---------------------------------------------------------------------------
# Kruskal
# ---------------------------------------------------------------------------
def kruskal_mst(graph: Graph) -> Optional[MSTResult]:
    require_undirected(graph, "MST")

    nodes = graph.nodes
    edges = sorted(graph.edges, key=lambda e: e.weight)    # snapshot
    sets = UnionFind(nodes)

    chosen: List[Edge] = []
    total = 0
    for edge in edges:
        if len(chosen) == len(nodes) - 1:
            break
        if sets.union(edge.source, edge.target):
            chosen.append(edge)
            total += edge.weight

    if not nodes or len(chosen) != len(nodes) - 1:
        logger.info(f"Kruskal: graph with {len(nodes)} node(s) cannot be spanned")
        return None
    return MSTResult(edges=chosen, weight=total)


# ---------------------------------------------------------------------------
# Prim
# ---------------------------------------------------------------------------
def prim_mst(graph: Graph, start: Optional[Hashable] = None) -> Optional[MSTResult]:
    """
    Default start is the first node inserted.  An unknown `start` yields None.
    """
    require_undirected(graph, "MST")

    # snapshot: {node: [(nbr, weight)]}
    adjacency: Dict[Hashable, List[Tuple[Hashable, float]]] = {
        node: graph.neighbours(node) for node in graph.nodes
    }
    if not adjacency:
        return None
    if start is None:
        start = next(iter(adjacency))
    elif start not in adjacency:
        return None

    tie = itertools.count()
    frontier: List[Tuple[float, int, Hashable, Hashable]] = []

    def push_edges(node: Hashable) -> None:
        for nbr, w in adjacency[node]:
            if nbr not in in_tree:
                heapq.heappush(frontier, (w, next(tie), node, nbr))

    in_tree = {start}
    chosen: List[Edge] = []
    total = 0
    push_edges(start)

    while frontier and len(in_tree) < len(adjacency):
        w, _, src, dst = heapq.heappop(frontier)
        if dst in in_tree:
            continue
        in_tree.add(dst)
        chosen.append(Edge(src, dst, w))
        total += w
        push_edges(dst)

    if len(chosen) != len(adjacency) - 1:
        logger.info(f"Prim: reached {len(in_tree)}/{len(adjacency)} nodes from {start!r}, graph is disconnected")
        return None
    return MSTResult(edges=chosen, weight=total)
