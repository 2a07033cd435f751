"""
shortest_path.py — Single-Source Shortest Paths
================================================
  • dijkstra        – one pair, non-negative weights, binary heap (heapq)
  • bellman_ford    – whole shortest-path tree, tolerates negative weights,
                      detects negative cycles
  • find_all_paths  – every simple path between two nodes, length-bounded

Correctness note: Dijkstra requires non-negative weights.  Rather than
return a silently wrong answer it raises NegativeWeightError when the graph
holds any negative edge; use bellman_ford for those graphs.
"""

import heapq
import itertools
import logging
from typing import Dict, Hashable, List, Optional, Tuple

from graph import Graph, NegativeWeightError
from algorithms.results import PathInfo, ShortestPathResult

logger = logging.getLogger(__name__)

INF = float("inf")


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
def dijkstra(graph: Graph, start: Hashable, end: Hashable) -> ShortestPathResult:
    if not graph.has_node(start) or not graph.has_node(end):
        return ShortestPathResult()
    if graph.has_negative_edges():
        raise NegativeWeightError(
            "Dijkstra requires non-negative edge weights; use bellman_ford instead"
        )

    dist:    Dict[Hashable, float]              = {start: 0}
    parent:  Dict[Hashable, Hashable]           = {}
    visited: set                                = set()
    tie = itertools.count()            # heap entries never compare nodes
    pq: List[Tuple[float, int, Hashable]] = [(0, next(tie), start)]

    while pq:
        d, _, node = heapq.heappop(pq)
        if node in visited:
            continue                   # stale entry
        visited.add(node)
        if node == end:
            break

        for nbr, w in graph.neighbours(node):
            if nbr in visited:
                continue
            new_dist = d + w
            if new_dist < dist.get(nbr, INF):
                dist[nbr]   = new_dist
                parent[nbr] = node
                heapq.heappush(pq, (new_dist, next(tie), nbr))

    if end not in visited:
        logger.debug(f"Dijkstra: {end!r} unreachable from {start!r}")
        return ShortestPathResult()

    return ShortestPathResult(path=_reconstruct(parent, end), distance=dist[end], found=True)


# ---------------------------------------------------------------------------
# Bellman-Ford
# ---------------------------------------------------------------------------
def bellman_ford(graph: Graph, start: Hashable) -> Optional[Dict[Hashable, PathInfo]]:
    """
    Shortest-path tree from `start`, or None when a negative cycle is
    reachable from it.  Unreachable nodes get distance inf and an empty path.
    """
    if not graph.has_node(start):
        return {}

    nodes = graph.nodes
    dist:   Dict[Hashable, float]    = {n: INF for n in nodes}
    parent: Dict[Hashable, Hashable] = {}
    dist[start] = 0

    # snapshot of directed edges; undirected edges are relaxed both ways
    all_edges: List[Tuple[Hashable, Hashable, float]] = []
    for edge in graph.edges:
        all_edges.append((edge.source, edge.target, edge.weight))
        if not graph.directed and edge.source != edge.target:
            all_edges.append((edge.target, edge.source, edge.weight))

    for round_idx in range(1, len(nodes)):
        any_relaxed = False
        for u, v, w in all_edges:
            if dist[u] == INF:
                continue
            if dist[u] + w < dist[v]:
                dist[v]   = dist[u] + w
                parent[v] = u
                any_relaxed = True
        if not any_relaxed:
            logger.debug(f"Bellman-Ford converged after {round_idx} round(s)")
            break

    # detector pass
    for u, v, w in all_edges:
        if dist[u] != INF and dist[u] + w < dist[v]:
            logger.info(f"Bellman-Ford: negative cycle detected via edge {u!r}→{v!r}")
            return None

    return {
        n: PathInfo(distance=dist[n], path=_reconstruct(parent, n) if dist[n] != INF else [])
        for n in nodes
    }


# ---------------------------------------------------------------------------
# All simple paths
# ---------------------------------------------------------------------------
def find_all_paths(
    graph: Graph,
    start: Hashable,
    end: Hashable,
    max_length: int = 10,
) -> List[List[Hashable]]:
    """
    Enumerate simple paths from `start` to `end` by backtracking DFS.
    `max_length` caps the number of nodes per path; longer paths are never
    explored, so the result is only complete up to that bound.
    """
    paths: List[List[Hashable]] = []
    if not graph.has_node(start):
        return paths

    current = [start]
    on_path = {start}

    def extend(node: Hashable) -> None:
        if len(current) > max_length:
            return
        if node == end:
            paths.append(list(current))
            return
        for nbr in graph.get_neighbors(node):
            if nbr in on_path:
                continue
            current.append(nbr)
            on_path.add(nbr)
            extend(nbr)
            on_path.discard(nbr)
            current.pop()

    extend(start)
    return paths


# ---------------------------------------------------------------------------
def _reconstruct(parent: Dict[Hashable, Hashable], target: Hashable) -> List[Hashable]:
    # the start node is the only one without a parent entry
    path = [target]
    while path[-1] in parent:
        path.append(parent[path[-1]])
    path.reverse()
    return path
