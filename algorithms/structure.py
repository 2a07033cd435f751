"""
structure.py — Structural Analysis
===================================
  • topological_sort                   – Kahn's algorithm (directed only)
  • has_cycle                          – directed: via topological_sort;
                                         undirected: DFS with parent tracking
  • get_connected_components           – BFS partition (undirected only)
  • get_strongly_connected_components  – Kosaraju two-pass (directed only)
  • is_bipartite                       – BFS two-colouring
  • get_articulation_points / get_bridges
                                       – Tarjan low-link (undirected only)
  • is_tree / is_forest

Every DFS in this module runs on an explicit frame stack
(node, neighbour iterator, parent) instead of Python recursion, so deep
graphs (long paths, big chains) never hit the recursion limit.

Calling a directed-only algorithm on an undirected graph (or vice versa)
raises InvalidOperationError.  A cyclic graph handed to topological_sort
is not an error: the answer is None.
"""

import logging
from collections import deque
from typing import Dict, Hashable, Iterator, List, Optional, Set, Tuple

from graph import Edge, Graph
from graph.errors import require_directed, require_undirected
from algorithms.traversal import bfs

logger = logging.getLogger(__name__)

_NO_PARENT = object()


class _Frame:
    """One level of an explicit DFS stack."""

    __slots__ = ("node", "parent", "neighbours")

    def __init__(self, node: Hashable, parent, neighbours: Iterator[Hashable]):
        self.node       = node
        self.parent     = parent
        self.neighbours = neighbours


# ---------------------------------------------------------------------------
# Ordering & cycles
# ---------------------------------------------------------------------------
def topological_sort(graph: Graph) -> Optional[List[Hashable]]:
    require_directed(graph, "Topological sort")

    in_degree: Dict[Hashable, int] = {node: 0 for node in graph.nodes}
    for node in graph.nodes:
        for nbr in graph.get_neighbors(node):
            in_degree[nbr] += 1

    queue = deque(node for node, deg in in_degree.items() if deg == 0)
    order: List[Hashable] = []

    while queue:
        node = queue.popleft()
        order.append(node)
        for nbr in graph.get_neighbors(node):
            in_degree[nbr] -= 1
            if in_degree[nbr] == 0:
                queue.append(nbr)

    if len(order) < graph.size:
        logger.debug(f"Topological sort: cycle present, ordered {len(order)}/{graph.size} nodes")
        return None
    return order


def has_cycle(graph: Graph) -> bool:
    if graph.directed:
        return topological_sort(graph) is None

    visited: Set[Hashable] = set()
    for root in graph.nodes:
        if root in visited:
            continue
        visited.add(root)
        stack = [_Frame(root, _NO_PARENT, iter(graph.get_neighbors(root)))]
        while stack:
            frame = stack[-1]
            for nbr in frame.neighbours:
                if nbr not in visited:
                    visited.add(nbr)
                    stack.append(_Frame(nbr, frame.node, iter(graph.get_neighbors(nbr))))
                    break
                if frame.parent is _NO_PARENT or nbr != frame.parent:
                    return True
            else:
                stack.pop()
    return False


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------
def get_connected_components(graph: Graph) -> List[List[Hashable]]:
    require_undirected(graph, "Connected components")

    visited: Set[Hashable] = set()
    components: List[List[Hashable]] = []
    for node in graph.nodes:
        if node in visited:
            continue
        component = bfs(graph, node)
        visited.update(component)
        components.append(component)
    return components


def get_strongly_connected_components(graph: Graph) -> List[List[Hashable]]:
    """
    Kosaraju:
      1. DFS over the graph recording nodes in finish order.
      2. DFS over the transpose in reverse finish order; each tree is one SCC.
    """
    require_directed(graph, "Strongly connected components")

    # -- pass 1: finish order --
    visited: Set[Hashable] = set()
    finish_order: List[Hashable] = []
    for root in graph.nodes:
        if root in visited:
            continue
        visited.add(root)
        stack: List[Tuple[Hashable, Iterator[Hashable]]] = [(root, iter(graph.get_neighbors(root)))]
        while stack:
            node, neighbours = stack[-1]
            for nbr in neighbours:
                if nbr not in visited:
                    visited.add(nbr)
                    stack.append((nbr, iter(graph.get_neighbors(nbr))))
                    break
            else:
                stack.pop()
                finish_order.append(node)

    # -- pass 2: transpose, reverse finish order --
    transpose = graph.transpose()
    assigned: Set[Hashable] = set()
    components: List[List[Hashable]] = []
    for root in reversed(finish_order):
        if root in assigned:
            continue
        assigned.add(root)
        component = []
        pending = [root]
        while pending:
            node = pending.pop()
            component.append(node)
            for nbr in transpose.get_neighbors(node):
                if nbr not in assigned:
                    assigned.add(nbr)
                    pending.append(nbr)
        components.append(component)

    logger.debug(f"Kosaraju found {len(components)} strongly connected component(s)")
    return components


# ---------------------------------------------------------------------------
# Bipartiteness
# ---------------------------------------------------------------------------
def is_bipartite(graph: Graph) -> bool:
    """Two-colour the graph; edge direction is ignored."""
    if graph.directed:
        links: Dict[Hashable, List[Hashable]] = {node: [] for node in graph.nodes}
        for edge in graph.edges:
            links[edge.source].append(edge.target)
            links[edge.target].append(edge.source)
    else:
        links = {node: graph.get_neighbors(node) for node in graph.nodes}

    colour: Dict[Hashable, int] = {}
    for root in graph.nodes:
        if root in colour:
            continue
        colour[root] = 0
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for nbr in links[node]:
                if nbr not in colour:
                    colour[nbr] = 1 - colour[node]
                    queue.append(nbr)
                elif colour[nbr] == colour[node]:
                    return False
    return True


# ---------------------------------------------------------------------------
# Tarjan low-link: articulation points & bridges
# ---------------------------------------------------------------------------
def _low_link(graph: Graph) -> Tuple[List[Hashable], List[Edge]]:
    """
    One DFS forest computing discovery time / low-link for every node.

    A non-root node u is an articulation point if some DFS child v has
    low[v] >= disc[u]; a root is one if it has more than one DFS child.
    Tree edge (u, v) is a bridge if low[v] > disc[u].
    """
    disc: Dict[Hashable, int] = {}
    low:  Dict[Hashable, int] = {}
    points: Dict[Hashable, None] = {}          # ordered set
    bridges: List[Edge] = []
    clock = 0

    for root in graph.nodes:
        if root in disc:
            continue
        disc[root] = low[root] = clock
        clock += 1
        root_children = 0
        stack = [_Frame(root, _NO_PARENT, iter(graph.get_neighbors(root)))]

        while stack:
            frame = stack[-1]
            node = frame.node
            descended = False
            for nbr in frame.neighbours:
                if nbr not in disc:
                    disc[nbr] = low[nbr] = clock
                    clock += 1
                    if frame.parent is _NO_PARENT:
                        root_children += 1
                    stack.append(_Frame(nbr, node, iter(graph.get_neighbors(nbr))))
                    descended = True
                    break
                if frame.parent is _NO_PARENT or nbr != frame.parent:
                    low[node] = min(low[node], disc[nbr])
            if descended:
                continue

            # node finished: fold its low-link into the parent frame
            stack.pop()
            if not stack:
                continue
            up = stack[-1].node
            low[up] = min(low[up], low[node])
            if stack[-1].parent is not _NO_PARENT and low[node] >= disc[up]:
                points[up] = None
            if low[node] > disc[up]:
                bridges.append(Edge(up, node, graph.get_weight(up, node)))

        if root_children > 1:
            points[root] = None

    return list(points), bridges


def get_articulation_points(graph: Graph) -> List[Hashable]:
    require_undirected(graph, "Articulation points")
    return _low_link(graph)[0]


def get_bridges(graph: Graph) -> List[Edge]:
    require_undirected(graph, "Bridges")
    return _low_link(graph)[1]


# ---------------------------------------------------------------------------
# Trees & forests
# ---------------------------------------------------------------------------
def is_tree(graph: Graph) -> bool:
    """Connected, acyclic, undirected.  The empty graph counts as a tree."""
    if graph.directed:
        return False
    if graph.size == 0:
        return True
    if graph.edge_count() != graph.size - 1:
        return False
    return len(get_connected_components(graph)) == 1 and not has_cycle(graph)


def is_forest(graph: Graph) -> bool:
    if graph.directed:
        return False
    return not has_cycle(graph)
