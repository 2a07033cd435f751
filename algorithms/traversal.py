"""
traversal.py — BFS / DFS
=========================
Three traversals over a Graph, all returning the visited nodes in visit
order:

  • bfs            – level order, FIFO frontier (collections.deque)
  • dfs            – recursive; bounded by Python's recursion limit
  • dfs_iterative  – explicit stack, same left-to-right preference as dfs;
                     use this one on deep graphs

Shared options:
  • visit(node, depth) – called once per newly visited node.  Returning
                         False stops the traversal (the node itself is
                         still part of the result).
  • max_depth          – nodes further than this from `start` are skipped.
                         None means unbounded.
"""

import logging
from collections import deque
from typing import Callable, Hashable, List, Optional, Set

from graph import Graph

logger = logging.getLogger(__name__)

Visitor = Callable[[Hashable, int], Optional[bool]]


def _too_deep(depth: int, max_depth: Optional[int]) -> bool:
    return max_depth is not None and depth > max_depth


# ---------------------------------------------------------------------------
# Breadth-first
# ---------------------------------------------------------------------------
def bfs(
    graph: Graph,
    start: Hashable,
    visit: Optional[Visitor] = None,
    max_depth: Optional[int] = None,
) -> List[Hashable]:
    if not graph.has_node(start):
        return []

    visited: Set[Hashable] = set()
    order:   List[Hashable] = []
    queue = deque([(start, 0)])

    while queue:
        node, depth = queue.popleft()
        if node in visited or _too_deep(depth, max_depth):
            continue
        visited.add(node)
        order.append(node)

        if visit is not None and visit(node, depth) is False:
            logger.debug(f"BFS from {start!r} stopped by visitor at {node!r}")
            break

        for nbr in graph.get_neighbors(node):
            if nbr not in visited:
                queue.append((nbr, depth + 1))

    return order


# ---------------------------------------------------------------------------
# Depth-first (recursive)
# ---------------------------------------------------------------------------
def dfs(
    graph: Graph,
    start: Hashable,
    visit: Optional[Visitor] = None,
    max_depth: Optional[int] = None,
) -> List[Hashable]:
    """
    Recursive DFS.  Recursion depth grows with the longest simple path
    explored, so very deep graphs should use `dfs_iterative`.
    """
    if not graph.has_node(start):
        return []

    visited: Set[Hashable] = set()
    order:   List[Hashable] = []

    def traverse(node: Hashable, depth: int) -> bool:
        # returns False once the visitor asked to stop
        if node in visited or _too_deep(depth, max_depth):
            return True
        visited.add(node)
        order.append(node)

        if visit is not None and visit(node, depth) is False:
            return False

        for nbr in graph.get_neighbors(node):
            if not traverse(nbr, depth + 1):
                return False
        return True

    traverse(start, 0)
    return order


# ---------------------------------------------------------------------------
# Depth-first (explicit stack)
# ---------------------------------------------------------------------------
def dfs_iterative(
    graph: Graph,
    start: Hashable,
    visit: Optional[Visitor] = None,
    max_depth: Optional[int] = None,
) -> List[Hashable]:
    """
    Mark-on-pop DFS.  Neighbours are pushed in reverse so the first
    neighbour is popped first, matching the recursive variant.
    """
    if not graph.has_node(start):
        return []

    visited: Set[Hashable] = set()
    order:   List[Hashable] = []
    stack = [(start, 0)]

    while stack:
        node, depth = stack.pop()
        if node in visited or _too_deep(depth, max_depth):
            continue
        visited.add(node)
        order.append(node)

        if visit is not None and visit(node, depth) is False:
            logger.debug(f"DFS from {start!r} stopped by visitor at {node!r}")
            break

        for nbr in reversed(graph.get_neighbors(node)):
            if nbr not in visited:
                stack.append((nbr, depth + 1))

    return order
