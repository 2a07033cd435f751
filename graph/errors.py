"""
errors.py — Graph Error Hierarchy
==================================
Absence is not an error: queries against missing nodes / edges return
sentinels (False, None, []).  The classes here cover the two cases that
DO raise:

  • InvalidOperationError – an algorithm was called on the wrong kind of
                            graph (directed-only on undirected, …)
  • NegativeWeightError   – Dijkstra was handed a negative edge weight
  • GraphFormatError      – a record / matrix at the serialisation
                            boundary is malformed
"""


class GraphError(Exception):
    """Base class for everything the graph engine raises."""


class InvalidOperationError(GraphError):
    pass


class NegativeWeightError(GraphError, ValueError):
    pass


class GraphFormatError(GraphError, ValueError):
    pass


# ---------------------------------------------------------------------------
# Directedness guards
# ---------------------------------------------------------------------------
def require_directed(graph, operation: str) -> None:
    if not graph.directed:
        raise InvalidOperationError(f"{operation} requires a directed graph")


def require_undirected(graph, operation: str) -> None:
    if graph.directed:
        raise InvalidOperationError(f"{operation} requires an undirected graph")
