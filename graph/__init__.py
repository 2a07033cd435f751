"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Edge, GraphStats
    from graph import create_directed_graph, create_undirected_graph, from_edge_list
    from graph import GraphError, InvalidOperationError, NegativeWeightError, GraphFormatError
"""

from graph.errors import (
    GraphError,
    InvalidOperationError,
    NegativeWeightError,
    GraphFormatError,
)
from graph.edge  import Edge
from graph.graph import (
    Graph,
    GraphStats,
    INF,
    create_directed_graph,
    create_undirected_graph,
    from_edge_list,
)

__all__ = [
    "Graph",                 "GraphStats",
    "Edge",                  "INF",
    "create_directed_graph", "create_undirected_graph",
    "from_edge_list",
    "GraphError",            "InvalidOperationError",
    "NegativeWeightError",   "GraphFormatError",
]
