"""
graph.py — Graph Container & Serialisation
===========================================
Single source of truth for a graph.  Every algorithm in `algorithms/`
talks to this object through its query methods only.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / has)
  2. Adjacency queries                      (neighbours, degrees, weights)
  3. Whole-graph helpers                    (stats, clone, transpose)
  4. Import / export                        (adjacency matrix, adjacency
                                             list text, interchange record)

Design decisions:
  - Adjacency is a "map of maps":  `_adj[node] → {neighbour: weight}`.
    Plain dicts keep insertion order, so node / neighbour iteration is
    deterministic and matches the order the caller built the graph in.
  - Undirected edges are stored twice (u→v and v→u) with the same weight;
    every mutator keeps the mirror in sync.
  - `directed` is fixed at construction and exposed read-only.
  - Queries on absent nodes / edges return sentinels, never raise.
"""

import logging
import math
from dataclasses import dataclass
from typing import (
    Any, Dict, Hashable, Iterable, List, Optional, Sequence, Set, Tuple, Union
)

from graph.edge import Edge
from graph.errors import GraphFormatError

logger = logging.getLogger(__name__)

INF = float("inf")


@dataclass(frozen=True)
class GraphStats:
    nodes:          int
    edges:          int
    directed:       bool
    density:        float
    average_degree: float


class Graph:
    """
    Attributes:
        directed : bool – fixed at construction
        _adj     : {node: {neighbour: weight}}
    """

    def __init__(self, directed: bool = False):
        self._directed: bool = bool(directed)
        self._adj: Dict[Hashable, Dict[Hashable, float]] = {}

    @property
    def directed(self) -> bool:
        return self._directed

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Hashable) -> None:
        self._adj.setdefault(node, {})

    def remove_node(self, node: Hashable) -> bool:
        """Remove `node` and every edge touching it.  False if absent."""
        if node not in self._adj:
            return False
        for neighbours in self._adj.values():
            neighbours.pop(node, None)
        del self._adj[node]
        return True

    def has_node(self, node: Hashable) -> bool:
        return node in self._adj

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, source: Hashable, target: Hashable, weight: float = 1) -> None:
        """Add (or overwrite) an edge.  Missing endpoints are created."""
        self.add_node(source)
        self.add_node(target)
        self._adj[source][target] = weight
        if not self._directed:
            self._adj[target][source] = weight

    def remove_edge(self, source: Hashable, target: Hashable) -> bool:
        neighbours = self._adj.get(source)
        if neighbours is None or target not in neighbours:
            return False
        del neighbours[target]
        if not self._directed:
            self._adj.get(target, {}).pop(source, None)
        return True

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        return target in self._adj.get(source, {})

    def get_weight(self, source: Hashable, target: Hashable) -> Optional[float]:
        return self._adj.get(source, {}).get(target)

    def set_weight(self, source: Hashable, target: Hashable, weight: float) -> bool:
        """Update an existing edge's weight.  Never creates an edge."""
        if not self.has_edge(source, target):
            return False
        self._adj[source][target] = weight
        if not self._directed:
            self._adj[target][source] = weight
        return True

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    @property
    def nodes(self) -> List[Hashable]:
        return list(self._adj)

    @property
    def edges(self) -> List[Edge]:
        """Every edge once.  Undirected edges keep their first-seen orientation."""
        result: List[Edge] = []
        if self._directed:
            for source, neighbours in self._adj.items():
                for target, weight in neighbours.items():
                    result.append(Edge(source, target, weight))
            return result

        seen: Set[frozenset] = set()
        for source, neighbours in self._adj.items():
            for target, weight in neighbours.items():
                key = frozenset((source, target))
                if key in seen:
                    continue
                seen.add(key)
                result.append(Edge(source, target, weight))
        return result

    @property
    def size(self) -> int:
        return len(self._adj)

    def get_neighbors(self, node: Hashable) -> List[Hashable]:
        return list(self._adj.get(node, {}))

    def neighbours(self, node: Hashable) -> List[Tuple[Hashable, float]]:
        """Return [(neighbour, weight)] for every outgoing edge of `node`."""
        return list(self._adj.get(node, {}).items())

    def get_predecessors(self, node: Hashable) -> List[Hashable]:
        """Nodes with an edge INTO `node` (same as neighbours when undirected)."""
        if node not in self._adj:
            return []
        return [src for src, neighbours in self._adj.items() if node in neighbours]

    def get_out_degree(self, node: Hashable) -> int:
        return len(self._adj.get(node, {}))

    def get_in_degree(self, node: Hashable) -> int:
        if node not in self._adj:
            return 0
        return sum(1 for neighbours in self._adj.values() if node in neighbours)

    def get_degree(self, node: Hashable) -> int:
        if self._directed:
            return self.get_out_degree(node) + self.get_in_degree(node)
        return self.get_out_degree(node)

    # ==================================================================
    # WHOLE-GRAPH HELPERS
    # ==================================================================
    def clear(self) -> None:
        self._adj.clear()

    def clone(self) -> "Graph":
        copy = type(self)(directed=self._directed)
        copy._adj = {node: dict(neighbours) for node, neighbours in self._adj.items()}
        return copy

    def transpose(self) -> "Graph":
        """Every edge reversed.  An undirected graph is its own transpose."""
        if not self._directed:
            return self.clone()
        reverse = type(self)(directed=True)
        for node in self._adj:
            reverse.add_node(node)
        for source, neighbours in self._adj.items():
            for target, weight in neighbours.items():
                reverse._adj[target][source] = weight
        return reverse

    def get_stats(self) -> GraphStats:
        n = self.size
        m = len(self.edges)
        max_edges = n * (n - 1) if self._directed else n * (n - 1) / 2
        return GraphStats(
            nodes=n,
            edges=m,
            directed=self._directed,
            density=m / max_edges if max_edges > 0 else 0.0,
            average_degree=(m * (1 if self._directed else 2)) / n if n > 0 else 0.0,
        )

    def has_negative_edges(self) -> bool:
        return any(w < 0 for neighbours in self._adj.values() for w in neighbours.values())

    def node_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return len(self.edges)

    # ==================================================================
    # SERIALISATION — adjacency matrix
    # ==================================================================
    def to_adjacency_matrix(self) -> Tuple[List[Hashable], List[List[float]]]:
        """
        Dense n×n matrix in `nodes` order.  Absent edges are `inf`, the
        diagonal is 0 unless a self-loop overrides it.
        """
        nodes = self.nodes
        index = {node: i for i, node in enumerate(nodes)}
        matrix = [[INF] * len(nodes) for _ in nodes]
        for i in range(len(nodes)):
            matrix[i][i] = 0
        for source, neighbours in self._adj.items():
            for target, weight in neighbours.items():
                matrix[index[source]][index[target]] = weight
        return nodes, matrix

    @classmethod
    def from_adjacency_matrix(
        cls,
        nodes: Sequence[Hashable],
        matrix: Sequence[Sequence[Optional[float]]],
        directed: bool = False,
    ) -> "Graph":
        """
        Build a graph from a square matrix.  0, inf and None mean "no edge".
        Undirected graphs read the upper triangle only.
        """
        n = len(nodes)
        if len(matrix) != n or any(len(row) != n for row in matrix):
            raise GraphFormatError(f"adjacency matrix must be {n}×{n} to match the node list")

        g = cls(directed=directed)
        for node in nodes:
            g.add_node(node)

        for i in range(n):
            for j in range(0 if directed else i + 1, n):
                value = matrix[i][j]
                if value is None:
                    continue
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise GraphFormatError(f"matrix[{i}][{j}] is not a number: {value!r}")
                if value == 0 or math.isinf(value):
                    continue
                g.add_edge(nodes[i], nodes[j], value)
        return g

    # ==================================================================
    # SERIALISATION — adjacency list text
    # ==================================================================
    @classmethod
    def from_adjacency_list(cls, text: str, directed: bool = False) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            A: B C D            → A connects to B, C, D  (weight 1)
            A: B(3) C(7)        → A→B weight 3, A→C weight 7
            0 -> 1,2,3          → alternate arrow syntax
            E                   → isolated node

        For undirected graphs the first mention of a pair wins.
        """
        g = cls(directed=directed)

        for lineno, line in enumerate(text.strip().splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            for sep in (":", "→", "->"):
                if sep in line:
                    source, _, rest = line.partition(sep)
                    break
            else:
                source, rest = line, ""

            source = source.strip()
            if not source:
                raise GraphFormatError(f"line {lineno}: missing source node")
            g.add_node(source)

            for token in rest.replace(",", " ").split():
                target, weight = _parse_target(token, lineno)
                if not directed and g.has_edge(target, source):
                    continue
                g.add_edge(source, target, weight)

        logger.debug(f"Parsed adjacency list into {g!r}")
        return g

    # ==================================================================
    # SERIALISATION — interchange record
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self._directed,
            "nodes":    self.nodes,
            "edges":    [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Graph":
        if not isinstance(data, dict):
            raise GraphFormatError("graph record must be an object")
        nodes = data.get("nodes", [])
        edges = data.get("edges", [])
        if not isinstance(nodes, list) or not isinstance(edges, list):
            raise GraphFormatError("'nodes' and 'edges' must be lists")

        directed = data.get("directed", False)
        if not isinstance(directed, bool):
            raise GraphFormatError(f"'directed' must be true or false, got {directed!r}")

        g = cls(directed=directed)
        for node in nodes:
            _check_hashable(node)
            g.add_node(node)
        for record in edges:
            edge = Edge.from_dict(record)
            _check_hashable(edge.source)
            _check_hashable(edge.target)
            g.add_edge(edge.source, edge.target, edge.weight)
        return g

    # ==================================================================
    # DUNDER
    # ==================================================================
    def __contains__(self, node: Hashable) -> bool:
        return self.has_node(node)

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()}, directed={self._directed})"


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------
def create_directed_graph() -> Graph:
    return Graph(directed=True)


def create_undirected_graph() -> Graph:
    return Graph(directed=False)


def from_edge_list(edges: Iterable[Union[Edge, dict]], directed: bool = False) -> Graph:
    """Build a graph from Edge objects or {"from", "to", "weight"} records."""
    g = Graph(directed=directed)
    for item in edges:
        edge = item if isinstance(item, Edge) else Edge.from_dict(item)
        g.add_edge(edge.source, edge.target, edge.weight)
    return g


# ---------------------------------------------------------------------------
def _parse_target(token: str, lineno: int) -> Tuple[str, float]:
    """'B(3)' → ('B', 3.0);  'B' → ('B', 1)."""
    if "(" in token and token.endswith(")"):
        target, w_str = token[:-1].split("(", 1)
        try:
            return target, float(w_str)
        except ValueError:
            raise GraphFormatError(f"line {lineno}: bad weight in {token!r}") from None
    return token, 1


def _check_hashable(node: Any) -> None:
    try:
        hash(node)
    except TypeError:
        raise GraphFormatError(f"node ids must be hashable, got {node!r}") from None
