"""
edge.py — Graph Edge Record
===========================
A lightweight value object describing one edge.  The Graph container does
NOT store Edge objects (adjacency is a map of maps); Edges are produced on
demand by `Graph.edges`, the MST builders and the bridge finder, and are the
unit of the interchange record:

    {"from": <node>, "to": <node>, "weight": <number>}

Design decisions:
  - `source` / `target` are the node values themselves, not wrappers.
  - Equality is by (source, target, weight) so results can be compared in
    tests and de-duplicated in sets.
"""

from typing import Any, Hashable

from graph.errors import GraphFormatError


class Edge:
    """
    Attributes:
        source : tail node.
        target : head node.
        weight : numeric cost (default 1).  May be negative.
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: Hashable, target: Hashable, weight: float = 1):
        self.source: Hashable = source
        self.target: Hashable = target
        self.weight: float    = weight

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def reversed(self) -> "Edge":
        return Edge(self.target, self.source, self.weight)

    def connects(self, node_a: Hashable, node_b: Hashable, directed: bool = True) -> bool:
        """True if this edge links node_a → node_b (either way when not directed)."""
        if self.source == node_a and self.target == node_b:
            return True
        return not directed and self.source == node_b and self.target == node_a

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: Any) -> "Edge":
        if not isinstance(data, dict) or "from" not in data or "to" not in data:
            raise GraphFormatError(f"edge record needs 'from' and 'to': {data!r}")
        weight = data.get("weight")
        if weight is None:
            weight = 1
        elif isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise GraphFormatError(f"edge weight must be a number: {weight!r}")
        return cls(data["from"], data["to"], weight)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source!r} → {self.target!r}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.source == other.source
            and self.target == other.target
            and self.weight == other.weight
        )

    def __hash__(self) -> int:
        return hash((self.source, self.target, self.weight))
