"""Tests for graph traversal: BFS, recursive DFS and iterative DFS."""
import pytest

from graph import Graph
from algorithms import bfs, dfs, dfs_iterative


@pytest.fixture
def tree():
    """Undirected A-B, A-C, B-D, B-E, C-F."""
    g = Graph()
    g.add_edge("A", "B")
    g.add_edge("A", "C")
    g.add_edge("B", "D")
    g.add_edge("B", "E")
    g.add_edge("C", "F")
    return g


class TestBFS:
    def test_level_order(self, tree):
        assert bfs(tree, "A") == ["A", "B", "C", "D", "E", "F"]

    def test_visitor_receives_depth(self, tree):
        seen = []
        bfs(tree, "A", visit=lambda node, depth: seen.append((node, depth)))
        assert dict(seen) == {"A": 0, "B": 1, "C": 1, "D": 2, "E": 2, "F": 2}

    def test_visitor_called_in_order(self):
        g = Graph()
        g.add_edge("A", "B")
        g.add_edge("B", "C")
        nodes = []
        bfs(g, "A", visit=lambda node, depth: nodes.append(node))
        assert nodes == ["A", "B", "C"]

    def test_visitor_can_stop_early(self, tree):
        result = bfs(tree, "A", visit=lambda node, depth: node != "B")
        assert result == ["A", "B"]

    def test_max_depth(self):
        g = Graph()
        g.add_edge("A", "B")
        g.add_edge("B", "C")
        g.add_edge("C", "D")
        assert bfs(g, "A", max_depth=1) == ["A", "B"]
        assert bfs(g, "A", max_depth=0) == ["A"]

    def test_directed_follows_direction(self, diamond):
        assert bfs(diamond, "B") == ["B", "D"]

    def test_missing_start(self, tree):
        assert bfs(tree, "Z") == []

    def test_cycle_visits_each_node_once(self):
        g = Graph()
        g.add_edge("A", "B")
        g.add_edge("B", "C")
        g.add_edge("C", "A")
        assert sorted(bfs(g, "A")) == ["A", "B", "C"]


class TestDFS:
    def test_recursive_order(self, tree):
        assert dfs(tree, "A") == ["A", "B", "D", "E", "C", "F"]

    def test_iterative_matches_recursive(self, tree):
        assert dfs_iterative(tree, "A") == dfs(tree, "A")

    def test_same_node_set_on_cyclic_graph(self, diamond):
        diamond.add_edge("D", "A")
        assert set(dfs(diamond, "A")) == set(dfs_iterative(diamond, "A"))

    def test_max_depth(self, tree):
        assert dfs(tree, "A", max_depth=1) == ["A", "B", "C"]
        assert dfs_iterative(tree, "A", max_depth=1) == ["A", "B", "C"]

    def test_visitor_can_stop_early(self, tree):
        stop_at_d = lambda node, depth: node != "D"
        assert dfs(tree, "A", visit=stop_at_d) == ["A", "B", "D"]
        assert dfs_iterative(tree, "A", visit=stop_at_d) == ["A", "B", "D"]

    def test_missing_start(self, tree):
        assert dfs(tree, "Z") == []
        assert dfs_iterative(tree, "Z") == []

    def test_iterative_handles_deep_chain(self):
        """A 5000-node path would overflow the recursive variant."""
        g = Graph(directed=True)
        for i in range(5000):
            g.add_edge(i, i + 1)
        result = dfs_iterative(g, 0)
        assert len(result) == 5001
        assert result[-1] == 5000
