"""
Pytest configuration for the graph engine tests.

Fixtures build small, hand-checkable graphs; `client` is a Flask test
client against the module-level app in main.py.
"""
import pytest

from graph import Graph


@pytest.fixture
def diamond():
    """Directed A→B, A→C, B→D, C→D."""
    g = Graph(directed=True)
    g.add_edge("A", "B")
    g.add_edge("A", "C")
    g.add_edge("B", "D")
    g.add_edge("C", "D")
    return g


@pytest.fixture
def weighted_directed():
    """Directed A→B(1), B→C(2), A→C(4), C→D(1)."""
    g = Graph(directed=True)
    for node in ["A", "B", "C", "D"]:
        g.add_node(node)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 2)
    g.add_edge("A", "C", 4)
    g.add_edge("C", "D", 1)
    return g


@pytest.fixture
def weighted_undirected():
    """Connected undirected graph with several weight ties."""
    g = Graph()
    g.add_edge("A", "B", 4)
    g.add_edge("A", "H", 8)
    g.add_edge("B", "C", 8)
    g.add_edge("B", "H", 11)
    g.add_edge("C", "D", 7)
    g.add_edge("C", "F", 4)
    g.add_edge("C", "I", 2)
    g.add_edge("D", "E", 9)
    g.add_edge("D", "F", 14)
    g.add_edge("E", "F", 10)
    g.add_edge("F", "G", 2)
    g.add_edge("G", "H", 1)
    g.add_edge("G", "I", 6)
    g.add_edge("H", "I", 7)
    return g


@pytest.fixture
def app():
    from main import app as flask_app
    flask_app.config.update(TESTING=True, MAX_NODES=10_000, MAX_EDGES=100_000)
    yield flask_app
    flask_app.config.update(MAX_NODES=10_000, MAX_EDGES=100_000)


@pytest.fixture
def client(app):
    return app.test_client()
