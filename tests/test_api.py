"""Tests for the Flask JSON API in main.py."""
import pytest


DIRECTED = {
    "directed": True,
    "nodes": ["A", "B", "C", "D"],
    "edges": [
        {"from": "A", "to": "B", "weight": 1},
        {"from": "B", "to": "C", "weight": 2},
        {"from": "A", "to": "C", "weight": 4},
        {"from": "C", "to": "D", "weight": 1},
    ],
}

UNDIRECTED = {
    "directed": False,
    "nodes": ["A", "B", "C"],
    "edges": [
        {"from": "A", "to": "B", "weight": 1},
        {"from": "B", "to": "C", "weight": 2},
        {"from": "A", "to": "C", "weight": 3},
    ],
}


def run(client, algorithm, graph, **params):
    return client.post("/api/run", json={"algorithm": algorithm, "graph": graph, "params": params})


class TestRegistry:
    def test_lists_algorithms(self, client):
        resp = client.get("/api/algorithms")
        assert resp.status_code == 200
        keys = [a["key"] for a in resp.get_json()["algorithms"]]
        assert "dijkstra" in keys
        assert "kruskal_mst" in keys
        assert "strongly_connected_components" in keys


class TestGraphRoutes:
    def test_stats(self, client):
        resp = client.post("/api/graph/stats", json=UNDIRECTED)
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["nodes"] == 3
        assert body["edges"] == 3
        assert body["density"] == pytest.approx(1.0)

    def test_matrix_encodes_inf_as_null(self, client):
        resp = client.post("/api/graph/matrix", json=DIRECTED)
        body = resp.get_json()
        assert body["nodes"] == ["A", "B", "C", "D"]
        assert body["matrix"][0][1] == 1
        assert body["matrix"][1][0] is None

    def test_import_adjacency_list(self, client):
        resp = client.post("/api/graph/import", json={"format": "adj-list", "text": "A: B(2) C"})
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["directed"] is False
        assert body["nodes"] == ["A", "B", "C"]
        assert {"from": "A", "to": "B", "weight": 2.0} in body["edges"]

    def test_import_adjacency_matrix(self, client):
        resp = client.post("/api/graph/import", json={
            "format": "adj-matrix", "directed": True,
            "nodes": ["A", "B"], "matrix": [[0, 3], [None, 0]],
        })
        assert resp.status_code == 200
        assert resp.get_json()["edges"] == [{"from": "A", "to": "B", "weight": 3}]

    def test_import_unknown_format(self, client):
        resp = client.post("/api/graph/import", json={"format": "dot", "text": ""})
        assert resp.status_code == 400

    def test_malformed_record(self, client):
        resp = client.post("/api/graph/stats", json={"edges": [{"from": "A"}]})
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_non_json_body(self, client):
        resp = client.post("/api/graph/stats", data="nope", content_type="text/plain")
        assert resp.status_code == 400


class TestRun:
    def test_dijkstra(self, client):
        resp = run(client, "dijkstra", DIRECTED, start="A", end="D")
        assert resp.status_code == 200
        result = resp.get_json()["result"]
        assert result == {"path": ["A", "B", "C", "D"], "distance": 4, "found": True}

    def test_dijkstra_unreachable_distance_is_null(self, client):
        result = run(client, "dijkstra", DIRECTED, start="D", end="A").get_json()["result"]
        assert result["found"] is False
        assert result["distance"] is None

    def test_dijkstra_negative_weight_is_rejected(self, client):
        graph = {"directed": True, "nodes": [], "edges": [{"from": "A", "to": "B", "weight": -1}]}
        resp = run(client, "dijkstra", graph, start="A", end="B")
        assert resp.status_code == 400

    def test_bellman_ford_negative_cycle_is_null(self, client):
        graph = {"directed": True, "nodes": [], "edges": [
            {"from": "A", "to": "B", "weight": 1},
            {"from": "B", "to": "C", "weight": -1},
            {"from": "C", "to": "A", "weight": -1},
        ]}
        resp = run(client, "bellman_ford", graph, start="A")
        assert resp.status_code == 200
        assert resp.get_json()["result"] is None

    def test_bellman_ford_tree(self, client):
        result = run(client, "bellman_ford", DIRECTED, start="A").get_json()["result"]
        assert result["D"] == {"distance": 4, "path": ["A", "B", "C", "D"]}

    def test_bfs_with_max_depth(self, client):
        result = run(client, "bfs", DIRECTED, start="A", max_depth=1).get_json()["result"]
        assert result == ["A", "B", "C"]

    def test_topological_sort(self, client):
        result = run(client, "topological_sort", DIRECTED).get_json()["result"]
        assert result == ["A", "B", "C", "D"]

    def test_kruskal(self, client):
        result = run(client, "kruskal_mst", UNDIRECTED).get_json()["result"]
        assert result["weight"] == 3
        assert len(result["edges"]) == 2

    def test_bridges(self, client):
        result = run(client, "bridges", UNDIRECTED).get_json()["result"]
        assert result == []

    def test_directedness_misuse(self, client):
        resp = run(client, "topological_sort", UNDIRECTED)
        assert resp.status_code == 400
        assert "directed" in resp.get_json()["error"]

    def test_unknown_algorithm(self, client):
        assert run(client, "floyd", DIRECTED).status_code == 404

    def test_missing_param(self, client):
        resp = run(client, "dijkstra", DIRECTED, start="A")
        assert resp.status_code == 400
        assert "end" in resp.get_json()["error"]

    def test_unknown_param(self, client):
        assert run(client, "has_cycle", DIRECTED, start="A").status_code == 400

    def test_max_nodes(self, app, client):
        app.config["MAX_NODES"] = 2
        resp = run(client, "has_cycle", DIRECTED)
        assert resp.status_code == 413


class TestParamValidation:
    def test_string_max_depth(self, client):
        resp = run(client, "bfs", DIRECTED, start="A", max_depth="1")
        assert resp.status_code == 400
        assert "max_depth" in resp.get_json()["error"]

    def test_bool_max_depth(self, client):
        assert run(client, "dfs_iterative", DIRECTED, start="A", max_depth=True).status_code == 400

    def test_negative_max_length(self, client):
        assert run(client, "find_all_paths", DIRECTED, start="A", end="D", max_length=-1).status_code == 400

    def test_unhashable_start(self, client):
        resp = run(client, "bfs", DIRECTED, start=["A"])
        assert resp.status_code == 400
        assert "start" in resp.get_json()["error"]

    def test_unhashable_end(self, client):
        assert run(client, "dijkstra", DIRECTED, start="A", end={"x": 1}).status_code == 400

    def test_null_max_depth_means_unbounded(self, client):
        result = run(client, "bfs", DIRECTED, start="A", max_depth=None).get_json()["result"]
        assert result == ["A", "B", "C", "D"]

    def test_max_length_is_capped(self, app, client):
        limit = app.config["MAX_PATH_LENGTH"]
        resp = run(client, "find_all_paths", DIRECTED, start="A", end="D", max_length=limit + 1)
        assert resp.status_code == 400
        assert "MAX_PATH_LENGTH" in resp.get_json()["error"]

    def test_max_length_within_cap(self, client):
        result = run(client, "find_all_paths", DIRECTED, start="A", end="D", max_length=4).get_json()["result"]
        assert sorted(result) == [["A", "B", "C", "D"], ["A", "C", "D"]]

    def test_null_max_length(self, client):
        assert run(client, "find_all_paths", DIRECTED, start="A", end="D", max_length=None).status_code == 400


class TestDeepGraphs:
    @staticmethod
    def chain(n):
        return {
            "directed": True,
            "nodes": list(range(n)),
            "edges": [{"from": i, "to": i + 1, "weight": 1} for i in range(n - 1)],
        }

    def test_recursive_dfs_on_deep_chain_is_a_client_error(self, client):
        resp = run(client, "dfs", self.chain(3000), start=0)
        assert resp.status_code == 400
        assert "dfs_iterative" in resp.get_json()["error"]

    def test_iterative_dfs_handles_deep_chain(self, client):
        result = run(client, "dfs_iterative", self.chain(3000), start=0).get_json()["result"]
        assert len(result) == 3000
        assert result[-1] == 2999


class TestRecordLimits:
    def test_non_bool_directed(self, client):
        record = dict(UNDIRECTED, directed="false")
        resp = client.post("/api/graph/stats", json=record)
        assert resp.status_code == 400
        assert "directed" in resp.get_json()["error"]

    def test_import_non_bool_directed(self, client):
        resp = client.post("/api/graph/import", json={"format": "adj-list", "text": "A: B", "directed": 1})
        assert resp.status_code == 400

    def test_edge_list_checked_before_build(self, app, client):
        app.config["MAX_EDGES"] = 2
        resp = client.post("/api/graph/stats", json=UNDIRECTED)
        assert resp.status_code == 413
        assert "MAX_EDGES" in resp.get_json()["error"]
