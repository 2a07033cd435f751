"""
main.py — Graph Engine HTTP API
================================
The web server that exposes the graph engine at the system boundary.
Callers send the interchange record

    {"directed": bool, "nodes": [...], "edges": [{"from", "to", "weight"}]}

and get plain JSON back.  Nothing is stored between requests.

Routes:
  GET  /api/algorithms          – registry listing
  POST /api/graph/stats         – node / edge counts, density, avg degree
  POST /api/graph/matrix        – record → adjacency matrix
  POST /api/graph/import        – adjacency list / matrix → record
  POST /api/run                 – run one algorithm on a record

Configuration (app.config, overridable via GRAPH_API_* env vars, e.g.
GRAPH_API_MAX_NODES=500):
  • MAX_NODES  – largest graph accepted by any route (413 beyond it)
  • MAX_EDGES  – longest edge list accepted, checked before the graph is built
  • MAX_PATH_LENGTH – upper bound on find_all_paths' max_length
  • LOG_LEVEL  – root logging level
  • HOST / PORT / DEBUG – used when run as a script; --host / --port /
                          --debug flags win over both

JSON has no infinity: every `inf` distance / matrix cell is sent as null,
and null matrix cells in requests mean "no edge".
"""

import argparse
import dataclasses
import logging
import math
from typing import Any, Dict

from flask import Flask, request, jsonify

from graph import Edge, Graph, GraphError, GraphFormatError, InvalidOperationError
from algorithms import get_algorithm, list_algorithms

logger = logging.getLogger(__name__)


app = Flask(__name__)
app.config.update(
    MAX_NODES=10_000,
    MAX_EDGES=100_000,
    MAX_PATH_LENGTH=20,
    LOG_LEVEL="INFO",
    HOST="0.0.0.0",
    PORT=5000,
    DEBUG=False,
)
app.config.from_prefixed_env("GRAPH_API")


class RequestTooLarge(GraphError):
    pass


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(RequestTooLarge)
def handle_too_large(err: RequestTooLarge):
    logger.warning(f"Rejected request: {err}")
    return jsonify({"error": str(err)}), 413


@app.errorhandler(GraphError)
def handle_graph_error(err: GraphError):
    logger.info(f"Bad request: {err}")
    return jsonify({"error": str(err)}), 400


# ---------------------------------------------------------------------------
# Request Helpers
# ---------------------------------------------------------------------------
def get_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise GraphFormatError("request body must be a JSON object")
    return data


def load_graph(record: Any) -> Graph:
    """Deserialise a graph record and enforce MAX_NODES / MAX_EDGES."""
    if isinstance(record, dict):
        if isinstance(record.get("nodes"), list) and len(record["nodes"]) > app.config["MAX_NODES"]:
            raise RequestTooLarge(f"graph exceeds MAX_NODES={app.config['MAX_NODES']}")
        if isinstance(record.get("edges"), list) and len(record["edges"]) > app.config["MAX_EDGES"]:
            raise RequestTooLarge(f"graph exceeds MAX_EDGES={app.config['MAX_EDGES']}")
    g = Graph.from_dict(record)
    if g.size > app.config["MAX_NODES"]:
        raise RequestTooLarge(f"graph exceeds MAX_NODES={app.config['MAX_NODES']}")
    return g


def check_params(params: Dict[str, Any]) -> None:
    """Type-check algorithm params before they reach the engine."""
    for name in ("start", "end"):
        if name in params:
            try:
                hash(params[name])
            except TypeError:
                raise GraphFormatError(f"'{name}' must be a node id, got {params[name]!r}") from None

    # max_depth may be null (unbounded); max_length may not
    for name in ("max_depth", "max_length"):
        if name not in params or (name == "max_depth" and params[name] is None):
            continue
        value = params[name]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise GraphFormatError(f"'{name}' must be a non-negative integer, got {value!r}")

    limit = app.config["MAX_PATH_LENGTH"]
    if params.get("max_length", 0) > limit:
        raise GraphFormatError(f"'max_length' exceeds MAX_PATH_LENGTH={limit}")


def read_directed(data: Dict[str, Any]) -> bool:
    directed = data.get("directed", False)
    if not isinstance(directed, bool):
        raise GraphFormatError(f"'directed' must be true or false, got {directed!r}")
    return directed


def to_json(value: Any) -> Any:
    """Turn algorithm results into JSON-safe values (inf → None)."""
    if isinstance(value, float) and math.isinf(value):
        return None
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Edge):
        return value.to_dict()
    if isinstance(value, Graph):
        return value.to_dict()
    if dataclasses.is_dataclass(value):
        return {f.name: to_json(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {str(k): to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_json(v) for v in value]
    return str(value)


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


# ---------------------------------------------------------------------------
# API: Graph inspection & conversion
# ---------------------------------------------------------------------------
@app.route("/api/graph/stats", methods=["POST"])
def api_graph_stats():
    g = load_graph(get_body())
    return jsonify(to_json(g.get_stats()))


@app.route("/api/graph/matrix", methods=["POST"])
def api_graph_matrix():
    g = load_graph(get_body())
    nodes, matrix = g.to_adjacency_matrix()
    return jsonify({"nodes": to_json(nodes), "matrix": to_json(matrix)})


@app.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    data     = get_body()
    fmt      = data.get("format", "adj-list")
    directed = read_directed(data)

    if fmt == "adj-list":
        text = data.get("text")
        if not isinstance(text, str):
            raise GraphFormatError("'text' must be a string")
        g = Graph.from_adjacency_list(text, directed=directed)
    elif fmt == "adj-matrix":
        nodes, matrix = data.get("nodes"), data.get("matrix")
        if not isinstance(nodes, list) or not isinstance(matrix, list) \
                or not all(isinstance(row, list) for row in matrix):
            raise GraphFormatError("'nodes' and 'matrix' must be lists")
        g = Graph.from_adjacency_matrix(nodes, matrix, directed=directed)
    else:
        return jsonify({"error": f"Unknown format: {fmt}"}), 400

    if g.size > app.config["MAX_NODES"]:
        raise RequestTooLarge(f"graph exceeds MAX_NODES={app.config['MAX_NODES']}")
    return jsonify(to_json(g))


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data     = get_body()
    algo_key = data.get("algorithm")
    info     = get_algorithm(algo_key) if isinstance(algo_key, str) else None
    if info is None:
        return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 404

    params = data.get("params") or {}
    if not isinstance(params, dict):
        raise GraphFormatError("'params' must be an object")
    unknown = sorted(set(params) - set(info.params))
    if unknown:
        raise GraphFormatError(f"{info.key} does not accept: {', '.join(unknown)}")
    missing = [p for p in info.required if p not in params]
    if missing:
        raise GraphFormatError(f"{info.key} requires: {', '.join(missing)}")
    check_params(params)

    g = load_graph(data.get("graph"))
    logger.debug(f"Running {info.key} on {g!r} with {params}")
    try:
        result = info.fn(g, **params)
    except RecursionError:
        hint = " (use dfs_iterative)" if info.key == "dfs" else ""
        raise InvalidOperationError(f"{info.key}: graph too deep for a recursive search{hint}") from None
    return jsonify({"algorithm": info.key, "result": to_json(result)})


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def main() -> None:
    parser = argparse.ArgumentParser(description="Graph engine HTTP API")
    parser.add_argument("--host", type=str, help="bind address")
    parser.add_argument("--port", type=int, help="HTTP port")
    parser.add_argument("--debug", action="store_true", help="Flask debug mode")
    args = parser.parse_args()

    logging.basicConfig(
        level=str(app.config["LOG_LEVEL"]).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    host  = args.host or app.config["HOST"]
    port  = args.port or int(app.config["PORT"])
    debug = args.debug or bool(app.config["DEBUG"])

    logger.info(f"Graph engine API listening on http://{host}:{port}")
    app.run(debug=debug, host=host, port=port)


if __name__ == "__main__":
    main()
