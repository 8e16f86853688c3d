"""
Graph serialization.

Precomputed graphs are exchanged as JSON documents of the form:

    {
      "nodes": [{"id": "App", "kind": "project"}, ...],
      "edges": [{"start": "App", "end": "Newtonsoft.Json", "label": "13.0.1"}, ...]
    }

Edges refer to nodes by id. Edge order in the document is preserved.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from .graph import DependencyGraph
from .types import DependsError, Edge, Node


class GraphFormatError(DependsError, ValueError):
    """Raised when a serialized graph cannot be decoded."""


def graph_to_dict(graph: DependencyGraph) -> Dict[str, Any]:
    return {
        "nodes": [node.model_dump(mode="json", exclude_none=True) for node in graph.iter_nodes()],
        "edges": [
            {"start": e.start.id, "end": e.end.id, **({"label": e.label} if e.label else {})}
            for e in graph.iter_edges()
        ],
    }


def graph_from_dict(data: Dict[str, Any]) -> DependencyGraph:
    """
    Build a DependencyGraph from its dictionary form.

    Raises:
        GraphFormatError: On malformed nodes or edges referencing unknown ids.
    """
    if not isinstance(data, dict):
        raise GraphFormatError("Graph document must be a JSON object")

    raw_nodes, raw_edges = data.get("nodes", []), data.get("edges", [])
    for key, value in (("nodes", raw_nodes), ("edges", raw_edges)):
        if not isinstance(value, list):
            raise GraphFormatError(f"'{key}' must be a list, got {type(value).__name__}")

    try:
        nodes = [Node.model_validate(raw) for raw in raw_nodes]
    except ValidationError as e:
        raise GraphFormatError(f"Invalid node: {e}") from e

    by_id = {}
    for node in nodes:
        by_id.setdefault(node.id, node)

    edges = []
    for raw in raw_edges:
        try:
            start, end = raw["start"], raw["end"]
            missing = [node_id for node_id in (start, end) if node_id not in by_id]
        except (KeyError, TypeError) as e:
            raise GraphFormatError(f"Invalid edge: {raw!r}") from e
        if missing:
            raise GraphFormatError(f"Edge {start} -> {end} references unknown node '{missing[0]}'")
        try:
            edges.append(Edge(start=by_id[start], end=by_id[end], label=raw.get("label")))
        except ValidationError as e:
            raise GraphFormatError(f"Invalid edge {start} -> {end}: {e}") from e

    return DependencyGraph(nodes, edges)


def graph_to_json(graph: DependencyGraph) -> str:
    return json.dumps(graph_to_dict(graph), indent=2)


def load_graph_file(path: Union[str, Path]) -> DependencyGraph:
    """
    Load a DependencyGraph from a JSON file.

    Raises:
        GraphFormatError: If the file is not valid JSON or not a valid graph.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise GraphFormatError(f"{path} is not valid JSON: {e}") from e
    return graph_from_dict(data)
