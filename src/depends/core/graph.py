"""
Dependency Graph backed by rustworkx.

The graph is produced once per session by an analyzer and is read-only
afterwards. It manages:
- The bimap between string Node IDs and rustworkx integer indices.
- Edge order: edges are enumerated in insertion order, which is also the
  order the projection panes display them in.
- Validation that every edge connects two member nodes.
"""

import logging
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, List, Optional

import rustworkx as rx

from .types import DependsError, Edge, Node, NodeKind

logger = logging.getLogger(__name__)


class GraphIntegrityError(DependsError, ValueError):
    """Raised when an edge references a node that is not part of the graph."""

    def __init__(self, edge: Edge, missing: Node):
        self.edge = edge
        self.missing = missing
        super().__init__(
            f"Edge {edge.start.id} -> {edge.end.id} references unknown node '{missing.id}'"
        )


class DependencyGraph:
    """
    Immutable dependency graph.

    Nodes are unique by id; adding the same id twice keeps the first node.
    Edges form a multigraph, so two labels between the same pair of nodes
    are kept as two edges. Edge endpoints are matched to nodes by id and
    replaced by the graph's own node, so an edge never disagrees with the
    node list about kind or version.
    """

    def __init__(self, nodes: Iterable[Node] = (), edges: Iterable[Edge] = ()):
        self._graph = rx.PyDiGraph(multigraph=True)
        self._id_to_idx: Dict[str, int] = {}

        for node in nodes:
            if node.id in self._id_to_idx:
                continue
            self._id_to_idx[node.id] = self._graph.add_node(node)

        for edge in edges:
            u_idx = self._index_of(edge, edge.start)
            v_idx = self._index_of(edge, edge.end)
            start, end = self._graph[u_idx], self._graph[v_idx]
            if start is not edge.start or end is not edge.end:
                # Endpoints always carry the graph's node for their id
                edge = edge.model_copy(update={"start": start, "end": end})
            self._graph.add_edge(u_idx, v_idx, edge)

        logger.debug(
            f"Built dependency graph with {self.node_count} nodes and {self.edge_count} edges"
        )

    def _index_of(self, edge: Edge, node: Node) -> int:
        idx = self._id_to_idx.get(node.id)
        if idx is None:
            raise GraphIntegrityError(edge, node)
        return idx

    def get_node(self, node_id: str) -> Optional[Node]:
        """Retrieve a node by ID."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def iter_nodes(self) -> Iterator[Node]:
        """Nodes in insertion order."""
        return iter(self._graph.nodes())

    def iter_edges(self) -> Iterator[Edge]:
        """Edges in insertion order."""
        return iter(self._graph.edges())

    @property
    def nodes(self) -> List[Node]:
        return list(self._graph.nodes())

    @property
    def edges(self) -> List[Edge]:
        return list(self._graph.edges())

    def out_edges(self, node_id: str) -> List[Edge]:
        """Edges starting at node_id, in insertion order."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return []
        # For a directed graph incident_edges yields outgoing edges only
        indices = sorted(set(self._graph.incident_edges(idx)))
        return [self._graph.get_edge_data_by_index(i) for i in indices]

    def in_edges(self, node_id: str) -> List[Edge]:
        """Edges ending at node_id, in insertion order."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return []
        indices = sorted(
            i for i in set(self._graph.incident_edges(idx, all_edges=True))
            if self._graph.get_edge_endpoints_by_index(i)[1] == idx
        )
        return [self._graph.get_edge_data_by_index(i) for i in indices]

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def get_stats(self) -> Dict[str, Any]:
        node_counts = Counter(node.kind.value for node in self.iter_nodes())
        return {
            "total_nodes": self.node_count,
            "total_edges": self.edge_count,
            "nodes_by_kind": {kind.value: node_counts.get(kind.value, 0) for kind in NodeKind},
            "labeled_edges": sum(1 for edge in self.iter_edges() if edge.wanted_version),
        }
