"""
Selection State.

The navigable state behind the node list: which nodes are listed, whether
assemblies are among them, and which one is selected. Everything shown in
the dependency panes is derived from this state by the projection engine.
"""

import logging
from typing import List, Optional

from .graph import DependencyGraph
from .types import DependsError, Node

logger = logging.getLogger(__name__)


class SelectionError(DependsError, IndexError):
    """Raised when a selection index falls outside the visible node list."""


def order_nodes(graph: DependencyGraph, assemblies_visible: bool = True) -> List[Node]:
    """Visible nodes sorted by id, ascending."""
    nodes = sorted(graph.iter_nodes(), key=lambda n: n.id)
    if not assemblies_visible:
        nodes = [n for n in nodes if not n.is_assembly]
    return nodes


class SelectionState:
    """
    Ordered node list, assembly visibility flag and selected index.

    `ordered_nodes` is always a function of the graph and the flag, so the
    only mutations are `select_index` and `toggle_assembly_visibility`.
    Toggling resets the selection to the first node.
    """

    def __init__(self, graph: DependencyGraph):
        self.graph = graph
        self._assemblies_visible = True
        self._ordered_nodes = order_nodes(graph, True)
        self._selected_index = 0

    @property
    def ordered_nodes(self) -> List[Node]:
        return list(self._ordered_nodes)

    @property
    def assemblies_visible(self) -> bool:
        return self._assemblies_visible

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def selected_node(self) -> Optional[Node]:
        """The selected node, or None when no node is visible."""
        if not self._ordered_nodes:
            return None
        return self._ordered_nodes[self._selected_index]

    def __len__(self) -> int:
        return len(self._ordered_nodes)

    def select_index(self, index: int) -> None:
        """
        Select the node at `index` in the visible list.

        Raises:
            SelectionError: If the index is outside the visible list.
        """
        if not 0 <= index < len(self._ordered_nodes):
            raise SelectionError(
                f"Selection index {index} out of range for {len(self._ordered_nodes)} visible nodes"
            )
        self._selected_index = index

    def toggle_assembly_visibility(self) -> None:
        """Show or hide assembly nodes and select the first visible node."""
        self._assemblies_visible = not self._assemblies_visible
        self._ordered_nodes = order_nodes(self.graph, self._assemblies_visible)
        self._selected_index = 0
        logger.debug(
            f"Assemblies {'shown' if self._assemblies_visible else 'hidden'}; "
            f"{len(self._ordered_nodes)} nodes visible"
        )
