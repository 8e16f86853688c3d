"""
Projection Engine.

Computes the three dependency panes for the selected node:
- runtime: assemblies the node depends on
- package: packages the node depends on, with the wanted version
- reverse: every node that depends on it, with the wanted version

Projections are recomputed from the graph on every state change; nothing
here is cached.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..config import WANTED_TEMPLATE
from .graph import DependencyGraph
from .selection import SelectionState
from .types import Node


class Projection(BaseModel):
    """The contents of the three dependency panes."""
    runtime: Tuple[Node, ...] = ()
    package: Tuple[str, ...] = ()
    reverse: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return not (self.runtime or self.package or self.reverse)


def format_wanted(node: Node, label: Optional[str]) -> str:
    """Render a node, suffixed with ' (Wanted: label)' when label is non-empty."""
    if not label:
        return str(node)
    return f"{node}{WANTED_TEMPLATE.format(label=label)}"


def project_node(graph: DependencyGraph, node: Optional[Node]) -> Projection:
    """Compute the panes for a single node (None yields empty panes)."""
    if node is None:
        return Projection()

    outgoing = graph.out_edges(node.id)
    incoming = graph.in_edges(node.id)

    return Projection(
        runtime=tuple(e.end for e in outgoing if e.end.is_assembly),
        package=tuple(format_wanted(e.end, e.label) for e in outgoing if e.end.is_package),
        reverse=tuple(format_wanted(e.start, e.label) for e in incoming),
    )


def project(graph: DependencyGraph, state: SelectionState) -> Projection:
    """Compute the panes for the node currently selected in `state`."""
    return project_node(graph, state.selected_node)
