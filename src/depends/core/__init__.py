"""
Core graph-view engine for depends.

Provides:
- types: Node, Edge and the NodeKind discriminator
- graph: the immutable DependencyGraph
- resolver: path to analysis target resolution
- selection: the SelectionState state machine
- projection: the three dependency panes
"""

from .graph import DependencyGraph, GraphIntegrityError
from .projection import Projection, format_wanted, project
from .resolver import ResolutionError, ResolutionErrorKind, resolve_target
from .result import Err, Ok, Result
from .selection import SelectionError, SelectionState
from .types import DependsError, Edge, Node, NodeKind

__all__ = [
    "DependencyGraph",
    "DependsError",
    "Edge",
    "Err",
    "GraphIntegrityError",
    "Node",
    "NodeKind",
    "Ok",
    "Projection",
    "ResolutionError",
    "ResolutionErrorKind",
    "Result",
    "SelectionError",
    "SelectionState",
    "format_wanted",
    "project",
    "resolve_target",
]
