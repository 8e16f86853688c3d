"""
Depends - Interactive dependency graph explorer.

Depends lets an operator walk a precomputed dependency graph of projects,
packages and assemblies in the terminal, showing for the selected node its
runtime dependencies, package dependencies and reverse dependencies.

Key Components:
- core: Graph model, target resolution, selection state and projection
- analysis: Pluggable graph builders (precomputed JSON, entry-point plugins)
- tui: Interaction loop and the textual application
- cli: The `depends` command

Usage:
    from depends.core.graph import DependencyGraph
    from depends.core.selection import SelectionState
    from depends.core.projection import project

    state = SelectionState(graph)
    panes = project(graph, state)
"""

__version__ = "0.1.0"

from .core.types import Edge, Node, NodeKind

__all__ = [
    "__version__",
    "Node",
    "NodeKind",
    "Edge",
]
