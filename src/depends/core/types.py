"""
Core type definitions for depends.

Nodes form a closed set of kinds, so filtering ("is this an assembly?")
is a comparison against NodeKind rather than a type check.
"""

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class DependsError(Exception):
    """Base class for all errors raised by depends."""


class NodeKind(StrEnum):
    """Categories of nodes in the dependency graph."""
    ASSEMBLY = "assembly"
    PACKAGE = "package"
    PROJECT = "project"


class Node(BaseModel):
    """
    A vertex of the dependency graph.

    Identity is the `id`: two nodes with the same id are the same node,
    whatever their other fields say.
    """
    id: str
    kind: NodeKind
    version: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def is_assembly(self) -> bool:
        return self.kind is NodeKind.ASSEMBLY

    @property
    def is_package(self) -> bool:
        return self.kind is NodeKind.PACKAGE

    @property
    def is_project(self) -> bool:
        return self.kind is NodeKind.PROJECT

    def __str__(self) -> str:
        if self.version:
            return f"{self.id} {self.version}"
        return self.id

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Node):
            return self.id == other.id
        return False


class Edge(BaseModel):
    """
    Directed relationship between two Nodes.

    A non-empty label is the version the start node wants of the end node.
    """
    start: Node
    end: Node
    label: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def wanted_version(self) -> Optional[str]:
        """The label, or None when it is missing or empty."""
        return self.label or None
