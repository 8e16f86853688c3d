"""
Analyzer contract.

An analyzer turns a solution, a project or a standalone package into a
DependencyGraph. Depends does not read build-system formats itself; it
delegates to whichever analyzer the CLI was given.
"""

from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from ..core.graph import DependencyGraph
from ..core.types import DependsError


class AnalysisError(DependsError):
    """
    Raised when an analyzer cannot produce a graph.

    Attributes:
        target: The project, solution or package being analyzed.
        message: Human-readable reason.
    """

    def __init__(self, target: str, message: str):
        self.target = target
        self.message = message
        super().__init__(f"Failed to analyze '{target}': {message}")


@runtime_checkable
class DependencyAnalyzer(Protocol):
    """Builds dependency graphs for projects, solutions and packages."""

    def analyze(self, project_path: Path, framework: Optional[str] = None) -> DependencyGraph:
        ...

    def analyze_solution(self, solution_path: Path, framework: Optional[str] = None) -> DependencyGraph:
        ...

    def analyze_package(
        self,
        package: str,
        version: Optional[str] = None,
        framework: Optional[str] = None,
    ) -> DependencyGraph:
        ...
