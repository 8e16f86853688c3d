"""
Analyzer discovery.

Build-system integrations ship as separate distributions that register a
factory under the `depends.analyzers` entry-point group. The factory is
called with the logger the analyzer should use and must return an object
satisfying DependencyAnalyzer.
"""

import logging
from importlib.metadata import EntryPoint, entry_points
from pathlib import Path
from typing import List, Optional

from ..config import ANALYZER_ENTRY_POINT_GROUP
from .base import AnalysisError, DependencyAnalyzer
from .graph_file import GraphFileAnalyzer

logger = logging.getLogger(__name__)


def available_analyzers() -> List[EntryPoint]:
    """Installed analyzer plugins, sorted by name."""
    return sorted(entry_points(group=ANALYZER_ENTRY_POINT_GROUP), key=lambda ep: ep.name)


def load_analyzer(
    graph_file: Optional[Path] = None,
    name: Optional[str] = None,
) -> DependencyAnalyzer:
    """
    Pick the analyzer for this session.

    A precomputed graph file always wins. Otherwise the plugin called `name`
    is used, or the first installed plugin when no name is given.

    Raises:
        AnalysisError: If no analyzer is available.
    """
    if graph_file is not None:
        return GraphFileAnalyzer(graph_file)

    plugins = available_analyzers()
    if name is not None:
        plugins = [ep for ep in plugins if ep.name == name]
        if not plugins:
            raise AnalysisError(name, "analyzer plugin is not installed")
    if not plugins:
        raise AnalysisError(
            name or "<analyzer>",
            "no graph builder is installed; pass --graph with a precomputed graph file",
        )

    plugin = plugins[0]
    logger.info(f"Using analyzer plugin '{plugin.name}' ({plugin.value})")
    factory = plugin.load()
    analyzer = factory(logging.getLogger(f"depends.analyzers.{plugin.name}"))
    if not isinstance(analyzer, DependencyAnalyzer):
        raise AnalysisError(plugin.name, "plugin does not provide a DependencyAnalyzer")
    return analyzer
