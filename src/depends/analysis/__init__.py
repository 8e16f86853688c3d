"""
Graph builders for depends.

Usage:
    from depends.analysis import load_analyzer

    analyzer = load_analyzer(graph_file=Path("graph.json"))
    graph = analyzer.analyze(Path("App.csproj"))
"""

from .base import AnalysisError, DependencyAnalyzer
from .graph_file import GraphFileAnalyzer
from .registry import available_analyzers, load_analyzer

__all__ = [
    "AnalysisError",
    "DependencyAnalyzer",
    "GraphFileAnalyzer",
    "available_analyzers",
    "load_analyzer",
]
