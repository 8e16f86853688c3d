"""
Precomputed graph analyzer.

Serves graphs exported ahead of time as JSON (see core.serialize). A file
may hold a single graph, or one graph per target framework:

    {"frameworks": {"net8.0": {"nodes": [...], "edges": [...]}, ...}}

With per-framework documents, --framework picks the graph; without it the
first framework listed is used.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.graph import DependencyGraph
from ..core.serialize import GraphFormatError, graph_from_dict
from .base import AnalysisError

logger = logging.getLogger(__name__)


class GraphFileAnalyzer:
    """DependencyAnalyzer reading every graph from one JSON file."""

    def __init__(self, graph_file: Union[str, Path]):
        self.graph_file = Path(graph_file)

    def analyze(self, project_path: Path, framework: Optional[str] = None) -> DependencyGraph:
        graph = self._load(str(project_path), framework)
        if not graph.has_node(Path(project_path).stem):
            logger.warning(f"Project {Path(project_path).stem} does not appear in {self.graph_file}")
        return graph

    def analyze_solution(self, solution_path: Path, framework: Optional[str] = None) -> DependencyGraph:
        return self._load(str(solution_path), framework)

    def analyze_package(
        self,
        package: str,
        version: Optional[str] = None,
        framework: Optional[str] = None,
    ) -> DependencyGraph:
        graph = self._load(package, framework)
        node = graph.get_node(package)
        if node is None:
            raise AnalysisError(package, f"package not found in {self.graph_file}")
        if version and node.version and node.version != version:
            raise AnalysisError(
                package, f"graph holds version {node.version}, not {version}"
            )
        return graph

    def _load(self, target: str, framework: Optional[str]) -> DependencyGraph:
        logger.info(f"Loading precomputed graph for {target} from {self.graph_file}")
        try:
            data = json.loads(self.graph_file.read_text(encoding="utf-8"))
        except OSError as e:
            raise AnalysisError(target, f"cannot read {self.graph_file}: {e.strerror or e}") from e
        except json.JSONDecodeError as e:
            raise AnalysisError(target, f"{self.graph_file} is not valid JSON: {e}") from e

        try:
            return graph_from_dict(self._select_framework(target, data, framework))
        except GraphFormatError as e:
            raise AnalysisError(target, str(e)) from e

    def _select_framework(
        self, target: str, data: Dict[str, Any], framework: Optional[str]
    ) -> Dict[str, Any]:
        frameworks = data.get("frameworks") if isinstance(data, dict) else None
        if not frameworks:
            if framework:
                logger.debug(f"{self.graph_file} is not per-framework; ignoring --framework {framework}")
            return data

        if not isinstance(frameworks, dict):
            raise AnalysisError(target, "'frameworks' must map framework names to graphs")

        if framework is None:
            framework = next(iter(frameworks))
            logger.info(f"No framework given, using {framework}")

        if framework not in frameworks:
            available = ", ".join(frameworks)
            raise AnalysisError(
                target, f"framework '{framework}' not found (available: {available})"
            )
        return frameworks[framework]
