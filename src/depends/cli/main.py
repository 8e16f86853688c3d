"""
depends CLI - Main entry point.

Resolves the analysis target, builds the dependency graph through the
selected analyzer and opens the interactive explorer. Every failure before
the UI starts is reported on stderr and exits with status 1.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from .. import __version__
from ..analysis import AnalysisError, DependencyAnalyzer, load_analyzer
from ..config import DEFAULT_VERBOSITY, VERBOSITY_NAMES
from ..core.graph import DependencyGraph
from ..core.resolver import is_solution_file, resolve_target
from ..core.types import DependsError
from .utils import configure_logging, echo_error, echo_info, route_logging_to_ui

logger = logging.getLogger(__name__)

console = Console(stderr=True)


@click.command()
@click.version_option(__version__, "--about", prog_name="depends")
@click.argument("project", default=".", type=click.Path())
@click.option("-v", "--verbosity", type=click.Choice(VERBOSITY_NAMES, case_sensitive=False),
              default=DEFAULT_VERBOSITY, show_default=True,
              help="Sets the verbosity level of the command.")
@click.option("-f", "--framework", help="Analyzes for a specific framework. "
              "The framework must be defined in the project file.")
@click.option("--package", help="Analyzes a specific package.")
@click.option("--version", "package_version", help="The version of the package to analyze.")
@click.option("-g", "--graph", "graph_file", type=click.Path(exists=True, dir_okay=False),
              help="Precomputed graph JSON file to explore instead of running an analyzer.")
@click.option("--analyzer", "analyzer_name", help="Name of the installed analyzer plugin to use.")
def main(
    project: str,
    verbosity: str,
    framework: Optional[str],
    package: Optional[str],
    package_version: Optional[str],
    graph_file: Optional[str],
    analyzer_name: Optional[str],
) -> None:
    """
    Explore the dependencies of a project, solution or package.

    PROJECT is the project or solution file to analyze. If a directory is
    given (the default is the current one), it is searched for a single
    solution file, then for a single file whose extension ends in "proj".

    \b
    Examples:
      depends MyApp.csproj
      depends ./src --framework net8.0
      depends --package Newtonsoft.Json --version 13.0.1
      depends --graph graph.json
    """
    configure_logging(verbosity)

    target: Optional[Path] = None
    if not package:
        resolution = resolve_target(project)
        if resolution.is_err():
            echo_error(resolution.error.message)
            for candidate in resolution.error.candidates:
                echo_info(str(candidate))
            sys.exit(1)
        target = resolution.unwrap()
        logger.info(f"Resolved {project} to {target}")

    try:
        analyzer = load_analyzer(
            Path(graph_file) if graph_file else None,
            analyzer_name,
        )
        with console.status(f"Analyzing {package or target}..."):
            graph = build_graph(analyzer, target, framework, package, package_version)
    except DependsError as e:
        echo_error(str(e))
        sys.exit(1)

    logger.info(f"Graph ready: {graph.node_count} nodes, {graph.edge_count} edges")

    # Lazy import: textual is only needed once there is a graph to show
    from ..tui.app import DependsApp

    route_logging_to_ui()
    DependsApp(graph).run()


def build_graph(
    analyzer: DependencyAnalyzer,
    target: Optional[Path],
    framework: Optional[str],
    package: Optional[str] = None,
    package_version: Optional[str] = None,
) -> DependencyGraph:
    """
    Dispatch to the analyzer operation matching the target.

    A package always takes priority over the resolved path.
    """
    if package:
        return analyzer.analyze_package(package, package_version, framework)
    if target is None:
        raise AnalysisError("<none>", "no project, solution or package to analyze")
    if is_solution_file(target):
        return analyzer.analyze_solution(target, framework)
    return analyzer.analyze(target, framework)


if __name__ == "__main__":
    main()
