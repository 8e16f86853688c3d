"""Shared fixtures for depends tests."""

import logging

import pytest

from depends.core.graph import DependencyGraph
from depends.core.types import Edge
from graph_helpers import assembly, package, project


@pytest.fixture
def abc_graph():
    """A(Project) -> B(Assembly), A -> C(Package, wanted 2.0.0)."""
    a, b, c = project("A"), assembly("B"), package("C")
    return DependencyGraph(
        nodes=[a, b, c],
        edges=[Edge(start=a, end=b), Edge(start=a, end=c, label="2.0.0")],
    )


@pytest.fixture
def solution_graph():
    """
    A small solution:

        App -> Lib (project)
        App -> Newtonsoft.Json (wanted 13.0.1)
        App -> System.Runtime (assembly)
        Lib -> Newtonsoft.Json (wanted 12.0.3)
        Lib -> Serilog
        Lib -> mscorlib (assembly)
        Newtonsoft.Json -> System.Runtime (assembly)
    """
    app, lib = project("App"), project("Lib")
    json_pkg, serilog = package("Newtonsoft.Json", "13.0.1"), package("Serilog", "3.1.1")
    runtime, corlib = assembly("System.Runtime"), assembly("mscorlib")
    return DependencyGraph(
        nodes=[app, lib, json_pkg, serilog, runtime, corlib],
        edges=[
            Edge(start=app, end=lib),
            Edge(start=app, end=json_pkg, label="13.0.1"),
            Edge(start=app, end=runtime),
            Edge(start=lib, end=json_pkg, label="12.0.3"),
            Edge(start=lib, end=serilog, label=""),
            Edge(start=lib, end=corlib),
            Edge(start=json_pkg, end=runtime),
        ],
    )


@pytest.fixture
def empty_graph():
    return DependencyGraph()


@pytest.fixture(autouse=True)
def _restore_logging():
    """The CLI reconfigures the root logger; undo that between tests."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    logging.disable(logging.NOTSET)
    root.handlers[:] = handlers
    root.setLevel(level)
