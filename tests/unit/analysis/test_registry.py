"""Unit tests for analyzer discovery."""

from unittest.mock import MagicMock, patch

import pytest

from depends.analysis import AnalysisError, GraphFileAnalyzer, load_analyzer


def entry_point(name, factory):
    ep = MagicMock()
    ep.name = name
    ep.value = f"plugin_{name}:create"
    ep.load.return_value = factory
    return ep


class FakeAnalyzer:
    def analyze(self, project_path, framework=None): ...
    def analyze_solution(self, solution_path, framework=None): ...
    def analyze_package(self, package, version=None, framework=None): ...


class TestLoadAnalyzer:
    def test_graph_file_wins(self, tmp_path):
        with patch("depends.analysis.registry.entry_points") as mock_eps:
            analyzer = load_analyzer(tmp_path / "graph.json", "msbuild")

        assert isinstance(analyzer, GraphFileAnalyzer)
        assert analyzer.graph_file == tmp_path / "graph.json"
        mock_eps.assert_not_called()

    @patch("depends.analysis.registry.entry_points")
    def test_no_plugins(self, mock_eps):
        mock_eps.return_value = []

        with pytest.raises(AnalysisError, match="--graph"):
            load_analyzer()

    @patch("depends.analysis.registry.entry_points")
    def test_first_plugin_by_name(self, mock_eps):
        first, second = FakeAnalyzer(), FakeAnalyzer()
        mock_eps.return_value = [
            entry_point("zeta", lambda log: second),
            entry_point("alpha", lambda log: first),
        ]

        assert load_analyzer() is first
        mock_eps.assert_called_once_with(group="depends.analyzers")

    @patch("depends.analysis.registry.entry_points")
    def test_named_plugin(self, mock_eps):
        wanted = FakeAnalyzer()
        factory = MagicMock(return_value=wanted)
        mock_eps.return_value = [
            entry_point("alpha", lambda log: FakeAnalyzer()),
            entry_point("msbuild", factory),
        ]

        assert load_analyzer(name="msbuild") is wanted
        assert factory.call_args.args[0].name == "depends.analyzers.msbuild"

    @patch("depends.analysis.registry.entry_points")
    def test_unknown_named_plugin(self, mock_eps):
        mock_eps.return_value = [entry_point("alpha", lambda log: FakeAnalyzer())]

        with pytest.raises(AnalysisError) as exc:
            load_analyzer(name="msbuild")

        assert exc.value.target == "msbuild"

    @patch("depends.analysis.registry.entry_points")
    def test_plugin_must_provide_analyzer(self, mock_eps):
        mock_eps.return_value = [entry_point("broken", lambda log: object())]

        with pytest.raises(AnalysisError, match="does not provide"):
            load_analyzer()
