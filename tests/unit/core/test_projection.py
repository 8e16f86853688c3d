"""Unit tests for the projection engine."""

from depends.core.graph import DependencyGraph
from depends.core.projection import Projection, format_wanted, project, project_node
from depends.core.selection import SelectionState
from depends.core.types import Edge
from graph_helpers import assembly, package
from graph_helpers import project as project_node_of


def select(state, node_id):
    state.select_index([n.id for n in state.ordered_nodes].index(node_id))


class TestFormatWanted:
    def test_with_label(self):
        assert format_wanted(package("C"), "2.0.0") == "C (Wanted: 2.0.0)"

    def test_without_label(self):
        assert format_wanted(package("C"), None) == "C"
        assert format_wanted(package("C"), "") == "C"

    def test_uses_node_display(self):
        assert format_wanted(package("C", "1.0"), "2.0") == "C 1.0 (Wanted: 2.0)"


class TestProject:
    def test_scenario_select_project(self, abc_graph):
        state = SelectionState(abc_graph)
        select(state, "A")

        panes = project(abc_graph, state)

        assert [n.id for n in panes.runtime] == ["B"]
        assert panes.package == ("C (Wanted: 2.0.0)",)
        assert panes.reverse == ()

    def test_scenario_select_package(self, abc_graph):
        state = SelectionState(abc_graph)
        select(state, "C")

        panes = project(abc_graph, state)

        assert panes.runtime == ()
        assert panes.package == ()
        assert panes.reverse == ("A (Wanted: 2.0.0)",)

    def test_scenario_select_assembly(self, abc_graph):
        state = SelectionState(abc_graph)
        select(state, "B")

        assert project(abc_graph, state).reverse == ("A",)

    def test_empty_graph(self, empty_graph):
        panes = project(empty_graph, SelectionState(empty_graph))

        assert panes == Projection()
        assert panes.is_empty

    def test_outgoing_split_by_end_kind(self, solution_graph):
        state = SelectionState(solution_graph)
        select(state, "App")

        panes = project(solution_graph, state)

        # The Lib project edge is neither runtime nor package
        assert [n.id for n in panes.runtime] == ["System.Runtime"]
        assert panes.package == ("Newtonsoft.Json 13.0.1 (Wanted: 13.0.1)",)

    def test_reverse_includes_every_start_kind(self, solution_graph):
        state = SelectionState(solution_graph)
        select(state, "System.Runtime")

        panes = project(solution_graph, state)

        assert panes.reverse == ("App", "Newtonsoft.Json 13.0.1")

    def test_reverse_keeps_edge_order_and_labels(self, solution_graph):
        state = SelectionState(solution_graph)
        select(state, "Newtonsoft.Json")

        panes = project(solution_graph, state)

        assert panes.reverse == ("App (Wanted: 13.0.1)", "Lib (Wanted: 12.0.3)")

    def test_empty_label_has_no_suffix(self, solution_graph):
        state = SelectionState(solution_graph)
        select(state, "Lib")

        panes = project(solution_graph, state)

        assert panes.package == ("Newtonsoft.Json 13.0.1 (Wanted: 12.0.3)", "Serilog 3.1.1")
        assert [n.id for n in panes.runtime] == ["mscorlib"]

    def test_only_selected_node_edges(self, solution_graph):
        state = SelectionState(solution_graph)
        for index, node in enumerate(state.ordered_nodes):
            state.select_index(index)
            panes = project(solution_graph, state)
            outgoing = solution_graph.out_edges(node.id)
            assert set(panes.runtime) <= {e.end for e in outgoing}
            assert len(panes.reverse) == len(solution_graph.in_edges(node.id))

    def test_follows_visibility_toggle(self, abc_graph):
        state = SelectionState(abc_graph)
        state.toggle_assembly_visibility()

        # Selection reset to "A", the first non-assembly node
        panes = project(abc_graph, state)

        assert [n.id for n in panes.runtime] == ["B"]

    def test_no_selection_when_filtered_empty(self):
        graph = DependencyGraph(nodes=[assembly("X")])
        state = SelectionState(graph)
        state.toggle_assembly_visibility()

        assert project(graph, state).is_empty


class TestProjectNode:
    def test_none(self, abc_graph):
        assert project_node(abc_graph, None) == Projection()

    def test_parallel_package_edges(self):
        a, p = project_node_of("A"), package("P")
        graph = DependencyGraph(
            nodes=[a, p],
            edges=[Edge(start=a, end=p, label="1.0"), Edge(start=a, end=p, label="2.0")],
        )

        assert project_node(graph, a).package == ("P (Wanted: 1.0)", "P (Wanted: 2.0)")

    def test_panes_follow_node_list_kind(self):
        a, b = project_node_of("A"), assembly("B")
        graph = DependencyGraph(
            nodes=[a, b],
            edges=[Edge(start=a, end=package("B"), label="1.0")],
        )

        result = project_node(graph, a)

        assert result.runtime == (b,)
        assert result.package == ()
