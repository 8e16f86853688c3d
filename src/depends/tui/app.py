"""Textual application rendering the dependency explorer."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, ListItem, ListView, Static

from ..config import HELP_TEXT, QUIT_KEY, TOGGLE_ASSEMBLIES_KEY
from ..core.graph import DependencyGraph
from ..core.projection import Projection
from ..core.types import Node
from .loop import Event, InteractionLoop, RenderRequest

logger = logging.getLogger(__name__)

# Pane id -> border title
PANES = {
    "runtime": "Runtime depends",
    "package": "Package depends",
    "reverse": "Reverse depends",
}


class NodeItem(ListItem):
    """A row of the node list, remembering which node it shows."""

    def __init__(self, node: Node) -> None:
        super().__init__(Label(str(node), markup=False))
        self.graph_node = node


def _text_items(values: Iterable[Any]) -> list[ListItem]:
    return [ListItem(Label(str(value), markup=False)) for value in values]


class DependsApp(App[None]):
    """Terminal UI listing graph nodes beside their three dependency panes."""

    TITLE = "Depends"
    BINDINGS = [
        Binding(QUIT_KEY, "quit_explorer", "Quit", priority=True),
        Binding(TOGGLE_ASSEMBLIES_KEY, "toggle_assemblies", "Toggle assemblies", priority=True),
    ]

    DEFAULT_CSS = """
    #main {
        height: 1fr;
    }
    #dependencies {
        width: 50%;
        border: round $primary;
    }
    #right {
        width: 1fr;
    }
    .pane {
        border: round $accent;
    }
    #runtime {
        height: 33%;
    }
    #package {
        height: 1fr;
    }
    #reverse {
        height: 1fr;
    }
    #help {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    def __init__(self, graph: DependencyGraph, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.interaction = InteractionLoop(graph)

    def compose(self) -> ComposeResult:
        projection = self.interaction.projection()
        with Horizontal(id="main"):
            yield ListView(
                *[NodeItem(n) for n in self.interaction.state.ordered_nodes],
                id="dependencies",
            )
            with Vertical(id="right"):
                yield ListView(*_text_items(projection.runtime), id="runtime", classes="pane")
                yield ListView(*_text_items(projection.package), id="package", classes="pane")
                yield ListView(*_text_items(projection.reverse), id="reverse", classes="pane")
        yield Static(HELP_TEXT, id="help")

    def on_mount(self) -> None:
        stats = self.interaction.graph.get_stats()
        self.sub_title = f"{stats['total_nodes']} nodes, {stats['total_edges']} edges"
        self.query_one("#dependencies", ListView).border_title = "Dependencies"
        for pane_id, title in PANES.items():
            self.query_one(f"#{pane_id}", ListView).border_title = title
        self.query_one("#dependencies", ListView).focus()

    # --- Event wiring ---

    async def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        if event.list_view.id != "dependencies":
            return
        item = event.item
        if not isinstance(item, NodeItem):
            return
        visible = self.interaction.state.ordered_nodes
        # Highlights queued before a toggle may refer to rows that are gone
        if item.graph_node not in visible:
            return
        selection = Event.selection_changed(visible.index(item.graph_node))
        await self._redraw(self.interaction.dispatch(selection))

    async def action_toggle_assemblies(self) -> None:
        await self._redraw(self.interaction.dispatch(Event.toggle_assemblies()))

    async def action_quit_explorer(self) -> None:
        await self._redraw(self.interaction.dispatch(Event.quit()))

    # --- Rendering ---

    async def _redraw(self, request: RenderRequest) -> None:
        if request is RenderRequest.STOP:
            self.exit()
            return
        if request is RenderRequest.ALL:
            await self._redraw_node_list()
        if request in (RenderRequest.ALL, RenderRequest.PANES):
            await self._redraw_panes(self.interaction.projection())

    async def _redraw_node_list(self) -> None:
        node_list = self.query_one("#dependencies", ListView)
        await node_list.clear()
        await node_list.extend([NodeItem(n) for n in self.interaction.state.ordered_nodes])
        if len(self.interaction.state):
            node_list.index = self.interaction.state.selected_index

    async def _redraw_panes(self, projection: Projection) -> None:
        contents = {
            "runtime": projection.runtime,
            "package": projection.package,
            "reverse": projection.reverse,
        }
        for pane_id, values in contents.items():
            pane = self.query_one(f"#{pane_id}", ListView)
            await pane.clear()
            await pane.extend(_text_items(values))
