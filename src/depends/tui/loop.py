"""
Interaction Loop.

Maps input events to SelectionState transitions through an explicit
dispatch table. Each transition returns a RenderRequest telling the UI how
much of the screen to redraw; the loop itself never touches the terminal.

    QUIT               -> STOP   (no state change)
    TOGGLE_ASSEMBLIES  -> ALL    (node list and panes)
    SELECTION_CHANGED  -> PANES  (the list redraws itself)

Events the table does not know are left to the toolkit's default handling.
"""

import logging
from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Callable, Dict, Optional

from ..core.graph import DependencyGraph
from ..core.projection import Projection, project
from ..core.selection import SelectionState

logger = logging.getLogger(__name__)


class EventKind(StrEnum):
    QUIT = "quit"
    TOGGLE_ASSEMBLIES = "toggle_assemblies"
    SELECTION_CHANGED = "selection_changed"


class RenderRequest(Enum):
    """What the UI must redraw after a transition."""
    NONE = "none"
    PANES = "panes"
    ALL = "all"
    STOP = "stop"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    index: Optional[int] = None

    @classmethod
    def quit(cls) -> "Event":
        return cls(EventKind.QUIT)

    @classmethod
    def toggle_assemblies(cls) -> "Event":
        return cls(EventKind.TOGGLE_ASSEMBLIES)

    @classmethod
    def selection_changed(cls, index: int) -> "Event":
        return cls(EventKind.SELECTION_CHANGED, index)


class InteractionLoop:
    """
    Event-driven controller over a SelectionState.

    Transitions run synchronously and to completion; there is no retry.
    An invalid selection index propagates as SelectionError.
    """

    def __init__(self, graph: DependencyGraph, state: Optional[SelectionState] = None):
        self.graph = graph
        self.state = state if state is not None else SelectionState(graph)
        self.running = True
        self._dispatch: Dict[EventKind, Callable[[Event], RenderRequest]] = {
            EventKind.QUIT: self._on_quit,
            EventKind.TOGGLE_ASSEMBLIES: self._on_toggle_assemblies,
            EventKind.SELECTION_CHANGED: self._on_selection_changed,
        }

    def handles(self, kind: EventKind) -> bool:
        return kind in self._dispatch

    def dispatch(self, event: Event) -> RenderRequest:
        """Apply the transition bound to `event` and report what to redraw."""
        if not self.running:
            return RenderRequest.NONE
        handler = self._dispatch.get(event.kind)
        if handler is None:
            return RenderRequest.NONE
        return handler(event)

    def projection(self) -> Projection:
        return project(self.graph, self.state)

    def _on_quit(self, event: Event) -> RenderRequest:
        self.running = False
        return RenderRequest.STOP

    def _on_toggle_assemblies(self, event: Event) -> RenderRequest:
        self.state.toggle_assembly_visibility()
        return RenderRequest.ALL

    def _on_selection_changed(self, event: Event) -> RenderRequest:
        if event.index is None:
            raise ValueError("SELECTION_CHANGED event requires an index")
        self.state.select_index(event.index)
        logger.debug(f"Selected {self.state.selected_node}")
        return RenderRequest.PANES
