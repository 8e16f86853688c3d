"""
Terminal UI for depends.

The interaction loop holds the logic (events to state transitions) and can
be driven without a terminal; DependsApp only renders what it reports.
"""

from .loop import Event, EventKind, InteractionLoop, RenderRequest

__all__ = [
    "Event",
    "EventKind",
    "InteractionLoop",
    "RenderRequest",
]
