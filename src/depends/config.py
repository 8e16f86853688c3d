"""
Global Configuration and Defaults.

This module centralizes the constants shared by target resolution,
the CLI and the terminal UI: which files count as solutions or projects,
which verbosity levels the CLI accepts, and the interactive key bindings.
"""

import logging
from typing import Dict, List, Optional

# --- Target discovery ---

# A directory containing exactly one of these is analyzed as a solution
SOLUTION_SUFFIX = ".sln"

# Any file extension ending in this is a project file (*.csproj, *.fsproj, *.proj, ...)
PROJECT_SUFFIX = "proj"

# --- Verbosity ---

VERBOSITY_NAMES: List[str] = [
    "Trace", "Debug", "Information", "Warning", "Error", "Critical", "None",
]

# Lowercased level names mapped to logging levels. None disables logging entirely.
VERBOSITY_LEVELS: Dict[str, Optional[int]] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "information": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "none": None,
}

DEFAULT_VERBOSITY = "Warning"

# --- Interactive UI ---

QUIT_KEY = "escape"
TOGGLE_ASSEMBLIES_KEY = "ctrl+d"

HELP_TEXT = (
    "Use arrow keys and Tab to move around. "
    "Ctrl+D to toggle assembly visibility. Esc to quit."
)

WANTED_TEMPLATE = " (Wanted: {label})"

# Entry-point group where build-system analyzers register themselves
ANALYZER_ENTRY_POINT_GROUP = "depends.analyzers"


def logging_level(verbosity: str) -> Optional[int]:
    """Translate a CLI verbosity name (case-insensitive) into a logging level."""
    return VERBOSITY_LEVELS[verbosity.lower()]
