"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing and logging setup used before the terminal UI starts.
Messages go to stderr; once the UI runs, log records go to textual's log.
"""

import logging
import sys
from typing import Optional

import click

from ..config import logging_level


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_info(message: str) -> None:
    """Print an informational message, dimmed."""
    click.echo(click.style(f"   {message}", dim=True), err=True)


def configure_logging(verbosity: str) -> Optional[int]:
    """
    Configure the root logger from a CLI verbosity name.

    "None" turns logging off altogether. Returns the level applied, or None.
    """
    level = logging_level(verbosity)
    if level is None:
        logging.disable(logging.CRITICAL)
        return None

    logging.disable(logging.NOTSET)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="[%X]",
        stream=sys.stderr,
        force=True,
    )
    return level


def route_logging_to_ui() -> None:
    """
    Move root log handlers off the terminal before the explorer starts.

    textual draws the UI on the process's stderr, so console handlers are
    replaced by a TextualHandler and records from inside the app go to
    textual's own log (visible with `textual console`). Other handlers,
    such as files, are left alone.
    """
    from textual.logging import TextualHandler

    root = logging.getLogger()
    terminals = {id(s) for s in (sys.stderr, sys.__stderr__, sys.stdout, sys.__stdout__)}
    console_handlers = [
        h for h in root.handlers
        if isinstance(h, logging.StreamHandler)
        and not isinstance(h, logging.FileHandler)
        and id(h.stream) in terminals
    ]
    if not console_handlers:
        return

    for handler in console_handlers:
        root.removeHandler(handler)

    ui_handler = TextualHandler()
    ui_handler.setFormatter(console_handlers[0].formatter)
    root.addHandler(ui_handler)
