"""
Target Resolver.

Turns the path given on the command line into exactly one file the graph
builder can analyze.

Resolution Strategy:
    1. A file is taken as-is (made absolute).
    2. A directory is searched, without descending into subdirectories, for
       a solution file (*.sln). Exactly one wins outright.
    3. Failing that, for a project file (any extension ending in "proj").
    4. Anything else is an error: missing or unreadable path, several
       candidates of the same kind, or no candidates at all.

Suffix matching is case-insensitive. Resolution never mutates its input and
reports failures as Err values, so the CLI can print them before any UI
or analysis work begins.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import List, Union

from ..config import PROJECT_SUFFIX, SOLUTION_SUFFIX
from .result import Err, Ok, Result, and_then, map_ok

logger = logging.getLogger(__name__)


class ResolutionErrorKind(StrEnum):
    """Why a path could not be resolved to an analysis target."""
    NOT_FOUND = "not_found"
    AMBIGUOUS_SOLUTION = "ambiguous_solution"
    AMBIGUOUS_PROJECT = "ambiguous_project"
    NO_TARGET_FOUND = "no_target_found"
    UNREADABLE = "unreadable"


@dataclass(frozen=True)
class ResolutionError:
    """
    A failed resolution.

    Attributes:
        kind: Which condition was hit.
        path: The path that was being resolved.
        candidates: The matching files, sorted, for the ambiguous kinds.
        reason: The operating system's explanation, for UNREADABLE.
    """

    kind: ResolutionErrorKind
    path: Path
    candidates: List[Path] = field(default_factory=list)
    reason: str = ""

    @property
    def message(self) -> str:
        if self.kind is ResolutionErrorKind.NOT_FOUND:
            return f"Project path does not exist: {self.path}"
        if self.kind is ResolutionErrorKind.UNREADABLE:
            return f"Project directory cannot be read: {self.path} ({self.reason})"
        if self.kind is ResolutionErrorKind.AMBIGUOUS_SOLUTION:
            return (
                f"More than one solution file found in {self.path} "
                f"({len(self.candidates)} candidates). Specify which one to use."
            )
        if self.kind is ResolutionErrorKind.AMBIGUOUS_PROJECT:
            return (
                f"More than one project file found in {self.path} "
                f"({len(self.candidates)} candidates). Specify which one to use."
            )
        return f"Unable to find any solution or project files in {self.path}"

    def __str__(self) -> str:
        return self.message


def is_solution_file(path: Union[str, Path]) -> bool:
    """Check whether a path names a solution file."""
    return Path(path).name.lower().endswith(SOLUTION_SUFFIX)


def is_project_file(path: Union[str, Path]) -> bool:
    """Check whether a path names a project file (*.*proj)."""
    suffix = Path(path).suffix.lower()
    return len(suffix) > 1 and suffix.endswith(PROJECT_SUFFIX)


def _absolute(path: Path) -> Path:
    return Path(os.path.abspath(path))


def _list_files(directory: Path) -> Result[List[Path], ResolutionError]:
    try:
        return Ok(sorted(p for p in directory.iterdir() if p.is_file()))
    except OSError as e:
        logger.debug(f"Cannot list {directory}: {e}")
        return Err(ResolutionError(
            ResolutionErrorKind.UNREADABLE, directory, reason=e.strerror or str(e)
        ))


def resolve_target(input_path: Union[str, Path]) -> Result[Path, ResolutionError]:
    """
    Resolve a file or directory into a single analyzable file.

    Args:
        input_path: A solution/project file, or a directory to search.

    Returns:
        Ok(absolute path) or Err(ResolutionError).
    """
    path = Path(input_path)

    if not (path.is_file() or path.is_dir()):
        return Err(ResolutionError(ResolutionErrorKind.NOT_FOUND, path))

    if path.is_file():
        return Ok(_absolute(path))

    return map_ok(
        and_then(_list_files(path), lambda files: _pick_target(path, files)),
        _absolute,
    )


def _pick_target(directory: Path, files: List[Path]) -> Result[Path, ResolutionError]:
    solutions = [f for f in files if is_solution_file(f)]
    if solutions:
        logger.debug(f"Found {len(solutions)} solution file(s) in {directory}")
        return _single(solutions, directory, ResolutionErrorKind.AMBIGUOUS_SOLUTION)

    projects = [f for f in files if is_project_file(f)]
    if projects:
        logger.debug(f"Found {len(projects)} project file(s) in {directory}")
        return _single(projects, directory, ResolutionErrorKind.AMBIGUOUS_PROJECT)

    return Err(ResolutionError(ResolutionErrorKind.NO_TARGET_FOUND, directory))


def _single(
    candidates: List[Path],
    directory: Path,
    ambiguous: ResolutionErrorKind,
) -> Result[Path, ResolutionError]:
    if len(candidates) == 1:
        return Ok(candidates[0])
    return Err(ResolutionError(ambiguous, directory, candidates))
