"""
Result values for expected failures.

Resolving the command-line path can fail in ordinary ways (nothing there,
several candidates, an unreadable directory). Those outcomes are returned
as Err values carrying a description of the problem, so the CLI can report
them before any analysis starts. Steps are chained with `and_then` and
`map_ok`; the first Err short-circuits the rest.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from .types import DependsError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class UnwrapError(DependsError, ValueError):
    """Raised when the value of an Err is requested."""


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise UnwrapError(f"Called unwrap on Err: {self.error}")


Result = Union[Ok[T], Err[E]]


def map_ok(result: "Result[T, E]", func: Callable[[T], U]) -> "Result[U, E]":
    """Transform the value of an Ok; an Err passes through untouched."""
    if isinstance(result, Ok):
        return Ok(func(result.value))
    return result


def and_then(result: "Result[T, E]", func: "Callable[[T], Result[U, E]]") -> "Result[U, E]":
    """Feed the value of an Ok to a step that may itself fail."""
    if isinstance(result, Ok):
        return func(result.value)
    return result
