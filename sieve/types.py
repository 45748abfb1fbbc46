"""
Type definitions for sieve.

Provides the Result type, the MISSING sentinel and the ValidationError
raised at the parse boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Sequence, TypeVar

T = TypeVar("T")

ErrorMessage = str


class _Missing(Enum):
    """
    Sentinel for a value that is absent, as opposed to present and None.

    Object schemas pass MISSING for keys that the input mapping does not
    contain, and optional() treats it as "no value given".
    """

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing.MISSING


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """
    Outcome of one schema or pipe step.

    Any error message marks the result as a failure. On failure `output`
    is advisory only and must not be treated as a T.
    """

    output: T | Any
    error_messages: tuple[ErrorMessage, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.error_messages, tuple):
            object.__setattr__(self, "error_messages", tuple(self.error_messages))

    def is_ok(self) -> bool:
        return not self.error_messages

    def is_err(self) -> bool:
        return bool(self.error_messages)


class ValidationError(ValueError):
    """Raised by parse() with every collected error message, in order."""

    def __init__(self, error_messages: Sequence[ErrorMessage]):
        messages = tuple(error_messages)
        if not messages:
            raise ValueError("ValidationError requires at least one error message")

        super().__init__(", ".join(messages))
        self.error_messages = messages


# Type aliases
Pipe = Callable[[T], Result[T]]
CheckFn = Callable[[Any], bool]
