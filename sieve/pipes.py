"""
Pipe runtime and built-in pipes.

A pipe refines a value that already passed its schema's type check. It
returns a Result carrying the (possibly transformed) value and any error
messages.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Iterable, Sized

from .types import ErrorMessage, Pipe, Result

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(
    r"^[\w+-]+(?:\.[\w+-]+)*@[\da-z]+(?:[.-][\da-z]+)*\.[a-z]{2,}$",
    re.IGNORECASE,
)


def run_pipes(value: Any, pipes: Iterable[Pipe[Any] | str]) -> Result[Any]:
    """
    Run every pipe over `value`, left to right.

    Each pipe receives the previous pipe's output. A failing pipe does not
    stop the ones after it; all messages are collected in order. Strings in
    `pipes` are override messages for the type check and are skipped here.
    """
    messages: list[ErrorMessage] | None = None

    for pipe in pipes:
        if isinstance(pipe, str):
            continue

        try:
            result = pipe(value)
        except Exception as e:
            logger.debug("Pipe %r raised on %r", pipe, value, exc_info=True)
            result = Result(value, (f"Pipe error: {e}",))

        value = result.output
        if result.error_messages:
            if messages is None:
                messages = []
            messages.extend(result.error_messages)

    if messages is None:
        return Result(value)
    return Result(value, tuple(messages))


def min_length(n: int, message: ErrorMessage = "MinLength") -> Pipe[Sized]:
    """Fail when the value's length is `n` or less."""

    def pipe(value: Sized) -> Result[Sized]:
        if len(value) <= n:
            return Result(value, (message,))
        return Result(value)

    return pipe


def max_length(n: int, message: ErrorMessage = "MaxLength") -> Pipe[Sized]:
    """Fail when the value's length is `n` or more."""

    def pipe(value: Sized) -> Result[Sized]:
        if len(value) >= n:
            return Result(value, (message,))
        return Result(value)

    return pipe


def email_address(message: ErrorMessage = "EmailAddress") -> Pipe[str]:
    """
    Validate that a string is an email address.

    Usage:
        string(email_address())
        string(email_address("Enter a valid email"))
    """

    def pipe(value: str) -> Result[str]:
        if EMAIL_PATTERN.fullmatch(value) is None:
            return Result(value, (message,))
        return Result(value)

    return pipe


def regex(pattern: str | re.Pattern[str], message: ErrorMessage = "Regex") -> Pipe[str]:
    """
    Validate that a string matches a regex pattern at its start.

    Usage:
        regex(r"^[a-z]+$")
        regex(r"\\d{3}-\\d{4}", "Phone")
    """
    compiled = re.compile(pattern)

    def pipe(value: str) -> Result[str]:
        if compiled.match(value) is None:
            return Result(value, (message,))
        return Result(value)

    return pipe


def check(predicate: Callable[[Any], bool], message: ErrorMessage = "Check") -> Pipe[Any]:
    """
    Create a pipe from an arbitrary predicate.

    Usage:
        number(check(lambda x: x > 0, "Positive"))
    """

    def pipe(value: Any) -> Result[Any]:
        if not predicate(value):
            return Result(value, (message,))
        return Result(value)

    return pipe


def transform(fn: Callable[[Any], Any]) -> Pipe[Any]:
    """
    Create a pipe that replaces the value with `fn(value)`.

    Usage:
        string(transform(str.strip), min_length(0))
    """

    def pipe(value: Any) -> Result[Any]:
        return Result(fn(value))

    return pipe
