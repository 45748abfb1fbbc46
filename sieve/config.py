"""
Schema configuration resolved from the trailing factory arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, TypeVar

from .types import ErrorMessage, Pipe

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SchemaConfig(Generic[T]):
    """
    Override messages and pipes for one schema.

    `messages` replace the default message when the type check fails.
    `pipes` run in order once the type check passes.
    """

    messages: tuple[ErrorMessage, ...] = ()
    pipes: tuple[Pipe[T], ...] = ()

    @classmethod
    def from_args(cls, args: Iterable[Any]) -> SchemaConfig[T]:
        """
        Split mixed factory arguments into messages and pipes.

        Conversion rules:
            str -> override message
            SchemaConfig -> merged (messages and pipes appended)
            Callable -> pipe
        """
        messages: list[ErrorMessage] = []
        pipes: list[Pipe[T]] = []

        for arg in args:
            if isinstance(arg, str):
                messages.append(arg)
            elif isinstance(arg, SchemaConfig):
                messages.extend(arg.messages)
                pipes.extend(arg.pipes)
            elif callable(arg):
                pipes.append(arg)
            else:
                raise TypeError(
                    f"Schema arguments must be messages or pipes, got {type(arg).__name__}"
                )

        return cls(messages=tuple(messages), pipes=tuple(pipes))

    def failure_messages(self, default: ErrorMessage) -> tuple[ErrorMessage, ...]:
        return self.messages or (default,)
