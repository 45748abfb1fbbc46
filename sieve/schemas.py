"""
Schema classes and factories.

Primitive schemas check a runtime type and then run their pipes. The
structural schemas (object_, array, optional) delegate to child schemas and
aggregate every child's messages before running their own pipes.
"""

from __future__ import annotations

import datetime
import io
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, Mapping, MutableMapping, TypeVar

from .config import SchemaConfig
from .context import is_in_place
from .pipes import run_pipes
from .types import MISSING, CheckFn, ErrorMessage, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Schema(ABC, Generic[T]):
    """A validator for one shape of value."""

    __slots__ = ()

    @abstractmethod
    def parse(self, value: Any) -> Result[T]:
        """Check `value`, returning its output and any error messages."""


@dataclass(frozen=True, slots=True)
class PrimitiveSchema(Schema[T]):
    """
    Leaf schema: a runtime type check followed by pipes.

    Pipes only run once `check` passes. On a type mismatch the override
    messages (or `name`) are returned with the input unchanged.
    """

    name: str
    check: CheckFn
    config: SchemaConfig[T] = field(default_factory=SchemaConfig)
    type_hint: Any = None

    def parse(self, value: Any) -> Result[T]:
        if not self.check(value):
            return Result(value, self.config.failure_messages(self.name))
        return run_pipes(value, self.config.pipes)


@dataclass(frozen=True, slots=True)
class AnySchema(Schema[Any]):
    """Accepts every value; pipes still run."""

    config: SchemaConfig[Any] = field(default_factory=SchemaConfig)

    def parse(self, value: Any) -> Result[Any]:
        return run_pipes(value, self.config.pipes)


@dataclass(frozen=True, slots=True)
class ObjectSchema(Schema[dict[str, Any]]):
    """Schema for mappings with one child schema per key."""

    entries: Mapping[str, Schema[Any]]
    config: SchemaConfig[dict[str, Any]] = field(default_factory=SchemaConfig)

    def parse(self, value: Any) -> Result[dict[str, Any]]:
        if not isinstance(value, Mapping):
            return Result(value, self.config.failure_messages("Object"))

        output = _object_target(value)
        messages: list[ErrorMessage] = []

        for key, schema in self.entries.items():
            result = schema.parse(value.get(key, MISSING))

            if result.output is MISSING:
                output.pop(key, None)
            else:
                output[key] = result.output

            messages.extend(result.error_messages)

        if messages:
            return Result(output, tuple(messages))

        return run_pipes(output, self.config.pipes)


@dataclass(frozen=True, slots=True)
class ArraySchema(Schema[list[T]]):
    """Schema for lists and tuples whose items all match `item`."""

    item: Schema[T]
    config: SchemaConfig[list[T]] = field(default_factory=SchemaConfig)

    def parse(self, value: Any) -> Result[list[T]]:
        if not isinstance(value, (list, tuple)):
            return Result(value, self.config.failure_messages("Array"))

        outputs: list[Any] = []
        messages: list[ErrorMessage] = []

        for item in value:
            result = self.item.parse(item)
            outputs.append(result.output)
            messages.extend(result.error_messages)

        if messages:
            return Result(outputs, tuple(messages))

        return run_pipes(outputs, self.config.pipes)


@dataclass(frozen=True, slots=True)
class OptionalSchema(Schema[Any]):
    """
    Wraps a schema so that an absent value (MISSING) is accepted.

    None is a present value and is handed to the wrapped schema.
    """

    schema: Schema[Any]
    default: Any = MISSING

    def parse(self, value: Any) -> Result[Any]:
        if value is MISSING:
            return Result(self.default)
        return self.schema.parse(value)


def _object_target(value: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Pick the container that object fields are written to."""
    if not is_in_place():
        return dict(value)

    if isinstance(value, MutableMapping):
        return value

    logger.debug(
        "In-place mode on immutable %s, writing to a copy", type(value).__name__
    )
    return dict(value)


# Runtime type checks


def _is_string(x: Any) -> bool:
    return isinstance(x, str)


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _is_bigint(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _is_boolean(x: Any) -> bool:
    return isinstance(x, bool)


def _is_date(x: Any) -> bool:
    return isinstance(x, datetime.date)


def _is_blob(x: Any) -> bool:
    return isinstance(x, (bytes, bytearray, memoryview))


def _is_file(x: Any) -> bool:
    return isinstance(x, io.IOBase)


# Factories


def string(*args: Any) -> PrimitiveSchema[str]:
    """
    String schema.

    Usage:
        string()
        string("Name must be text")
        string(min_length(2), max_length(50))
    """
    return PrimitiveSchema("String", _is_string, SchemaConfig.from_args(args), str)


def number(*args: Any) -> PrimitiveSchema[int | float]:
    """Number schema: int or float, never bool."""
    return PrimitiveSchema(
        "Number", _is_number, SchemaConfig.from_args(args), int | float
    )


def bigint(*args: Any) -> PrimitiveSchema[int]:
    """Integer schema, never bool."""
    return PrimitiveSchema("Bigint", _is_bigint, SchemaConfig.from_args(args), int)


def boolean(*args: Any) -> PrimitiveSchema[bool]:
    return PrimitiveSchema("Boolean", _is_boolean, SchemaConfig.from_args(args), bool)


def date(*args: Any) -> PrimitiveSchema[datetime.date]:
    """Date schema; datetimes are dates too."""
    return PrimitiveSchema(
        "Date", _is_date, SchemaConfig.from_args(args), datetime.date
    )


def blob(*args: Any) -> PrimitiveSchema[bytes]:
    """Binary data: bytes, bytearray or memoryview."""
    return PrimitiveSchema("Blob", _is_blob, SchemaConfig.from_args(args), bytes)


def file(*args: Any) -> PrimitiveSchema[io.IOBase]:
    """Open file objects (anything deriving from io.IOBase)."""
    return PrimitiveSchema("File", _is_file, SchemaConfig.from_args(args), io.IOBase)


def any_(*args: Any) -> AnySchema:
    return AnySchema(SchemaConfig.from_args(args))


def object_(entries: Mapping[str, Schema[Any]], *args: Any) -> ObjectSchema:
    """
    Object schema.

    Every entry is checked, in declaration order, and all failures are
    reported together. Pipes given in `args` run on the whole object only
    when every field passed.

    Usage:
        object_({
            "name": string(min_length(0)),
            "email": optional(string(email_address())),
            "tags": array(string()),
        })
    """
    for key, schema in entries.items():
        if not isinstance(schema, Schema):
            raise TypeError(
                f"Entry {key!r} must be a Schema, got {type(schema).__name__}"
            )

    return ObjectSchema(MappingProxyType(dict(entries)), SchemaConfig.from_args(args))


def array(item: Schema[T], *args: Any) -> ArraySchema[T]:
    """
    Array schema.

    Usage:
        array(number())
        array(string(), "Tags must be a list", min_length(0))
    """
    if not isinstance(item, Schema):
        raise TypeError(f"Array item must be a Schema, got {type(item).__name__}")

    return ArraySchema(item, SchemaConfig.from_args(args))


def optional(schema: Schema[T], default: Any = MISSING) -> OptionalSchema:
    """
    Optional schema.

    An absent value (MISSING) yields `default`, or MISSING when no default
    is given. Anything else, including None, goes to `schema`.
    """
    if not isinstance(schema, Schema):
        raise TypeError(f"Optional expects a Schema, got {type(schema).__name__}")

    return OptionalSchema(schema, default)
