"""
Parse entrypoints: the boundary between Result values and exceptions.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar, cast

from .schemas import Schema
from .types import Result, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse(schema: Schema[T], value: Any) -> T:
    """
    Validate `value` against `schema` and return the output.

    Args:
        schema: The schema to run
        value: Untyped input (e.g., decoded JSON)

    Returns:
        The schema output, transformed by any pipes

    Raises:
        ValidationError: If any error message was collected. The exception
            carries every message in discovery order.

    Usage:
        user = parse(object_({"name": string()}), {"name": "Alice"})
    """
    result = schema.parse(value)

    if result.error_messages:
        logger.debug(
            "Validation failed with %d error(s): %s",
            len(result.error_messages),
            result.error_messages,
        )
        raise ValidationError(result.error_messages)

    return cast(T, result.output)


def safe_parse(schema: Schema[T], value: Any) -> Result[T]:
    """Validate without raising; failures are reported in the Result."""
    return schema.parse(value)


def is_valid(schema: Schema[Any], value: Any) -> bool:
    return schema.parse(value).is_ok()
