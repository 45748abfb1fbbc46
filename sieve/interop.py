"""
Pydantic interop for sieve schemas.

Provides to_pydantic(), which compiles an object schema into a model.
"""

from __future__ import annotations

import datetime
from typing import Annotated, Any, Union
from typing import Optional as TypingOptional

from pydantic import (
    BaseModel,
    ConfigDict,
    InstanceOf,
    Strict,
    StrictBool,
    StrictBytes,
    StrictFloat,
    StrictInt,
    StrictStr,
    create_model,
)

from .schemas import (
    AnySchema,
    ArraySchema,
    ObjectSchema,
    OptionalSchema,
    PrimitiveSchema,
    Schema,
)
from .types import MISSING

# Strict counterparts, so generated models do not coerce either
_STRICT_TYPES: dict[Any, Any] = {
    str: StrictStr,
    int: StrictInt,
    int | float: Union[StrictInt, StrictFloat],
    bool: StrictBool,
    bytes: Union[StrictBytes, InstanceOf[bytearray], InstanceOf[memoryview]],
    datetime.date: Union[
        Annotated[datetime.date, Strict()], Annotated[datetime.datetime, Strict()]
    ],
}


def to_pydantic(name: str, schema: ObjectSchema) -> type[BaseModel]:
    """
    Compile an object schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: Schema built with object_()

    Returns:
        A Pydantic BaseModel subclass. Nested objects become nested models
        named "{name}_{key}". Pipes are not carried over.

    Usage:
        User = to_pydantic("User", object_({
            "name": string(),
            "email": optional(string()),
        }))
        user = User(name="Alice")
    """
    if not isinstance(schema, ObjectSchema):
        raise TypeError("Schema must be an object schema")

    fields: dict[str, Any] = {}

    for key, child in schema.entries.items():
        fields[key] = _extract_pydantic_field(f"{name}_{key}", child)

    return create_model(
        name, __config__=ConfigDict(arbitrary_types_allowed=True), **fields
    )


def _extract_pydantic_field(name: str, schema: Schema[Any]) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a schema."""
    if isinstance(schema, OptionalSchema):
        default = None if schema.default is MISSING else schema.default
        return (_field_type(name, schema), default)

    return (_field_type(name, schema), ...)


def _field_type(name: str, schema: Schema[Any]) -> Any:
    match schema:
        case OptionalSchema(schema=inner):
            return TypingOptional[_field_type(name, inner)]
        case ObjectSchema():
            return to_pydantic(name, schema)
        case ArraySchema(item=item):
            return list[_field_type(name, item)]  # type: ignore[misc]
        case PrimitiveSchema(type_hint=t):
            return _STRICT_TYPES.get(t, t or Any)
        case AnySchema():
            return Any

    return Any
