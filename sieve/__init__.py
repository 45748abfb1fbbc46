"""
Sieve - composable runtime schemas with pipes.

Usage:
    from sieve import object_, string, number, optional, array, parse
    from sieve import min_length, email_address

    schema = object_({
        "name": string(min_length(0)),
        "email": optional(string(email_address())),
        "scores": array(number()),
    })

    user = parse(schema, data)  # raises ValidationError with every message
"""

from .config import SchemaConfig
from .context import is_in_place, parse_context
from .interop import to_pydantic
from .parse import is_valid, parse, safe_parse
from .pipes import (
    check,
    email_address,
    max_length,
    min_length,
    regex,
    run_pipes,
    transform,
)
from .schemas import (
    AnySchema,
    ArraySchema,
    ObjectSchema,
    OptionalSchema,
    PrimitiveSchema,
    Schema,
    any_,
    array,
    bigint,
    blob,
    boolean,
    date,
    file,
    number,
    object_,
    optional,
    string,
)
from .types import MISSING, Result, ValidationError

__all__ = [
    # Result types
    "Result",
    "MISSING",
    "ValidationError",
    "SchemaConfig",
    # Schemas
    "Schema",
    "PrimitiveSchema",
    "AnySchema",
    "ObjectSchema",
    "ArraySchema",
    "OptionalSchema",
    "string",
    "number",
    "bigint",
    "boolean",
    "date",
    "blob",
    "file",
    "any_",
    "object_",
    "array",
    "optional",
    # Pipes
    "run_pipes",
    "min_length",
    "max_length",
    "email_address",
    "regex",
    "check",
    "transform",
    # Parsing
    "parse",
    "safe_parse",
    "is_valid",
    "parse_context",
    "is_in_place",
    # Interop
    "to_pydantic",
]
