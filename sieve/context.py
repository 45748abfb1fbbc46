"""
Context manager for parse configuration (e.g., in-place write-back).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for in-place mode
_in_place: ContextVar[bool] = ContextVar("in_place", default=False)


def is_in_place() -> bool:
    """Check if in-place write-back is currently enabled."""
    return _in_place.get()


@contextmanager
def parse_context(*, in_place: bool = False):
    """
    Context manager for parse configuration.

    Args:
        in_place: If True, object schemas write field outputs back onto the
               input mapping itself instead of building a new one.
               Immutable mappings still get a fresh copy. Arrays always
               build a new list.

    Example:
        from sieve import object_, optional, string, parse, parse_context

        schema = object_({"name": optional(string(), "anonymous")})
        data = {}

        # Normal: data is left untouched, a new dict is returned
        parse(schema, data)

        # In place: data["name"] == "anonymous" afterwards
        with parse_context(in_place=True):
            parse(schema, data)
    """
    token = _in_place.set(in_place)
    try:
        yield
    finally:
        _in_place.reset(token)
