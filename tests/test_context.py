"""
Tests for parse_context (in-place write-back).
"""

from types import MappingProxyType

from sieve import (
    is_in_place,
    object_,
    optional,
    parse,
    parse_context,
    string,
    transform,
)


class TestParseContext:
    def test_default_off(self):
        assert is_in_place() is False

    def test_flag_reset_on_exit(self):
        with parse_context(in_place=True):
            assert is_in_place() is True
        assert is_in_place() is False

    def test_nested_contexts(self):
        with parse_context(in_place=True):
            with parse_context(in_place=False):
                assert is_in_place() is False
            assert is_in_place() is True

    def test_in_place_writes_to_input(self):
        schema = object_({"name": optional(string(), "anonymous")})
        data = {}

        with parse_context(in_place=True):
            result = parse(schema, data)

        assert result is data
        assert data == {"name": "anonymous"}

    def test_in_place_nested_objects(self):
        schema = object_({"user": object_({"name": string(transform(str.title))})})
        inner = {"name": "alice"}
        data = {"user": inner}

        with parse_context(in_place=True):
            parse(schema, data)

        assert inner == {"name": "Alice"}

    def test_in_place_failure_keeps_partial_writes(self):
        schema = object_({"a": string(transform(str.upper)), "b": string()})
        data = {"a": "x", "b": 1}

        with parse_context(in_place=True):
            result = schema.parse(data)

        assert result.error_messages == ("String",)
        assert data == {"a": "X", "b": 1}

    def test_immutable_mapping_copied(self):
        schema = object_({"a": string(transform(str.upper))})
        data = MappingProxyType({"a": "x"})

        with parse_context(in_place=True):
            result = schema.parse(data)

        assert result.output == {"a": "X"}
        assert data["a"] == "x"
