"""
Tests for sieve.types.
"""

from dataclasses import FrozenInstanceError

import pytest

from sieve import MISSING, Result, SchemaConfig, ValidationError, min_length


class TestResult:
    def test_success_has_no_messages(self):
        result = Result("value")
        assert result.output == "value"
        assert result.error_messages == ()
        assert result.is_ok()
        assert not result.is_err()

    def test_failure(self):
        result = Result(1, ("String",))
        assert result.is_err()
        assert not result.is_ok()

    def test_messages_normalized_to_tuple(self):
        result = Result(1, ["A", "B"])
        assert result.error_messages == ("A", "B")

    def test_frozen(self):
        result = Result(1)
        with pytest.raises(FrozenInstanceError):
            result.output = 2  # type: ignore[misc]


class TestMissing:
    def test_distinct_from_none(self):
        assert MISSING is not None
        assert MISSING != None  # noqa: E711

    def test_repr(self):
        assert repr(MISSING) == "MISSING"


class TestValidationError:
    def test_carries_messages(self):
        err = ValidationError(["String", "Number"])
        assert err.error_messages == ("String", "Number")
        assert str(err) == "String, Number"

    def test_is_value_error(self):
        assert isinstance(ValidationError(["String"]), ValueError)

    def test_requires_messages(self):
        with pytest.raises(ValueError, match="at least one"):
            ValidationError([])


class TestSchemaConfig:
    def test_splits_messages_and_pipes(self):
        pipe = min_length(1)
        config = SchemaConfig.from_args(["Bad", pipe, "Worse"])
        assert config.messages == ("Bad", "Worse")
        assert config.pipes == (pipe,)

    def test_merges_nested_config(self):
        pipe = min_length(1)
        inner = SchemaConfig(messages=("Inner",), pipes=(pipe,))
        config = SchemaConfig.from_args(["Outer", inner])
        assert config.messages == ("Outer", "Inner")
        assert config.pipes == (pipe,)

    def test_failure_messages_default(self):
        assert SchemaConfig().failure_messages("String") == ("String",)
        assert SchemaConfig(messages=("X",)).failure_messages("String") == ("X",)

    def test_rejects_other_values(self):
        with pytest.raises(TypeError):
            SchemaConfig.from_args([42])
