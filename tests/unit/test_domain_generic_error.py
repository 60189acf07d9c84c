"""Unit tests for GenericError (domain error composed over BaseError).

Tests cover:
- Code fallback to the configured default
- Message rendering (cause, code, attributes, nested tree)
- Delegation of capability operations, mutators and accessors
- Settings-driven indentation and default code
- Copy, deepcopy and pickle round-trips; self-append
"""

import copy
import os
import pickle
from datetime import timedelta
from unittest.mock import patch

import pytest

from errorx.core.config import get_settings
from errorx.core.errors import AttributeNotFoundError
from errorx.core.result import Failure, Success
from errorx.domain.errors import BaseError, GenericError, UnknownCauseError
from errorx.domain.protocols import Error


@pytest.mark.unit
class TestGenericErrorCode:
    """Test GenericError code handling."""

    def test_explicit_code(self):
        """Test an explicit code is used as given."""
        assert GenericError(RuntimeError("x"), code=1234).code() == 1234

    def test_default_code(self):
        """Test a missing code falls back to 128."""
        assert GenericError(RuntimeError("x")).code() == 128

    def test_zero_code_falls_back(self):
        """Test a zero code falls back to the default."""
        assert GenericError(RuntimeError("x"), code=0).code() == 128

    def test_default_code_from_settings(self):
        """Test the fallback code is read from settings."""
        with patch.dict(os.environ, {"ERRORX_GENERIC_ERROR_CODE": "99"}):
            get_settings.cache_clear()

            assert GenericError().code() == 99


@pytest.mark.unit
class TestGenericErrorMessage:
    """Test GenericError message rendering."""

    def test_cause_and_code(self):
        """Test message renders the cause followed by the code."""
        err = GenericError(RuntimeError("db down"), code=500)

        assert err.message() == "db down (code=500)"
        assert str(err) == "db down (code=500)"

    def test_unknown_cause(self):
        """Test message without a cause renders the unknown-cause text once."""
        err = GenericError()

        assert isinstance(err.cause(), UnknownCauseError)
        assert err.message() == "an unknown error occurred (code=128)"

    def test_foreign_unknown_cause_keeps_own_code(self):
        """Test a synthetic cause carrying another code is rendered as a cause."""
        err = GenericError(UnknownCauseError(7), code=500)

        assert err.message() == "an unknown error occurred (code=7) (code=500)"

    def test_matching_unknown_cause_rendered_once(self):
        """Test an explicit synthetic cause with the same code renders once."""
        err = GenericError(UnknownCauseError(500), code=500)

        assert err.message() == "an unknown error occurred (code=500)"

    def test_attributes_are_bracketed_in_order(self):
        """Test attributes render as key=value pairs in insertion order."""
        err = GenericError(RuntimeError("db down"), code=500)
        err.with_attr("retries", 3)
        err.with_attr("host", "primary")

        assert err.message() == "db down (code=500) [ retries=3 host=primary ]"

    def test_non_string_attribute_values(self):
        """Test attribute values are rendered with str()."""
        err = GenericError(RuntimeError("slow"), code=1)
        err.with_attr("elapsed", timedelta(seconds=2))

        assert err.message() == "slow (code=1) [ elapsed=0:00:02 ]"

    def test_nested_errors_indented_per_level(self):
        """Test nested messages are indented once per nesting level."""
        parent = GenericError(RuntimeError("db down"), code=500)
        child = GenericError(RuntimeError("replica timed out"), code=2)
        grandchild = GenericError(RuntimeError("socket closed"), code=7)
        child.append(grandchild)
        parent.append(child)

        assert parent.message() == (
            "db down (code=500)\n"
            "   replica timed out (code=2)\n"
            "      socket closed (code=7)"
        )

    def test_nested_order_preserved(self):
        """Test sibling nested errors render in insertion order."""
        err = RuntimeError("this is an error")
        e1 = GenericError(err)
        e2 = GenericError(err, code=1234)
        e3 = GenericError(err)
        e3.with_attrs({"key1": "value1", "key2": 2334})
        e3.append(e1, e2)

        assert e3.message() == (
            "this is an error (code=128) [ key1=value1 key2=2334 ]\n"
            "   this is an error (code=128)\n"
            "   this is an error (code=1234)"
        )

    def test_nested_base_error_uses_its_own_message(self):
        """Test a nested BaseError renders its default message."""
        parent = GenericError(RuntimeError("outer"), code=1)
        parent.append(BaseError(2, RuntimeError("inner")))

        assert parent.message() == "outer (code=1)\n   error: inner"

    def test_indent_from_settings(self):
        """Test the indentation width is read from settings."""
        with patch.dict(os.environ, {"ERRORX_NESTED_ERROR_INDENT": "1"}):
            get_settings.cache_clear()
            parent = GenericError(RuntimeError("a"), code=1)
            child = GenericError(RuntimeError("b"), code=2)
            child.append(GenericError(RuntimeError("c"), code=3))
            parent.append(child)

            assert parent.message() == "a (code=1)\n b (code=2)\n  c (code=3)"


@pytest.mark.unit
class TestGenericErrorDelegation:
    """Test GenericError delegates to its composed BaseError."""

    def test_satisfies_error_capability(self):
        """Test GenericError is an Error without inheriting BaseError."""
        err = GenericError()

        assert isinstance(err, Error)
        assert not isinstance(err, BaseError)

    def test_cause_delegates(self):
        """Test cause() returns the wrapped cause."""
        cause = RuntimeError("db down")
        err = GenericError(cause)

        assert err.cause() is cause
        assert err.base.cause() is cause

    def test_attributes_and_accessors_delegate(self):
        """Test mutators and typed accessors act on the composed value."""
        err = GenericError(RuntimeError("x"))
        err.with_attr("retries", 3)
        err.with_attrs({"host": "primary"})

        assert err.attributes() == {"retries": 3, "host": "primary"}
        assert err.base.attributes() == err.attributes()
        assert err.attr("host") == Success(value="primary")
        assert err.attr_int("retries") == Success(value=3)
        assert err.attr_int64("retries") == Success(value=3)
        assert err.attr_uint("retries") == Success(value=3)
        assert err.attr_uint64("retries") == Success(value=3)
        assert err.attr_string("host") == Success(value="primary")

    def test_missing_attribute_delegates(self):
        """Test NotFound surfaces through the delegating accessors."""
        err = GenericError()

        for result in (err.attr_duration("d"), err.attr_time("t")):
            assert isinstance(result, Failure)
            assert isinstance(result.error, AttributeNotFoundError)

    def test_append_delegates(self):
        """Test append() skips None and preserves order."""
        err = GenericError()
        first, second = GenericError(code=1), BaseError(2)
        err.append(first, None, second)

        assert err.nested_errors() == [first, second]

    def test_raise_and_catch(self):
        """Test GenericError can be raised and chains its cause."""
        cause = RuntimeError("db down")

        with pytest.raises(GenericError) as exc_info:
            raise GenericError(cause, code=500)

        assert exc_info.value.__cause__ is cause
        assert str(exc_info.value) == "db down (code=500)"


@pytest.mark.unit
class TestGenericErrorCopying:
    """Test GenericError survives copy, deepcopy and pickle."""

    @pytest.mark.parametrize(
        "clone",
        [copy.copy, copy.deepcopy, lambda e: pickle.loads(pickle.dumps(e))],
        ids=["copy", "deepcopy", "pickle"],
    )
    def test_round_trip(self, clone):
        """Test code, cause, attributes and message are preserved."""
        err = GenericError(ConnectionError("db down"), code=503)
        err.with_attr("host", "primary")
        err.append(BaseError(2, TimeoutError("slow")))

        restored = clone(err)

        assert restored.code() == 503
        assert restored.attributes() == {"host": "primary"}
        assert restored.message() == (
            "db down (code=503) [ host=primary ]\n   error: slow"
        )
        assert isinstance(restored.__cause__, ConnectionError)

    @pytest.mark.parametrize(
        "clone",
        [copy.copy, copy.deepcopy, lambda e: pickle.loads(pickle.dumps(e))],
        ids=["copy", "deepcopy", "pickle"],
    )
    def test_round_trip_without_cause(self, clone):
        """Test an error without a cause keeps its explicit code."""
        restored = clone(GenericError(code=42))

        assert restored.code() == 42
        assert restored.cause().code == 42
        assert restored.message() == "an unknown error occurred (code=42)"

    def test_snapshot_is_equal_and_independent(self):
        """Test snapshot() compares equal but does not share state."""
        err = GenericError(RuntimeError("x"), code=1)
        err.with_attr("a", 1)

        clone = err.snapshot()
        assert clone == err

        clone.with_attr("b", 2)
        assert clone != err
        assert err.attributes() == {"a": 1}


@pytest.mark.unit
class TestGenericErrorSelfAppend:
    """Test appending an error to itself."""

    def test_self_append_renders_finitely(self):
        """Test a self-appended error renders its earlier state once."""
        err = GenericError(RuntimeError("loop"), code=1)
        err.append(err)

        assert err.message() == "loop (code=1)\n   loop (code=1)"

    def test_self_append_twice(self):
        """Test a second self-append nests the tree as it was at that time."""
        err = GenericError(RuntimeError("loop"), code=1)
        err.append(err)
        err.append(err)

        assert err.message() == (
            "loop (code=1)\n"
            "   loop (code=1)\n"
            "   loop (code=1)\n"
            "      loop (code=1)"
        )
