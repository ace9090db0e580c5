"""Tests for the Result helper."""

import pytest

from utils.result import Result


def test_success_result():
    result = Result.success({"a": 1})

    assert result.is_success
    assert not result.is_error
    assert result.unwrap() == {"a": 1}
    assert result.unwrap_or({}) == {"a": 1}


def test_failure_result():
    result = Result.failure("boom")

    assert result.is_error
    assert result.unwrap_or("fallback") == "fallback"
    with pytest.raises(ValueError, match="boom"):
        result.unwrap()


def test_success_with_none_value():
    """A None value is still a success when there is no error."""
    result = Result.success(None)

    assert result.is_success
    assert result.unwrap() is None
