"""Tests for the lizard exception hierarchy."""

import pytest

from lizard.errors import (
    ConfigKeyExistsError,
    ConfigurationError,
    EmptyValueError,
    HandlerError,
    InvalidConfigKeyError,
    InvalidHeaderError,
    InvalidPatternError,
    InvalidStatusError,
    LizardError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            ConfigurationError("x"),
            EmptyValueError("x"),
            HandlerError("GET", "/"),
            InvalidConfigKeyError(["x"]),
            ConfigKeyExistsError(["X"]),
            InvalidHeaderError("X-A", "bad"),
            InvalidPatternError("/:", "empty"),
            InvalidStatusError(99),
        ],
    )
    def test_all_are_lizard_errors(self, exc: Exception) -> None:
        assert isinstance(exc, LizardError)

    def test_value_errors(self) -> None:
        assert isinstance(InvalidPatternError("/:", "r"), ValueError)
        assert isinstance(InvalidStatusError(600), ValueError)
        assert isinstance(EmptyValueError("e"), ValueError)


class TestMessages:
    def test_pattern(self) -> None:
        exc = InvalidPatternError("/a/:", "parameter name is empty")
        assert exc.pattern == "/a/:"
        assert str(exc) == "Invalid route pattern '/a/:': parameter name is empty"

    def test_status(self) -> None:
        assert "Invalid status code: 600" in str(InvalidStatusError(600))

    def test_handler(self) -> None:
        assert str(HandlerError("PUT", "/u/1")) == "Error handling PUT /u/1"

    def test_config_key_exists(self) -> None:
        assert str(ConfigKeyExistsError(["A", "B"])) == "Config keys are already set: 'A', 'B'"

    def test_header(self) -> None:
        exc = InvalidHeaderError("X-A", "contains a line break")
        assert isinstance(exc, ValueError)
        assert str(exc) == "Invalid header 'X-A': contains a line break"
