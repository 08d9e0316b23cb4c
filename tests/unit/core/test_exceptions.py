"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from fury_front.core.exceptions import (
    ConfigurationError,
    FuryFrontError,
    GameEngineError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)


class TestFuryFrontError:
    """Tests for the base FuryFrontError exception."""

    def test_basic_message(self) -> None:
        exc = FuryFrontError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Details are appended to the string form."""
        exc = FuryFrontError(
            "Test error",
            details={"key": "value", "count": 42},
        )
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        exc = FuryFrontError("Test", details={"x": 1})
        repr_str = repr(exc)
        assert "FuryFrontError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestEngineExceptions:
    """Tests for combat engine exceptions."""

    def test_invalid_state_error(self) -> None:
        exc = InvalidStateError(
            "Cannot take cover",
            current_state="idle",
            expected_states=["engaged"],
        )
        assert exc.details["current_state"] == "idle"
        assert exc.details["expected_states"] == ["engaged"]

    def test_not_found_error(self) -> None:
        exc = NotFoundError("Missing", resource="weapon", identifier="railgun")
        assert exc.details["resource"] == "weapon"
        assert exc.details["identifier"] == "railgun"

    def test_inheritance(self) -> None:
        """Engine errors share a common base."""
        for exc in (InvalidStateError("x"), NotFoundError("y")):
            assert isinstance(exc, GameEngineError)
            assert isinstance(exc, FuryFrontError)


class TestValidationExceptions:
    """Tests for configuration and validation exceptions."""

    def test_configuration_error(self) -> None:
        exc = ConfigurationError("Bad clip", config_key="default_clip_size")
        assert exc.details["config_key"] == "default_clip_size"

    def test_validation_error(self) -> None:
        exc = ValidationError(
            "Invalid value",
            field_name="amount",
            invalid_value=-5,
        )
        assert exc.details["field_name"] == "amount"
        assert exc.details["invalid_value"] == -5

    def test_validation_error_is_not_engine_error(self) -> None:
        """Bad input and bad state are distinct failure kinds."""
        assert not isinstance(ValidationError("x"), GameEngineError)


class TestExceptionChaining:
    """Tests for exception chaining behavior."""

    def test_raise_from(self) -> None:
        original = KeyError("rifle_ak")

        with pytest.raises(NotFoundError) as exc_info:
            try:
                raise original
            except KeyError as e:
                raise NotFoundError("Wrapped error") from e

        assert exc_info.value.__cause__ is original
