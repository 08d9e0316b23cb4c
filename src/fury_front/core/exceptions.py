"""Custom exception hierarchy for the Fury Front combat core.

All exceptions inherit from FuryFrontError so a host can catch every
combat-core failure at its boundary while still inspecting domain-specific
context through ``details``.

Every error in this hierarchy is raised before the operation mutates any
state, so a failed call leaves the combat state exactly as it was.

Example:
    >>> from fury_front.core.exceptions import InvalidStateError
    >>> raise InvalidStateError("Cannot fire: not in combat", current_state="idle")
"""

from __future__ import annotations

from typing import Any


class FuryFrontError(Exception):
    """Base exception for all Fury Front combat core errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(FuryFrontError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(FuryFrontError):
    """Raised when a caller passes bad input.

    Negative damage or healing amounts, blank identifiers and negative
    perception readings all end up here.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


# =============================================================================
# Game Engine Domain Exceptions
# =============================================================================


class GameEngineError(FuryFrontError):
    """Base exception for all combat engine errors."""


class InvalidStateError(GameEngineError):
    """Raised when an operation is illegal for the current state.

    Firing while idle, reloading with an empty reserve and upgrading with
    no weapon equipped are typical causes.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid state error with state context.

        Args:
            message: Human-readable error description.
            current_state: The state the operation was attempted from.
            expected_states: States from which the operation is legal.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


class NotFoundError(GameEngineError):
    """Raised when an identifier is absent from a registry."""

    def __init__(
        self,
        message: str,
        *,
        resource: str | None = None,
        identifier: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize not-found error with lookup context.

        Args:
            message: Human-readable error description.
            resource: Kind of registry that was searched (e.g. 'weapon').
            identifier: The identifier that was not found.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if resource:
            combined_details["resource"] = resource
        if identifier:
            combined_details["identifier"] = identifier
        super().__init__(message, details=combined_details)


__all__ = [
    "FuryFrontError",
    "ConfigurationError",
    "ValidationError",
    "GameEngineError",
    "InvalidStateError",
    "NotFoundError",
]
