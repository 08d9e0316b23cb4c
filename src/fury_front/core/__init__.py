"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        FuryFrontError: Base exception for all combat core errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Bad caller input.
        GameEngineError: Base for engine errors.
        InvalidStateError: Operation illegal in the current state.
        NotFoundError: Identifier missing from a registry.

    Configuration:
        Settings: Main application settings class.
        CombatSettings: Combat session defaults.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
        log_context: Bind logging context for a block.
"""

from __future__ import annotations

from fury_front.core.config import (
    CombatSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from fury_front.core.exceptions import (
    ConfigurationError,
    FuryFrontError,
    GameEngineError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from fury_front.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    log_context,
)


__all__ = [
    # Exceptions
    "FuryFrontError",
    "ConfigurationError",
    "ValidationError",
    "GameEngineError",
    "InvalidStateError",
    "NotFoundError",
    # Configuration
    "Settings",
    "CombatSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "log_context",
]
