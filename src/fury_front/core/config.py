"""Configuration management for the Fury Front combat core.

Settings are loaded with pydantic-settings from environment variables and
an optional ``.env`` file, then cached for the lifetime of the process.

Example:
    >>> from fury_front.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.combat.max_health
    100

Environment Variables:
    FURY_FRONT_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    FURY_FRONT_JSON_LOGS: Emit JSON logs instead of console output
    FURY_FRONT_DEBUG: Force DEBUG logging
    FURY_FRONT_LOG_FILE: Optional log file path
    FURY_FRONT_COMBAT_MAX_HEALTH: Player maximum health
    FURY_FRONT_COMBAT_MAX_ARMOR: Player maximum armor
    FURY_FRONT_COMBAT_ABSORB_ARMOR_FIRST: Armor soaks damage before health
    FURY_FRONT_COMBAT_APPLY_TYPE_MULTIPLIERS: Scale health damage by damage type
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fury_front.core.constants import (
    DEFAULT_AMMO_IN_CLIP,
    DEFAULT_CLIP_SIZE,
    DEFAULT_MAX_ARMOR,
    DEFAULT_MAX_HEALTH,
    DEFAULT_RESERVE_AMMO,
    DEFAULT_WEAPON_ID,
)
from fury_front.core.exceptions import ConfigurationError


class CombatSettings(BaseSettings):
    """Starting values and damage pipeline selection for a combat session.

    Attributes:
        max_health: Player maximum (and starting) health.
        max_armor: Player maximum (and starting) armor.
        starting_ammo_in_clip: Rounds loaded when the session starts.
        starting_reserve_ammo: Spare rounds carried when the session starts.
        default_clip_size: Clip capacity used while no weapon is equipped.
        default_weapon_id: Weapon equipped at session start, or None.
        absorb_armor_first: Armor soaks damage before health does.
        apply_type_multipliers: Health damage is scaled by damage type.
    """

    model_config = SettingsConfigDict(
        env_prefix="FURY_FRONT_COMBAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_health: int = Field(
        default=DEFAULT_MAX_HEALTH,
        ge=1,
        description="Player maximum health",
    )
    max_armor: int = Field(
        default=DEFAULT_MAX_ARMOR,
        ge=0,
        description="Player maximum armor",
    )
    starting_ammo_in_clip: int = Field(
        default=DEFAULT_AMMO_IN_CLIP,
        ge=0,
        description="Rounds loaded at session start",
    )
    starting_reserve_ammo: int = Field(
        default=DEFAULT_RESERVE_AMMO,
        ge=0,
        description="Spare rounds at session start",
    )
    default_clip_size: int = Field(
        default=DEFAULT_CLIP_SIZE,
        ge=1,
        description="Clip capacity with no weapon equipped",
    )
    default_weapon_id: str | None = Field(
        default=DEFAULT_WEAPON_ID,
        description="Weapon equipped at session start",
    )
    absorb_armor_first: bool = Field(
        default=True,
        description="Armor absorbs damage before health",
    )
    apply_type_multipliers: bool = Field(
        default=True,
        description="Scale health damage by damage type",
    )

    @model_validator(mode="after")
    def validate_starting_clip(self) -> "CombatSettings":
        """Ensure the starting clip fits in the default clip.

        Raises:
            ConfigurationError: If more rounds are loaded than the clip holds.
        """
        if self.starting_ammo_in_clip > self.default_clip_size:
            raise ConfigurationError(
                f"starting_ammo_in_clip ({self.starting_ammo_in_clip}) exceeds "
                f"default_clip_size ({self.default_clip_size})",
                config_key="starting_ammo_in_clip",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Force DEBUG logging.
        log_level: Application logging level.
        json_logs: Render logs as JSON.
        log_file: Also write standard library log records here.
        combat: Combat session settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="FURY_FRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="Fury Front Combat Core", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Render logs as JSON")
    log_file: str | None = Field(default=None, description="Optional log file path")

    combat: CombatSettings = Field(default_factory=CombatSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "CombatSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
