"""Enumeration types for the Fury Front combat core.

Every enumerated state field in the combat core is a closed StrEnum so
values serialize as plain strings and compare equal to them.
"""

from __future__ import annotations

from enum import StrEnum


class DamageType(StrEnum):
    """Source of incoming damage."""

    BULLET = "bullet"
    EXPLOSION = "explosion"
    MELEE = "melee"
    ENVIRONMENTAL = "environmental"


class WeaponType(StrEnum):
    """Weapon classes available in the arsenal."""

    ASSAULT_RIFLE = "assault_rifle"
    SNIPER_RIFLE = "sniper_rifle"
    SHOTGUN = "shotgun"
    PISTOL = "pistol"
    SUBMACHINE_GUN = "submachine_gun"


class UpgradeRarity(StrEnum):
    """Rarity tier of a weapon upgrade."""

    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class FireMode(StrEnum):
    """Selected firing cadence. Stored only; no logic gates on it."""

    SINGLE = "single"
    BURST = "burst"
    AUTO = "auto"


class CombatState(StrEnum):
    """Player combat state.

    RELOADING only exists for the duration of a reload call and is never
    left behind as the current state.
    """

    IDLE = "idle"
    ENGAGED = "engaged"
    IN_COVER = "in_cover"
    RELOADING = "reloading"

    @property
    def in_combat(self) -> bool:
        """Whether the player is in an active engagement."""
        return self is not CombatState.IDLE


class AIBehavior(StrEnum):
    """Static temperament of an AI agent."""

    PASSIVE = "passive"
    DEFENSIVE = "defensive"
    AGGRESSIVE = "aggressive"


class AITask(StrEnum):
    """Tactical task an AI agent is currently pursuing."""

    IDLE = "idle"
    PATROL = "patrol"
    ATTACK_PLAYER = "attack_player"
    TAKE_COVER = "take_cover"
    RETREAT = "retreat"

    @property
    def is_hostile(self) -> bool:
        """Whether the task has the agent shooting at the player."""
        return self is AITask.ATTACK_PLAYER


__all__ = [
    "DamageType",
    "WeaponType",
    "UpgradeRarity",
    "FireMode",
    "CombatState",
    "AIBehavior",
    "AITask",
]
