"""Pydantic V2 models for the Fury Front combat core.

Submodules:
    enums: Closed enumerations for states, tasks and damage types.
    defense: Health/armor state and the damage policy.
    weapons: Weapon definitions, upgrades and stat aggregation.
"""

from __future__ import annotations

from fury_front.models.defense import (
    DEFAULT_DAMAGE_MULTIPLIERS,
    DamagePolicy,
    DamageReport,
    DefenseState,
)
from fury_front.models.enums import (
    AIBehavior,
    AITask,
    CombatState,
    DamageType,
    FireMode,
    UpgradeRarity,
    WeaponType,
)
from fury_front.models.weapons import (
    EquippedWeapon,
    Weapon,
    WeaponStats,
    WeaponUpgrade,
    aggregate_stats,
)


__all__ = [
    # Enums
    "AIBehavior",
    "AITask",
    "CombatState",
    "DamageType",
    "FireMode",
    "UpgradeRarity",
    "WeaponType",
    # Defense
    "DEFAULT_DAMAGE_MULTIPLIERS",
    "DamagePolicy",
    "DamageReport",
    "DefenseState",
    # Weapons
    "EquippedWeapon",
    "Weapon",
    "WeaponStats",
    "WeaponUpgrade",
    "aggregate_stats",
]
