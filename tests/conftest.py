"""Pytest configuration and shared fixtures.

This module provides common fixtures for the Fury Front combat core
test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from fury_front.core.config import CombatSettings
from fury_front.engine.combat import CombatContext, CombatStateMachine
from fury_front.engine.loadout import Loadout
from fury_front.engine.roster import AIRoster
from fury_front.engine.session import CombatSession
from fury_front.models.defense import DefenseState
from fury_front.models.enums import WeaponType
from fury_front.models.weapons import Weapon, WeaponUpgrade


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from fury_front.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def combat_settings() -> CombatSettings:
    """Provide stock combat settings, independent of the environment."""
    return CombatSettings(
        max_health=100,
        max_armor=50,
        starting_ammo_in_clip=30,
        starting_reserve_ammo=90,
        default_clip_size=30,
        default_weapon_id="rifle_ak",
        absorb_armor_first=True,
        apply_type_multipliers=True,
    )


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def defense() -> DefenseState:
    """Full health and armor under the canonical damage policy."""
    return DefenseState.full(100, 50)


@pytest.fixture
def rifle() -> Weapon:
    return Weapon(
        id="test_rifle",
        name="Test Rifle",
        weapon_type=WeaponType.ASSAULT_RIFLE,
        damage=30,
        clip_size=30,
        rate_of_fire=9.0,
    )


@pytest.fixture
def extended_mag() -> WeaponUpgrade:
    return WeaponUpgrade(id="ext_mag", title="Extended Magazine", clip_size_bonus=10)


@pytest.fixture
def hollow_points() -> WeaponUpgrade:
    return WeaponUpgrade(id="hollow_pts", title="Hollow Points", damage_bonus=5)


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def loadout() -> Loadout:
    """Stock arsenal with the AK rifle (30 round clip) equipped."""
    loadout = Loadout()
    loadout.equip("rifle_ak")
    return loadout


@pytest.fixture
def machine(defense: DefenseState, loadout: Loadout) -> CombatStateMachine:
    """Player state machine at session start: idle, 30/90 ammo."""
    return CombatStateMachine(defense, loadout, CombatContext())


@pytest.fixture
def roster() -> AIRoster:
    return AIRoster()


@pytest.fixture
def session(combat_settings: CombatSettings) -> CombatSession:
    return CombatSession(combat_settings)
