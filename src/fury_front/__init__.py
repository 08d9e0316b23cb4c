"""Fury Front - tactical shooter combat core.

Simulates real-time combat state for a player and AI-controlled agents:
health and armor, weapon fire/reload cycles, and AI tactical decisions
derived from distance and threat.

Example:
    >>> from fury_front import CombatSession, AIBehavior
    >>>
    >>> session = CombatSession()
    >>> session.player.engage()
    >>>
    >>> # Perception writes readings, then one decision tick runs
    >>> grunt = session.roster.spawn("grunt-1", "Grunt", AIBehavior.AGGRESSIVE)
    >>> grunt.observe(15.0, 0.9)
    >>> session.tick()
    {'grunt-1': <AITask.ATTACK_PLAYER: 'attack_player'>}
    >>>
    >>> # The grunt opens fire; armor soaks the hit first
    >>> report = session.apply_agent_damage("grunt-1", 25)
    >>> session.hud().armor
    25

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 models for defense, weapons and enums.
    engine: Loadout, player state machine, AI agents, roster, session.
"""

from __future__ import annotations

# Core
from fury_front.core.config import CombatSettings, Settings, get_settings
from fury_front.core.exceptions import (
    FuryFrontError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from fury_front.core.logging import configure_logging, get_logger

# Models
from fury_front.models import (
    AIBehavior,
    AITask,
    CombatState,
    DamagePolicy,
    DamageType,
    DefenseState,
    EquippedWeapon,
    FireMode,
    Weapon,
    WeaponUpgrade,
    aggregate_stats,
)

# Engine
from fury_front.engine import (
    AIAgent,
    AIRoster,
    CombatEvent,
    CombatEventKind,
    CombatSession,
    CombatStateMachine,
    HudState,
    Loadout,
    SessionSnapshot,
    decide_task,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "FuryFrontError",
    "InvalidStateError",
    "NotFoundError",
    "ValidationError",
    "CombatSettings",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "AIBehavior",
    "AITask",
    "CombatState",
    "DamagePolicy",
    "DamageType",
    "DefenseState",
    "EquippedWeapon",
    "FireMode",
    "Weapon",
    "WeaponUpgrade",
    "aggregate_stats",
    # Engine
    "AIAgent",
    "AIRoster",
    "CombatEvent",
    "CombatEventKind",
    "CombatSession",
    "CombatStateMachine",
    "HudState",
    "Loadout",
    "SessionSnapshot",
    "decide_task",
]
