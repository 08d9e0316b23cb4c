"""Combat engine for the Fury Front combat core.

Submodules:
    loadout: Weapon arsenal registry and the active loadout
    combat: Player combat state machine (engage, cover, fire, reload, damage)
    ai_agent: AI decision function and agent model
    roster: Registration-ordered AI agent collection
    session: Composition root wiring player, loadout and roster together

Example:
    >>> from fury_front.engine import CombatSession
    >>> session = CombatSession()
    >>> session.player.engage()
    >>> session.player.fire().damage
    30
"""

from __future__ import annotations

# =============================================================================
# Loadout
# =============================================================================
from fury_front.engine.loadout import (
    DEFAULT_ARSENAL,
    Loadout,
    LoadoutState,
)

# =============================================================================
# Player State Machine
# =============================================================================
from fury_front.engine.combat import (
    CombatContext,
    CombatEvent,
    CombatEventKind,
    CombatStateMachine,
    ShotResult,
)

# =============================================================================
# AI
# =============================================================================
from fury_front.engine.ai_agent import (
    AIAgent,
    decide_task,
)
from fury_front.engine.roster import AIRoster

# =============================================================================
# Session
# =============================================================================
from fury_front.engine.session import (
    CombatSession,
    HudState,
    SessionSnapshot,
)


__all__ = [
    # Loadout
    "DEFAULT_ARSENAL",
    "Loadout",
    "LoadoutState",
    # Player State Machine
    "CombatContext",
    "CombatEvent",
    "CombatEventKind",
    "CombatStateMachine",
    "ShotResult",
    # AI
    "AIAgent",
    "AIRoster",
    "decide_task",
    # Session
    "CombatSession",
    "HudState",
    "SessionSnapshot",
]
