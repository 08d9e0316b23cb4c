"""Constants shared across the Fury Front combat core.

Defines player defaults, ammunition defaults and the AI decision
thresholds.
"""

from __future__ import annotations

# =============================================================================
# Player Defaults
# =============================================================================

DEFAULT_MAX_HEALTH = 100
"""Maximum player health at session start."""

DEFAULT_MAX_ARMOR = 50
"""Maximum player armor at session start."""

# =============================================================================
# Ammunition Defaults
# =============================================================================

DEFAULT_CLIP_SIZE = 30
"""Clip capacity used when no weapon is equipped."""

DEFAULT_AMMO_IN_CLIP = 30
"""Rounds loaded at session start."""

DEFAULT_RESERVE_AMMO = 90
"""Spare rounds carried at session start."""

DEFAULT_WEAPON_ID = "rifle_ak"
"""Weapon equipped when a session starts."""

# =============================================================================
# Event History
# =============================================================================

DEFAULT_EVENT_HISTORY = 256
"""Combat events kept by a state machine before the oldest are dropped."""

# =============================================================================
# AI Decision Thresholds
# =============================================================================

LOW_THREAT_THRESHOLD = 0.1
"""At or below this threat level every agent patrols."""

PASSIVE_RETREAT_DISTANCE = 5.0
"""Passive agents closer than this retreat."""

DEFENSIVE_COVER_DISTANCE = 10.0
"""Defensive agents closer than this seek cover under moderate threat."""

DEFENSIVE_COVER_THREAT = 0.5
"""Threat above which a close defensive agent takes cover."""

DEFENSIVE_RETREAT_THREAT = 0.7
"""Threat above which a defensive agent retreats."""

AGGRESSIVE_ATTACK_DISTANCE = 20.0
"""Aggressive agents closer than this attack the player."""


__all__ = [
    # Player
    "DEFAULT_MAX_HEALTH",
    "DEFAULT_MAX_ARMOR",
    # Ammunition
    "DEFAULT_CLIP_SIZE",
    "DEFAULT_AMMO_IN_CLIP",
    "DEFAULT_RESERVE_AMMO",
    "DEFAULT_WEAPON_ID",
    # Events
    "DEFAULT_EVENT_HISTORY",
    # AI
    "LOW_THREAT_THRESHOLD",
    "PASSIVE_RETREAT_DISTANCE",
    "DEFENSIVE_COVER_DISTANCE",
    "DEFENSIVE_COVER_THREAT",
    "DEFENSIVE_RETREAT_THREAT",
    "AGGRESSIVE_ATTACK_DISTANCE",
]
