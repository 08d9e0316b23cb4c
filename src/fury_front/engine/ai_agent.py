"""AI agent decision-making for enemy combatants.

Each agent's task is a pure function of its behavior and the latest
perception readings (distance to the player and threat level). Nothing
carries over between ticks: update_decision() recomputes the task from
scratch every time.

Decision table:
    threat <= 0.1                                -> PATROL (any behavior)
    PASSIVE    distance < 5.0                    -> RETREAT
    PASSIVE    otherwise                         -> IDLE
    DEFENSIVE  distance < 10.0 and threat > 0.5  -> TAKE_COVER
    DEFENSIVE  threat > 0.7                      -> RETREAT
    DEFENSIVE  otherwise                         -> PATROL
    AGGRESSIVE distance < 20.0                   -> ATTACK_PLAYER
    AGGRESSIVE otherwise                         -> PATROL
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fury_front.core.constants import (
    AGGRESSIVE_ATTACK_DISTANCE,
    DEFENSIVE_COVER_DISTANCE,
    DEFENSIVE_COVER_THREAT,
    DEFENSIVE_RETREAT_THREAT,
    LOW_THREAT_THRESHOLD,
    PASSIVE_RETREAT_DISTANCE,
)
from fury_front.core.exceptions import ValidationError
from fury_front.core.logging import get_logger
from fury_front.models.enums import AIBehavior, AITask


logger = get_logger(__name__)


# =============================================================================
# Decision Function
# =============================================================================


def _decide_passive(distance: float) -> AITask:
    if distance < PASSIVE_RETREAT_DISTANCE:
        return AITask.RETREAT
    return AITask.IDLE


def _decide_defensive(distance: float, threat: float) -> AITask:
    if distance < DEFENSIVE_COVER_DISTANCE and threat > DEFENSIVE_COVER_THREAT:
        return AITask.TAKE_COVER
    if threat > DEFENSIVE_RETREAT_THREAT:
        return AITask.RETREAT
    return AITask.PATROL


def _decide_aggressive(distance: float) -> AITask:
    if distance < AGGRESSIVE_ATTACK_DISTANCE:
        return AITask.ATTACK_PLAYER
    return AITask.PATROL


def _require_reading(value: float, field_name: str) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValidationError(
            f"{field_name} must be a finite, non-negative number",
            field_name=field_name,
            invalid_value=value,
        )


def decide_task(behavior: AIBehavior, distance: float, threat: float) -> AITask:
    """Map behavior and perception readings to a tactical task.

    Args:
        behavior: The agent's temperament.
        distance: Distance to the player in meters.
        threat: Perceived threat level of the player.

    Returns:
        The task the agent should pursue this tick.

    Raises:
        ValidationError: If either reading is negative, NaN or infinite.

    Example:
        >>> decide_task(AIBehavior.AGGRESSIVE, 15.0, 0.9)
        <AITask.ATTACK_PLAYER: 'attack_player'>
    """
    _require_reading(distance, "distance_to_player")
    _require_reading(threat, "threat_level")

    if threat <= LOW_THREAT_THRESHOLD:
        return AITask.PATROL

    if behavior == AIBehavior.PASSIVE:
        return _decide_passive(distance)
    if behavior == AIBehavior.DEFENSIVE:
        return _decide_defensive(distance, threat)
    return _decide_aggressive(distance)


# =============================================================================
# Agent
# =============================================================================


class AIAgent(BaseModel):
    """An AI-controlled combatant.

    The perception layer writes distance_to_player and threat_level (via
    observe()) before each tick; the roster then calls update_decision()
    and consumers read current_task.

    Attributes:
        id: Unique agent identifier.
        display_name: Name shown in the HUD and logs.
        behavior: Static temperament.
        current_task: Task chosen on the last update.
        distance_to_player: Latest distance reading, in meters.
        threat_level: Latest threat reading.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: str = Field(min_length=1, description="Unique agent identifier")
    display_name: str = Field(min_length=1, description="Display name")
    behavior: AIBehavior = Field(description="Static temperament")
    current_task: AITask = Field(default=AITask.IDLE, description="Current task")
    distance_to_player: float = Field(
        default=0.0,
        ge=0.0,
        allow_inf_nan=False,
        description="Distance to player (m)",
    )
    threat_level: float = Field(
        default=0.0,
        ge=0.0,
        allow_inf_nan=False,
        description="Perceived threat",
    )

    @field_validator("id", "display_name")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        """Reject whitespace-only identifiers and names."""
        if not value.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return value

    def observe(self, distance: float, threat: float) -> None:
        """Record fresh perception readings.

        Both values are checked before either is written.

        Raises:
            ValidationError: If either reading is negative, NaN or infinite.
        """
        _require_reading(distance, "distance_to_player")
        _require_reading(threat, "threat_level")
        self.distance_to_player = distance
        self.threat_level = threat

    def update_decision(self) -> AITask:
        """Recompute the current task from behavior and perception."""
        task = decide_task(self.behavior, self.distance_to_player, self.threat_level)
        if task != self.current_task:
            logger.debug(
                "Agent task changed",
                agent_id=self.id,
                previous=str(self.current_task),
                task=str(task),
            )
        self.current_task = task
        return task


__all__ = [
    "AIAgent",
    "decide_task",
]
