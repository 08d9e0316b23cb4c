"""Tests for AI decision-making."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError as PydanticValidationError

from fury_front.core.exceptions import ValidationError
from fury_front.engine.ai_agent import AIAgent, decide_task
from fury_front.models import AIBehavior, AITask


class TestDecideTask:
    """Tests for the decision table."""

    @pytest.mark.parametrize(
        "behavior,distance,threat,expected",
        [
            (AIBehavior.PASSIVE, 3.0, 0.5, AITask.RETREAT),
            (AIBehavior.PASSIVE, 4.9, 0.9, AITask.RETREAT),
            (AIBehavior.PASSIVE, 5.0, 0.9, AITask.IDLE),
            (AIBehavior.PASSIVE, 30.0, 0.5, AITask.IDLE),
            (AIBehavior.DEFENSIVE, 8.0, 0.6, AITask.TAKE_COVER),
            (AIBehavior.DEFENSIVE, 8.0, 0.8, AITask.TAKE_COVER),
            (AIBehavior.DEFENSIVE, 9.9, 0.5, AITask.PATROL),
            (AIBehavior.DEFENSIVE, 10.0, 0.6, AITask.PATROL),
            (AIBehavior.DEFENSIVE, 12.0, 0.8, AITask.RETREAT),
            (AIBehavior.DEFENSIVE, 12.0, 0.7, AITask.PATROL),
            (AIBehavior.AGGRESSIVE, 15.0, 0.2, AITask.ATTACK_PLAYER),
            (AIBehavior.AGGRESSIVE, 19.9, 0.9, AITask.ATTACK_PLAYER),
            (AIBehavior.AGGRESSIVE, 20.0, 0.9, AITask.PATROL),
        ],
    )
    def test_table(
        self,
        behavior: AIBehavior,
        distance: float,
        threat: float,
        expected: AITask,
    ) -> None:
        assert decide_task(behavior, distance, threat) == expected

    @pytest.mark.parametrize("behavior", list(AIBehavior))
    @pytest.mark.parametrize("distance", [0.0, 2.0, 8.0, 15.0, 50.0])
    def test_low_threat_patrols(self, behavior: AIBehavior, distance: float) -> None:
        """Low threat overrides every behavior and distance."""
        assert decide_task(behavior, distance, 0.05) == AITask.PATROL

    def test_threat_at_threshold_patrols(self) -> None:
        assert decide_task(AIBehavior.AGGRESSIVE, 5.0, 0.1) == AITask.PATROL

    @pytest.mark.parametrize("distance,threat", [(1.0, math.nan), (math.nan, 0.9), (1.0, -0.5)])
    def test_invalid_readings_rejected(self, distance: float, threat: float) -> None:
        """NaN and negative readings never reach the decision table."""
        with pytest.raises(ValidationError):
            decide_task(AIBehavior.AGGRESSIVE, distance, threat)


class TestAIAgent:
    """Tests for the AIAgent model."""

    def test_defaults(self) -> None:
        agent = AIAgent(id="grunt-1", display_name="Grunt", behavior=AIBehavior.AGGRESSIVE)
        assert agent.current_task == AITask.IDLE
        assert agent.distance_to_player == 0.0
        assert agent.threat_level == 0.0

    def test_blank_id_rejected(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            AIAgent(id=" ", display_name="Grunt", behavior=AIBehavior.PASSIVE)
        assert exc_info.value.errors()[0]["loc"] == ("id",)

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            AIAgent(id="grunt-1", display_name="", behavior=AIBehavior.PASSIVE)

    def test_observe(self) -> None:
        agent = AIAgent(id="grunt-1", display_name="Grunt", behavior=AIBehavior.DEFENSIVE)
        agent.observe(8.0, 0.6)

        assert agent.distance_to_player == 8.0
        assert agent.threat_level == 0.6
        assert agent.update_decision() == AITask.TAKE_COVER
        assert agent.current_task == AITask.TAKE_COVER

    @pytest.mark.parametrize(
        "distance,threat",
        [(-1.0, 0.5), (5.0, -0.2), (1.0, math.nan), (math.nan, 0.5), (math.inf, 0.5)],
    )
    def test_observe_invalid_rejected(self, distance: float, threat: float) -> None:
        """Neither reading is written when one is negative, NaN or infinite."""
        agent = AIAgent(id="grunt-1", display_name="Grunt", behavior=AIBehavior.DEFENSIVE)
        agent.observe(8.0, 0.6)

        with pytest.raises(ValidationError):
            agent.observe(distance, threat)

        assert agent.distance_to_player == 8.0
        assert agent.threat_level == 0.6

    def test_assignment_validated(self) -> None:
        agent = AIAgent(id="grunt-1", display_name="Grunt", behavior=AIBehavior.PASSIVE)
        with pytest.raises(PydanticValidationError):
            agent.distance_to_player = -3.0
        assert agent.distance_to_player == 0.0

    def test_nan_threat_never_attacks(self) -> None:
        agent = AIAgent(id="grunt-1", display_name="Grunt", behavior=AIBehavior.AGGRESSIVE)
        agent.observe(1.0, 0.05)

        with pytest.raises(ValidationError):
            agent.observe(1.0, math.nan)

        assert agent.update_decision() == AITask.PATROL

    def test_nan_rejected_at_construction(self) -> None:
        with pytest.raises(PydanticValidationError):
            AIAgent(
                id="grunt-1",
                display_name="Grunt",
                behavior=AIBehavior.AGGRESSIVE,
                threat_level=math.nan,
            )

    def test_no_memory_between_ticks(self) -> None:
        """Each decision depends only on the current readings."""
        agent = AIAgent(id="grunt-1", display_name="Grunt", behavior=AIBehavior.AGGRESSIVE)

        agent.observe(10.0, 0.9)
        assert agent.update_decision() == AITask.ATTACK_PLAYER

        agent.observe(10.0, 0.05)
        assert agent.update_decision() == AITask.PATROL

        agent.observe(10.0, 0.9)
        assert agent.update_decision() == AITask.ATTACK_PLAYER

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            AIAgent(id="a", display_name="A", behavior=AIBehavior.PASSIVE, health=10)  # type: ignore[call-arg]
