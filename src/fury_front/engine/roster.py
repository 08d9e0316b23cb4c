"""Roster of AI agents in the current combat session.

The roster owns the agents between spawn and despawn and drives the
per-tick decision update. Agents are kept in registration order, so
update_all() visits them in a stable order for deterministic replay.
"""

from __future__ import annotations

from collections.abc import Iterator

from fury_front.core.exceptions import InvalidStateError, NotFoundError
from fury_front.core.logging import get_logger
from fury_front.engine.ai_agent import AIAgent
from fury_front.models.enums import AIBehavior, AITask


logger = get_logger(__name__)


class AIRoster:
    """Registration-ordered collection of AI agents."""

    def __init__(self) -> None:
        self._agents: dict[str, AIAgent] = {}

    def __len__(self) -> int:
        return len(self._agents)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def __iter__(self) -> Iterator[AIAgent]:
        return iter(list(self._agents.values()))

    @property
    def agents(self) -> list[AIAgent]:
        """Agents in registration order."""
        return list(self._agents.values())

    def register(self, agent: AIAgent) -> AIAgent:
        """Add a spawned agent to the roster.

        Raises:
            InvalidStateError: If an agent with the same id is registered.
        """
        if agent.id in self._agents:
            raise InvalidStateError(
                f"Agent already registered: {agent.id}",
                details={"agent_id": agent.id},
            )

        self._agents[agent.id] = agent
        logger.info(
            "Agent registered",
            agent_id=agent.id,
            name=agent.display_name,
            behavior=str(agent.behavior),
        )
        return agent

    def spawn(self, agent_id: str, display_name: str, behavior: AIBehavior) -> AIAgent:
        """Create and register a new agent in one step."""
        return self.register(AIAgent(id=agent_id, display_name=display_name, behavior=behavior))

    def get(self, agent_id: str) -> AIAgent:
        """Look up a registered agent.

        Raises:
            NotFoundError: If no agent has that id.
        """
        try:
            return self._agents[agent_id]
        except KeyError:
            raise NotFoundError(
                f"Agent not found: {agent_id}",
                resource="agent",
                identifier=agent_id,
            ) from None

    def remove(self, agent_id: str) -> AIAgent:
        """Remove a despawned agent.

        Raises:
            NotFoundError: If no agent has that id.
        """
        agent = self.get(agent_id)
        del self._agents[agent_id]
        logger.info("Agent removed", agent_id=agent_id)
        return agent

    def clear(self) -> None:
        self._agents.clear()

    def update_all(self) -> dict[str, AITask]:
        """Run one decision tick for every agent.

        Returns:
            Each agent's new task, keyed by id in registration order.
        """
        decisions = {agent_id: agent.update_decision() for agent_id, agent in self._agents.items()}
        logger.debug("Roster updated", agents=len(decisions))
        return decisions

    def with_task(self, task: AITask) -> list[AIAgent]:
        """Agents currently pursuing a task, in registration order."""
        return [agent for agent in self._agents.values() if agent.current_task == task]


__all__ = [
    "AIRoster",
]
