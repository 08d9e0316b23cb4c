"""Combat session: the composition root for one engagement.

A CombatSession wires the player's DefenseState, Loadout and
CombatStateMachine together with the AIRoster, routes damage from AI
agents into the player's defense, and hands read-only views to the HUD
and exact-value snapshots to the persistence layer.
"""

from __future__ import annotations

from collections.abc import Iterable
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from fury_front.core.config import CombatSettings, get_settings
from fury_front.core.logging import get_logger, log_context
from fury_front.engine.ai_agent import AIAgent
from fury_front.engine.combat import CombatContext, CombatStateMachine
from fury_front.engine.loadout import Loadout, LoadoutState
from fury_front.engine.roster import AIRoster
from fury_front.models.defense import DamagePolicy, DamageReport, DefenseState
from fury_front.models.enums import AITask, CombatState, DamageType, FireMode
from fury_front.models.weapons import Weapon


logger = get_logger(__name__)


class HudState(BaseModel):
    """Read-only player state for the presentation layer."""

    model_config = ConfigDict(frozen=True)

    health: int
    max_health: int
    armor: int
    max_armor: int
    ammo_in_clip: int
    reserve_ammo: int
    clip_size: int
    combat_state: CombatState
    fire_mode: FireMode
    weapon_name: str | None = None


class SessionSnapshot(BaseModel):
    """Exact field values of a combat session.

    Holds no derived state: restoring a snapshot reproduces the session
    field for field.
    """

    defense: DefenseState
    context: CombatContext
    loadout: LoadoutState = Field(default_factory=LoadoutState)
    agents: list[AIAgent] = Field(default_factory=list)


class CombatSession:
    """One combat session for a single player and its AI opponents.

    Example:
        >>> session = CombatSession()
        >>> session.player.engage()
        >>> session.roster.spawn("grunt-1", "Grunt", AIBehavior.AGGRESSIVE).observe(12.0, 0.8)
        >>> session.tick()
        {'grunt-1': <AITask.ATTACK_PLAYER: 'attack_player'>}
    """

    def __init__(
        self,
        settings: CombatSettings | None = None,
        *,
        arsenal: Iterable[Weapon] | None = None,
    ) -> None:
        """Start a session with fresh starting values.

        Args:
            settings: Combat settings. Defaults to the application settings.
            arsenal: Weapons available to the loadout. Defaults to the stock arsenal.
        """
        self._settings = settings if settings is not None else get_settings().combat
        self._arsenal = tuple(arsenal) if arsenal is not None else None
        self.session_id = uuid4().hex
        self._log = logger.bind(session_id=self.session_id)
        self.roster = AIRoster()
        self._start()
        self._log.info(
            "Combat session started",
            max_health=self._settings.max_health,
            max_armor=self._settings.max_armor,
            weapon=self._settings.default_weapon_id,
        )

    @property
    def settings(self) -> CombatSettings:
        return self._settings

    @property
    def defense(self) -> DefenseState:
        return self.player.defense

    @property
    def loadout(self) -> Loadout:
        return self.player.loadout

    def _damage_policy(self) -> DamagePolicy:
        return DamagePolicy(
            absorb_armor_first=self._settings.absorb_armor_first,
            apply_type_multipliers=self._settings.apply_type_multipliers,
        )

    def _start(self) -> None:
        defense = DefenseState.full(
            self._settings.max_health,
            self._settings.max_armor,
            policy=self._damage_policy(),
        )
        loadout = Loadout(self._arsenal)
        if self._settings.default_weapon_id:
            loadout.equip(self._settings.default_weapon_id)

        self.player = CombatStateMachine(
            defense,
            loadout,
            CombatContext(reserve_ammo=self._settings.starting_reserve_ammo),
            default_clip_size=self._settings.default_clip_size,
        )
        self.player.context.ammo_in_clip = min(
            self._settings.starting_ammo_in_clip,
            self.player.clip_capacity,
        )

    def tick(self) -> dict[str, AITask]:
        """Run one AI decision tick."""
        with log_context(session_id=self.session_id):
            return self.roster.update_all()

    def apply_agent_damage(
        self,
        agent_id: str,
        amount: int,
        damage_type: DamageType = DamageType.BULLET,
    ) -> DamageReport:
        """Apply damage dealt by an AI agent to the player.

        Raises:
            NotFoundError: If the agent is not in the roster.
            ValidationError: If amount is negative.
        """
        agent = self.roster.get(agent_id)
        with log_context(session_id=self.session_id, agent_id=agent.id):
            report = self.player.apply_damage(amount, damage_type)
            self._log.info(
                "Player hit",
                damage_type=str(damage_type),
                armor_absorbed=report.armor_absorbed,
                health_damage=report.health_damage,
                health=report.health,
            )
        return report

    def hud(self) -> HudState:
        """Snapshot of what the HUD should display."""
        active = self.loadout.active
        return HudState(
            health=self.defense.health,
            max_health=self.defense.max_health,
            armor=self.defense.armor,
            max_armor=self.defense.max_armor,
            ammo_in_clip=self.player.ammo_in_clip,
            reserve_ammo=self.player.reserve_ammo,
            clip_size=self.player.clip_capacity,
            combat_state=self.player.state,
            fire_mode=self.player.context.fire_mode,
            weapon_name=active.weapon.name if active else None,
        )

    def snapshot(self) -> SessionSnapshot:
        """Capture exact field values for the persistence layer."""
        return SessionSnapshot(
            defense=self.defense.model_copy(deep=True),
            context=self.player.context.model_copy(deep=True),
            loadout=self.loadout.state(),
            agents=[agent.model_copy(deep=True) for agent in self.roster],
        )

    @classmethod
    def restore(
        cls,
        snapshot: SessionSnapshot,
        settings: CombatSettings | None = None,
        *,
        arsenal: Iterable[Weapon] | None = None,
    ) -> "CombatSession":
        """Rebuild a session from a snapshot.

        Raises:
            NotFoundError: If the snapshot references a weapon missing from the arsenal.
            InvalidStateError: If the snapshot lists the same agent twice.
        """
        session = cls(settings, arsenal=arsenal)
        session.player = CombatStateMachine(
            snapshot.defense.model_copy(deep=True),
            Loadout.restore(snapshot.loadout, session._arsenal),
            snapshot.context.model_copy(deep=True),
            default_clip_size=session._settings.default_clip_size,
        )
        for agent in snapshot.agents:
            session.roster.register(agent.model_copy(deep=True))
        session._log.info("Combat session restored", agents=len(session.roster))
        return session

    def reset(self) -> None:
        """Return to starting values and drop every agent."""
        self.roster.clear()
        self._start()
        self._log.info("Combat session reset")


__all__ = [
    "CombatSession",
    "HudState",
    "SessionSnapshot",
]
