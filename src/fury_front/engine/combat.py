"""Player combat state machine.

The state machine moves between IDLE, ENGAGED and IN_COVER in response to
player commands and orchestrates firing, reloading and incoming damage
against the player's DefenseState and Loadout.

Reloading is a transition, not a resting state: a reload passes through
RELOADING and lands back on ENGAGED within the same call, and is reported
as a discrete RELOADED event so callers can assert it happened.

Death is an overlay rather than a state. It is only checked when the
player tries to engage.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from fury_front.core.constants import (
    DEFAULT_AMMO_IN_CLIP,
    DEFAULT_CLIP_SIZE,
    DEFAULT_EVENT_HISTORY,
    DEFAULT_RESERVE_AMMO,
)
from fury_front.core.exceptions import InvalidStateError, ValidationError
from fury_front.core.logging import get_logger
from fury_front.engine.loadout import Loadout
from fury_front.models.defense import DamageReport, DefenseState
from fury_front.models.enums import CombatState, DamageType, FireMode


logger = get_logger(__name__)


# =============================================================================
# Context & Events
# =============================================================================


class CombatContext(BaseModel):
    """Mutable player combat values.

    Health lives on the DefenseState that the state machine owns, so it is
    not duplicated here.

    Attributes:
        ammo_in_clip: Rounds currently loaded.
        reserve_ammo: Spare rounds carried.
        fire_mode: Selected firing cadence.
        state: Current combat state.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    ammo_in_clip: int = Field(default=DEFAULT_AMMO_IN_CLIP, ge=0, description="Rounds loaded")
    reserve_ammo: int = Field(default=DEFAULT_RESERVE_AMMO, ge=0, description="Spare rounds")
    fire_mode: FireMode = Field(default=FireMode.SINGLE, description="Firing cadence")
    state: CombatState = Field(default=CombatState.IDLE, description="Combat state")


class CombatEventKind(StrEnum):
    """Kinds of events emitted by the state machine."""

    ENGAGED = "engaged"
    TOOK_COVER = "took_cover"
    FIRED = "fired"
    RELOADED = "reloaded"
    DAMAGED = "damaged"
    FIRE_MODE_CHANGED = "fire_mode_changed"


@dataclass(frozen=True)
class CombatEvent:
    """A discrete state machine transition or ammo change.

    Attributes:
        kind: What happened.
        from_state: State before the event.
        to_state: State after the event.
        details: Event-specific values (ammo counts, damage, ...).
    """

    kind: CombatEventKind
    from_state: CombatState
    to_state: CombatState
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ShotResult:
    """Outcome of a single shot.

    Attributes:
        damage: Effective damage of the weapon that fired.
        ammo_in_clip: Rounds loaded after the shot (and any auto-reload).
        reserve_ammo: Spare rounds after the shot (and any auto-reload).
        reload: The automatic reload triggered by emptying the clip, if any.
    """

    damage: int
    ammo_in_clip: int
    reserve_ammo: int
    reload: CombatEvent | None = None


# =============================================================================
# State Machine
# =============================================================================


class CombatStateMachine:
    """Player-side combat state machine.

    Every command validates before it mutates, so a command that raises
    leaves the context and defense state untouched.

    Example:
        >>> machine = CombatStateMachine(DefenseState.full(100, 50))
        >>> machine.engage()
        >>> machine.fire().ammo_in_clip
        29
    """

    def __init__(
        self,
        defense: DefenseState,
        loadout: Loadout | None = None,
        context: CombatContext | None = None,
        *,
        default_clip_size: int = DEFAULT_CLIP_SIZE,
        event_history: int = DEFAULT_EVENT_HISTORY,
    ) -> None:
        """Initialize the state machine.

        Args:
            defense: The player's health and armor.
            loadout: Weapon loadout providing clip capacity and shot damage.
            context: Starting combat values. Defaults to a fresh CombatContext.
            default_clip_size: Clip capacity used while no weapon is equipped.
            event_history: Most recent events kept in `events`. Older events
                are dropped; callbacks still see every event.
        """
        self._defense = defense
        self._loadout = loadout if loadout is not None else Loadout()
        self._context = context if context is not None else CombatContext()
        self._default_clip_size = default_clip_size
        self._events: deque[CombatEvent] = deque(maxlen=event_history)
        self._event_callbacks: list[Callable[[CombatEvent], None]] = []

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def context(self) -> CombatContext:
        return self._context

    @property
    def defense(self) -> DefenseState:
        return self._defense

    @property
    def loadout(self) -> Loadout:
        return self._loadout

    @property
    def state(self) -> CombatState:
        return self._context.state

    @property
    def health(self) -> int:
        return self._defense.health

    @property
    def ammo_in_clip(self) -> int:
        return self._context.ammo_in_clip

    @property
    def reserve_ammo(self) -> int:
        return self._context.reserve_ammo

    @property
    def clip_capacity(self) -> int:
        """Effective clip size of the active weapon, or the default."""
        stats = self._loadout.effective_stats
        return stats.clip_size if stats else self._default_clip_size

    @property
    def events(self) -> list[CombatEvent]:
        """Most recent events, oldest first."""
        return list(self._events)

    def add_event_callback(self, callback: Callable[[CombatEvent], None]) -> None:
        """Register a callback invoked with every emitted event."""
        self._event_callbacks.append(callback)

    def clear_events(self) -> None:
        self._events.clear()

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def engage(self) -> None:
        """Enter combat from any state.

        Raises:
            InvalidStateError: If the player is dead.
        """
        if self._defense.health <= 0:
            raise InvalidStateError(
                "Cannot engage: player is dead",
                current_state=self.state.value,
                details={"health": self._defense.health},
            )

        self._transition(CombatEventKind.ENGAGED, CombatState.ENGAGED)

    def take_cover(self) -> None:
        """Move into cover.

        Raises:
            InvalidStateError: If not currently engaged.
        """
        if self.state != CombatState.ENGAGED:
            raise InvalidStateError(
                "Cannot take cover outside active combat",
                current_state=self.state.value,
                expected_states=[CombatState.ENGAGED.value],
            )

        self._transition(CombatEventKind.TOOK_COVER, CombatState.IN_COVER)

    def fire(self) -> ShotResult:
        """Fire one round.

        Emptying the clip while spare rounds remain reloads automatically.

        Returns:
            The shot outcome, including any automatic reload.

        Raises:
            InvalidStateError: If not in combat or the clip is empty.
        """
        if self.state == CombatState.IDLE:
            raise InvalidStateError(
                "Cannot fire: not in combat",
                current_state=self.state.value,
                expected_states=[CombatState.ENGAGED.value, CombatState.IN_COVER.value],
            )
        if self._context.ammo_in_clip == 0:
            raise InvalidStateError(
                "Cannot fire: clip is empty, must reload",
                current_state=self.state.value,
                details={"reserve_ammo": self._context.reserve_ammo},
            )

        stats = self._loadout.effective_stats
        damage = stats.damage if stats else 0

        self._context.ammo_in_clip -= 1
        self._emit(
            CombatEvent(
                kind=CombatEventKind.FIRED,
                from_state=self.state,
                to_state=self.state,
                details={"damage": damage, "ammo_in_clip": self._context.ammo_in_clip},
            )
        )

        reload_event = None
        if self._context.ammo_in_clip == 0 and self._context.reserve_ammo > 0:
            reload_event = self._reload(automatic=True)

        return ShotResult(
            damage=damage,
            ammo_in_clip=self._context.ammo_in_clip,
            reserve_ammo=self._context.reserve_ammo,
            reload=reload_event,
        )

    def reload(self) -> CombatEvent:
        """Top up the clip from reserve ammo and return to ENGAGED.

        Returns:
            The RELOADED event describing the transfer.

        Raises:
            InvalidStateError: If there is no reserve ammo.
        """
        return self._reload(automatic=False)

    def apply_damage(
        self,
        amount: int,
        damage_type: DamageType = DamageType.BULLET,
    ) -> DamageReport:
        """Apply incoming damage through the defense state's policy.

        Raises:
            ValidationError: If amount is negative.
        """
        if amount < 0:
            raise ValidationError(
                "amount cannot be negative",
                field_name="amount",
                invalid_value=amount,
            )

        report = self._defense.apply_damage(amount, damage_type)
        if report.armor_absorbed or report.health_damage:
            self._emit(
                CombatEvent(
                    kind=CombatEventKind.DAMAGED,
                    from_state=self.state,
                    to_state=self.state,
                    details=report.model_dump(),
                )
            )
        return report

    def set_fire_mode(self, mode: FireMode) -> None:
        previous = self._context.fire_mode
        self._context.fire_mode = mode
        if previous != mode:
            self._emit(
                CombatEvent(
                    kind=CombatEventKind.FIRE_MODE_CHANGED,
                    from_state=self.state,
                    to_state=self.state,
                    details={"from": previous, "to": mode},
                )
            )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _reload(self, *, automatic: bool) -> CombatEvent:
        if self._context.reserve_ammo == 0:
            raise InvalidStateError(
                "Cannot reload: no reserve ammo",
                current_state=self.state.value,
                details={"ammo_in_clip": self._context.ammo_in_clip},
            )

        from_state = self.state
        self._context.state = CombatState.RELOADING

        # A clip over capacity after a weapon swap is left as is
        needed = max(0, self.clip_capacity - self._context.ammo_in_clip)
        transferred = min(needed, self._context.reserve_ammo)
        self._context.ammo_in_clip += transferred
        self._context.reserve_ammo -= transferred

        self._context.state = CombatState.ENGAGED

        event = CombatEvent(
            kind=CombatEventKind.RELOADED,
            from_state=from_state,
            to_state=CombatState.ENGAGED,
            details={
                "transferred": transferred,
                "ammo_in_clip": self._context.ammo_in_clip,
                "reserve_ammo": self._context.reserve_ammo,
                "automatic": automatic,
            },
        )
        self._emit(event)
        return event

    def _transition(self, kind: CombatEventKind, to_state: CombatState) -> None:
        from_state = self.state
        self._context.state = to_state
        self._emit(CombatEvent(kind=kind, from_state=from_state, to_state=to_state))

    def _emit(self, event: CombatEvent) -> None:
        self._events.append(event)
        logger.debug(
            "Combat event",
            kind=str(event.kind),
            from_state=str(event.from_state),
            to_state=str(event.to_state),
            **event.details,
        )
        for callback in self._event_callbacks:
            try:
                callback(event)
            except Exception:
                logger.exception("Combat event callback failed", kind=str(event.kind))


__all__ = [
    "CombatContext",
    "CombatEvent",
    "CombatEventKind",
    "CombatStateMachine",
    "ShotResult",
]
