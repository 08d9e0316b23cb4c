"""Tests for the player combat state machine."""

from __future__ import annotations

import pytest

from fury_front.core.exceptions import InvalidStateError, ValidationError
from fury_front.engine.combat import (
    CombatContext,
    CombatEvent,
    CombatEventKind,
    CombatStateMachine,
)
from fury_front.engine.loadout import Loadout
from fury_front.models import (
    CombatState,
    DamagePolicy,
    DamageType,
    DefenseState,
    FireMode,
    WeaponUpgrade,
)


def _machine(ammo_in_clip: int, reserve_ammo: int, *, weapon_id: str | None = "rifle_ak") -> CombatStateMachine:
    loadout = Loadout()
    if weapon_id:
        loadout.equip(weapon_id)
    context = CombatContext(ammo_in_clip=ammo_in_clip, reserve_ammo=reserve_ammo)
    return CombatStateMachine(DefenseState.full(100, 50), loadout, context)


class TestTransitions:
    """Tests for engage and take_cover."""

    def test_starts_idle(self, machine: CombatStateMachine) -> None:
        assert machine.state == CombatState.IDLE
        assert machine.health == 100
        assert machine.ammo_in_clip == 30
        assert machine.reserve_ammo == 90

    def test_engage(self, machine: CombatStateMachine) -> None:
        machine.engage()
        assert machine.state == CombatState.ENGAGED

    def test_take_cover_from_engaged(self, machine: CombatStateMachine) -> None:
        machine.engage()
        machine.take_cover()
        assert machine.state == CombatState.IN_COVER

    def test_take_cover_from_idle_fails(self, machine: CombatStateMachine) -> None:
        with pytest.raises(InvalidStateError) as exc_info:
            machine.take_cover()

        assert exc_info.value.details["current_state"] == "idle"
        assert machine.state == CombatState.IDLE

    def test_take_cover_twice_fails(self, machine: CombatStateMachine) -> None:
        machine.engage()
        machine.take_cover()
        with pytest.raises(InvalidStateError):
            machine.take_cover()
        assert machine.state == CombatState.IN_COVER

    def test_engage_from_cover(self, machine: CombatStateMachine) -> None:
        machine.engage()
        machine.take_cover()
        machine.engage()
        assert machine.state == CombatState.ENGAGED

    def test_engage_when_dead_fails(self, machine: CombatStateMachine) -> None:
        """A dead player cannot engage, and nothing changes."""
        machine.defense.kill()
        before = machine.context.model_dump()

        with pytest.raises(InvalidStateError):
            machine.engage()

        assert machine.context.model_dump() == before
        assert machine.health == 0


class TestFire:
    """Tests for firing."""

    def test_fire_decrements_clip(self, machine: CombatStateMachine) -> None:
        machine.engage()
        shot = machine.fire()

        assert shot.ammo_in_clip == 29
        assert shot.reserve_ammo == 90
        assert shot.damage == 30
        assert shot.reload is None

    def test_fire_in_cover(self, machine: CombatStateMachine) -> None:
        machine.engage()
        machine.take_cover()
        machine.fire()

        assert machine.state == CombatState.IN_COVER
        assert machine.ammo_in_clip == 29

    def test_fire_when_idle_fails(self, machine: CombatStateMachine) -> None:
        with pytest.raises(InvalidStateError):
            machine.fire()
        assert machine.ammo_in_clip == 30

    def test_auto_reload_on_last_round(self) -> None:
        """Firing the last round reloads from reserve."""
        machine = _machine(1, 50)
        machine.engage()

        shot = machine.fire()

        assert machine.ammo_in_clip == 30
        assert machine.reserve_ammo == 20
        assert machine.state == CombatState.ENGAGED
        assert shot.reload is not None
        assert shot.reload.details["transferred"] == 30
        assert shot.reload.details["automatic"] is True

    def test_last_round_without_reserve(self) -> None:
        machine = _machine(1, 0)
        machine.engage()

        shot = machine.fire()

        assert shot.reload is None
        assert machine.ammo_in_clip == 0
        assert machine.state == CombatState.ENGAGED

    def test_fire_empty_clip_fails(self) -> None:
        machine = _machine(0, 0)
        machine.engage()

        with pytest.raises(InvalidStateError) as exc_info:
            machine.fire()

        assert "reload" in str(exc_info.value)
        assert machine.ammo_in_clip == 0

    def test_upgraded_damage(self, machine: CombatStateMachine, hollow_points: WeaponUpgrade) -> None:
        machine.loadout.apply_upgrade(hollow_points)
        machine.engage()
        assert machine.fire().damage == 35

    def test_fire_unarmed(self) -> None:
        machine = _machine(30, 90, weapon_id=None)
        machine.engage()
        assert machine.fire().damage == 0


class TestReload:
    """Tests for manual reloads."""

    def test_partial_reload(self) -> None:
        """Reserve smaller than the gap is fully transferred."""
        machine = _machine(25, 3)
        machine.engage()

        event = machine.reload()

        assert machine.ammo_in_clip == 28
        assert machine.reserve_ammo == 0
        assert event.kind == CombatEventKind.RELOADED
        assert event.details["automatic"] is False

    def test_reload_without_reserve_fails(self) -> None:
        machine = _machine(10, 0)
        machine.engage()

        with pytest.raises(InvalidStateError):
            machine.reload()

        assert machine.ammo_in_clip == 10
        assert machine.state == CombatState.ENGAGED

    def test_reload_lands_on_engaged(self) -> None:
        """Reloading from cover or idle ends engaged, never reloading."""
        machine = _machine(10, 90)
        machine.engage()
        machine.take_cover()

        event = machine.reload()

        assert machine.state == CombatState.ENGAGED
        assert event.from_state == CombatState.IN_COVER
        assert event.to_state == CombatState.ENGAGED

        idle = _machine(10, 90)
        idle.reload()
        assert idle.state == CombatState.ENGAGED

    def test_full_clip_transfers_nothing(self, machine: CombatStateMachine) -> None:
        event = machine.reload()
        assert event.details["transferred"] == 0
        assert machine.reserve_ammo == 90

    def test_reload_uses_upgraded_clip(self, machine: CombatStateMachine, extended_mag: WeaponUpgrade) -> None:
        machine.loadout.apply_upgrade(extended_mag)
        machine.context.ammo_in_clip = 25

        machine.reload()

        assert machine.ammo_in_clip == 40
        assert machine.reserve_ammo == 75

    def test_default_clip_without_weapon(self) -> None:
        machine = _machine(10, 90, weapon_id=None)
        machine.reload()

        assert machine.clip_capacity == 30
        assert machine.ammo_in_clip == 30
        assert machine.reserve_ammo == 70

    def test_clip_over_capacity_left_alone(self) -> None:
        """Swapping to a smaller weapon does not drain a full clip."""
        machine = _machine(30, 10, weapon_id="pistol_std")
        event = machine.reload()

        assert event.details["transferred"] == 0
        assert machine.ammo_in_clip == 30
        assert machine.reserve_ammo == 10


class TestDamage:
    """Tests for damage routed through the state machine."""

    def test_armor_first(self, machine: CombatStateMachine) -> None:
        machine.apply_damage(70, DamageType.BULLET)
        assert machine.defense.armor == 0
        assert machine.health == 80

    def test_negative_rejected(self, machine: CombatStateMachine) -> None:
        with pytest.raises(ValidationError):
            machine.apply_damage(-1)
        assert machine.health == 100
        assert machine.defense.armor == 50

    def test_plain_policy(self) -> None:
        defense = DefenseState.full(100, 50, policy=DamagePolicy.plain())
        machine = CombatStateMachine(defense)

        machine.apply_damage(30)
        assert machine.health == 70

        machine.apply_damage(200)
        assert machine.health == 0

        machine.apply_damage(10)
        assert machine.health == 0

    def test_damage_does_not_change_state(self, machine: CombatStateMachine) -> None:
        machine.engage()
        machine.apply_damage(500)

        assert machine.health == 0
        assert machine.state == CombatState.ENGAGED


class TestEvents:
    """Tests for emitted events and callbacks."""

    def test_event_sequence(self, machine: CombatStateMachine) -> None:
        machine.engage()
        machine.take_cover()
        machine.fire()
        machine.apply_damage(10)

        kinds = [event.kind for event in machine.events]
        assert kinds == [
            CombatEventKind.ENGAGED,
            CombatEventKind.TOOK_COVER,
            CombatEventKind.FIRED,
            CombatEventKind.DAMAGED,
        ]

    def test_callbacks(self, machine: CombatStateMachine) -> None:
        received: list[CombatEvent] = []
        machine.add_event_callback(received.append)

        machine.engage()

        assert len(received) == 1
        assert received[0].to_state == CombatState.ENGAGED

    def test_failing_callback_does_not_break_command(self, machine: CombatStateMachine) -> None:
        def explode(event: CombatEvent) -> None:
            raise RuntimeError("HUD crashed")

        machine.add_event_callback(explode)
        machine.engage()

        assert machine.state == CombatState.ENGAGED

    def test_event_history_is_bounded(self) -> None:
        """Only the most recent events are kept; callbacks see them all."""
        received: list[CombatEvent] = []
        machine = CombatStateMachine(DefenseState.full(100, 50), event_history=3)
        machine.add_event_callback(received.append)
        machine.engage()

        for _ in range(5):
            machine.fire()

        assert len(received) == 6
        assert len(machine.events) == 3
        assert machine.events == received[-3:]
        assert machine.events[-1].details["ammo_in_clip"] == 25

    def test_clear_events(self, machine: CombatStateMachine) -> None:
        machine.engage()
        machine.clear_events()
        assert machine.events == []

    def test_set_fire_mode(self, machine: CombatStateMachine) -> None:
        machine.set_fire_mode(FireMode.BURST)

        assert machine.context.fire_mode == FireMode.BURST
        assert machine.events[-1].kind == CombatEventKind.FIRE_MODE_CHANGED

    def test_same_fire_mode_emits_nothing(self, machine: CombatStateMachine) -> None:
        machine.set_fire_mode(FireMode.SINGLE)
        assert machine.events == []
