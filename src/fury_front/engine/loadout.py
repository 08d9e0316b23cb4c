"""Weapon arsenal and the player's active loadout.

The arsenal is an id-to-Weapon mapping built once when the Loadout is
created and exposed read-only afterwards. The loadout tracks which weapon
is active and the upgrades installed on each weapon it has carried.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field

from fury_front.core.exceptions import InvalidStateError, NotFoundError, ValidationError
from fury_front.core.logging import get_logger
from fury_front.models.enums import WeaponType
from fury_front.models.weapons import EquippedWeapon, Weapon, WeaponStats, WeaponUpgrade


logger = get_logger(__name__)


DEFAULT_ARSENAL: tuple[Weapon, ...] = (
    Weapon(
        id="rifle_ak",
        name="AK Assault Rifle",
        weapon_type=WeaponType.ASSAULT_RIFLE,
        damage=30,
        clip_size=30,
        rate_of_fire=9.0,
    ),
    Weapon(
        id="pistol_std",
        name="Service Pistol",
        weapon_type=WeaponType.PISTOL,
        damage=20,
        clip_size=15,
        rate_of_fire=4.0,
    ),
    Weapon(
        id="shotgun_pump",
        name="Pump Shotgun",
        weapon_type=WeaponType.SHOTGUN,
        damage=80,
        clip_size=8,
        rate_of_fire=1.0,
    ),
    Weapon(
        id="smg_vector",
        name="Vector SMG",
        weapon_type=WeaponType.SUBMACHINE_GUN,
        damage=18,
        clip_size=25,
        rate_of_fire=12.0,
    ),
    Weapon(
        id="sniper_bolt",
        name="Bolt-Action Sniper",
        weapon_type=WeaponType.SNIPER_RIFLE,
        damage=120,
        clip_size=5,
        rate_of_fire=0.8,
    ),
)


class LoadoutState(BaseModel):
    """Persisted loadout values.

    Attributes:
        active_weapon_id: Currently equipped weapon, if any.
        upgrades: Installed upgrades per weapon id, in installation order.
    """

    active_weapon_id: str | None = None
    upgrades: dict[str, list[WeaponUpgrade]] = Field(default_factory=dict)


def _require_id(weapon_id: str) -> None:
    if not weapon_id or not weapon_id.strip():
        raise ValidationError(
            "Weapon id cannot be blank",
            field_name="weapon_id",
            invalid_value=weapon_id,
        )


class Loadout:
    """Player weapon loadout backed by a read-only arsenal.

    Example:
        >>> loadout = Loadout()
        >>> loadout.equip("rifle_ak").stats.damage
        30
    """

    def __init__(self, arsenal: Iterable[Weapon] | None = None) -> None:
        """Build the arsenal registry.

        Args:
            arsenal: Weapons to register. Defaults to DEFAULT_ARSENAL.

        Raises:
            ValidationError: If two weapons share an id.
        """
        registry: dict[str, Weapon] = {}
        for weapon in arsenal if arsenal is not None else DEFAULT_ARSENAL:
            if weapon.id in registry:
                raise ValidationError(
                    f"Duplicate weapon id in arsenal: {weapon.id}",
                    field_name="id",
                    invalid_value=weapon.id,
                )
            registry[weapon.id] = weapon

        self._arsenal: Mapping[str, Weapon] = MappingProxyType(registry)
        self._carried: dict[str, EquippedWeapon] = {}
        self._active_id: str | None = None
        logger.debug("Loadout initialized", weapons=len(registry))

    @property
    def arsenal(self) -> Mapping[str, Weapon]:
        """Read-only view of the weapon registry."""
        return self._arsenal

    @property
    def active(self) -> EquippedWeapon | None:
        """The currently equipped weapon, or None."""
        if self._active_id is None:
            return None
        return self._carried[self._active_id]

    @property
    def effective_stats(self) -> WeaponStats | None:
        """Effective stats of the active weapon, or None."""
        active = self.active
        return active.stats if active else None

    def get_weapon(self, weapon_id: str) -> Weapon:
        """Look up a weapon definition.

        Raises:
            ValidationError: If weapon_id is blank.
            NotFoundError: If weapon_id is not in the arsenal.
        """
        _require_id(weapon_id)
        try:
            return self._arsenal[weapon_id]
        except KeyError:
            raise NotFoundError(
                f"Weapon not found in arsenal: {weapon_id}",
                resource="weapon",
                identifier=weapon_id,
            ) from None

    def equip(self, weapon_id: str) -> EquippedWeapon:
        """Switch the active weapon.

        Upgrades previously installed on the weapon in this loadout stay
        installed.

        Raises:
            ValidationError: If weapon_id is blank.
            NotFoundError: If weapon_id is not in the arsenal.
        """
        weapon = self.get_weapon(weapon_id)
        equipped = self._carried.setdefault(weapon_id, EquippedWeapon(weapon=weapon))
        self._active_id = weapon_id
        logger.info("Weapon equipped", weapon_id=weapon_id, upgrades=len(equipped.upgrades))
        return equipped

    def unequip(self) -> None:
        """Holster the active weapon."""
        self._active_id = None

    def apply_upgrade(self, upgrade: WeaponUpgrade) -> EquippedWeapon:
        """Install an upgrade on the active weapon.

        Raises:
            InvalidStateError: If no weapon is equipped.
        """
        if self._active_id is None:
            raise InvalidStateError(
                "Cannot apply upgrade: no weapon equipped",
                details={"upgrade_id": upgrade.id},
            )

        upgraded = self._carried[self._active_id].with_upgrade(upgrade)
        self._carried[self._active_id] = upgraded
        logger.info(
            "Upgrade applied",
            weapon_id=self._active_id,
            upgrade_id=upgrade.id,
            damage=upgraded.stats.damage,
            clip_size=upgraded.stats.clip_size,
        )
        return upgraded

    def upgrades_for(self, weapon_id: str) -> tuple[WeaponUpgrade, ...]:
        """Upgrades installed on a weapon in this loadout."""
        self.get_weapon(weapon_id)
        carried = self._carried.get(weapon_id)
        return carried.upgrades if carried else ()

    def state(self) -> LoadoutState:
        """Capture the loadout for persistence."""
        return LoadoutState(
            active_weapon_id=self._active_id,
            upgrades={wid: list(w.upgrades) for wid, w in self._carried.items()},
        )

    @classmethod
    def restore(cls, state: LoadoutState, arsenal: Iterable[Weapon] | None = None) -> "Loadout":
        """Rebuild a loadout from persisted values.

        Raises:
            NotFoundError: If the state references a weapon missing from the arsenal.
        """
        loadout = cls(arsenal)
        for weapon_id, upgrades in state.upgrades.items():
            weapon = loadout.get_weapon(weapon_id)
            loadout._carried[weapon_id] = EquippedWeapon(weapon=weapon, upgrades=tuple(upgrades))
        if state.active_weapon_id is not None:
            loadout.equip(state.active_weapon_id)
        return loadout


__all__ = [
    "DEFAULT_ARSENAL",
    "Loadout",
    "LoadoutState",
]
