"""Weapon definitions, upgrades and effective stat aggregation.

Weapon and WeaponUpgrade are immutable definitions. An EquippedWeapon
pairs one weapon with the ordered tuple of upgrades installed on it;
installing an upgrade yields a new EquippedWeapon, so a shared Weapon
definition is never altered by any loadout.

Effective stats are never stored. aggregate_stats() sums the base stats
and every installed upgrade on demand.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from fury_front.models.enums import UpgradeRarity, WeaponType


MIN_CLIP_SIZE = 1


class Weapon(BaseModel):
    """Static weapon description.

    Attributes:
        id: Registry key.
        name: Display name.
        weapon_type: Weapon class.
        damage: Base damage per shot.
        clip_size: Base magazine capacity.
        rate_of_fire: Base shots per second.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Registry key")
    name: str = Field(min_length=1, description="Display name")
    weapon_type: WeaponType = Field(description="Weapon class")
    damage: int = Field(ge=0, description="Base damage per shot")
    clip_size: int = Field(ge=MIN_CLIP_SIZE, description="Base magazine capacity")
    rate_of_fire: float = Field(ge=0.0, description="Base shots per second")


class WeaponUpgrade(BaseModel):
    """An upgrade installable on the equipped weapon.

    Bonuses may be negative for trade-off mods (e.g. a heavier barrel that
    trades fire rate for damage).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Upgrade identifier")
    title: str = Field(min_length=1, description="Display title")
    rarity: UpgradeRarity = Field(default=UpgradeRarity.COMMON)
    damage_bonus: int = Field(default=0, description="Added damage per shot")
    clip_size_bonus: int = Field(default=0, description="Added magazine capacity")
    fire_rate_bonus: float = Field(default=0.0, description="Added shots per second")


class WeaponStats(BaseModel):
    """Effective weapon stats after upgrades."""

    model_config = ConfigDict(frozen=True)

    damage: int
    clip_size: int
    rate_of_fire: float


def aggregate_stats(weapon: Weapon, upgrades: Iterable[WeaponUpgrade] = ()) -> WeaponStats:
    """Compute effective stats for a weapon and its upgrades.

    Damage is floored at 0, rate of fire at 0.0 and clip size at 1.
    There is no upper cap.

    Args:
        weapon: Base weapon definition.
        upgrades: Installed upgrades, in installation order.

    Returns:
        The effective WeaponStats.

    Example:
        >>> rifle = Weapon(id="r", name="Rifle", weapon_type=WeaponType.ASSAULT_RIFLE,
        ...                damage=30, clip_size=30, rate_of_fire=9.0)
        >>> aggregate_stats(rifle, [WeaponUpgrade(id="m", title="Mag", clip_size_bonus=10)])
        WeaponStats(damage=30, clip_size=40, rate_of_fire=9.0)
    """
    damage = weapon.damage
    clip_size = weapon.clip_size
    rate_of_fire = weapon.rate_of_fire
    for upgrade in upgrades:
        damage += upgrade.damage_bonus
        clip_size += upgrade.clip_size_bonus
        rate_of_fire += upgrade.fire_rate_bonus

    return WeaponStats(
        damage=max(0, damage),
        clip_size=max(MIN_CLIP_SIZE, clip_size),
        rate_of_fire=max(0.0, rate_of_fire),
    )


class EquippedWeapon(BaseModel):
    """A weapon instance with its installed upgrades.

    Attributes:
        weapon: Shared base definition.
        upgrades: Installed upgrades in installation order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    weapon: Weapon
    upgrades: tuple[WeaponUpgrade, ...] = ()

    @property
    def id(self) -> str:
        return self.weapon.id

    @property
    def stats(self) -> WeaponStats:
        """Effective stats including every installed upgrade."""
        return aggregate_stats(self.weapon, self.upgrades)

    def with_upgrade(self, upgrade: WeaponUpgrade) -> "EquippedWeapon":
        """Return a copy with one more upgrade installed."""
        return EquippedWeapon(weapon=self.weapon, upgrades=(*self.upgrades, upgrade))


__all__ = [
    "MIN_CLIP_SIZE",
    "Weapon",
    "WeaponUpgrade",
    "WeaponStats",
    "EquippedWeapon",
    "aggregate_stats",
]
