"""Health, armor and the damage-absorption model.

DefenseState is the single owner of the player's health and armor. Damage
runs through a DamagePolicy chosen at construction, which decides whether
armor soaks damage first and whether the health portion is scaled by the
damage type.

Example:
    >>> defense = DefenseState(health=100, armor=50, max_health=100, max_armor=50)
    >>> report = defense.apply_damage(70, DamageType.EXPLOSION)
    >>> (defense.armor, defense.health)
    (0, 74)
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from fury_front.core.exceptions import ValidationError
from fury_front.core.logging import get_logger
from fury_front.models.enums import DamageType


logger = get_logger(__name__)


DEFAULT_DAMAGE_MULTIPLIERS: dict[DamageType, float] = {
    DamageType.BULLET: 1.0,
    DamageType.EXPLOSION: 1.3,
    DamageType.MELEE: 1.1,
    DamageType.ENVIRONMENTAL: 0.8,
}


def _require_non_negative(amount: int, field_name: str) -> None:
    if amount < 0:
        raise ValidationError(
            f"{field_name} cannot be negative",
            field_name=field_name,
            invalid_value=amount,
        )


# =============================================================================
# Damage Policy
# =============================================================================


class DamagePolicy(BaseModel):
    """Capability flags selecting how damage reaches health.

    Attributes:
        absorb_armor_first: Armor soaks the raw amount before health.
        apply_type_multipliers: Health damage is scaled by damage type.
        multipliers: Per-type multipliers applied to the health portion.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    absorb_armor_first: bool = Field(default=True, description="Armor absorbs first")
    apply_type_multipliers: bool = Field(default=True, description="Scale by damage type")
    multipliers: dict[DamageType, Annotated[float, Field(ge=0.0, allow_inf_nan=False)]] = Field(
        default_factory=lambda: dict(DEFAULT_DAMAGE_MULTIPLIERS),
        description="Health damage multiplier per damage type",
    )

    @classmethod
    def canonical(cls) -> "DamagePolicy":
        """Armor-first absorption with damage type multipliers."""
        return cls()

    @classmethod
    def plain(cls) -> "DamagePolicy":
        """Straight health subtraction, ignoring armor and damage type."""
        return cls(absorb_armor_first=False, apply_type_multipliers=False)

    def multiplier_for(self, damage_type: DamageType) -> float:
        """Get the health multiplier for a damage type under this policy."""
        if not self.apply_type_multipliers:
            return 1.0
        return self.multipliers.get(damage_type, 1.0)


class DamageReport(BaseModel):
    """Outcome of a single damage application.

    Attributes:
        requested: Raw damage amount passed in.
        damage_type: Type of the incoming damage.
        armor_absorbed: Damage soaked by armor.
        health_damage: Health actually removed.
        health: Health after the hit.
        armor: Armor after the hit.
        killed: Whether this hit took health to zero.
    """

    model_config = ConfigDict(frozen=True)

    requested: int
    damage_type: DamageType
    armor_absorbed: int = 0
    health_damage: int = 0
    health: int
    armor: int
    killed: bool = False


# =============================================================================
# Defense State
# =============================================================================


class DefenseState(BaseModel):
    """Player health and armor with armor-first damage absorption.

    Mutated only through apply_damage, heal, restore_armor and kill. Every
    method validates its input before touching state.

    Attributes:
        health: Current health, between 0 and max_health.
        armor: Current armor, between 0 and max_armor.
        max_health: Maximum health.
        max_armor: Maximum armor.
        policy: Damage pipeline selected at construction.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",  # Computed fields come back in persisted dumps
    )

    health: Annotated[int, Field(ge=0, description="Current health")]
    armor: Annotated[int, Field(ge=0, description="Current armor")] = 0
    max_health: Annotated[int, Field(ge=1, description="Maximum health")]
    max_armor: Annotated[int, Field(ge=0, description="Maximum armor")] = 0
    policy: DamagePolicy = Field(default_factory=DamagePolicy.canonical)

    @model_validator(mode="after")
    def validate_bounds(self) -> "DefenseState":
        """Keep current values within their maxima."""
        if self.health > self.max_health:
            msg = f"health ({self.health}) exceeds max_health ({self.max_health})"
            raise ValueError(msg)
        if self.armor > self.max_armor:
            msg = f"armor ({self.armor}) exceeds max_armor ({self.max_armor})"
            raise ValueError(msg)
        return self

    @classmethod
    def full(
        cls,
        max_health: int,
        max_armor: int = 0,
        *,
        policy: DamagePolicy | None = None,
    ) -> "DefenseState":
        """Create a defense state at full health and armor."""
        return cls(
            health=max_health,
            armor=max_armor,
            max_health=max_health,
            max_armor=max_armor,
            policy=policy or DamagePolicy.canonical(),
        )

    @computed_field(description="Whether the player is alive")
    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @computed_field(description="Health as percentage of maximum")
    @property
    def health_percentage(self) -> float:
        return round(self.health / self.max_health * 100, 2)

    def apply_damage(
        self,
        amount: int,
        damage_type: DamageType = DamageType.BULLET,
    ) -> DamageReport:
        """Apply incoming damage.

        Armor absorbs the raw amount first when the policy says so. The
        damage type multiplier scales only what is left for health, and the
        result is truncated toward zero. Health never drops below zero.

        Args:
            amount: Raw damage amount.
            damage_type: Source of the damage.

        Returns:
            Report describing how the damage was distributed.

        Raises:
            ValidationError: If amount is negative.
        """
        _require_non_negative(amount, "amount")

        if not self.is_alive:
            return DamageReport(
                requested=amount,
                damage_type=damage_type,
                health=self.health,
                armor=self.armor,
            )

        remaining = amount
        absorbed = 0
        if self.policy.absorb_armor_first and self.armor > 0:
            absorbed = min(self.armor, remaining)
            remaining -= absorbed

        health_damage = 0
        if remaining > 0:
            health_damage = int(remaining * self.policy.multiplier_for(damage_type))

        new_armor = self.armor - absorbed
        new_health = max(0, self.health - health_damage)
        actual = self.health - new_health

        # Multipliers are non-negative: neither value can rise
        self.armor = new_armor
        self.health = new_health

        report = DamageReport(
            requested=amount,
            damage_type=damage_type,
            armor_absorbed=absorbed,
            health_damage=actual,
            health=self.health,
            armor=self.armor,
            killed=self.health == 0 and actual > 0,
        )
        logger.debug(
            "Damage applied",
            amount=amount,
            damage_type=str(damage_type),
            armor_absorbed=absorbed,
            health_damage=actual,
            health=self.health,
            armor=self.armor,
        )
        if report.killed:
            logger.info("Player killed", damage_type=str(damage_type))
        return report

    def heal(self, amount: int) -> int:
        """Restore health up to the maximum.

        Returns:
            Health actually restored (0 if dead).

        Raises:
            ValidationError: If amount is negative.
        """
        _require_non_negative(amount, "amount")
        if not self.is_alive:
            return 0

        before = self.health
        self.health = min(self.max_health, self.health + amount)
        return self.health - before

    def restore_armor(self, amount: int) -> int:
        """Restore armor up to the maximum.

        Returns:
            Armor actually restored (0 if dead).

        Raises:
            ValidationError: If amount is negative.
        """
        _require_non_negative(amount, "amount")
        if not self.is_alive:
            return 0

        before = self.armor
        self.armor = min(self.max_armor, self.armor + amount)
        return self.armor - before

    def kill(self) -> None:
        """Force health to zero. Safe to call repeatedly."""
        if self.health:
            logger.info("Player killed", forced=True)
        self.health = 0


__all__ = [
    "DEFAULT_DAMAGE_MULTIPLIERS",
    "DamagePolicy",
    "DamageReport",
    "DefenseState",
]
