"""Host-facing effects of the default attributes.

Each helper reads one attribute's effective value and applies it to a value the
host computed. Entities without the attribute behave as if it had its base value.
"""

from enum import StrEnum

import structlog

from entity_attributes.core import AttributeContainer, resolve_or_default

logger = structlog.get_logger(__name__)

CRITICAL_BONUS_DAMAGE = "critical_bonus_damage"
WATER_SPEED = "water_speed"
WATER_VISIBILITY = "water_visibility"
MAX_AIR = "max_air"
LAVA_SPEED = "lava_speed"
LAVA_VISIBILITY = "lava_visibility"
DIG_SPEED = "dig_speed"
DROPPED_EXPERIENCE = "dropped_experience"
MAGIC_PROTECTION = "magic_protection"


class Fluid(StrEnum):
    """Fluids with their own movement and visibility attributes."""

    WATER = "water"
    LAVA = "lava"


_SPEED_ATTRIBUTES = {Fluid.WATER: WATER_SPEED, Fluid.LAVA: LAVA_SPEED}
_VISIBILITY_ATTRIBUTES = {Fluid.WATER: WATER_VISIBILITY, Fluid.LAVA: LAVA_VISIBILITY}


def critical_damage_multiplier(attributes: AttributeContainer) -> float:
    """Damage multiplier for a critical hit (1.5 with the default bonus of 0.5)."""
    return 1.0 + resolve_or_default(attributes, CRITICAL_BONUS_DAMAGE)


def apply_critical_damage(damage: float, attributes: AttributeContainer) -> float:
    return damage * critical_damage_multiplier(attributes)


def scale_experience(amount: int, attributes: AttributeContainer) -> int:
    """
    Scale dropped experience by the entity's ``dropped_experience`` multiplier.

    Args:
        amount: Experience the host would drop
        attributes: Attributes of the entity credited with the drop

    Returns:
        The scaled amount, truncated to a whole number
    """
    multiplier = resolve_or_default(attributes, DROPPED_EXPERIENCE)
    return int(amount * multiplier)


def reduce_magic_damage(
    damage: float, attributes: AttributeContainer, is_magic: bool = True
) -> float:
    """
    Subtract magic protection from incoming damage.

    Each point of protection removes one point of magic damage. Damage that is
    not magic passes through unchanged, and the result never drops below zero.
    """
    if not is_magic:
        return damage

    protection = resolve_or_default(attributes, MAGIC_PROTECTION)
    reduced = max(0.0, damage - protection)

    if reduced != damage:
        logger.debug(
            "magic_damage_reduced",
            entity_id=attributes.entity_id,
            damage=damage,
            protection=protection,
            result=reduced,
        )

    return reduced


def max_air(host_max_air: int, attributes: AttributeContainer) -> int:
    """Breath capacity in ticks: the host's value plus ``max_air``, never negative."""
    bonus = int(resolve_or_default(attributes, MAX_AIR))
    return max(0, host_max_air + bonus)


def dig_speed(host_speed: float, attributes: AttributeContainer) -> float:
    return host_speed + resolve_or_default(attributes, DIG_SPEED)


def fluid_speed(
    attributes: AttributeContainer, fluid: Fluid, dynamic_base: float | None = None
) -> float:
    """
    Movement speed factor while inside a fluid.

    The host recomputes the base every tick and passes it as ``dynamic_base``;
    it replaces the attribute's base before modifiers are applied.

    Args:
        attributes: Attributes of the moving entity
        fluid: The fluid the entity is in
        dynamic_base: Base value the host computed this tick

    Returns:
        The effective speed factor, within [0, 1]
    """
    kind_id = _SPEED_ATTRIBUTES[fluid]
    if dynamic_base is not None:
        instance = attributes.get(kind_id)
        if instance is not None:
            instance.base_value = dynamic_base
    return resolve_or_default(attributes, kind_id)


def fluid_visibility(attributes: AttributeContainer, fluid: Fluid) -> float:
    """Fog distance while inside a fluid."""
    return resolve_or_default(attributes, _VISIBILITY_ATTRIBUTES[fluid])
