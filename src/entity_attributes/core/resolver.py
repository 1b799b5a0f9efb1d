"""Effective value resolution for attribute instances."""

from typing import TYPE_CHECKING

import structlog

from .modifiers import Operation

if TYPE_CHECKING:
    from .container import AttributeContainer
    from .instance import AttributeInstance

logger = structlog.get_logger(__name__)


def resolve_value(instance: "AttributeInstance") -> float:
    """
    Compute the clamped effective value of an attribute instance.

    ADD and MULTIPLY_BASE modifiers are applied to the base first, then every
    MULTIPLY_TOTAL modifier scales the running total. The result is clamped to
    the kind's range.

    Args:
        instance: The attribute instance to resolve

    Returns:
        The effective value, always within [kind.min, kind.max]

    Examples:
        base 0.5, ADD 0.5, MULTIPLY_TOTAL 0.5 -> (0.5 + 0.5) * 1.5 = 1.5
    """
    base = instance.base_value
    total = base

    for modifier in instance.modifiers_by_operation(Operation.ADD):
        total += modifier.amount

    for modifier in instance.modifiers_by_operation(Operation.MULTIPLY_BASE):
        total += base * modifier.amount

    for modifier in instance.modifiers_by_operation(Operation.MULTIPLY_TOTAL):
        total *= 1.0 + modifier.amount

    return instance.kind.clamp(total)


def resolve(container: "AttributeContainer", kind_id: str) -> float:
    """
    Get the effective value of an entity's attribute.

    Raises:
        UnknownAttributeError: If the kind id is not in the catalog
        MissingAttributeInstanceError: If the entity does not have the attribute
    """
    return resolve_value(container.require(kind_id))


def resolve_or_default(container: "AttributeContainer", kind_id: str) -> float:
    """
    Get the effective value of an entity's attribute, or the kind's base if absent.

    Raises:
        UnknownAttributeError: If the kind id is not in the catalog
    """
    instance = container.get(kind_id)
    if instance is None:
        logger.debug(
            "attribute_instance_missing",
            entity_id=container.entity_id,
            attribute=kind_id,
        )
        return container.catalog.lookup(kind_id).base
    return resolve_value(instance)
