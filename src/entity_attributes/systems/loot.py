"""Bonus loot rerolls for entity attributes.

An entity's ``bonus_loot_count_rolls`` attribute lets a bonus-count loot formula
be evaluated extra times; the highest result is kept. The host calls
``apply_bonus_rolls`` where it would otherwise use its single computed roll.
"""

import random
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from entity_attributes.config import get_settings
from entity_attributes.core import AttributeContainer

logger = structlog.get_logger(__name__)

BONUS_LOOT_COUNT_ROLLS = "bonus_loot_count_rolls"

# formula(random_source, context_count, enchantment_level) -> quantity
LootFormula = Callable[[random.Random, int, int], int]


def create_random_source(seed: int | None = None) -> random.Random:
    """
    Create the random source loot formulas draw from.

    Args:
        seed: Explicit seed; falls back to the configured ``random_seed``

    Returns:
        A new Random instance, seeded when a seed is available
    """
    if seed is None:
        seed = get_settings().random_seed
    return random.Random(seed)


def bonus_roll_count(
    container: AttributeContainer, kind_id: str = BONUS_LOOT_COUNT_ROLLS
) -> int | None:
    """
    Get the number of extra rolls an entity gets.

    Fractional values are truncated, not rounded: 2.9 rolls is 2 rolls.

    Returns:
        The truncated effective value, or None if the entity lacks the attribute
    """
    instance = container.get(kind_id)
    if instance is None:
        return None
    return int(instance.value)


def reroll_max(
    initial_roll: int,
    roll_count: int,
    formula: LootFormula,
    random_source: random.Random,
    context_count: int,
    enchantment_level: int,
) -> int:
    """
    Evaluate a loot formula ``roll_count`` more times and keep the best result.

    Args:
        initial_roll: The result the host already computed
        roll_count: Number of extra evaluations (>= 0)
        formula: Loot-quantity formula
        random_source: Shared random source passed to every evaluation
        context_count: Stack count the formula scales
        enchantment_level: Enchantment level the formula scales by

    Returns:
        The maximum of the initial roll and every extra roll

    Raises:
        ValueError: If roll_count is negative
    """
    if roll_count < 0:
        raise ValueError(f"roll_count must be >= 0, got {roll_count}")

    highest_roll = initial_roll
    for _ in range(roll_count):
        this_roll = formula(random_source, context_count, enchantment_level)
        highest_roll = max(highest_roll, this_roll)

    return highest_roll


def apply_bonus_rolls(
    initial_roll: int,
    formula: LootFormula,
    random_source: random.Random,
    context_count: int,
    enchantment_level: int,
    attributes: AttributeContainer | None,
    has_tool: bool = True,
) -> int:
    """
    Replace a single bonus-loot roll with the best of the entity's extra rolls.

    The reroll only happens when a tool was used, the entity has attributes,
    the enchantment level is above zero and the entity has the bonus roll
    attribute. Otherwise the initial roll is returned unchanged.

    Args:
        initial_roll: The result the host already computed
        formula: Loot-quantity formula
        random_source: The loot context's random source
        context_count: Stack count being processed
        enchantment_level: Level of the formula's enchantment on the tool
        attributes: Attribute container of the looting entity, if it has one
        has_tool: Whether the loot context carries a tool

    Returns:
        The quantity the host should use
    """
    if not has_tool or attributes is None or enchantment_level <= 0:
        return initial_roll

    roll_count = bonus_roll_count(attributes)
    if roll_count is None:
        return initial_roll

    result = reroll_max(
        initial_roll,
        roll_count,
        formula,
        random_source,
        context_count,
        enchantment_level,
    )

    if roll_count > 0:
        logger.debug(
            "bonus_loot_rerolled",
            entity_id=attributes.entity_id,
            roll_count=roll_count,
            initial_roll=initial_roll,
            result=result,
        )

    return result


@dataclass(frozen=True)
class UniformBonusCount:
    """
    Adds a uniform random bonus of 0 to ``bonus_multiplier * level``.

    Attributes:
        bonus_multiplier: Upper bound of the bonus per enchantment level
    """

    bonus_multiplier: int = 1

    def __call__(self, random_source: random.Random, count: int, level: int) -> int:
        return count + random_source.randint(0, self.bonus_multiplier * level)


@dataclass(frozen=True)
class OreDrops:
    """Multiplies the count by a random factor of 1 to ``level + 1``, weighted toward 1."""

    def __call__(self, random_source: random.Random, count: int, level: int) -> int:
        if level <= 0:
            return count
        bonus = max(0, random_source.randrange(level + 2) - 1)
        return count * (bonus + 1)


@dataclass(frozen=True)
class BinomialWithBonusCount:
    """
    Adds one item per successful trial out of ``level + extra`` trials.

    Attributes:
        extra: Trials added on top of the enchantment level
        probability: Chance each trial succeeds (0.0-1.0)
    """

    extra: int
    probability: float

    def __post_init__(self) -> None:
        """Validate formula parameters."""
        if not 0.0 <= self.probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {self.probability}")
        if self.extra < 0:
            raise ValueError(f"extra must be >= 0, got {self.extra}")

    def __call__(self, random_source: random.Random, count: int, level: int) -> int:
        successes = sum(
            1 for _ in range(level + self.extra) if random_source.random() < self.probability
        )
        return count + successes
