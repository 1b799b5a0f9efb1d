"""Game systems that consume entity attributes."""

from .effects import (
    Fluid,
    apply_critical_damage,
    critical_damage_multiplier,
    dig_speed,
    fluid_speed,
    fluid_visibility,
    max_air,
    reduce_magic_damage,
    scale_experience,
)
from .loot import (
    BinomialWithBonusCount,
    LootFormula,
    OreDrops,
    UniformBonusCount,
    apply_bonus_rolls,
    bonus_roll_count,
    create_random_source,
    reroll_max,
)

__all__ = [
    "BinomialWithBonusCount",
    "Fluid",
    "LootFormula",
    "OreDrops",
    "UniformBonusCount",
    "apply_bonus_rolls",
    "apply_critical_damage",
    "bonus_roll_count",
    "create_random_source",
    "critical_damage_multiplier",
    "dig_speed",
    "fluid_speed",
    "fluid_visibility",
    "max_air",
    "reduce_magic_damage",
    "scale_experience",
]
