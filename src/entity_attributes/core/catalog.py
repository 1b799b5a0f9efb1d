"""
Attribute catalog for entity attributes.

Defines the attribute kinds known to the process and handles loading extra
definitions from YAML files.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from entity_attributes.config import DEFAULT_NAMESPACE

logger = structlog.get_logger(__name__)


class UnknownAttributeError(LookupError):
    """Raised when looking up an attribute kind that was never defined."""

    pass


class DuplicateAttributeError(Exception):
    """Raised when an attribute kind id is defined twice."""

    pass


class AttributeDefinitionError(Exception):
    """Raised when attribute definitions cannot be loaded or validated."""

    pass


@dataclass(frozen=True)
class AttributeKind:
    """
    Immutable definition of one attribute.

    Attributes:
        id: Stable identifier, unique within a catalog (e.g. "water_speed")
        base: Default value when nothing overrides it
        min: Inclusive lower clamp bound
        max: Inclusive upper clamp bound
        tracked: Whether the host should sync the value to clients
        namespace: Registry namespace the id lives in
    """

    id: str
    base: float
    min: float
    max: float
    tracked: bool = True
    namespace: str = DEFAULT_NAMESPACE

    def __post_init__(self) -> None:
        """Validate the clamp range."""
        if not self.id:
            raise ValueError("Attribute id must be a non-empty string")
        if self.min > self.max:
            raise ValueError(
                f"Minimum value ({self.min}) cannot be bigger than maximum ({self.max}) "
                f"for attribute '{self.id}'"
            )
        if not self.min <= self.base <= self.max:
            raise ValueError(
                f"Base value ({self.base}) must be within [{self.min}, {self.max}] "
                f"for attribute '{self.id}'"
            )

    @property
    def registry_id(self) -> str:
        """Namespaced identifier, e.g. ``additionalentityattributes:water_speed``."""
        return f"{self.namespace}:{self.id}"

    @property
    def translation_key(self) -> str:
        """Key the host uses to look up the attribute's display name."""
        return f"attribute.name.generic.{self.namespace}.{self.id}"

    def clamp(self, value: float) -> float:
        """Clamp a value into this kind's inclusive range."""
        return max(self.min, min(self.max, value))


class AttributeCatalog:
    """
    The set of attribute kinds defined at startup.

    Built once and handed to every consumer; there is no process-wide table.
    """

    def __init__(self, namespace: str = DEFAULT_NAMESPACE) -> None:
        self.namespace = namespace
        self._kinds: dict[str, AttributeKind] = {}

    def define(
        self,
        id: str,
        base: float,
        min: float,
        max: float,
        tracked: bool = True,
    ) -> AttributeKind:
        """
        Define a new attribute kind.

        Args:
            id: Bare identifier (no namespace)
            base: Default value
            min: Inclusive lower bound
            max: Inclusive upper bound
            tracked: Whether the host syncs the value

        Returns:
            The new AttributeKind

        Raises:
            DuplicateAttributeError: If the id is already defined
            ValueError: If the range is invalid
        """
        if id in self._kinds:
            raise DuplicateAttributeError(f"Attribute '{id}' is already defined")

        kind = AttributeKind(
            id=id,
            base=float(base),
            min=float(min),
            max=float(max),
            tracked=tracked,
            namespace=self.namespace,
        )
        self._kinds[id] = kind

        logger.debug(
            "attribute_defined",
            attribute=kind.registry_id,
            base=kind.base,
            range=f"{kind.min}-{kind.max}",
        )

        return kind

    def lookup(self, id: str) -> AttributeKind:
        """
        Get an attribute kind by bare or namespaced id.

        Raises:
            UnknownAttributeError: If the id was never defined
        """
        key = self._strip_namespace(id)
        kind = self._kinds.get(key) if key is not None else None
        if kind is None:
            raise UnknownAttributeError(f"Unknown attribute: {id}")
        return kind

    def get(self, id: str) -> AttributeKind | None:
        """Get an attribute kind by id, or None if it is not defined."""
        key = self._strip_namespace(id)
        return self._kinds.get(key) if key is not None else None

    def _strip_namespace(self, id: str) -> str | None:
        namespace, sep, name = id.rpartition(":")
        if not sep:
            return id
        if namespace != self.namespace:
            return None
        return name

    def __contains__(self, id: object) -> bool:
        return isinstance(id, str) and self.get(id) is not None

    def __iter__(self) -> Iterator[AttributeKind]:
        return iter(self._kinds.values())

    def __len__(self) -> int:
        return len(self._kinds)

    @property
    def ids(self) -> list[str]:
        """All bare ids in definition order."""
        return list(self._kinds)


# Default kinds: (id, base, min, max)
DEFAULT_ATTRIBUTES: list[tuple[str, float, float, float]] = [
    # Crits deal 1.5x by default, so the bonus starts at 0.5
    ("critical_bonus_damage", 0.5, -1.0, 1024.0),
    # Base is recomputed by the host every tick; capped at 1
    ("water_speed", 0.5, 0.0, 1.0),
    ("water_visibility", 96.0, 0.0, 1024.0),
    # Measured in ticks
    ("max_air", 0.0, -40000.0, 40000.0),
    ("lava_speed", 0.5, 0.0, 1.0),
    ("lava_visibility", 1.0, 0.0, 1024.0),
    ("dig_speed", 0.0, 0.0, 2048.0),
    # Each full +1 rolls bonus loot formulas once more, keeping the best
    ("bonus_loot_count_rolls", 0.0, 0.0, 128.0),
    ("bonus_rare_loot_rolls", 0.0, 0.0, 128.0),
    # 1.0 is the unmodified drop amount, 0.0 drops nothing
    ("dropped_experience", 1.0, 0.0, 1024.0),
    # Each point reduces magic damage taken by 1
    ("magic_protection", 0.0, 0.0, 1024.0),
]


def build_default_catalog(namespace: str = DEFAULT_NAMESPACE) -> AttributeCatalog:
    """Build a catalog holding the eleven default attribute kinds."""
    catalog = AttributeCatalog(namespace)
    for id, base, min_value, max_value in DEFAULT_ATTRIBUTES:
        catalog.define(id, base, min_value, max_value)

    logger.info(
        "attribute_catalog_built",
        namespace=namespace,
        attribute_count=len(catalog),
    )

    return catalog


class AttributeDefinition(BaseModel):
    """
    Attribute kind definition loaded from YAML data.

    Attributes:
        id: Bare attribute identifier
        base: Default value
        min: Inclusive lower bound
        max: Inclusive upper bound
        tracked: Whether the host syncs the value
    """

    id: str = Field(..., min_length=1, description="Bare attribute identifier")
    base: float = Field(default=0.0, description="Default value")
    min: float = Field(..., description="Inclusive lower bound")
    max: float = Field(..., description="Inclusive upper bound")
    tracked: bool = Field(default=True, description="Sync value to clients")

    @model_validator(mode="after")
    def check_range(self) -> "AttributeDefinition":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max})")
        if not self.min <= self.base <= self.max:
            raise ValueError(f"base ({self.base}) must be within [{self.min}, {self.max}]")
        return self


def load_attribute_definitions(file_path: Path) -> list[AttributeDefinition]:
    """
    Load attribute definitions from a YAML file.

    The file holds a top-level ``attributes`` list of definition mappings.

    Args:
        file_path: Path to the YAML file

    Returns:
        List of validated definitions

    Raises:
        AttributeDefinitionError: If the file cannot be loaded, parsed or validated
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise AttributeDefinitionError(f"YAML parsing error in {file_path}: {e}")
    except FileNotFoundError:
        raise AttributeDefinitionError(f"File not found: {file_path}")

    if not data:
        raise AttributeDefinitionError(f"Empty YAML file: {file_path}")

    if not isinstance(data, dict) or "attributes" not in data:
        raise AttributeDefinitionError(f"Missing 'attributes' key in {file_path}")

    entries = data["attributes"]
    if not isinstance(entries, list):
        raise AttributeDefinitionError(f"'attributes' must be a list in {file_path}")

    definitions = []
    for entry in entries:
        try:
            definitions.append(AttributeDefinition.model_validate(entry))
        except ValidationError as e:
            entry_id = entry.get("id", "unknown") if isinstance(entry, dict) else "unknown"
            raise AttributeDefinitionError(
                f"Attribute '{entry_id}' in {file_path} is invalid: {e}"
            )

    logger.info(
        "attribute_definitions_loaded",
        path=str(file_path),
        definition_count=len(definitions),
    )

    return definitions


def define_all(catalog: AttributeCatalog, definitions: list[AttributeDefinition]) -> None:
    """Define every loaded definition into a catalog."""
    for definition in definitions:
        catalog.define(
            definition.id,
            definition.base,
            definition.min,
            definition.max,
            tracked=definition.tracked,
        )
