"""Per-entity attribute state."""

from collections.abc import Iterator

import structlog

from .catalog import AttributeKind
from .modifiers import Modifier, Operation
from .resolver import resolve_value

logger = structlog.get_logger(__name__)


class AttributeInstance:
    """
    Runtime state of one attribute on one entity.

    Holds an optional base override and the modifiers keyed by id. The
    effective value is computed on demand and never cached.
    """

    def __init__(self, kind: AttributeKind, base_override: float | None = None) -> None:
        self._kind = kind
        self.base_override = base_override
        self._modifiers: dict[str, Modifier] = {}

    @property
    def kind(self) -> AttributeKind:
        return self._kind

    @property
    def base_value(self) -> float:
        """The base override if set, otherwise the kind's base."""
        if self.base_override is None:
            return self._kind.base
        return self.base_override

    @base_value.setter
    def base_value(self, value: float) -> None:
        self.base_override = float(value)

    def clear_base_override(self) -> None:
        self.base_override = None

    @property
    def value(self) -> float:
        """The clamped effective value."""
        return resolve_value(self)

    def add_modifier(self, modifier: Modifier) -> None:
        """Add a modifier, replacing any existing modifier with the same id."""
        replaced = modifier.id in self._modifiers
        self._modifiers[modifier.id] = modifier

        logger.debug(
            "modifier_added",
            attribute=self._kind.id,
            modifier_id=modifier.id,
            amount=modifier.amount,
            operation=modifier.operation.value,
            replaced=replaced,
        )

    def remove_modifier(self, modifier_id: str) -> Modifier | None:
        """Remove a modifier by id. Removing an unknown id does nothing.

        Returns:
            The removed modifier, or None if it was not present
        """
        removed = self._modifiers.pop(modifier_id, None)
        if removed is not None:
            logger.debug(
                "modifier_removed",
                attribute=self._kind.id,
                modifier_id=modifier_id,
            )
        return removed

    def get_modifier(self, modifier_id: str) -> Modifier | None:
        return self._modifiers.get(modifier_id)

    def has_modifier(self, modifier_id: str) -> bool:
        return modifier_id in self._modifiers

    def clear_modifiers(self) -> None:
        self._modifiers.clear()

    @property
    def modifiers(self) -> list[Modifier]:
        return list(self._modifiers.values())

    def modifiers_by_operation(self, operation: Operation) -> Iterator[Modifier]:
        """Iterate the modifiers that use the given operation."""
        return (m for m in self._modifiers.values() if m.operation is operation)

    def __repr__(self) -> str:
        return (
            f"AttributeInstance(kind={self._kind.id!r}, base={self.base_value}, "
            f"modifiers={len(self._modifiers)})"
        )
