"""Attribute modifiers and the operations they apply."""

from dataclasses import dataclass
from enum import StrEnum


class Operation(StrEnum):
    """How a modifier combines with an attribute's value.

    ADD and MULTIPLY_BASE are summed into the running total first, then every
    MULTIPLY_TOTAL scales the result.
    """

    ADD = "add"
    MULTIPLY_BASE = "multiply_base"
    MULTIPLY_TOTAL = "multiply_total"

    @classmethod
    def parse(cls, name: str) -> "Operation":
        """Parse an operation name, accepting ``multiply`` for MULTIPLY_TOTAL.

        Raises:
            ValueError: If the name is not a known operation
        """
        normalized = name.strip().lower()
        if normalized == "multiply":
            return cls.MULTIPLY_TOTAL
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(op.value for op in cls)
            raise ValueError(f"Unknown modifier operation '{name}' (must be one of: {valid})")


@dataclass(frozen=True)
class Modifier:
    """
    A single modifier applied to one attribute instance.

    Attributes:
        id: Identifier, unique per attribute instance
        amount: Signed magnitude of the modifier
        operation: How the amount is applied
        name: Optional human-readable label (e.g. the item or effect granting it)
    """

    id: str
    amount: float
    operation: Operation = Operation.ADD
    name: str = ""

    def __post_init__(self) -> None:
        """Validate modifier parameters."""
        if not self.id:
            raise ValueError("Modifier id must be a non-empty string")
        if not isinstance(self.operation, Operation):
            object.__setattr__(self, "operation", Operation.parse(str(self.operation)))
