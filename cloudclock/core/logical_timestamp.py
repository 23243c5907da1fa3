"""
Logical (Lamport-style) counter owned by a single process.
"""

from __future__ import annotations

from dataclasses import dataclass

from cloudclock.core.exceptions import InvalidArgumentError


@dataclass(frozen=True, order=True, repr=False)
class LogicalTimestamp:
    """
    Immutable non-negative event counter for one process.

    Advancing never modifies an instance; it returns a new one whose
    value is one greater.

    Attributes:
        value: Number of events counted so far.
    """

    value: int = 0

    def __post_init__(self) -> None:
        """Validate that the counter is a non-negative integer."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidArgumentError(
                f"LogicalTimestamp value must be an int, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise InvalidArgumentError(
                f"LogicalTimestamp value must be non-negative, got {self.value}"
            )

    def advance(self) -> LogicalTimestamp:
        """Return the next timestamp (``value + 1``)."""
        return LogicalTimestamp(self.value + 1)

    def is_before(self, other: LogicalTimestamp) -> bool:
        """True when ``self.value < other.value``."""
        return self.value < other.value

    def is_after(self, other: LogicalTimestamp) -> bool:
        """True when ``self.value > other.value``."""
        return self.value > other.value

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"LogicalTimestamp({self.value})"
