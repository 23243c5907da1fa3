"""
Exceptions raised by cloudclock.

All of them signal a broken caller contract (bad length, bad index,
vectors from different process sets) and are raised before any new
timestamp is built.  They derive from :class:`ValueError` so callers that
already guard clock operations with ``except ValueError`` keep working.
"""

from __future__ import annotations


class ClockError(ValueError):
    """Base class for every error raised by cloudclock."""

    pass


class InvalidArgumentError(ClockError):
    """A constructor received a value outside its domain (e.g. a negative length)."""

    pass


class IndexOutOfBoundsError(ClockError, IndexError):
    """A process index is not in ``[0, length)``."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(
            f"Index out of bounds: {index} (vector length {length})"
        )
        self.index: int = index
        self.length: int = length


class LengthMismatchError(ClockError):
    """Two vector timestamps of different lengths were compared or merged."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Timestamp vectors length do not match: {expected} vs {actual}"
        )
        self.expected: int = expected
        self.actual: int = actual
