"""
Tests for the per-process logical timestamp.

Tests cover construction, validation, advancing, ordering queries,
equality and hashing.
"""

import pytest

from cloudclock.core.exceptions import ClockError, InvalidArgumentError
from cloudclock.core.logical_timestamp import LogicalTimestamp


class TestLogicalTimestampCreation:
    """Test LogicalTimestamp initialization."""

    def test_default_is_zero(self) -> None:
        """A new timestamp starts at zero."""
        assert LogicalTimestamp().value == 0

    def test_explicit_value(self) -> None:
        """A timestamp can be created with an explicit counter."""
        assert LogicalTimestamp(7).value == 7

    def test_negative_value_raises(self) -> None:
        """Negative counters are rejected."""
        with pytest.raises(InvalidArgumentError):
            LogicalTimestamp(-1)

    def test_non_int_raises(self) -> None:
        """Non-integer counters are rejected."""
        with pytest.raises(InvalidArgumentError):
            LogicalTimestamp(1.5)  # type: ignore[arg-type]

    def test_bool_raises(self) -> None:
        """Booleans are not accepted as counters."""
        with pytest.raises(InvalidArgumentError):
            LogicalTimestamp(True)

    def test_error_is_value_error(self) -> None:
        """Validation errors are ValueErrors and ClockErrors."""
        with pytest.raises(ValueError):
            LogicalTimestamp(-3)
        with pytest.raises(ClockError):
            LogicalTimestamp(-3)

    def test_immutable(self) -> None:
        """The counter cannot be reassigned."""
        ts = LogicalTimestamp(1)
        with pytest.raises(AttributeError):
            ts.value = 2  # type: ignore[misc]


class TestLogicalTimestampAdvance:
    """Test LogicalTimestamp.advance."""

    def test_advance_adds_one(self) -> None:
        """Advancing yields value + 1."""
        assert LogicalTimestamp(4).advance().value == 5

    def test_advance_returns_new_instance(self) -> None:
        """The original is left untouched."""
        ts = LogicalTimestamp()
        nxt = ts.advance()
        assert nxt is not ts
        assert ts.value == 0

    def test_chain(self) -> None:
        """Repeated advances accumulate."""
        ts = LogicalTimestamp()
        for _ in range(5):
            ts = ts.advance()
        assert ts == LogicalTimestamp(5)


class TestLogicalTimestampOrdering:
    """Test before/after queries and comparison operators."""

    def test_is_before(self) -> None:
        """Smaller counter is before."""
        assert LogicalTimestamp(1).is_before(LogicalTimestamp(2))
        assert not LogicalTimestamp(2).is_before(LogicalTimestamp(1))

    def test_is_after(self) -> None:
        """Larger counter is after."""
        assert LogicalTimestamp(3).is_after(LogicalTimestamp(2))
        assert not LogicalTimestamp(2).is_after(LogicalTimestamp(3))

    def test_equal_is_neither(self) -> None:
        """Equal counters are neither before nor after."""
        a, b = LogicalTimestamp(2), LogicalTimestamp(2)
        assert not a.is_before(b)
        assert not a.is_after(b)

    def test_operators(self) -> None:
        """Rich comparisons follow the counter."""
        assert LogicalTimestamp(1) < LogicalTimestamp(2)
        assert LogicalTimestamp(2) >= LogicalTimestamp(2)
        assert max(LogicalTimestamp(1), LogicalTimestamp(4)) == LogicalTimestamp(4)

    def test_int_conversion(self) -> None:
        """int() returns the counter."""
        assert int(LogicalTimestamp(9)) == 9


class TestLogicalTimestampEquality:
    """Test equality, hashing and repr."""

    def test_equal_by_value(self) -> None:
        """Timestamps with the same counter are equal."""
        assert LogicalTimestamp(3) == LogicalTimestamp(3)
        assert LogicalTimestamp(3) != LogicalTimestamp(4)

    def test_hash_consistency(self) -> None:
        """Equal timestamps hash equally."""
        assert len({LogicalTimestamp(3), LogicalTimestamp(3)}) == 1

    def test_repr(self) -> None:
        """repr shows the counter."""
        assert repr(LogicalTimestamp(3)) == "LogicalTimestamp(3)"
