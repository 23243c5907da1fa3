"""
Vector timestamp (vector clock) over a fixed set of processes.

A vector timestamp holds one :class:`LogicalTimestamp` per process; slot
``i`` is owned by process ``i``.  Comparing two vectors slot by slot gives
the causal relation between the events they are attached to:

    a ≺ b  ⟺  a[i] ≤ b[i] for all i  and  a[j] < b[j] for some j
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from cloudclock.core.exceptions import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    LengthMismatchError,
)
from cloudclock.core.logical_timestamp import LogicalTimestamp
from cloudclock.core.relation import Relation


class VectorTimestamp:
    """
    Immutable fixed-length vector of logical timestamps.

    Every operation returns a *new* instance; slots are kept in a tuple,
    so no caller can reach the internal state of an existing vector.

    Attributes:
        slots: Tuple of per-process logical timestamps.
    """

    __slots__ = ("_slots",)

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    def __init__(self, length: int) -> None:
        """
        Create a vector of *length* zero timestamps.

        A zero-length vector is allowed and compares EQUAL to any other
        zero-length vector.

        Raises:
            InvalidArgumentError: If *length* is negative.
        """
        if length < 0:
            raise InvalidArgumentError(
                f"Vector length must be non-negative, got {length}"
            )
        self._slots: Tuple[LogicalTimestamp, ...] = tuple(
            LogicalTimestamp() for _ in range(length)
        )

    @classmethod
    def from_slots(cls, slots: Iterable[LogicalTimestamp]) -> VectorTimestamp:
        """
        Build a vector from an ordered sequence of logical timestamps.

        The sequence is copied; later changes to it do not affect the
        returned vector.

        Raises:
            InvalidArgumentError: If an item is not a LogicalTimestamp.
        """
        copied = tuple(slots)
        for i, slot in enumerate(copied):
            if not isinstance(slot, LogicalTimestamp):
                raise InvalidArgumentError(
                    f"Slot {i} must be a LogicalTimestamp, got {type(slot).__name__}"
                )
        return cls._wrap(copied)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> VectorTimestamp:
        """Build a vector from plain non-negative counter values."""
        return cls._wrap(tuple(LogicalTimestamp(v) for v in values))

    @classmethod
    def _wrap(cls, slots: Tuple[LogicalTimestamp, ...]) -> VectorTimestamp:
        vt = cls.__new__(cls)
        vt._slots = slots
        return vt

    # ------------------------------------------------------------------ #
    # Properties
    # ------------------------------------------------------------------ #

    @property
    def slots(self) -> Tuple[LogicalTimestamp, ...]:
        """Return the per-process logical timestamps."""
        return self._slots

    def values(self) -> Tuple[int, ...]:
        """Return the per-process counters as plain ints."""
        return tuple(s.value for s in self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> LogicalTimestamp:
        return self._slots[index]

    def __iter__(self) -> Iterator[LogicalTimestamp]:
        return iter(self._slots)

    # ------------------------------------------------------------------ #
    # Clock operations
    # ------------------------------------------------------------------ #

    def next_timestamp(
        self,
        local_index: int,
        happens_before_timestamp: Optional[VectorTimestamp] = None,
    ) -> VectorTimestamp:
        """
        Return the timestamp of the next event on process *local_index*.

        Without *happens_before_timestamp* this is a local event: only
        the owner's slot is advanced.  With it, this models receiving a
        message stamped *happens_before_timestamp*: the owner's slot is
        advanced from its own value and every other slot takes the later
        of the two vectors.

        Raises:
            IndexOutOfBoundsError: If *local_index* is not in ``[0, len)``.
            LengthMismatchError: If the received vector has another length.
        """
        self._check_index(local_index)
        if happens_before_timestamp is not None:
            self._check_length(happens_before_timestamp)

        new_slots = list(self._slots)
        new_slots[local_index] = new_slots[local_index].advance()

        if happens_before_timestamp is not None:
            for i, theirs in enumerate(happens_before_timestamp._slots):
                if i != local_index and new_slots[i].is_before(theirs):
                    new_slots[i] = theirs

        return VectorTimestamp._wrap(tuple(new_slots))

    # ------------------------------------------------------------------ #
    # Ordering
    # ------------------------------------------------------------------ #

    def get_relation(self, that: VectorTimestamp) -> Relation:
        """
        Classify the causal relation of *self* to *that*.

        Scans the slots once.  As soon as one slot is before and another
        is after, the vectors are CONCURRENT and the scan stops.

        Raises:
            LengthMismatchError: If the vectors have different lengths.
        """
        self._check_length(that)

        relation = Relation.EQUAL
        for mine, theirs in zip(self._slots, that._slots):
            if mine.is_before(theirs):
                if relation is Relation.HAPPENS_AFTER:
                    return Relation.CONCURRENT
                relation = Relation.HAPPENS_BEFORE
            elif mine.is_after(theirs):
                if relation is Relation.HAPPENS_BEFORE:
                    return Relation.CONCURRENT
                relation = Relation.HAPPENS_AFTER

        return relation

    def is_happens_before(self, that: VectorTimestamp) -> bool:
        """
        True when *self* causally precedes *that*.

        False covers EQUAL, CONCURRENT and HAPPENS_AFTER alike.
        """
        return self.get_relation(that) is Relation.HAPPENS_BEFORE

    def is_happens_after(self, that: VectorTimestamp) -> bool:
        """
        True when *that* causally precedes *self*.

        False covers EQUAL, CONCURRENT and HAPPENS_BEFORE alike.
        """
        return self.get_relation(that) is Relation.HAPPENS_AFTER

    def is_concurrent(self, that: VectorTimestamp) -> bool:
        """True when neither vector causally precedes the other."""
        return self.get_relation(that) is Relation.CONCURRENT

    # ------------------------------------------------------------------ #
    # Validation
    # ------------------------------------------------------------------ #

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._slots):
            raise IndexOutOfBoundsError(index, len(self._slots))

    def _check_length(self, other: VectorTimestamp) -> None:
        if len(self._slots) != len(other._slots):
            raise LengthMismatchError(len(self._slots), len(other._slots))

    # ------------------------------------------------------------------ #
    # Equality / hashing / repr
    # ------------------------------------------------------------------ #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorTimestamp):
            return NotImplemented
        return self._slots == other._slots

    def __hash__(self) -> int:
        return hash(self._slots)

    def __repr__(self) -> str:
        return f"VectorTimestamp({list(self.values())})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.values()) + "]"
