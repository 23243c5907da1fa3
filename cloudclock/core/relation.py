"""
Causal relation between two vector timestamps.
"""

from __future__ import annotations

from enum import Enum


class Relation(Enum):
    """
    Result of comparing two vector timestamps ``a.get_relation(b)``.

    EQUAL:          every slot matches.
    HAPPENS_BEFORE: ``a`` causally precedes ``b``.
    HAPPENS_AFTER:  ``b`` causally precedes ``a``.
    CONCURRENT:     neither precedes the other.
    """

    EQUAL = "equal"
    HAPPENS_BEFORE = "happens-before"
    HAPPENS_AFTER = "happens-after"
    CONCURRENT = "concurrent"

    def inverse(self) -> Relation:
        """Return the relation as seen from the other timestamp."""
        if self is Relation.HAPPENS_BEFORE:
            return Relation.HAPPENS_AFTER
        if self is Relation.HAPPENS_AFTER:
            return Relation.HAPPENS_BEFORE
        return self

    def is_causal(self) -> bool:
        """True for HAPPENS_BEFORE and HAPPENS_AFTER."""
        return self in (Relation.HAPPENS_BEFORE, Relation.HAPPENS_AFTER)
