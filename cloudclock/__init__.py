"""
cloudclock: vector clocks for causal ordering.

Tracks the partial "happened-before" order of events produced by a fixed
set of processes in a distributed system, without relying on wall-clock
time.
"""

from cloudclock.core.exceptions import (
    ClockError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    LengthMismatchError,
)
from cloudclock.core.logical_timestamp import LogicalTimestamp
from cloudclock.core.relation import Relation
from cloudclock.core.vector_timestamp import VectorTimestamp

__version__ = "0.1.0"

__all__ = [
    "ClockError",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "LengthMismatchError",
    "LogicalTimestamp",
    "Relation",
    "VectorTimestamp",
]
