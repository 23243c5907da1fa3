"""
Shared pytest fixtures for the cloudclock test suite.

Provides reusable vectors and a helper for building vectors from plain
counter values.
"""

from typing import Callable

import pytest

from cloudclock.core.vector_timestamp import VectorTimestamp


@pytest.fixture
def vt() -> Callable[..., VectorTimestamp]:
    """Build a vector timestamp from counter values: ``vt(1, 0, 2)``."""
    return lambda *values: VectorTimestamp.from_values(values)


@pytest.fixture
def zero3() -> VectorTimestamp:
    """A fresh vector for three processes."""
    return VectorTimestamp(3)


@pytest.fixture
def zero2() -> VectorTimestamp:
    """A fresh vector for two processes."""
    return VectorTimestamp(2)
