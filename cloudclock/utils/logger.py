"""
Level-filtered output for the cloudclock command line.

Provides configurable log levels (silent, normal, verbose, debug) with
consistent formatting for relation results, computed timestamps and
per-step traces.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Dict, Sequence, TextIO

from cloudclock.core.relation import Relation
from cloudclock.core.vector_timestamp import VectorTimestamp


class LogLevel(Enum):
    """
    Logging levels for the command line.

    SILENT:  No output at all.
    NORMAL:  Results only.
    VERBOSE: Results plus inputs and summaries.
    DEBUG:   Every intermediate timestamp.
    """

    SILENT = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


class ClockLogger:
    """
    Structured writer for clock operation results.

    Attributes:
        level: The minimum log level to display.
        stream: The output stream (defaults to stdout).
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.NORMAL,
        stream: TextIO = sys.stdout,
    ) -> None:
        self.level: LogLevel = level
        self.stream: TextIO = stream

    def enabled(self, level: LogLevel) -> bool:
        """True when messages at *level* are written."""
        return self.level.value >= level.value

    def debug(self, message: str, **kwargs: Any) -> None:
        """
        Log a debug message (only shown at DEBUG level).

        Args:
            message: The message to log.
            **kwargs: Additional key-value pairs to include.
        """
        if self.enabled(LogLevel.DEBUG):
            self._write(f"[DEBUG] {message}")
            for k, v in kwargs.items():
                self._write(f"  {k}: {v}")

    def info(self, message: str, **kwargs: Any) -> None:
        """
        Log an info message (shown at VERBOSE and DEBUG levels).

        Args:
            message: The message to log.
            **kwargs: Additional key-value pairs to include.
        """
        if self.enabled(LogLevel.VERBOSE):
            self._write(f"[INFO] {message}")
            for k, v in kwargs.items():
                self._write(f"  {k}: {v}")

    def relation(
        self, left: VectorTimestamp, right: VectorTimestamp, relation: Relation,
    ) -> None:
        """Log a comparison result (shown at NORMAL level and above)."""
        if self.enabled(LogLevel.NORMAL):
            self._write(f"{left} {relation.value} {right}")

    def timestamp(self, label: str, vector: VectorTimestamp) -> None:
        """Log a computed timestamp (shown at NORMAL level and above)."""
        if self.enabled(LogLevel.NORMAL):
            self._write(f"{label}: {vector}")

    def step(self, description: str, before: VectorTimestamp, after: VectorTimestamp) -> None:
        """Log one clock operation (shown at DEBUG level)."""
        if self.enabled(LogLevel.DEBUG):
            self._write(f"[STEP] {description}: {before} -> {after}")

    def summary(self, stats: Dict[str, Any]) -> None:
        """
        Log summary counters (shown at VERBOSE level and above).

        Args:
            stats: Dictionary of statistic names to values.
        """
        if self.enabled(LogLevel.VERBOSE):
            self._write("=== Summary ===")
            for key, value in stats.items():
                label = key.replace("_", " ").title()
                self._write(f"  {label}: {value}")

    def vectors(self, labels: Sequence[str], vectors: Sequence[VectorTimestamp]) -> None:
        """Log a labelled list of timestamps (shown at NORMAL level and above)."""
        for label, vector in zip(labels, vectors):
            self.timestamp(label, vector)

    def _write(self, message: str) -> None:
        """Write a line to the output stream."""
        self.stream.write(message + "\n")
