"""
Command-line interface for cloudclock.

Compares vector timestamps, computes the next timestamp of a process and
replays small message-passing scenarios.  Vectors are written as
comma-separated counters, e.g. ``1,0,2``.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

import cloudclock
from cloudclock.core.exceptions import (
    ClockError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
)
from cloudclock.core.vector_timestamp import VectorTimestamp
from cloudclock.utils.logger import ClockLogger, LogLevel

# (receiver, sender); sender is None for a local event
Step = Tuple[int, Optional[int]]


def parse_vector(text: str) -> VectorTimestamp:
    """
    Parse ``"1,0,2"`` into a vector timestamp.

    The empty string is the zero-length vector.

    Raises:
        argparse.ArgumentTypeError: If a counter is not a non-negative integer.
    """
    text = text.strip()
    if not text:
        return VectorTimestamp(0)
    try:
        values = [int(tok.strip()) for tok in text.split(",")]
        return VectorTimestamp.from_values(values)
    except (ValueError, ClockError) as exc:
        raise argparse.ArgumentTypeError(f"invalid vector '{text}': {exc}") from exc


def parse_step(text: str) -> Step:
    """
    Parse a replay step: ``"I"`` (local event) or ``"I<J"`` (I receives from J).

    Raises:
        argparse.ArgumentTypeError: If the step is malformed.
    """
    try:
        if "<" in text:
            receiver, sender = text.split("<")
            return int(receiver), int(sender)
        return int(text), None
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid step '{text}'") from exc


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the cloudclock CLI."""
    parser = argparse.ArgumentParser(
        prog="cloudclock",
        description="cloudclock: vector timestamps for causal ordering",
    )
    parser.add_argument(
        "-o",
        "--output",
        choices=["silent", "normal", "verbose"],
        default="normal",
        help="Output level (default: normal)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        type=int,
        choices=[0, 1, 2, 3],
        default=0,
        help="Debug level 0-3 (default: 0)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cloudclock {cloudclock.__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    relation = commands.add_parser(
        "relation", help="Print the causal relation of vector A to vector B",
    )
    relation.add_argument("left", type=parse_vector, metavar="A")
    relation.add_argument("right", type=parse_vector, metavar="B")

    tick = commands.add_parser(
        "tick", help="Print the next timestamp of a process",
    )
    tick.add_argument("vector", type=parse_vector, metavar="VECTOR")
    tick.add_argument(
        "-i",
        "--index",
        type=int,
        required=True,
        help="Index of the process that owns VECTOR",
    )
    tick.add_argument(
        "-r",
        "--received",
        type=parse_vector,
        default=None,
        metavar="VECTOR",
        help="Timestamp carried by a received message (merge it)",
    )

    replay = commands.add_parser(
        "replay",
        help="Replay local events (I) and receives (I<J) over N processes",
    )
    replay.add_argument(
        "-n",
        "--processes",
        type=int,
        required=True,
        help="Number of processes",
    )
    replay.add_argument("steps", type=parse_step, nargs="*", metavar="STEP")

    return parser


def _resolve_log_level(output: str, debug: int) -> LogLevel:
    """Determine the effective log level from output and debug settings."""
    if debug >= 3:
        return LogLevel.DEBUG
    if output == "verbose" or debug >= 1:
        return LogLevel.VERBOSE
    if output == "silent":
        return LogLevel.SILENT
    return LogLevel.NORMAL


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``cloudclock`` CLI command."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logger = ClockLogger(
        level=_resolve_log_level(args.output, args.debug), stream=sys.stdout,
    )

    try:
        _run(args, logger)
    except ClockError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)


def _run(args: argparse.Namespace, logger: ClockLogger) -> None:
    if args.command == "relation":
        logger.info("Comparing", left=args.left, right=args.right)
        logger.relation(args.left, args.right, args.left.get_relation(args.right))
    elif args.command == "tick":
        result = args.vector.next_timestamp(args.index, args.received)
        if args.received is None:
            logger.step(f"local event on {args.index}", args.vector, result)
        else:
            logger.step(f"{args.index} receives {args.received}", args.vector, result)
        logger.timestamp("next", result)
    else:
        clocks = replay(args.processes, args.steps, logger)
        logger.vectors([f"P{i}" for i in range(len(clocks))], clocks)


def replay(
    processes: int, steps: List[Step], logger: Optional[ClockLogger] = None,
) -> List[VectorTimestamp]:
    """
    Run *steps* over *processes* fresh clocks and return the final clocks.

    Each step advances the receiver's clock; a receive step merges the
    sender's current clock.

    Raises:
        ClockError: On a negative process count or an out-of-range index.
    """
    logger = logger or ClockLogger(level=LogLevel.SILENT)
    if processes < 0:
        raise InvalidArgumentError(
            f"Number of processes must be non-negative, got {processes}"
        )
    clocks = [VectorTimestamp(processes) for _ in range(processes)]

    for receiver, sender in steps:
        if not 0 <= receiver < processes:
            raise IndexOutOfBoundsError(receiver, processes)
        before = clocks[receiver]
        if sender is None:
            clocks[receiver] = before.next_timestamp(receiver)
            logger.step(f"local event on P{receiver}", before, clocks[receiver])
        else:
            if not 0 <= sender < processes:
                raise IndexOutOfBoundsError(sender, processes)
            clocks[receiver] = before.next_timestamp(receiver, clocks[sender])
            logger.step(f"P{receiver} receives from P{sender}", before, clocks[receiver])

    logger.summary({"processes": processes, "steps": len(steps)})
    return clocks
