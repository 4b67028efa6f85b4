"""
events.py — Shared event schema for fatrace-parser.

Defines the canonical record types that the parser emits, the decoder
enriches and the aggregator consumes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operation(Enum):
    """Filesystem operation kinds, keyed by their fatrace flag character."""

    OPEN = "O"
    CLOSE = "C"
    READ = "R"
    WRITE = "W"
    DELETE = "D"


@dataclass(frozen=True)
class TraceEvent:
    """Represents a single access record parsed from one fatrace line.

    Attributes:
        pid:       Process id as printed by fatrace (kept as an opaque string).
        process:   Process name (``comm``) that performed the access.
        path:      Path of the accessed file, taken literally.
        operation: Raw flag string, e.g. ``"CO"`` for close + open.
    """

    pid: str
    process: str
    path: str
    operation: str


@dataclass(frozen=True)
class DecodedEvent:
    """A :class:`TraceEvent` with its flag string expanded.

    ``raw_operations`` holds every flag character, recognised or not;
    ``operations`` holds only the ones that map to an :class:`Operation`.
    """

    pid: str
    process: str
    path: str
    operation: str
    operations: tuple[Operation, ...] = ()
    raw_operations: tuple[str, ...] = ()

    @property
    def has_write(self) -> bool:
        return Operation.WRITE.value in self.raw_operations
