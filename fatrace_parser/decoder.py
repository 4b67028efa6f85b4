"""
decoder.py — Expands fatrace flag strings into :class:`Operation` kinds.

A flag string is a run of single-character codes, e.g. ``"CO"`` means
close followed by open.  Unknown characters are kept in the raw sequence
and dropped from the decoded one.
"""

from __future__ import annotations

from typing import Iterable

from fatrace_parser.events import DecodedEvent, Operation, TraceEvent


def decode_operation(raw: str) -> tuple[tuple[Operation, ...], tuple[str, ...]]:
    """Return ``(operations, raw_operations)`` for a flag string."""
    raw_operations = tuple(raw)
    operations: list[Operation] = []
    for code in raw_operations:
        try:
            operations.append(Operation(code))
        except ValueError:
            continue
    return tuple(operations), raw_operations


def decode_event(event: TraceEvent) -> DecodedEvent:
    operations, raw_operations = decode_operation(event.operation)
    return DecodedEvent(
        pid=event.pid,
        process=event.process,
        path=event.path,
        operation=event.operation,
        operations=operations,
        raw_operations=raw_operations,
    )


def decode_events(events: Iterable[TraceEvent]) -> list[DecodedEvent]:
    return [decode_event(event) for event in events]
