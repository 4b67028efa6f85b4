"""
aggregator.py — Folds decoded events into report statistics.

Three independent counts are kept (per path, per pid, per written path)
together with a pid → process-name lookup.  Counts do not depend on
event order; the process lookup does (first occurrence wins).
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from fatrace_parser.events import DecodedEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Statistics:
    """Aggregate counts for one fatrace log.

    Mapping keys appear in first-occurrence order of the input; the
    renderer relies on this to order entries with equal counts.
    """

    count_per_path: dict[str, int] = field(default_factory=dict)
    count_per_pid: dict[str, int] = field(default_factory=dict)
    count_per_write_path: dict[str, int] = field(default_factory=dict)
    pid_to_process_map: dict[str, str] = field(default_factory=dict)

    @property
    def paths_count(self) -> int:
        """Number of unique paths."""
        return len(self.count_per_path)

    @property
    def pid_count(self) -> int:
        """Number of unique pids."""
        return len(self.count_per_pid)

    @property
    def write_paths_count(self) -> int:
        """Number of unique paths that were written at least once."""
        return len(self.count_per_write_path)

    @property
    def total_events(self) -> int:
        return sum(self.count_per_path.values())


def build_statistics(events: Iterable[DecodedEvent]) -> Statistics:
    """Compute :class:`Statistics` in a single pass over *events*."""
    per_path: Counter[str] = Counter()
    per_pid: Counter[str] = Counter()
    per_write_path: Counter[str] = Counter()
    pid_to_process: dict[str, str] = {}

    for event in events:
        per_path[event.path] += 1
        per_pid[event.pid] += 1
        if event.has_write:
            per_write_path[event.path] += 1

        known = pid_to_process.setdefault(event.pid, event.process)
        if known != event.process:
            # First name seen for a pid is kept (pid reuse is not tracked)
            logger.debug(
                "pid %s seen as %r and %r; keeping %r",
                event.pid,
                known,
                event.process,
                known,
            )

    stats = Statistics(
        count_per_path=dict(per_path),
        count_per_pid=dict(per_pid),
        count_per_write_path=dict(per_write_path),
        pid_to_process_map=pid_to_process,
    )
    logger.debug(
        "Aggregated %d events: %d paths, %d write paths, %d pids",
        stats.total_events,
        stats.paths_count,
        stats.write_paths_count,
        stats.pid_count,
    )
    return stats
