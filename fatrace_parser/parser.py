"""
parser.py — Line parser for fatrace output.

Turns raw fatrace lines such as::

    14:02:11.204731 rsyslogd(812): W /var/log/syslog

into :class:`TraceEvent` records.  Lines that do not fit the expected
shape are counted and skipped; nothing in this module raises on bad
input.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from fatrace_parser.events import TraceEvent

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Line pattern: "<anything> <process>(<pid>): <FLAGS> <path>"
# ---------------------------------------------------------------------------
LINE_RE = re.compile(
    r"^.*\s"
    r"(?P<process>[a-zA-Z0-9:\[\]\-_()]+)"
    r"\((?P<pid>[0-9]+)\):\s+"
    r"(?P<operation>[A-Z+<>]+)\s+"
    r"(?P<path>.*)$"
)

_REQUIRED_GROUPS = ("pid", "operation", "path", "process")


@dataclass
class ParseResult:
    """Outcome of parsing a whole log.

    Attributes:
        events:      Successfully parsed events, in input order.
        errors:      Number of lines that could not be parsed.
        total_lines: Number of non-empty lines fed to the parser.
    """

    events: list[TraceEvent] = field(default_factory=list)
    errors: int = 0
    total_lines: int = 0

    @property
    def parsed(self) -> int:
        return len(self.events)


def split_lines(text: str) -> list[str]:
    """Split raw log text on ``\\n``, dropping blank lines.

    One trailing ``\\r`` is removed from each line (CRLF logs); a lone
    ``\\r`` elsewhere is part of the line.
    """
    lines = (line[:-1] if line.endswith("\r") else line for line in text.split("\n"))
    return [line for line in lines if line != ""]


def parse_line(line: str) -> TraceEvent | None:
    """Parse a single fatrace line.

    Returns ``None`` if the line does not match, or if it matches but one
    of the captured fields came out empty.
    """
    m = LINE_RE.match(line)
    if not m:
        logger.debug("Unparseable line: %r", line)
        return None

    groups = m.groupdict()
    if not all(groups[name] for name in _REQUIRED_GROUPS):
        logger.warning("Missing properties %s %r", groups, line)
        return None

    return TraceEvent(
        pid=groups["pid"],
        process=groups["process"],
        path=groups["path"],
        operation=groups["operation"],
    )


def parse_lines(lines: Iterable[str]) -> ParseResult:
    """Parse every line, counting failures instead of raising."""
    result = ParseResult()
    for line in lines:
        result.total_lines += 1
        event = parse_line(line)
        if event is None:
            result.errors += 1
            continue
        result.events.append(event)
    return result
