"""
viewer.py — Writing the HTML report and opening it for the user.

The report always goes to the same file in the system temp directory
(unless another path is given), so each run overwrites the previous one.
Opening it is fire-and-forget: the viewer process is started and never
waited on.
"""

from __future__ import annotations

import logging
import subprocess
import sys
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_REPORT_PATH = Path(tempfile.gettempdir()) / "fatrace-parser.html"

# ---------------------------------------------------------------------------
# Platform → command used to open a document with its default application
# ---------------------------------------------------------------------------
_OPENERS: dict[str, list[str]] = {
    "darwin": ["open"],
    "win32": ["cmd", "/c", "start", ""],
    "linux": ["xdg-open"],
}
_FALLBACK_OPENER = ["xdg-open"]


def write_report(content: str, path: str | Path = DEFAULT_REPORT_PATH) -> Path:
    """Write *content* to *path* (UTF-8), replacing any previous report."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("Report written to %s (%d chars)", path, len(content))
    return path


def opener_command(path: str | Path, platform: str | None = None) -> list[str]:
    """Return the command line that opens *path* on *platform*.

    *platform* defaults to ``sys.platform``; unknown platforms fall back
    to ``xdg-open``.
    """
    platform = platform or sys.platform
    base = _OPENERS.get(platform, _FALLBACK_OPENER)
    return [*base, str(path)]


def open_in_viewer(path: str | Path, platform: str | None = None) -> None:
    """Launch the platform's default viewer for *path* without waiting.

    A missing or failing opener is logged, not raised; the report has
    already been written at this point.
    """
    cmd = opener_command(path, platform)
    try:
        subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        logger.info("Opening report with: %s", " ".join(cmd))
    except OSError as exc:
        logger.warning("Could not open %s: %s", path, exc)
