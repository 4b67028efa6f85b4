"""
chart.py — Optional bar chart of the most accessed paths.

Draws a horizontal bar chart (all accesses, with writes overlaid) on a
headless Agg canvas and returns it as PNG bytes so the HTML report can
embed it inline.
"""

from __future__ import annotations

import base64
import io
import logging

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from fatrace_parser.aggregator import Statistics
from fatrace_parser.renderer import sort_by_count

logger = logging.getLogger(__name__)

DEFAULT_TOP_PATHS = 20

_ALL_COLOUR = "#6C757D"
_WRITE_COLOUR = "#DC3545"
_MAX_LABEL = 60


def _short_label(path: str) -> str:
    if len(path) <= _MAX_LABEL:
        return path
    return "…" + path[-(_MAX_LABEL - 1):]


def render_top_paths_chart(statistics: Statistics, top: int = DEFAULT_TOP_PATHS) -> bytes:
    """Return a PNG bar chart of the *top* most accessed paths."""
    paths = sort_by_count(statistics.count_per_path)[: max(top, 0)]
    totals = np.array([statistics.count_per_path[p] for p in paths], dtype=float)
    writes = np.array(
        [statistics.count_per_write_path.get(p, 0) for p in paths], dtype=float
    )
    positions = np.arange(len(paths))

    height = max(2.5, 0.35 * len(paths) + 1.0)
    fig = Figure(figsize=(10, height), dpi=100)
    FigureCanvasAgg(fig)
    axes = fig.add_subplot(111)

    if len(paths):
        axes.barh(positions, totals, color=_ALL_COLOUR, label="all accesses")
        axes.barh(positions, writes, color=_WRITE_COLOUR, label="writes")
        axes.set_yticks(positions)
        axes.set_yticklabels([_short_label(p) for p in paths], fontsize=8)
        axes.invert_yaxis()
        axes.legend(loc="lower right", fontsize=8)
    else:
        axes.set_yticks([])
        axes.text(0.5, 0.5, "No events", ha="center", va="center",
                  transform=axes.transAxes)

    axes.set_xlabel("events")
    axes.spines["top"].set_visible(False)
    axes.spines["right"].set_visible(False)
    axes.grid(True, axis="x", linestyle=":", alpha=0.4)
    fig.tight_layout()

    buf = io.BytesIO()
    fig.savefig(buf, format="png", metadata={"Software": None})
    logger.debug("Chart rendered for %d paths (%d bytes)", len(paths), buf.tell())
    return buf.getvalue()


def chart_data_uri(png: bytes) -> str:
    """Encode PNG bytes as an inline ``data:`` URI."""
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
