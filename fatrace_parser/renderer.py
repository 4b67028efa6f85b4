"""
renderer.py — Static HTML report for fatrace statistics.

The page has a short summary (unique paths / write paths / pids, each
linking to its section) followed by one list per count table, sorted by
count in descending order.

Paths and process names are inserted verbatim, without HTML escaping.
"""

from __future__ import annotations

from fatrace_parser.aggregator import Statistics

# ---------------------------------------------------------------------------
# Static page parts
# ---------------------------------------------------------------------------
_TITLE = "fatrace-parser"
_BOOTSTRAP_CSS = (
    "https://cdn.jsdelivr.net/npm/bootstrap@5.0.0-alpha1/dist/css/bootstrap.min.css"
)

_CSS = """
        .problem {
            margin-top: 20px;
            padding: 16px;
            border-radius: 32px;
        }

        .problem:nth-child(odd) {
            background-color: #f8d7da;
        }

        .problem:nth-child(even) {
            background-color: #f8f1f1;
        }
"""


def sort_by_count(counts: dict[str, int]) -> list[str]:
    """Return the keys of *counts*, highest count first.

    The sort is stable, so keys with equal counts keep the order of
    *counts* itself (first occurrence in the log).
    """
    return sorted(counts, key=lambda key: counts[key], reverse=True)


def _paths_list(counts: dict[str, int]) -> str:
    return "".join(f"<li>{path}: {counts[path]}</li>" for path in sort_by_count(counts))


def _pids_list(statistics: Statistics) -> str:
    counts = statistics.count_per_pid
    processes = statistics.pid_to_process_map
    return "".join(
        f'<li data-pid="{pid}">{pid} ({processes.get(pid, "")}): {counts[pid]}</li>'
        for pid in sort_by_count(counts)
    )


def _chart_section(chart_uri: str) -> str:
    return f"""
        <div class="problem">
            <h2 id="top-paths-chart">Most accessed paths</h2>
            <img class="img-fluid" src="{chart_uri}" alt="Most accessed paths">
        </div>"""


def render_statistics_to_html(
    statistics: Statistics,
    chart_uri: str | None = None,
) -> str:
    """Render *statistics* as a self-contained HTML document.

    Args:
        statistics: Aggregated counts from :func:`build_statistics`.
        chart_uri:  Optional ``data:`` URI of a chart image; when given,
                    an extra section showing it is appended.
    """
    chart = _chart_section(chart_uri) if chart_uri else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{_TITLE}</title>
    <!-- bootstrap -->
    <link href="{_BOOTSTRAP_CSS}" rel="stylesheet">
    <style>{_CSS}    </style>
</head>
<body>
    <div class="container-fluid mt-3">
        <h1>Statistics</h1>
        <p>Number of unique paths: {statistics.paths_count} <a href="#problems-by-path">Goto</a></p>
        <p>Number of unique write paths: {statistics.write_paths_count} <a href="#write-problems-by-path">Goto</a></p>
        <p>Number of unique PIDs: {statistics.pid_count} <a href="#problems-by-pid">Goto</a></p>
        <div class="problem">
            <h2 id="problems-by-path">Problems by path</h2>
            <ul>
                {_paths_list(statistics.count_per_path)}
            </ul>
        </div>
        <div class="problem">
            <h2 id="write-problems-by-path">Write problems by path</h2>
            <ul>
                {_paths_list(statistics.count_per_write_path)}
            </ul>
        </div>
        <div class="problem">
            <h2 id="problems-by-pid">Problems by PID</h2>
            <ul>
                {_pids_list(statistics)}
            </ul>
        </div>{chart}
    </div>
</body>
</html>
"""
