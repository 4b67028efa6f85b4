#!/usr/bin/env python3
"""
fatrace_main.py — CLI entry point for fatrace-parser.

Reads a log captured with ``fatrace``, counts accesses per path, per
written path and per pid, and writes an HTML report.

Usage
-----
    # Build the report in the temp directory
    python -m fatrace_parser.fatrace_main fatrace.log

    # Build it, embed a chart of the 30 busiest paths, and open it
    python -m fatrace_parser.fatrace_main fatrace.log --chart --top 30 --open
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from fatrace_parser.aggregator import build_statistics
from fatrace_parser.chart import DEFAULT_TOP_PATHS, chart_data_uri, render_top_paths_chart
from fatrace_parser.decoder import decode_events
from fatrace_parser.parser import parse_lines, split_lines
from fatrace_parser.renderer import render_statistics_to_html
from fatrace_parser.viewer import DEFAULT_REPORT_PATH, open_in_viewer, write_report

__version__ = "1.0.0"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("fatrace_parser")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass
class ReportConfig:
    """Settings for one report run, built from the command line."""

    file: Path
    open: bool = False
    output: Path = DEFAULT_REPORT_PATH
    chart: bool = False
    top: int = DEFAULT_TOP_PATHS
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ReportConfig":
        return cls(
            file=Path(args.file),
            open=args.open,
            output=Path(args.output),
            chart=args.chart,
            top=args.top,
            verbose=args.verbose,
        )


class _BelowError(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


def log_handlers() -> list[logging.Handler]:
    """Progress records go to stdout, errors to stderr."""
    out = logging.StreamHandler(sys.stdout)
    out.addFilter(_BelowError())
    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.ERROR)
    return [out, err]


def configure_logging(verbose: bool = False) -> None:
    """Install the stdout/stderr handlers; DEBUG when *verbose*."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=log_handlers(),
    )


# ---------------------------------------------------------------------------
# Report pipeline
# ---------------------------------------------------------------------------

def generate_report(config: ReportConfig) -> Path:
    """Run parse → decode → aggregate → render and write the report.

    Returns the path of the written HTML file.
    """
    text = config.file.read_bytes().decode("utf-8", errors="replace")
    lines = split_lines(text)

    result = parse_lines(lines)
    logger.info(
        "Parsed %d lines with %d errors (input lines: %d)",
        result.parsed,
        result.errors,
        result.total_lines,
    )

    logger.info("Creating statistics...")
    statistics = build_statistics(decode_events(result.events))

    logger.info("Processing done, generating HTML...")
    chart_uri = None
    if config.chart:
        chart_uri = chart_data_uri(render_top_paths_chart(statistics, top=config.top))
    html = render_statistics_to_html(statistics, chart_uri=chart_uri)

    report_path = write_report(html, config.output)
    if config.open:
        open_in_viewer(report_path)

    logger.info("HTML file generated: %s", report_path)
    return report_path


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="fatrace-parser",
        description="A tool to parse output of fatrace command",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=__version__,
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Path to the file with fatrace output",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        help="Open generated HTML in the browser",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=str(DEFAULT_REPORT_PATH),
        help=f"Where to write the HTML report (default: {DEFAULT_REPORT_PATH}).",
    )
    parser.add_argument(
        "--chart",
        action="store_true",
        help="Embed a bar chart of the most accessed paths in the report.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP_PATHS,
        help=f"Number of paths shown in the chart (default: {DEFAULT_TOP_PATHS}).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every rejected line and other debug details.",
    )
    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Parse CLI args and build the report.  Returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.file:
        parser.print_help()
        return 0

    config = ReportConfig.from_args(args)
    configure_logging(config.verbose)

    if not config.file.exists():
        logger.error("File %s does not exist", config.file)
        return 1

    try:
        generate_report(config)
    except Exception:
        # Parse errors are already counted; anything reaching here is unexpected
        logger.exception("Report generation failed")
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
