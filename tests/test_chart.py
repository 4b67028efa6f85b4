# tests/test_chart.py
import base64

from fatrace_parser.aggregator import Statistics
from fatrace_parser.chart import _short_label, chart_data_uri, render_top_paths_chart

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _stats(n=30):
    counts = {f"/data/file_{i:02d}": n - i for i in range(n)}
    writes = {path: 1 for path in list(counts)[::3]}
    return Statistics(count_per_path=counts, count_per_write_path=writes)


def test_chart_is_png():
    png = render_top_paths_chart(_stats(), top=10)
    assert png.startswith(PNG_MAGIC)


def test_chart_with_no_events():
    assert render_top_paths_chart(Statistics()).startswith(PNG_MAGIC)


def test_chart_data_uri_round_trips():
    uri = chart_data_uri(b"\x89PNGabc")
    assert uri.startswith("data:image/png;base64,")
    assert base64.b64decode(uri.split(",", 1)[1]) == b"\x89PNGabc"


def test_long_labels_are_shortened_from_the_left():
    path = "/very/" + "deep/" * 30 + "leaf.txt"
    label = _short_label(path)
    assert len(label) == 60
    assert label.endswith("leaf.txt")
    assert _short_label("/short") == "/short"
