# tests/test_renderer.py
import re

from fatrace_parser.aggregator import Statistics
from fatrace_parser.renderer import render_statistics_to_html, sort_by_count


def _stats():
    return Statistics(
        count_per_path={"/etc/passwd": 1, "/var/log/syslog": 5, "/tmp/x": 3},
        count_per_pid={"812": 5, "1001": 4},
        count_per_write_path={"/var/log/syslog": 5},
        pid_to_process_map={"812": "rsyslogd", "1001": "bash"},
    )


def test_sort_by_count_descending():
    assert sort_by_count({"a": 1, "b": 5, "c": 3}) == ["b", "c", "a"]


def test_sort_by_count_ties_keep_insertion_order():
    assert sort_by_count({"z": 2, "a": 2, "m": 7, "b": 2}) == ["m", "z", "a", "b"]


def test_summary_shows_cardinalities_with_links():
    page = render_statistics_to_html(_stats())
    assert 'Number of unique paths: 3 <a href="#problems-by-path">Goto</a>' in page
    assert 'Number of unique write paths: 1 <a href="#write-problems-by-path">Goto</a>' in page
    assert 'Number of unique PIDs: 2 <a href="#problems-by-pid">Goto</a>' in page


def test_document_skeleton():
    page = render_statistics_to_html(_stats())
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>fatrace-parser</title>" in page
    assert '<meta charset="UTF-8">' in page
    assert "bootstrap.min.css" in page
    for anchor in ("problems-by-path", "write-problems-by-path", "problems-by-pid"):
        assert f'id="{anchor}"' in page
    assert page.count('<div class="problem">') == 3


def test_path_entries_sorted_by_count():
    page = render_statistics_to_html(_stats())
    section = page.split('id="problems-by-path"')[1].split("</ul>")[0]
    assert re.findall(r"<li>(.*?)</li>", section) == [
        "/var/log/syslog: 5",
        "/tmp/x: 3",
        "/etc/passwd: 1",
    ]


def test_write_section_lists_only_write_paths():
    page = render_statistics_to_html(_stats())
    section = page.split('id="write-problems-by-path"')[1].split("</ul>")[0]
    assert re.findall(r"<li>(.*?)</li>", section) == ["/var/log/syslog: 5"]


def test_pid_entries_carry_data_attribute_and_process():
    page = render_statistics_to_html(_stats())
    assert '<li data-pid="812">812 (rsyslogd): 5</li><li data-pid="1001">1001 (bash): 4</li>' in page


def test_content_is_not_escaped():
    stats = Statistics(
        count_per_path={"/tmp/<b>.txt": 1},
        count_per_pid={"1": 1},
        pid_to_process_map={"1": "a&b"},
    )
    page = render_statistics_to_html(stats)
    assert "<li>/tmp/<b>.txt: 1</li>" in page
    assert "1 (a&b): 1" in page


def test_rendering_is_deterministic():
    assert render_statistics_to_html(_stats()) == render_statistics_to_html(_stats())


def test_empty_statistics_render():
    page = render_statistics_to_html(Statistics())
    assert "Number of unique paths: 0" in page
    assert "<li>" not in page
    assert "<li data-pid" not in page


def test_chart_section_only_when_requested():
    assert "top-paths-chart" not in render_statistics_to_html(_stats())
    page = render_statistics_to_html(_stats(), chart_uri="data:image/png;base64,AAAA")
    assert 'id="top-paths-chart"' in page
    assert 'src="data:image/png;base64,AAAA"' in page
    assert page.count('<div class="problem">') == 4
