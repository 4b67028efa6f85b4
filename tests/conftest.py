# tests/conftest.py
import os
import sys

import pytest

# Add project root to sys.path so `fatrace_parser` is importable without install
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

SAMPLE_LOG = """\
12:00:01.000001 rsyslogd(812): W /var/log/syslog
12:00:01.000002 bash(1001): RO /etc/passwd
12:00:01.000003 rsyslogd(812): W /var/log/syslog
12:00:01.000004 bash(1001): C /etc/passwd
this line is not a fatrace record

12:00:01.000005 kworker/u8:2(77): W /tmp/x
12:00:01.000006 Xorg(455): CW /var/log/Xorg.0.log
"""


@pytest.fixture
def sample_log(tmp_path):
    path = tmp_path / "fatrace.log"
    path.write_text(SAMPLE_LOG, encoding="utf-8")
    return path
