"""
Unit tests for gap markers.

Covers:
- The 10 second threshold and the 120 second detail limit
- UTC timestamp formatting
- Idle time of missing and existing files
"""
import os
from datetime import datetime, timezone

import pytest

from loghelper.sinks.gap import gap_marker, seconds_since_modified

NOW = datetime(2024, 5, 17, 13, 45, 30, tzinfo=timezone.utc).timestamp()


@pytest.mark.parametrize("elapsed", [0, 1, 9])
def test_no_marker_below_threshold(elapsed):
    assert gap_marker(elapsed, NOW) is None


@pytest.mark.parametrize("elapsed", [10, 42, 119, 120])
def test_marker_with_elapsed_suffix(elapsed):
    assert gap_marker(elapsed, NOW) == f"- - - - - [17.05.24 13:45:30 +{elapsed}] - - - - -"


@pytest.mark.parametrize("elapsed", [121, 3600, int(NOW)])
def test_marker_without_suffix_after_detail_limit(elapsed):
    assert gap_marker(elapsed, NOW) == "- - - - - [17.05.24 13:45:30] - - - - -"


def test_negative_elapsed_has_no_marker():
    assert gap_marker(-5, NOW) is None


def test_missing_file_counts_from_epoch(tmp_path):
    assert seconds_since_modified(str(tmp_path / "missing.txt"), NOW) == int(NOW)


def test_existing_file_elapsed(tmp_path):
    path = tmp_path / "log_x.txt"
    path.write_text("x\n")
    os.utime(path, (NOW - 30, NOW - 30))
    assert seconds_since_modified(str(path), NOW) == 30
