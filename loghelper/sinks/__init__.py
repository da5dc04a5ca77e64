"""
Log sinks: where rendered records end up on disk.
"""

from loghelper.sinks.file import AppendResult, FileAppendSink
from loghelper.sinks.gap import GAP_DETAIL_LIMIT, GAP_THRESHOLD, gap_marker
from loghelper.sinks.target import LogTarget, default_log_directory
from loghelper.sinks.trace import UNKNOWN_TRACE, resolve_trace_label

__all__ = [
    "AppendResult",
    "FileAppendSink",
    "LogTarget",
    "default_log_directory",
    "gap_marker",
    "GAP_THRESHOLD",
    "GAP_DETAIL_LIMIT",
    "resolve_trace_label",
    "UNKNOWN_TRACE",
]
