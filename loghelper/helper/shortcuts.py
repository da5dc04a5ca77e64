"""
One-shot file logging without setting up a helper.
"""

from typing import Any, Optional

from loghelper.formatting import RenderMode
from loghelper.sinks import FileAppendSink, LogTarget


def add_to_log(
    message: Any,
    topic: str = "",
    clear_before: bool = False,
    log_directory: Optional[str] = None,
) -> bool:
    """
    Append `message` in exported form to the topic file.

    The record is labelled with the caller's file and line.
    """
    target = LogTarget.create(topic, log_directory)
    sink = FileAppendSink.for_target(target, mode=RenderMode.EXPORTED)
    return bool(sink.append(message, clear_before, stacklevel=2))


def array_to_log(
    message: Any, topic: str = "", log_directory: Optional[str] = None
) -> bool:
    """Append `message` in pretty exported form to the topic file."""
    target = LogTarget.create(topic, log_directory)
    sink = FileAppendSink.for_target(target, mode=RenderMode.PRETTY_EXPORTED)
    return bool(sink.append(message, stacklevel=2))
