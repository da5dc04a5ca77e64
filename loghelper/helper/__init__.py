"""
Log helper facade and the process-scoped handle.
"""

from loghelper.helper.facade import CLEAR_NOTICE, LogHelper
from loghelper.helper.manager import (
    get_default,
    get_or_create,
    log,
    reset_default,
    set_backend,
    set_render_mode,
    set_topic,
)
from loghelper.helper.shortcuts import add_to_log, array_to_log

__all__ = [
    "CLEAR_NOTICE",
    "LogHelper",
    "get_or_create",
    "get_default",
    "reset_default",
    "set_backend",
    "set_render_mode",
    "set_topic",
    "log",
    "add_to_log",
    "array_to_log",
]
