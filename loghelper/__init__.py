"""
LogHelper - a small, pluggable diagnostic logger.

Values of any shape are rendered into readable text, labelled with their
origin and written to a topic file, a structlog logger or the host
application's logging.

Usage:
    from loghelper import FileBackend, LogHelper, RenderMode

    helper = LogHelper(topic="orders", module="OrderModule")
    helper.set_backend(FileBackend.for_path(helper.target.path))
    helper.set_render_mode(RenderMode.PRETTY_EXPORTED)
    helper.log({"id": 7, "tags": ["a", "b"]})
"""

__version__ = "0.1.0"

# Public API exports
from loghelper.backends import (
    FileBackend,
    HostLoggingBackend,
    LogBackend,
    StructlogBackend,
    create_backend,
)
from loghelper.config import BackendKind, LogHelperSettings, get_settings
from loghelper.errors import BackendUnavailableError, FailureKind, LogHelperError
from loghelper.formatting import RenderMode, render
from loghelper.helper import LogHelper, add_to_log, array_to_log, get_or_create
from loghelper.sinks import AppendResult, FileAppendSink, LogTarget
