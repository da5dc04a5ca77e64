"""
Backend selection from configuration.
"""

from typing import Optional, Union

from loghelper.backends.base import LogBackend
from loghelper.backends.file import FileBackend
from loghelper.backends.host import HostLoggingBackend
from loghelper.backends.structured import StructlogBackend
from loghelper.config.base import BackendKind, LogHelperSettings
from loghelper.logging import Logger
from loghelper.sinks.file import FileAppendSink
from loghelper.sinks.target import LogTarget


def create_backend(
    kind: Union[BackendKind, str],
    target: LogTarget,
    settings: Optional[LogHelperSettings] = None,
    logger: Optional[Logger] = None,
) -> LogBackend:
    """
    Build the backend named by `kind`.

    Args:
        kind: file, structlog or host
        target: Log file used by the file backend
        settings: Optional settings for backend specific options
        logger: Diagnostic logger handed to the backend

    Returns:
        A ready to use backend

    Raises:
        ValueError: If `kind` is not a known backend
    """
    kind = BackendKind(kind.lower() if isinstance(kind, str) else kind)

    if kind is BackendKind.STRUCTLOG:
        channel = settings.LOG_STRUCTLOG_CHANNEL if settings else "app"
        return StructlogBackend(channel=channel, logger=logger)
    if kind is BackendKind.HOST:
        name = settings.LOG_HOST_LOGGER if settings else "uvicorn.error"
        return HostLoggingBackend(name=name, logger=logger)
    return FileBackend(FileAppendSink.for_target(target, logger=logger))
