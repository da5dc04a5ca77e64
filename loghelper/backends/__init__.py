"""
Log backends: pluggable destinations for rendered log lines.

Features:
- FileBackend: appends to `<directory>/log_<topic>.txt` with locking
- StructlogBackend: forwards to a structlog logger
- HostLoggingBackend: forwards to the host application's stdlib logger

Limitations:
- Only the file backend honours clear_before
"""

from loghelper.backends.base import LogBackend
from loghelper.backends.factory import create_backend
from loghelper.backends.file import FileBackend
from loghelper.backends.host import HostLoggingBackend
from loghelper.backends.structured import StructlogBackend

__all__ = [
    "LogBackend",
    "FileBackend",
    "StructlogBackend",
    "HostLoggingBackend",
    "create_backend",
]
