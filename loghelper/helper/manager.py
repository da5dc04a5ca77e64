"""
Process-scoped log helper handle.

The shared helper is created explicitly, once, and handed to call sites:

    helper = get_or_create("orders", "OrderModule")
    set_backend(helper, FileBackend.for_path(helper.target.path))
    log(helper, "created #42")

Later calls to get_or_create return the same helper and ignore their
arguments.
"""

import threading
from typing import Any, Optional, Union

from loghelper.backends import LogBackend
from loghelper.config import LogHelperSettings
from loghelper.errors import BackendUnavailableError
from loghelper.formatting import RenderMode
from loghelper.helper.facade import LogHelper

_default: Optional[LogHelper] = None
_lock = threading.Lock()


def get_or_create(
    topic: str = "",
    module: str = "",
    log_directory: Optional[str] = None,
    settings: Optional[LogHelperSettings] = None,
) -> LogHelper:
    """
    Return the shared helper, creating it on the first call.

    With `settings` the helper (and its backend) is built from them,
    otherwise from the topic, module and directory given; in that case a
    backend still has to be set before logging.
    """
    global _default
    with _lock:
        if _default is None:
            if settings is not None:
                _default = LogHelper.from_settings(settings)
            else:
                _default = LogHelper(topic, module, log_directory)
        return _default


def get_default() -> LogHelper:
    """
    Return the shared helper.

    Raises:
        BackendUnavailableError: If get_or_create has not been called
    """
    if _default is None:
        raise BackendUnavailableError("Log helper is not initialized")
    return _default


def reset_default() -> None:
    """Forget the shared helper. Intended for tests."""
    global _default
    with _lock:
        _default = None


def set_backend(handle: LogHelper, backend: LogBackend) -> None:
    handle.set_backend(backend)


def set_render_mode(handle: LogHelper, mode: Union[RenderMode, str, int]) -> None:
    handle.set_render_mode(mode)


def set_topic(handle: LogHelper, topic: str) -> None:
    handle.set_topic(topic)


def log(
    handle: LogHelper,
    value: Any,
    clear_before: bool = False,
    trace: Optional[str] = None,
) -> bool:
    """Log `value` through `handle`, labelled with the caller of this function."""
    return handle.log(value, clear_before, trace, stacklevel=2)
