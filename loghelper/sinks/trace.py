"""
Trace label resolution.
"""

import inspect
from typing import Optional

UNKNOWN_TRACE = "unknown"


def resolve_trace_label(
    module: Optional[str] = None, stacklevel: int = 1
) -> str:
    """
    Work out the origin label attached to a log record.

    A configured module name is used as-is. Otherwise the label is the
    `file:line` of a frame on the call stack: stacklevel 1 is the function
    calling resolve_trace_label, 2 is its caller, and so on. If that frame
    is not available the label is "unknown".

    Example:
        ```python
        def log(message):
            trace = resolve_trace_label("", stacklevel=2)  # caller of log()
        ```
    """
    if module:
        return module

    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return UNKNOWN_TRACE
        return f"{frame.f_code.co_filename}:{frame.f_lineno}"
    finally:
        del frame
