"""
Gap markers: separator lines written when a log file has been idle.

    - - - - - [18.10.26 14:03:07 +42] - - - - -
"""

import os
from datetime import datetime, timezone
from typing import Optional

# A marker is written once the file has been idle this many seconds
GAP_THRESHOLD = 10
# Up to this many seconds the marker also shows the idle time
GAP_DETAIL_LIMIT = 120
TIMESTAMP_FORMAT = "%d.%m.%y %H:%M:%S"


def seconds_since_modified(path: str, now: float) -> int:
    """
    Whole seconds since `path` was last modified.

    A missing file counts as modified at the epoch, so the result is huge
    and the first write to a file always gets a marker.
    """
    try:
        modified = os.path.getmtime(path)
    except OSError:
        modified = 0
    return int(now) - int(modified)


def gap_marker(elapsed: int, now: float) -> Optional[str]:
    """
    Build the marker line for an idle period, or None if it was too short.

    Args:
        elapsed: Seconds since the previous write
        now: Current time as a UNIX timestamp, rendered in UTC
    """
    if elapsed < GAP_THRESHOLD:
        return None
    stamp = datetime.fromtimestamp(now, tz=timezone.utc).strftime(TIMESTAMP_FORMAT)
    suffix = f" +{elapsed}" if elapsed <= GAP_DETAIL_LIMIT else ""
    return f"- - - - - [{stamp}{suffix}] - - - - -"
