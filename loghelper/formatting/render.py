"""
Single entry point for turning a value into log text.
"""

import logging
from typing import Any, Union

from loghelper.formatting.export import export_pretty, export_value
from loghelper.formatting.modes import RenderMode
from loghelper.formatting.plain import dump_plain

logger = logging.getLogger(__name__)


def render(value: Any, mode: Union[RenderMode, str, int] = RenderMode.PLAIN) -> str:
    """
    Render `value` as text using the given mode.

    Rendering never raises: if the selected mode cannot handle the value it
    falls back to the plain dump, and failing that to `repr`.

    Args:
        value: Anything to be logged
        mode: A RenderMode, or anything RenderMode.parse accepts

    Returns:
        The rendered text, possibly spanning several lines

    Example:
        ```python
        render({"id": 7}, RenderMode.EXPORTED)
        # "array (\n  'id' => 7,\n)"
        ```
    """
    try:
        mode = RenderMode.parse(mode)
        if mode is RenderMode.EXPORTED:
            return export_value(value)
        if mode is RenderMode.PRETTY_EXPORTED:
            return export_pretty(value)
        return dump_plain(value)
    except Exception as e:
        logger.debug(f"Falling back to plain rendering: {e}")
        try:
            return dump_plain(value)
        except Exception:
            return object.__repr__(value)
