"""
Render modes for turning arbitrary values into log text.
"""

from enum import Enum
from typing import Union


class RenderMode(str, Enum):
    """
    How a value is turned into text before it is logged.

    PLAIN prints strings as-is and dumps containers as an indented tree,
    EXPORTED writes a literal re-construction of the value and
    PRETTY_EXPORTED reshapes that literal into nested bracket blocks.
    """

    PLAIN = "plain"
    EXPORTED = "exported"
    PRETTY_EXPORTED = "pretty_exported"

    @classmethod
    def parse(cls, mode: Union["RenderMode", str, int]) -> "RenderMode":
        """
        Convert a mode given as a member, value, name or legacy code.

        Legacy integer codes are 0 (print), 1 (dump) and 2 (export).

        Example:
            ```python
            assert RenderMode.parse("PRETTY_EXPORTED") is RenderMode.PRETTY_EXPORTED
            assert RenderMode.parse(1) is RenderMode.EXPORTED
            ```

        Raises:
            ValueError: If the mode is not recognised
        """
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, int) and not isinstance(mode, bool):
            codes = [cls.PLAIN, cls.EXPORTED, cls.PRETTY_EXPORTED]
            if 0 <= mode < len(codes):
                return codes[mode]
        if isinstance(mode, str):
            text = mode.strip()
            if text.isdigit():
                return cls.parse(int(text))
            for member in cls:
                if text.lower() in (member.value, member.name.lower()):
                    return member
        raise ValueError(f"Unknown render mode: {mode!r}")
