"""
Exported rendering: a literal re-construction of a value.

The syntax is a small, language-neutral literal notation:

    array (
      'id' => 7,
      'tags' =>
      array (
        0 => 'a',
        1 => 'b',
      ),
    )

Strings are single-quoted with control characters escaped, so every string
stays on one line. `None`, booleans and numbers stay distinguishable from
their quoted forms. `export_pretty` reshapes this text into bracket blocks.
"""

import math
import re
from enum import Enum
from typing import Any, List, Set

from loghelper.formatting.inspection import container_items, object_attributes

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Characters str.splitlines() treats as line breaks besides \n and \r.
_LINE_BREAKS = "\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"

# Line patterns applied by export_pretty, in order.
_OPEN_LINE = re.compile(r"\s*(?:\\\S+::__set_state\()?array\s\($")
_CLOSE_TAIL = re.compile(r"\)\)?(,)?$")
_KEY_TAIL = re.compile(r"\s=>\s$")
_LEADING_INDENT = re.compile(r"^([ ]*)(.*)", re.MULTILINE)


def quote(text: str) -> str:
    """Single-quote `text`, escaping quotes, backslashes and control characters."""
    out = []
    for char in text:
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif ord(char) < 32 or ord(char) == 127:
            out.append(f"\\x{ord(char):02x}")
        elif char in _LINE_BREAKS:
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(char)
    return "'" + "".join(out) + "'"


def _export_scalar(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        if math.isnan(value):
            return "NAN"
        if math.isinf(value):
            return "INF" if value > 0 else "-INF"
        return repr(value)
    if isinstance(value, str):
        return quote(str.__str__(value))
    if isinstance(value, (bytes, bytearray)):
        return quote(bytes(value).decode("utf-8", "backslashreplace"))
    if isinstance(value, Enum):
        return quote(str(value))
    return quote(repr(value))


def _is_scalar(value: Any) -> bool:
    return value is None or isinstance(
        value, (bool, int, float, str, bytes, bytearray, Enum)
    )


def _export_key(key: Any) -> str:
    if _is_scalar(key):
        return _export_scalar(key)
    return quote(repr(key))


def _export(value: Any, level: int, seen: Set[int]) -> str:
    if _is_scalar(value):
        return _export_scalar(value)

    items = container_items(value)
    opener, closer = "array (", ")"
    if items is None:
        attrs = object_attributes(value)
        if attrs is None:
            return quote(repr(value))
        cls = type(value)
        opener = f"\\{cls.__module__}.{cls.__qualname__}::__set_state(array ("
        closer = "))"
        items = list(attrs.items())

    if id(value) in seen:
        return quote("*RECURSION*")

    inner = "  " * (level + 1)
    lines: List[str] = [opener]
    seen.add(id(value))
    try:
        for key, item in items:
            rendered = _export(item, level + 1, seen)
            prefix = f"{inner}{_export_key(key)} => "
            if "\n" in rendered:
                lines.append(f"{prefix}\n{inner}{rendered},")
            else:
                lines.append(f"{prefix}{rendered},")
    finally:
        seen.discard(id(value))
    lines.append("  " * level + closer)
    return "\n".join(lines)


def export_value(value: Any) -> str:
    """Render `value` as a literal re-construction."""
    return _export(value, 0, set())


def export_pretty(value: Any) -> str:
    """
    Render `value` as exported text reshaped into nested `[` ... `]` blocks.

    Indentation is doubled, collection openers are dropped (the top-level
    one becomes `[`), closers become `]` and `key => ` followed by a nested
    block becomes `key => [`. The result is wrapped in an outer `[` / `]`.
    """
    export = _LEADING_INDENT.sub(r"\1\1\2", export_value(value))
    lines = export.split("\n")
    opens_block = bool(_OPEN_LINE.fullmatch(lines[0]))

    reshaped = []
    for line in lines:
        line = _OPEN_LINE.sub("", line)
        line = _CLOSE_TAIL.sub(r"]\1", line)
        line = _KEY_TAIL.sub(" => [", line)
        reshaped.append(line)
    if opens_block:
        reshaped[0] = "["

    return "\n".join(["["] + [line for line in reshaped if line] + ["]"])
