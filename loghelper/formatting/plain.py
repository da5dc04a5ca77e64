"""
Plain rendering: strings pass through, everything else is dumped as a tree.

The dump mirrors the classic "print nested structure" layout:

    dict
    (
        [id] => 7
        [tags] => list
            (
                [0] => a
                [1] => b
            )

    )
"""

from typing import Any, Set

from loghelper.formatting.inspection import container_items, object_attributes


def dump_plain(value: Any) -> str:
    """Render `value` for humans. Strings are returned unchanged."""
    if isinstance(value, str):
        return value
    return _dump(value, 0, set()).rstrip("\n")


def _dump(value: Any, indent: int, seen: Set[int]) -> str:
    items = container_items(value)
    header = type(value).__name__
    if items is None:
        attrs = object_attributes(value)
        if attrs is None:
            return str(value)
        items = list(attrs.items())
        header = f"{header} Object"

    if id(value) in seen:
        return f"{header}\n *RECURSION*"

    pad = " " * indent
    lines = [header, f"{pad}("]
    seen.add(id(value))
    try:
        for key, item in items:
            lines.append(f"{pad}    [{key}] => {_dump(item, indent + 8, seen)}")
    finally:
        seen.discard(id(value))
    lines.append(f"{pad})")
    return "\n".join(lines) + "\n"
