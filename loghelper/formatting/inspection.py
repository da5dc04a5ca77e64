"""
Helpers shared by the plain and export renderers to walk arbitrary values.
"""

import dataclasses
from collections.abc import Mapping, Sequence
from enum import Enum
from types import ModuleType
from typing import Any, Dict, Iterable, List, Optional, Tuple


def _ordered(items: Iterable[Any]) -> List[Any]:
    # Sets have no stable order; sort them so output is deterministic.
    items = list(items)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=repr)


def container_items(value: Any) -> Optional[List[Tuple[Any, Any]]]:
    """
    Return the (key, item) pairs of a mapping or sequence.

    Sequences and sets are keyed by position. Returns None for anything that
    is not a container, including str and bytes.
    """
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, (str, bytes, bytearray)):
        return None
    if isinstance(value, (set, frozenset)):
        return list(enumerate(_ordered(value)))
    if isinstance(value, Sequence):
        return list(enumerate(value))
    return None


def object_attributes(value: Any) -> Optional[Dict[str, Any]]:
    """
    Return the public state of a plain object, or None if it has none.

    Dataclasses contribute their fields, other instances their __dict__.
    Classes, modules, enum members and callables are not treated as objects.
    """
    if isinstance(value, (type, ModuleType, Enum)) or callable(value):
        return None
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, dict):
        return dict(attrs)
    return None
