"""Dot-path lookup into a JSON-like data document.

    resolve_path({"address": {"city": "Oslo"}}, "address.city") -> "Oslo"
    resolve_path({"items": ["a", "b"]}, "items.1")             -> "b"
    resolve_path({}, "missing")                                 -> NOT_FOUND

A present ``None`` is returned as ``None``; only a missing key (or a node
that cannot be indexed) yields ``NOT_FOUND``.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

# Canonical array index: "0", "1", "12" but not "01", "-1" or "+1"
_INDEX_PATTERN = re.compile(r"0|[1-9][0-9]*")


class _NotFound:
    """Marker for a path that did not resolve. Distinct from a present None."""

    _instance: "_NotFound | None" = None

    def __new__(cls) -> "_NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


def is_missing(value: Any) -> bool:
    """True for NOT_FOUND and None - the values that display as nothing."""
    return value is NOT_FOUND or value is None


def _child(node: Any, segment: str) -> Any:
    """Step one segment into node, or NOT_FOUND."""
    if isinstance(node, Mapping):
        if segment in node:
            return node[segment]
        return NOT_FOUND

    # Lists are addressed by index, strings are not indexable
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        if _INDEX_PATTERN.fullmatch(segment):
            index = int(segment)
            if index < len(node):
                return node[index]
        return NOT_FOUND

    return NOT_FOUND


def resolve_path(data: Any, path: str) -> Any:
    """Resolve a dot-separated path against data.

    Args:
        data: Data document (dicts, lists and scalars)
        path: Dot-separated key path, e.g. "user.address.city"

    Returns:
        The value at the path as-is (may be None, a dict or a list),
        or NOT_FOUND
    """
    if not path:
        return NOT_FOUND

    current = data
    for segment in path.split("."):
        current = _child(current, segment)
        if current is NOT_FOUND:
            return NOT_FOUND
    return current
