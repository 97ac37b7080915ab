# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Minimal JSONPath support.

Supports the root marker, dotted property access and numeric indices, e.g.
``$``, ``$.foo.bar``, ``$.foo[0]`` and ``$.foo[0].bar``. A path that leads
nowhere yields :data:`UNDEFINED` instead of raising, so absence can be
asserted on like any other value.
"""

from typing import Any, List, Tuple, Union

from mcpspec.errors import InvalidPathError


class _Undefined:
    """Marker for "no value here", distinct from JSON null (``None``)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()

Segment = Tuple[str, Union[str, int]]


def _parse_segments(path: str, start: int) -> List[Segment]:
    segments: List[Segment] = []
    i = start

    while i < len(path):
        if path[i] == "[":
            end = path.find("]", i)
            if end == -1:
                raise InvalidPathError(path, f"unclosed bracket at position {i}")
            index_str = path[i + 1:end].strip()
            try:
                index = int(index_str)
            except ValueError:
                raise InvalidPathError(path, f"non-numeric array index {index_str!r}") from None
            segments.append(("index", index))
            i = end + 1
            if i < len(path) and path[i] == ".":
                i += 1
        else:
            end = i
            while end < len(path) and path[end] not in ".[":
                end += 1
            key = path[i:end]
            if key:
                segments.append(("property", key))
            i = end
            if i < len(path) and path[i] == ".":
                i += 1

    return segments


def query_json_path(data: Any, path: str) -> Any:
    """
    Evaluate a path against a response value.

    Args:
        data: The normalized response
        path: Path expression starting with ``$``

    Returns:
        The value at the path, or UNDEFINED when any segment is missing

    Raises:
        InvalidPathError: If the path is syntactically invalid
    """
    if not isinstance(path, str) or not path.startswith("$"):
        raise InvalidPathError(str(path), "must start with $")

    if path in ("$", "$."):
        return data
    start = 2 if path.startswith("$.") else 1

    current = data
    for kind, key in _parse_segments(path, start):
        if kind == "property":
            if not isinstance(current, dict) or key not in current:
                return UNDEFINED
            current = current[key]
        else:
            # Negative indices do not wrap around
            if not isinstance(current, list) or not 0 <= key < len(current):
                return UNDEFINED
            current = current[key]

    return current


def json_path_exists(data: Any, path: str) -> bool:
    """Check whether a path resolves to a value (JSON null counts as a value)."""
    return query_json_path(data, path) is not UNDEFINED
