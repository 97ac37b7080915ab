# Copyright (c) 2025 Scott Wilcox
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Variable store and ``{{name}}`` template resolution.

Values captured from one test's response are kept in a :class:`VariableStore`
and substituted into the input of later tests. A token whose variable is
missing, or holds :data:`UNDEFINED`, stays in the string unchanged; ``None``
becomes ``null``.
"""

import json
import re
from typing import Any, Dict, Iterator, Mapping, Optional

from mcpspec.utils.jsonpath import UNDEFINED
from mcpspec.utils.logging import get_logger

logger = get_logger("variables")

VARIABLE_PATTERN = re.compile(r"\{\{(\w+(?:\.\w+)*)\}\}")

_MISSING = object()


class VariableStore:
    """Mutable name -> value mapping owned by a single test executor."""

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def update(self, values: Mapping[str, Any]) -> None:
        self._values.update(values)

    def snapshot(self) -> Dict[str, Any]:
        """Return a shallow copy of the current values."""
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"VariableStore({self._values!r})"


def _lookup(variables: Mapping[str, Any], dotted: str) -> Any:
    current: Any = variables
    for part in dotted.split("."):
        if isinstance(current, VariableStore):
            current = current.get(part, _MISSING)
        elif isinstance(current, Mapping):
            current = current.get(part, _MISSING)
        else:
            return _MISSING
        if current is _MISSING:
            return _MISSING
    return current


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def resolve_variables(template: str, variables: Mapping[str, Any]) -> str:
    """
    Replace every ``{{name}}`` token in a string.

    Args:
        template: The string to resolve
        variables: Variable store or plain mapping

    Returns:
        The resolved string; unresolvable tokens are left as written
    """
    def _replace(match: "re.Match[str]") -> str:
        value = _lookup(variables, match.group(1))
        if value is _MISSING or value is UNDEFINED:
            logger.warning(f"Variable {match.group(1)!r} is not set, leaving {match.group(0)} unresolved")
            return match.group(0)
        return _stringify(value)

    return VARIABLE_PATTERN.sub(_replace, template)


def resolve_object_variables(obj: Any, variables: Mapping[str, Any]) -> Any:
    """
    Resolve tokens in every string of a nested structure.

    A new structure is returned; neither ``obj`` nor ``variables`` is modified.
    """
    if isinstance(obj, str):
        return resolve_variables(obj, variables)
    if isinstance(obj, dict):
        return {key: resolve_object_variables(value, variables) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [resolve_object_variables(item, variables) for item in obj]
    return obj
