"""Conversion of raw request values into the type a setter expects."""

import re
from enum import Enum


class ValueType(str, Enum):
    TEXT = "text"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


_ALIASES: dict[str, ValueType] = {
    "text": ValueType.TEXT,
    "int": ValueType.INT,
    "integer": ValueType.INT,
    "float": ValueType.FLOAT,
    "bool": ValueType.BOOL,
    "boolean": ValueType.BOOL,
}

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def resolve_value_type(declared_type: str) -> ValueType:
    """Map a declared type name (or alias) to a ValueType; unknown names are text."""
    return _ALIASES.get(declared_type, ValueType.TEXT)


def coerce_value(
    declared_type: str,
    raw_value: str,
    *,
    bool_accepts_numeric: bool = True,
) -> str | int | float | bool:
    """Convert ``raw_value`` according to ``declared_type``.

    Numbers are parsed from the longest valid leading prefix, so ``"42px"``
    gives ``42`` and a value without any digits gives zero.
    """
    value_type = resolve_value_type(declared_type)
    raw = str(raw_value)

    if value_type is ValueType.BOOL:
        return raw == "true" or (bool_accepts_numeric and raw == "1")
    if value_type is ValueType.FLOAT:
        match = _FLOAT_PREFIX.match(raw)
        return float(match.group()) if match else 0.0
    if value_type is ValueType.INT:
        match = _INT_PREFIX.match(raw)
        return int(match.group()) if match else 0
    return raw
