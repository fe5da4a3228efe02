"""Lenient field value coercion."""

import re
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_TRUTHY = {"true", "1", "on", "yes", "checked"}


def parse_int(value: Any) -> int:
    """
    Parse a leading integer the way form inputs report numbers.

    ``"12px"`` gives 12, ``"3.9"`` gives 3. Anything unparseable gives 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else 0
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return 0


def parse_bool(value: Any) -> bool:
    """Checkbox-style boolean."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)
