"""ID Generation System.

Two id families live in the engine:

- Instance ids: ``<type>-<milliseconds>`` (e.g. ``Input-1678886400000``),
  matching the blueprint wire format. The suffix is strictly monotonic per
  minter, so rapid inserts within one millisecond still get distinct ids.
- Resource handles: ``blob:pageforge/<ULID>`` for transient uploaded files.
"""

import time
from typing import Callable, Iterable, NewType
from ulid import ULID

# ============================================================================
# Type-Safe ID Wrappers
# ============================================================================

InstanceID = NewType("InstanceID", str)
"""Component instance identifier"""

ResourceURL = NewType("ResourceURL", str)
"""Transient resource (object URL) identifier"""


class Prefix:
    """ID prefix constants."""

    RESOURCE = "blob:pageforge/"


# ============================================================================
# Instance ID Minter
# ============================================================================


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class InstanceIdMinter:
    """Mints ``type-suffix`` ids with a time-based, strictly increasing suffix."""

    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock
        self._last = 0

    def mint(self, component_type: str) -> InstanceID:
        """Mint a new instance id for a component type."""
        suffix = self._clock()
        if suffix <= self._last:
            suffix = self._last + 1
        self._last = suffix
        return InstanceID(f"{component_type}-{suffix}")

    def advance_past(self, ids: Iterable[str]) -> None:
        """Never mint a suffix at or below one already present (imported blueprints)."""
        for id_str in ids:
            parts = split_instance_id(id_str)
            if parts is not None and parts[1] > self._last:
                self._last = parts[1]


def split_instance_id(id_str: str) -> tuple[str, int] | None:
    """Split ``type-suffix`` into its parts, or None if not minted here."""
    base, sep, suffix = id_str.rpartition("-")
    if not sep or not base or not suffix.isdigit():
        return None
    return base, int(suffix)


# ============================================================================
# Resource URLs
# ============================================================================


def new_resource_url() -> ResourceURL:
    """Generate a new transient resource URL."""
    return ResourceURL(f"{Prefix.RESOURCE}{ULID()}")


def is_resource_url(value: object) -> bool:
    """Check if a prop value is a transient resource URL."""
    return isinstance(value, str) and value.startswith("blob:")
