"""Component Registry - type name to defaults and field capabilities."""

import copy
from typing import Any, Iterable

from ..core import get_logger, UnknownTypeError
from .catalog import builtin_entries
from .models import FieldDescriptor, RegistryEntry

logger = get_logger(__name__)


class ComponentRegistry:
    """
    Registry of creatable component types.

    Registration is static configuration done at construction; lookups never
    hand out the stored templates by reference.
    """

    def __init__(self, entries: Iterable[RegistryEntry] | None = None) -> None:
        self._entries: dict[str, RegistryEntry] = {}
        for entry in builtin_entries() if entries is None else entries:
            self.register(entry)
        logger.info("registry_init", types=len(self._entries))

    def register(self, entry: RegistryEntry) -> None:
        """Register a component type."""
        if entry.type in self._entries:
            logger.warning("type_already_registered", type=entry.type)
            return
        self._entries[entry.type] = entry
        logger.debug("type_registered", type=entry.type, fields=len(entry.fields))

    def resolve(self, component_type: str) -> RegistryEntry | None:
        """
        Find the entry for a type key.

        Versioned keys (``"Button@1.2.0"``) fall back to the base entry when
        no exact versioned entry is registered.
        """
        entry = self._entries.get(component_type)
        if entry is None and "@" in component_type:
            entry = self._entries.get(component_type.split("@", 1)[0])
        return entry

    def get_entry(self, component_type: str) -> RegistryEntry:
        """Get entry by type, raising UnknownTypeError if missing."""
        entry = self.resolve(component_type)
        if entry is None:
            raise UnknownTypeError(component_type)
        return entry

    def is_registered(self, component_type: str) -> bool:
        """Check whether a type can be instantiated."""
        return self.resolve(component_type) is not None

    def get_defaults(self, component_type: str) -> dict[str, Any]:
        """Return a deep, independent copy of the type's default props."""
        return copy.deepcopy(self.get_entry(component_type).default_props)

    def describe_fields(self, component_type: str) -> list[FieldDescriptor]:
        """Editable field descriptors for a type."""
        return list(self.get_entry(component_type).fields)

    def palette(self) -> list[str]:
        """Creatable type names in registration order."""
        return list(self._entries)

    def __contains__(self, component_type: object) -> bool:
        return isinstance(component_type, str) and self.is_registered(component_type)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["ComponentRegistry"]
