"""Registry Data Models."""

from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field


ResizeHook = Callable[[dict[str, Any]], dict[str, Any]]


class FieldKind(str, Enum):
    """How the properties editor treats a field's incoming value."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    STRUCTURAL = "structural"
    LIST = "list"  # comma-separated options, exported as an array literal
    RESOURCE = "resource"  # may hold a transient object URL


class FieldDescriptor(BaseModel):
    """Editable field of a component type."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    kind: FieldKind
    style: bool = Field(default=False, description="Field lives in props.styles")
    options: tuple[str, ...] = Field(default=(), description="Allowed values for enums")
    value_kind: FieldKind | None = Field(
        default=None, description="Coercion for structural fields (number or boolean)"
    )


class RegistryEntry(BaseModel):
    """Capability description of one component type."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: str = Field(..., description="Registry key")
    default_props: dict[str, Any] = Field(..., description="Template, cloned on every use")
    fields: tuple[FieldDescriptor, ...] = Field(default=())
    accepts_file_drop: bool = Field(default=False, description="Supports dropped-file resource binding")
    structural_fields: frozenset[str] = Field(
        default=frozenset(), description="Props exported as literal data expressions"
    )
    resize: ResizeHook | None = Field(default=None, description="Structural-resize hook")

    def field(self, name: str) -> FieldDescriptor | None:
        """Look up a field descriptor by name."""
        for descriptor in self.fields:
            if descriptor.name == name:
                return descriptor
        return None
