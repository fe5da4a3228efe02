"""Blueprint Data Models."""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field


class ComponentInstance(BaseModel):
    """One placed, configured component within a blueprint."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique within the blueprint")
    type: str = Field(..., min_length=1, description="Registry key, optionally 'Type@semver'")
    props: dict[str, Any] = Field(default_factory=dict)


class BlueprintDocument(BaseModel):
    """Canonical exchanged form of a blueprint."""

    name: str
    components: list[ComponentInstance] = Field(default_factory=list)


def style_value(props: dict[str, Any], name: str, default: Any = 0) -> Any:
    """Read a style field, treating a missing styles dict or field as ``default``."""
    styles = props.get("styles") or {}
    value = styles.get(name)
    return default if value is None else value
