"""Input validation with strong typing and multiple backends."""

from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure

from pydantic import BaseModel, Field, field_validator, ConfigDict

from .json import JSONParseError, validate_json_depth, validate_json_size


# Validation limits
MAX_DOCUMENT_SIZE = 512 * 1024  # 512KB
MAX_JSON_DEPTH = 20
MAX_PAGE_ID_LENGTH = 128


class ValidationError(Exception):
    """Validation failed."""

    pass


class UnknownTypeError(ValidationError):
    """Component type is not registered."""

    def __init__(self, component_type: str) -> None:
        super().__init__(f"Unknown component type: {component_type}")
        self.component_type = component_type


class DuplicateIdError(ValidationError):
    """Component id already present in the blueprint."""

    def __init__(self, component_id: str) -> None:
        super().__init__(f"Duplicate component id: {component_id}")
        self.component_id = component_id


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


class RequestValidator(BaseModel):
    """Base validator with strict configuration."""

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="forbid", frozen=True  # Immutable by default
    )


class PageRequest(RequestValidator):
    """Validated page persistence request."""

    page_id: str = Field(min_length=1, max_length=MAX_PAGE_ID_LENGTH)

    @field_validator("page_id")
    @classmethod
    def validate_page_id(cls, v: str) -> str:
        """Ensure page id is non-empty and path-safe."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Page id cannot be empty")
        if "/" in stripped:
            raise ValueError("Page id cannot contain '/'")
        return stripped


class BlueprintValidator:
    """Validates blueprint documents received from outside the engine."""

    @staticmethod
    def validate(
        document: dict[str, Any],
        document_json: str | None = None,
        max_size: int = MAX_DOCUMENT_SIZE,
        max_depth: int = MAX_JSON_DEPTH,
    ) -> None:
        """
        Validate a blueprint document's shape.

        Args:
            document: Parsed document dictionary
            document_json: JSON string representation (size check skipped if None)
            max_size: Maximum encoded size in bytes
            max_depth: Maximum nesting depth

        Raises:
            ValidationError: If validation fails
        """
        try:
            if document_json is not None:
                validate_json_size(document_json, max_size, "Blueprint document")
            validate_json_depth(document, max_depth)
        except JSONParseError as e:
            raise ValidationError(str(e)) from e

        if not isinstance(document, dict):
            raise ValidationError("Blueprint document must be an object")

        if not isinstance(document.get("name"), str):
            raise ValidationError("Blueprint document missing required string 'name' field")

        components = document.get("components")
        if not isinstance(components, list):
            raise ValidationError("Blueprint document 'components' must be a list")

        seen: set[str] = set()
        for position, component in enumerate(components):
            BlueprintValidator.validate_component(component, position)
            if component["id"] in seen:
                raise DuplicateIdError(component["id"])
            seen.add(component["id"])

    @staticmethod
    def validate_component(component: Any, position: int = 0) -> None:
        """Validate a single component instance's shape."""
        where = f"components[{position}]"
        if not isinstance(component, dict):
            raise ValidationError(f"{where} must be an object")

        for key in ("id", "type"):
            value = component.get(key)
            if not isinstance(value, str) or not value:
                raise ValidationError(f"{where}.{key} must be a non-empty string")

        props = component.get("props")
        if not isinstance(props, dict):
            raise ValidationError(f"{where}.props must be an object")

        styles = props.get("styles")
        if styles is not None and not isinstance(styles, dict):
            raise ValidationError(f"{where}.props.styles must be an object")


def validate_document(
    document: dict[str, Any], document_json: str | None = None
) -> Result[None, ValidationResult]:
    """
    Validate a blueprint document (Result pattern version).

    Returns:
        Result indicating success or validation error
    """
    try:
        BlueprintValidator.validate(document, document_json)
        return Success(None)
    except ValidationError as e:
        return Failure(ValidationResult(str(e)))
