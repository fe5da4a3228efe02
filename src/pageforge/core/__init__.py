"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    UnknownTypeError,
    DuplicateIdError,
    ValidationResult,
    PageRequest,
    BlueprintValidator,
    validate_document,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import (
    extract_json,
    safe_json_dumps,
    JSONParseError,
    validate_json_size,
    validate_json_depth,
)
from .id import InstanceID, ResourceURL, InstanceIdMinter, new_resource_url, is_resource_url


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "UnknownTypeError",
    "DuplicateIdError",
    "ValidationResult",
    "PageRequest",
    "BlueprintValidator",
    "validate_document",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_size",
    "validate_json_depth",
    # IDs
    "InstanceID",
    "ResourceURL",
    "InstanceIdMinter",
    "new_resource_url",
    "is_resource_url",
    # DI
    "create_container",
]
