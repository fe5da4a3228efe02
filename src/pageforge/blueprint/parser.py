"""Blueprint Parser - JSON document to BlueprintDocument with validation."""

from typing import Any

from ..core import (
    get_logger,
    get_settings,
    ValidationError,
    BlueprintValidator,
    extract_json,
    safe_json_dumps,
    JSONParseError,
)
from ..registry import ComponentRegistry
from .models import BlueprintDocument, ComponentInstance

logger = get_logger(__name__)


class BlueprintParser:
    """Parses exchanged blueprint documents back into engine models."""

    def __init__(self, registry: ComponentRegistry | None = None, repair: bool = False) -> None:
        """
        Args:
            registry: Used only to report stale types; parsing never rejects them
            repair: Accept pasted text (fences, prose) and repair malformed JSON
        """
        self.registry = registry
        self.repair = repair

    def parse(self, content: str | dict[str, Any]) -> BlueprintDocument:
        """
        Parse a blueprint document.

        Args:
            content: JSON text or an already-decoded document dict

        Returns:
            Validated BlueprintDocument

        Raises:
            ValidationError: If the document is malformed
        """
        settings = get_settings()

        if isinstance(content, str):
            try:
                document = extract_json(content, repair=self.repair)
            except JSONParseError as e:
                logger.error("json_parse_failed", error=str(e))
                raise ValidationError(f"Invalid JSON: {e}") from e
            document_json = content
        else:
            document = content
            document_json = safe_json_dumps(content) if isinstance(content, dict) else None

        if not isinstance(document, dict):
            logger.error("invalid_format", type=type(document).__name__)
            raise ValidationError("Invalid blueprint format: expected JSON object")

        BlueprintValidator.validate(
            document,
            document_json,
            max_size=settings.max_document_size,
            max_depth=settings.max_json_depth,
        )

        components = [self._parse_component(c) for c in document["components"]]
        self._report_stale_types(components)

        return BlueprintDocument(name=document["name"], components=components)

    def _parse_component(self, component: dict[str, Any]) -> ComponentInstance:
        """Build one instance with its props exactly as exchanged."""
        if "styles" not in component["props"]:
            # Readers default missing style values through style_value
            logger.warning("styles_missing", id=component["id"])
        return ComponentInstance(id=component["id"], type=component["type"], props=component["props"])

    def _report_stale_types(self, components: list[ComponentInstance]) -> None:
        if self.registry is None:
            return
        stale = sorted({c.type for c in components if not self.registry.is_registered(c.type)})
        if stale:
            logger.warning("stale_types", types=stale)


def parse_blueprint(content: str | dict[str, Any]) -> BlueprintDocument:
    """
    Convenience function to parse blueprint content

    Args:
        content: Blueprint JSON string or dict

    Returns:
        BlueprintDocument
    """
    parser = BlueprintParser()
    return parser.parse(content)
