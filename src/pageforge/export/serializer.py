"""Export Serializer - canonical JSON and generated presentation source."""

from typing import Any, Iterable

from ..core import get_logger, get_settings, safe_json_dumps, Settings
from ..blueprint import BlueprintDocument, BlueprintParser, BlueprintStore, ComponentInstance
from ..registry import ComponentRegistry, FieldKind

logger = get_logger(__name__)


PAGE_TEMPLATE = """import React from 'react';
{imports}
export default function GeneratedPage() {{
  return (
    <div className="p-8 space-y-4">
{body}
    </div>
  );
}}
"""

INDENT = " " * 8


def tag_name(component_type: str) -> str:
    """Component name used in source, without any ``@version`` suffix."""
    return component_type.split("@", 1)[0]


def _attribute_string(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;")


class ExportSerializer:
    """Projects the store into exchangeable forms."""

    def __init__(
        self,
        store: BlueprintStore,
        registry: ComponentRegistry,
        settings: Settings | None = None,
    ) -> None:
        self.store = store
        self.registry = registry
        self.settings = settings or get_settings()
        self.parser = BlueprintParser(registry)

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def to_json(self, name: str | None = None) -> dict[str, Any]:
        """Canonical document: ``{"name", "components"}`` from one snapshot."""
        return {
            "name": name or self.settings.export_name,
            "components": [item.model_dump() for item in self.store.snapshot()],
        }

    def dumps(self, name: str | None = None, indent: int = 2) -> str:
        """Canonical document as JSON text."""
        return safe_json_dumps(self.to_json(name), indent=indent)

    def from_json(self, document: str | dict[str, Any]) -> BlueprintDocument:
        """Parse a canonical document (text or dict) without touching the store."""
        return self.parser.parse(document)

    def load(self, document: str | dict[str, Any]) -> BlueprintDocument:
        """Parse a document and replace the store's contents with it."""
        parsed = self.from_json(document)
        self.store.load(parsed.components)
        logger.info("document_imported", name=parsed.name, components=len(parsed.components))
        return parsed

    # ------------------------------------------------------------------
    # Source text
    # ------------------------------------------------------------------

    def to_source_text(self) -> str:
        """
        Generate a presentation module for the current blueprint.

        One self-closing tag per instance, in order. Every distinct type is
        imported once, in first-seen order.
        """
        snapshot = self.store.snapshot()
        names = distinct_types(snapshot)

        imports = ""
        if names:
            imports = (
                f"import {{ {', '.join(names)} }} from '{self.settings.component_import_path}';\n"
            )

        body = "\n".join(INDENT + self.render_tag(item) for item in snapshot)
        logger.debug("source_generated", components=len(snapshot), types=len(names))
        return PAGE_TEMPLATE.format(imports=imports, body=body)

    def render_tag(self, item: ComponentInstance) -> str:
        """Render one instance as a self-closing tag."""
        literal_fields, list_fields = self._field_rules(item.type)

        attributes = [
            self._attribute(key, value, key in literal_fields, key in list_fields)
            for key, value in item.props.items()
            if key != "styles"
        ]
        attributes.append(f"style={{{safe_json_dumps(item.props.get('styles') or {})}}}")
        return f"<{tag_name(item.type)} {' '.join(attributes)} />"

    def _field_rules(self, component_type: str) -> tuple[frozenset[str], set[str]]:
        entry = self.registry.resolve(component_type)
        if entry is None:
            return frozenset(), set()
        lists = {d.name for d in entry.fields if d.kind is FieldKind.LIST}
        return entry.structural_fields, lists

    @staticmethod
    def _attribute(key: str, value: Any, literal: bool, is_list: bool) -> str:
        if is_list and isinstance(value, str):
            return f"{key}={{{safe_json_dumps(_split_options(value))}}}"
        if isinstance(value, str) and not literal:
            return f'{key}="{_attribute_string(value)}"'
        return f"{key}={{{safe_json_dumps(value)}}}"


def _split_options(value: str) -> list[str]:
    return [option.strip() for option in value.split(",")]


def distinct_types(components: Iterable[ComponentInstance]) -> list[str]:
    """Distinct tag names in first-seen order."""
    return list(dict.fromkeys(tag_name(c.type) for c in components))
