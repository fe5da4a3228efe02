"""Properties Editor - field-level edits applied through the store."""

from dataclasses import dataclass, field
from typing import Any, Callable

from ..core import get_logger, ValidationError, is_resource_url
from ..blueprint import BlueprintStore, ComponentInstance, Upload
from ..registry import ComponentRegistry, FieldDescriptor, FieldKind, RegistryEntry
from .coerce import parse_bool, parse_int

logger = get_logger(__name__)


@dataclass(frozen=True)
class PropertyForm:
    """Editable view of one instance for a properties panel."""

    instance_id: str
    type: str
    recognized: bool
    fields: tuple[FieldDescriptor, ...] = ()
    values: dict[str, Any] = field(default_factory=dict)


class PropertiesEditor:
    """
    Applies field edits to instances.

    Each edit copies the current props, changes one field and hands the
    whole object to ``BlueprintStore.update_props``, which replaces rather
    than merges. Dispatch is by the field's declared kind.
    """

    def __init__(self, store: BlueprintStore, registry: ComponentRegistry) -> None:
        self.store = store
        self.registry = registry
        self._coercers: dict[FieldKind, Callable[[Any], Any]] = {
            FieldKind.TEXT: lambda v: v,
            FieldKind.ENUM: lambda v: v,
            FieldKind.LIST: lambda v: v,
            FieldKind.RESOURCE: lambda v: v,
            FieldKind.BOOLEAN: parse_bool,
            FieldKind.NUMBER: parse_int,
        }

    @property
    def resources(self):
        return self.store.resources

    def form(self, instance_id: str) -> PropertyForm | None:
        """Describe an instance's editable fields; unknown types get a placeholder form."""
        instance = self.store.get(instance_id)
        if instance is None:
            return None

        entry = self.registry.resolve(instance.type)
        if entry is None:
            logger.warning("form_unrecognized_type", id=instance_id, type=instance.type)
            return PropertyForm(instance_id=instance_id, type=instance.type, recognized=False)

        styles = instance.props.get("styles") or {}
        values = {
            d.name: styles.get(d.name, 0 if d.kind is FieldKind.NUMBER else None)
            if d.style
            else instance.props.get(d.name)
            for d in entry.fields
        }
        return PropertyForm(
            instance_id=instance_id,
            type=instance.type,
            recognized=True,
            fields=entry.fields,
            values=values,
        )

    def apply(self, instance_id: str, field_name: str, value: Any) -> ComponentInstance | None:
        """
        Apply one field edit.

        Returns:
            Updated instance, or None when the id is absent or its type is
            no longer registered (both leave the store untouched)

        Raises:
            ValidationError: If the type has no such editable field
        """
        located = self._locate(instance_id)
        if located is None:
            return None
        instance, entry = located

        descriptor = entry.field(field_name)
        if descriptor is None:
            raise ValidationError(f"{instance.type} has no editable field '{field_name}'")

        props = instance.props
        previous = props.get(field_name)

        if descriptor.kind is FieldKind.STRUCTURAL:
            props = self._apply_structural(entry, descriptor, props, value)
        elif descriptor.style:
            styles = dict(props.get("styles") or {})
            styles[field_name] = self._coercers[descriptor.kind](value)
            props["styles"] = styles
        else:
            props[field_name] = self._coercers[descriptor.kind](value)

        self.store.update_props(instance_id, props)

        if descriptor.kind is FieldKind.RESOURCE and previous != props[field_name]:
            # Typing a URL over an uploaded file unbinds it
            self._release_previous(instance_id, field_name, keep=None)

        logger.debug("field_applied", id=instance_id, field=field_name, kind=descriptor.kind.value)
        return self.store.get(instance_id)

    def _apply_structural(
        self,
        entry: RegistryEntry,
        descriptor: FieldDescriptor,
        props: dict[str, Any],
        value: Any,
    ) -> dict[str, Any]:
        coerce = self._coercers[descriptor.value_kind or FieldKind.TEXT]
        coerced = coerce(value)
        if descriptor.value_kind is FieldKind.NUMBER and coerced < 0:
            logger.info("dimension_clamped", field=descriptor.name, value=coerced)
            coerced = 0
        props[descriptor.name] = coerced
        if entry.resize is not None:
            props = entry.resize(props)
        return props

    def bind_resource(self, instance_id: str, field_name: str, upload: Upload) -> str | None:
        """
        Bind an uploaded file to a resource field.

        The previous transient URL owned by the same prop is released exactly
        once, right after the swap.

        Returns:
            New URL, or None if the instance/type/upload cannot take the file
        """
        located = self._locate(instance_id)
        if located is None:
            return None
        instance, entry = located

        if not entry.accepts_file_drop:
            logger.info("file_drop_unsupported", id=instance_id, type=instance.type)
            return None

        descriptor = entry.field(field_name)
        if descriptor is None or descriptor.kind is not FieldKind.RESOURCE:
            raise ValidationError(f"{instance.type}.{field_name} cannot hold a resource")

        if not upload.is_image:
            logger.info("upload_rejected", id=instance_id, content_type=upload.content_type)
            return None

        url = self.resources.acquire(instance_id, field_name, upload)
        props = instance.props
        props[field_name] = url
        self.store.update_props(instance_id, props)
        self._release_previous(instance_id, field_name, keep=url)

        logger.info("resource_bound", id=instance_id, field=field_name, file=upload.name)
        return url

    def _release_previous(self, instance_id: str, field_name: str, keep: str | None) -> int:
        released = 0
        for url in self.resources.owned_by(instance_id, field_name):
            if url != keep and is_resource_url(url) and self.resources.release(url):
                released += 1
        return released

    def set_header(self, instance_id: str, col: int, text: str) -> bool:
        """Edit one header label of a table-like instance."""
        return self._edit_table(instance_id, lambda data: _set_at(data["headers"], col, text, "header"))

    def set_cell(self, instance_id: str, row: int, col: int, text: str) -> bool:
        """Edit one data cell of a table-like instance."""

        def edit(data: dict[str, Any]) -> None:
            cells = data["cells"]
            if not 0 <= row < len(cells):
                raise ValidationError(f"Cell row {row} out of range")
            _set_at(cells[row], col, text, "cell column")

        return self._edit_table(instance_id, edit)

    def _edit_table(self, instance_id: str, edit: Callable[[dict[str, Any]], None]) -> bool:
        located = self._locate(instance_id)
        if located is None:
            return False
        instance, entry = located
        if entry.resize is None or not isinstance(instance.props.get("data"), dict):
            raise ValidationError(f"{instance.type} has no table data")

        props = instance.props
        data = props["data"]
        data.setdefault("headers", [])
        data.setdefault("cells", [])
        edit(data)
        return self.store.update_props(instance_id, props)

    def _locate(self, instance_id: str) -> tuple[ComponentInstance, RegistryEntry] | None:
        instance = self.store.get(instance_id)
        if instance is None:
            logger.debug("edit_unknown_id", id=instance_id)
            return None
        entry = self.registry.resolve(instance.type)
        if entry is None:
            logger.warning("edit_unrecognized_type", id=instance_id, type=instance.type)
            return None
        return instance, entry


def _set_at(values: list[Any], index: int, text: str, what: str) -> None:
    if not 0 <= index < len(values):
        raise ValidationError(f"Table {what} {index} out of range")
    values[index] = text
