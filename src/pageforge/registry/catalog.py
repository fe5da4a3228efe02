"""
Built-in Component Catalog
Default templates and editable fields for the palette's block types.
"""

from typing import Any

from .models import FieldDescriptor, FieldKind, RegistryEntry
from .table import generate_table_data, resize_table


IMAGE_PLACEHOLDER_SRC = (
    "https://images.unsplash.com/photo-1599420186946-7b6fb4e297f0"
    "?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&q=80"
)


def _spacing(top: int = 10, bottom: int = 4, left: int = 0, right: int = 0) -> dict[str, int]:
    return {"marginTop": top, "marginBottom": bottom, "marginLeft": left, "marginRight": right}


def _styles(font_size: int, color: str, **spacing: int) -> dict[str, Any]:
    return {**_spacing(**spacing), "fontSize": font_size, "color": color}


SPACING_FIELDS = (
    FieldDescriptor(name="marginTop", label="Margin Top", kind=FieldKind.NUMBER, style=True),
    FieldDescriptor(name="marginBottom", label="Margin Bottom", kind=FieldKind.NUMBER, style=True),
    FieldDescriptor(name="marginLeft", label="Margin Left", kind=FieldKind.NUMBER, style=True),
    FieldDescriptor(name="marginRight", label="Margin Right", kind=FieldKind.NUMBER, style=True),
)

FONT_FIELDS = (
    FieldDescriptor(name="color", label="Font Color", kind=FieldKind.TEXT, style=True),
    FieldDescriptor(name="fontSize", label="Font Size (px)", kind=FieldKind.NUMBER, style=True),
)


def _text(name: str, label: str) -> FieldDescriptor:
    return FieldDescriptor(name=name, label=label, kind=FieldKind.TEXT)


LABELLED_FIELDS = (_text("label", "Label"), _text("placeholder", "Placeholder"))


def builtin_entries() -> list[RegistryEntry]:
    """Entries for every block type the palette offers out of the box."""
    return [
        RegistryEntry(
            type="Button",
            default_props={
                "text": "Click Me",
                "variant": "default",
                "styles": _styles(14, "#FFFFFF", top=0, bottom=8),
            },
            fields=(
                _text("text", "Button Text"),
                FieldDescriptor(
                    name="variant",
                    label="Variant",
                    kind=FieldKind.ENUM,
                    options=("default", "destructive"),
                ),
            )
            + FONT_FIELDS
            + SPACING_FIELDS,
        ),
        RegistryEntry(
            type="Input",
            default_props={
                "label": "Field Label",
                "placeholder": "Enter value...",
                "styles": _styles(14, "#334155"),
            },
            fields=LABELLED_FIELDS + FONT_FIELDS + SPACING_FIELDS,
        ),
        RegistryEntry(
            type="Textarea",
            default_props={
                "label": "Message",
                "placeholder": "Your message here",
                "styles": _styles(14, "#334155"),
            },
            fields=LABELLED_FIELDS + FONT_FIELDS + SPACING_FIELDS,
        ),
        RegistryEntry(
            type="Select",
            default_props={
                "label": "Choose an option",
                "options": "Option 1,Option 2,Option 3",
                "styles": _styles(14, "#334155"),
            },
            fields=(
                _text("label", "Label"),
                FieldDescriptor(name="options", label="Options (comma-separated)", kind=FieldKind.LIST),
            )
            + FONT_FIELDS
            + SPACING_FIELDS,
        ),
        RegistryEntry(
            type="Checkbox",
            default_props={
                "label": "Accept terms",
                "checked": False,
                "styles": _styles(14, "#334155"),
            },
            fields=(
                _text("label", "Label"),
                FieldDescriptor(name="checked", label="Checked", kind=FieldKind.BOOLEAN),
            )
            + FONT_FIELDS
            + SPACING_FIELDS,
        ),
        RegistryEntry(
            type="Card",
            default_props={
                "title": "Card Title",
                "description": "Card Description",
                "styles": _spacing(top=0, bottom=0),
            },
            fields=(_text("title", "Title"), _text("description", "Description")) + SPACING_FIELDS,
        ),
        RegistryEntry(
            type="Separator",
            default_props={"styles": _spacing()},
            fields=SPACING_FIELDS,
        ),
        RegistryEntry(
            type="Image",
            default_props={
                "src": IMAGE_PLACEHOLDER_SRC,
                "alt": "A placeholder image",
                "styles": _spacing(),
            },
            fields=(
                FieldDescriptor(name="src", label="Image URL", kind=FieldKind.RESOURCE),
                _text("alt", "Alt Text"),
            )
            + SPACING_FIELDS,
            accepts_file_drop=True,
        ),
        RegistryEntry(
            type="Table",
            default_props={
                "rows": 4,
                "cols": 4,
                "hasHeader": True,
                "data": generate_table_data(4, 4, True),
                "styles": _spacing(),
            },
            fields=(
                FieldDescriptor(
                    name="rows", label="Rows", kind=FieldKind.STRUCTURAL, value_kind=FieldKind.NUMBER
                ),
                FieldDescriptor(
                    name="cols", label="Columns", kind=FieldKind.STRUCTURAL, value_kind=FieldKind.NUMBER
                ),
                FieldDescriptor(
                    name="hasHeader",
                    label="Enable Table Header",
                    kind=FieldKind.STRUCTURAL,
                    value_kind=FieldKind.BOOLEAN,
                ),
            )
            + SPACING_FIELDS,
            structural_fields=frozenset({"rows", "cols", "hasHeader", "data"}),
            resize=resize_table,
        ),
        RegistryEntry(
            type="Text",
            default_props={
                "text": (
                    "This is an editable text block. "
                    "Click to select and edit in the properties panel."
                ),
                "styles": _styles(18, "#1e293b", top=8, bottom=8),
            },
            fields=(_text("text", "Content"),) + FONT_FIELDS + SPACING_FIELDS,
        ),
        RegistryEntry(
            type="Description",
            default_props={
                "text": (
                    "This is a smaller description text. "
                    "Use it for details, captions, or supplementary information."
                ),
                "styles": _styles(14, "#475569", top=4, bottom=4),
            },
            fields=(_text("text", "Content"),) + FONT_FIELDS + SPACING_FIELDS,
        ),
        RegistryEntry(
            type="Graph",
            default_props={"chartType": "bar", "styles": _spacing()},
            fields=(
                FieldDescriptor(
                    name="chartType", label="Chart Type", kind=FieldKind.ENUM, options=("bar", "line")
                ),
            )
            + SPACING_FIELDS,
        ),
    ]
