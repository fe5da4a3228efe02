"""
Component Registry
Type templates, editable fields and structural hooks
"""

from .models import FieldDescriptor, FieldKind, RegistryEntry, ResizeHook
from .registry import ComponentRegistry
from .table import generate_table_data, reshape_table_data, resize_table, data_row_count

__all__ = [
    "ComponentRegistry",
    "FieldDescriptor",
    "FieldKind",
    "RegistryEntry",
    "ResizeHook",
    "generate_table_data",
    "reshape_table_data",
    "resize_table",
    "data_row_count",
]
