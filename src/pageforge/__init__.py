"""
pageforge
Blueprint state engine for a drag-and-drop page builder.
"""

from .core import configure_logging, create_container, get_settings
from .registry import ComponentRegistry
from .blueprint import BlueprintDocument, BlueprintStore, ComponentInstance, ResourceTracker, Upload
from .dnd import DragReconciler, Droppable, Rect
from .editor import PropertiesEditor
from .export import ExportSerializer

__version__ = "0.1.0"

__all__ = [
    "configure_logging",
    "create_container",
    "get_settings",
    "ComponentRegistry",
    "BlueprintDocument",
    "BlueprintStore",
    "ComponentInstance",
    "ResourceTracker",
    "Upload",
    "DragReconciler",
    "Droppable",
    "Rect",
    "PropertiesEditor",
    "ExportSerializer",
]
