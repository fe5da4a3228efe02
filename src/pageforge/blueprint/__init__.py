"""
Blueprint State
Instances, the ordered store, transient resources and document parsing
"""

from .models import BlueprintDocument, ComponentInstance, style_value
from .resources import ResourceTracker, Upload
from .store import BlueprintStore
from .parser import BlueprintParser, parse_blueprint

__all__ = [
    "BlueprintDocument",
    "ComponentInstance",
    "style_value",
    "ResourceTracker",
    "Upload",
    "BlueprintStore",
    "BlueprintParser",
    "parse_blueprint",
]
