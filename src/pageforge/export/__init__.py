"""
Export
Canonical JSON and generated presentation source
"""

from .serializer import ExportSerializer, distinct_types, tag_name

__all__ = ["ExportSerializer", "distinct_types", "tag_name"]
