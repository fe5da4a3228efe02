"""
Properties Editor
Kind-dispatched field edits, structural resize and resource binding
"""

from .coerce import parse_bool, parse_int
from .editor import PropertiesEditor, PropertyForm

__all__ = ["PropertiesEditor", "PropertyForm", "parse_bool", "parse_int"]
