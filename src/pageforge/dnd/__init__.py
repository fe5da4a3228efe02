"""
Drag and Drop
Gesture state machine and collision resolution
"""

from .collision import Droppable, Rect, closest_center, center_distance
from .reconciler import DragOperation, DragOutcome, DragReconciler, DragState, DragStateError

__all__ = [
    "Droppable",
    "Rect",
    "closest_center",
    "center_distance",
    "DragOperation",
    "DragOutcome",
    "DragReconciler",
    "DragState",
    "DragStateError",
]
