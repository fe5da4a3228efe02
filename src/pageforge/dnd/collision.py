"""Collision detection for overlapping droppable regions."""

import math
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in canvas coordinates."""

    left: float
    top: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)

    def translated(self, dx: float, dy: float) -> "Rect":
        return Rect(self.left + dx, self.top + dy, self.width, self.height)


@dataclass(frozen=True)
class Droppable:
    """A region a dragged element may be released onto."""

    id: str
    rect: Rect


def center_distance(a: Rect, b: Rect) -> float:
    (ax, ay), (bx, by) = a.center, b.center
    return math.hypot(ax - bx, ay - by)


def closest_center(active: Rect | None, droppables: Iterable[Droppable]) -> str | None:
    """
    Pick the droppable whose center is nearest the dragged element's center.

    Ties go to the first droppable in iteration order.

    Returns:
        Droppable id, or None when there is no rect or no droppable
    """
    if active is None:
        return None

    best_id: str | None = None
    best_distance = math.inf
    for droppable in droppables:
        distance = center_distance(active, droppable.rect)
        if distance < best_distance:
            best_id, best_distance = droppable.id, distance
    return best_id
