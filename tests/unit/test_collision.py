"""Tests for collision detection."""

import pytest

from pageforge.dnd import Droppable, Rect, closest_center


def _stack(*ids, height=50, gap=10):
    """Vertically stacked droppables of equal size."""
    return [Droppable(i, Rect(0, n * (height + gap), 200, height)) for n, i in enumerate(ids)]


@pytest.mark.unit
def test_rect_center():
    """Test rect centers."""
    assert Rect(10, 20, 100, 40).center == (60, 40)
    assert Rect(0, 0, 10, 10).translated(5, -5) == Rect(5, -5, 10, 10)


@pytest.mark.unit
def test_closest_center_picks_nearest():
    """Test the nearest center wins."""
    droppables = _stack("A", "B", "C")
    dragged = Rect(0, 70, 200, 50)  # center y=95, B's center y=85

    assert closest_center(dragged, droppables) == "B"


@pytest.mark.unit
def test_closest_center_overlapping_regions():
    """Test overlapping regions resolve by center distance, not overlap area."""
    big = Droppable("canvas", Rect(0, 0, 1000, 1000))
    small = Droppable("A", Rect(90, 90, 20, 20))

    assert closest_center(Rect(95, 95, 10, 10), [big, small]) == "A"


@pytest.mark.unit
def test_closest_center_tie_first_wins():
    """Test equidistant droppables resolve to the first in sequence."""
    above = Droppable("A", Rect(0, 0, 100, 100))
    below = Droppable("B", Rect(0, 200, 100, 100))
    dragged = Rect(0, 100, 100, 100)  # center exactly between

    assert closest_center(dragged, [above, below]) == "A"
    assert closest_center(dragged, [below, above]) == "B"


@pytest.mark.unit
def test_closest_center_empty():
    """Test no rect or no droppables gives no target."""
    assert closest_center(Rect(0, 0, 1, 1), []) is None
    assert closest_center(None, _stack("A")) is None
