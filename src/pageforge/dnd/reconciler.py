"""
Drag/Drop Reconciler
Turns one pointer gesture into at most one store operation.

    IDLE --begin_drag--> DRAGGING --end/cancel--> COMMITTED | CANCELLED --> IDLE
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ..core import get_logger, InstanceIdMinter, LogContext
from ..core.id import split_instance_id
from ..blueprint import BlueprintStore, ComponentInstance
from ..registry import ComponentRegistry
from .collision import Droppable, Rect, closest_center

logger = get_logger(__name__)


class DragState(str, Enum):
    """Reconciler states."""

    IDLE = "idle"
    DRAGGING = "dragging"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


class DragOperation(str, Enum):
    """Store operation a committed drag produced."""

    INSERT = "insert"
    MOVE = "move"


class DragStateError(RuntimeError):
    """Gesture event arrived in a state that cannot accept it."""

    pass


@dataclass(frozen=True)
class DragOutcome:
    """Result of a finished gesture."""

    state: DragState
    active_id: str
    over_id: str | None
    operation: DragOperation | None = None
    instance_id: str | None = None
    index: int | None = None

    @property
    def committed(self) -> bool:
        return self.state is DragState.COMMITTED


# Marker: end() without an explicit target uses the last collision result
_FROM_COLLISION = object()


class DragReconciler:
    """Translates drag gestures into Store operations."""

    def __init__(
        self,
        store: BlueprintStore,
        registry: ComponentRegistry,
        minter: InstanceIdMinter | None = None,
    ) -> None:
        self.store = store
        self.registry = registry
        self.minter = minter or InstanceIdMinter()
        self._state = DragState.IDLE
        self.active_id: str | None = None
        self.active_rect: Rect | None = None
        self.over_id: str | None = None
        self.last_outcome: DragOutcome | None = None

    @property
    def state(self) -> DragState:
        return self._state

    def begin_drag(self, active_id: str, rect: Rect | None = None) -> None:
        """
        Start a gesture.

        Args:
            active_id: Palette type name or canvas instance id
            rect: Initial rect of the dragged element
        """
        if self._state is not DragState.IDLE:
            raise DragStateError(f"Cannot begin drag while {self._state.value}")
        self._state = DragState.DRAGGING
        self.active_id = active_id
        self.active_rect = rect
        self.over_id = None
        logger.debug("drag_begin", active=active_id)

    def move(self, rect: Rect, droppables: Iterable[Droppable] = ()) -> str | None:
        """
        Track the dragged element and recompute the collision target.

        Pointer moves outside a gesture are ignored.

        Returns:
            Current target id (None if nothing collides)
        """
        if self._state is not DragState.DRAGGING:
            return None
        self.active_rect = rect
        self.over_id = closest_center(rect, droppables)
        return self.over_id

    def end(self, over_id: object = _FROM_COLLISION) -> DragOutcome:
        """
        Finish the gesture and apply at most one store operation.

        Args:
            over_id: Drop target id, or None for "released over nothing".
                Defaults to the target found by the last ``move``.

        Raises:
            DragStateError: If no drag is in progress
            UnknownTypeError: If a palette type is not registered (store unchanged)
        """
        if self._state is not DragState.DRAGGING:
            raise DragStateError(f"Cannot end drag while {self._state.value}")

        target = self.over_id if over_id is _FROM_COLLISION else over_id
        active_id = self.active_id or ""

        try:
            with LogContext(drag=active_id):
                outcome = self._resolve(active_id, target)  # type: ignore[arg-type]
        finally:
            self._reset()

        self.last_outcome = outcome
        return outcome

    def cancel(self) -> DragOutcome:
        """Abort the gesture; the store is untouched."""
        if self._state is not DragState.DRAGGING:
            raise DragStateError(f"Cannot cancel drag while {self._state.value}")
        outcome = self._cancelled(self.active_id or "", None, "cancelled")
        self._reset()
        self.last_outcome = outcome
        return outcome

    def _resolve(self, active_id: str, over_id: str | None) -> DragOutcome:
        if over_id is None:
            return self._cancelled(active_id, over_id, "no_target")

        if not self.store.contains(active_id):
            # An instance removed mid-gesture, not a palette type
            if split_instance_id(active_id) is not None and not self.registry.is_registered(active_id):
                return self._cancelled(active_id, over_id, "instance_gone")
            return self._insert_from_palette(active_id, over_id)

        if active_id == over_id:
            return self._cancelled(active_id, over_id, "dropped_on_self")

        to_index = self.store.index_of(over_id)
        if to_index == -1:
            return self._cancelled(active_id, over_id, "unknown_target")

        self._state = DragState.COMMITTED
        self.store.move_range(self.store.index_of(active_id), to_index)
        return DragOutcome(
            state=DragState.COMMITTED,
            active_id=active_id,
            over_id=over_id,
            operation=DragOperation.MOVE,
            instance_id=active_id,
            index=to_index,
        )

    def _insert_from_palette(self, component_type: str, over_id: str) -> DragOutcome:
        # get_defaults raises UnknownTypeError before anything is minted or stored
        props = self.registry.get_defaults(component_type)
        self.minter.advance_past(self.store.ids())
        instance = ComponentInstance(
            id=self.minter.mint(component_type), type=component_type, props=props
        )

        over_index = self.store.index_of(over_id)
        index = over_index if over_index != -1 else len(self.store)

        self._state = DragState.COMMITTED
        landed = self.store.insert_at(index, instance)
        return DragOutcome(
            state=DragState.COMMITTED,
            active_id=component_type,
            over_id=over_id,
            operation=DragOperation.INSERT,
            instance_id=instance.id,
            index=landed,
        )

    def _cancelled(self, active_id: str, over_id: str | None, reason: str) -> DragOutcome:
        self._state = DragState.CANCELLED
        logger.debug("drag_cancelled", active=active_id, over=over_id, reason=reason)
        return DragOutcome(state=DragState.CANCELLED, active_id=active_id, over_id=over_id)

    def _reset(self) -> None:
        self._state = DragState.IDLE
        self.active_id = None
        self.active_rect = None
        self.over_id = None
