"""Blueprint Store - the ordered sequence of component instances."""

import copy
from typing import Any, Callable, Iterable

from ..core import get_logger, DuplicateIdError
from .models import ComponentInstance
from .resources import ResourceTracker

logger = get_logger(__name__)

Observer = Callable[[tuple[ComponentInstance, ...]], None]


class BlueprintStore:
    """
    Owns the page-under-construction.

    Every mutation builds the new sequence aside and swaps it in with a
    single assignment, so observers only ever see the pre- or post-state.
    Position is carried by sequence order alone.
    """

    def __init__(self, resources: ResourceTracker | None = None) -> None:
        self._items: tuple[ComponentInstance, ...] = ()
        self._observers: list[Observer] = []
        self.resources = resources or ResourceTracker()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def snapshot(self) -> tuple[ComponentInstance, ...]:
        """Ordered, detached copy of the current sequence."""
        return tuple(item.model_copy(deep=True) for item in self._items)

    def ids(self) -> list[str]:
        return [item.id for item in self._items]

    def index_of(self, instance_id: str) -> int:
        """Position of an instance, or -1 if absent."""
        for index, item in enumerate(self._items):
            if item.id == instance_id:
                return index
        return -1

    def get(self, instance_id: str) -> ComponentInstance | None:
        """Detached copy of one instance."""
        index = self.index_of(instance_id)
        return self._items[index].model_copy(deep=True) if index != -1 else None

    def contains(self, instance_id: str) -> bool:
        return self.index_of(instance_id) != -1

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def insert_at(self, index: int, instance: ComponentInstance) -> int:
        """
        Insert an instance.

        Out-of-range indices (negative or past the end) append.

        Returns:
            Index the instance landed at

        Raises:
            DuplicateIdError: If the id is already present
        """
        if self.contains(instance.id):
            raise DuplicateIdError(instance.id)

        items = list(self._items)
        if index < 0 or index > len(items):
            index = len(items)
        items.insert(index, instance.model_copy(deep=True))
        self._commit(items)

        logger.info("instance_inserted", id=instance.id, type=instance.type, index=index)
        return index

    def move_range(self, from_index: int, to_index: int) -> bool:
        """
        Move one instance.

        The element at ``from_index`` is removed first; ``to_index`` is then
        applied to the shortened sequence.

        Returns:
            False if either index is out of range (nothing moves)
        """
        size = len(self._items)
        if not (0 <= from_index < size and 0 <= to_index < size):
            logger.debug("move_out_of_range", from_index=from_index, to_index=to_index, size=size)
            return False
        if from_index == to_index:
            return True

        items = list(self._items)
        moved = items.pop(from_index)
        items.insert(to_index, moved)
        self._commit(items)

        logger.info("instance_moved", id=moved.id, from_index=from_index, to_index=to_index)
        return True

    def update_props(self, instance_id: str, new_props: dict[str, Any]) -> bool:
        """
        Replace an instance's props wholesale.

        No merge happens: keys the caller leaves out are gone afterwards.
        Unknown ids are a silent no-op.

        Returns:
            True if an instance was updated
        """
        index = self.index_of(instance_id)
        if index == -1:
            logger.debug("update_unknown_id", id=instance_id)
            return False

        items = list(self._items)
        items[index] = items[index].model_copy(update={"props": copy.deepcopy(new_props)})
        self._commit(items)

        logger.debug("props_updated", id=instance_id, keys=sorted(new_props))
        return True

    def remove(self, instance_id: str) -> bool:
        """Remove one instance and release the resources it owns."""
        index = self.index_of(instance_id)
        if index == -1:
            return False

        items = list(self._items)
        del items[index]
        self._commit(items)
        released = self.resources.release_owner(instance_id)

        logger.info("instance_removed", id=instance_id, released=released)
        return True

    def remove_all(self) -> None:
        """Clear the blueprint."""
        count = len(self._items)
        self._commit([])
        released = self.resources.release_all()
        logger.info("blueprint_cleared", removed=count, released=released)

    def load(self, instances: Iterable[ComponentInstance]) -> None:
        """
        Replace the whole sequence (import path).

        Raises:
            DuplicateIdError: If two instances share an id (store unchanged)
        """
        items = [instance.model_copy(deep=True) for instance in instances]
        seen: set[str] = set()
        for item in items:
            if item.id in seen:
                raise DuplicateIdError(item.id)
            seen.add(item.id)

        self.resources.release_all()
        self._commit(items)
        logger.info("blueprint_loaded", components=len(items))

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer; returns a function that unsubscribes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _commit(self, items: list[ComponentInstance]) -> None:
        self._items = tuple(items)
        if self._observers:
            view = self.snapshot()
            for observer in list(self._observers):
                observer(view)
