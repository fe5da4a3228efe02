"""
Transient Resource Tracker
Scoped ownership of object URLs created for uploaded files.

Each live URL is owned by exactly one ``(instance id, prop name)`` pair.
Acquire on bind, release on replace/unbind/instance removal.
"""

from dataclasses import dataclass
from typing import Callable

from ..core import get_logger, new_resource_url

logger = get_logger(__name__)


@dataclass(frozen=True)
class Upload:
    """A file handed to the engine by a drop or file-pick gesture."""

    name: str
    content_type: str
    size: int = 0

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")


@dataclass(frozen=True)
class _Handle:
    url: str
    owner_id: str
    field: str
    upload: Upload


Releaser = Callable[[str], None]


def _noop_release(url: str) -> None:
    pass


class ResourceTracker:
    """Tracks live transient URLs and releases each exactly once."""

    def __init__(self, releaser: Releaser = _noop_release) -> None:
        """
        Args:
            releaser: Platform hook that frees a URL (e.g. revokeObjectURL)
        """
        self._releaser = releaser
        self._handles: dict[str, _Handle] = {}

    def acquire(self, owner_id: str, field: str, upload: Upload) -> str:
        """Create a URL for ``upload`` owned by ``owner_id.field``."""
        url = new_resource_url()
        self._handles[url] = _Handle(url=url, owner_id=owner_id, field=field, upload=upload)
        logger.debug("resource_acquired", url=url, owner=owner_id, field=field, file=upload.name)
        return url

    def release(self, url: str) -> bool:
        """
        Release a URL.

        Already-released or foreign URLs are ignored. A failing platform
        releaser is logged, and the handle is still dropped.

        Returns:
            True if a live handle was released
        """
        handle = self._handles.pop(url, None)
        if handle is None:
            logger.debug("resource_release_skipped", url=url)
            return False
        try:
            self._releaser(url)
        except Exception as e:
            logger.warning("resource_release_failed", url=url, error=str(e))
        logger.debug("resource_released", url=url, owner=handle.owner_id, field=handle.field)
        return True

    def owned_by(self, owner_id: str, field: str) -> list[str]:
        """Live URLs owned by one prop."""
        return [
            h.url for h in self._handles.values() if h.owner_id == owner_id and h.field == field
        ]

    def release_owner(self, owner_id: str) -> int:
        """Release every URL owned by an instance. Returns the count released."""
        urls = [h.url for h in self._handles.values() if h.owner_id == owner_id]
        return sum(1 for url in urls if self.release(url))

    def release_all(self) -> int:
        """Release every live URL."""
        return sum(1 for url in list(self._handles) if self.release(url))

    def is_live(self, url: str) -> bool:
        return url in self._handles

    @property
    def live_count(self) -> int:
        return len(self._handles)
