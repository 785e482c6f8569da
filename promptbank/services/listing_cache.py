"""Per-user cache of the root listing, dropped whenever a mutation succeeds.

Mutating services call ``revalidate(user_id)`` after they commit. That
discards the cached snapshot and bumps the user's revision so clients
polling ``/api/workspace/revision`` know to re-seed.
"""

import logging
import threading
from typing import Optional

from starlette.requests import Request

from ..schemas.workspace import WorkspaceSnapshot

logger = logging.getLogger(__name__)


class RootListingCache:
    """Thread-safe in-process store of ``WorkspaceSnapshot`` per user."""

    def __init__(self) -> None:
        self._snapshots: dict[str, WorkspaceSnapshot] = {}
        self._revisions: dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, user_id: str) -> Optional[WorkspaceSnapshot]:
        with self._lock:
            return self._snapshots.get(user_id)

    def put(self, user_id: str, snapshot: WorkspaceSnapshot) -> None:
        with self._lock:
            # A revalidation that raced the load wins: never cache a stale revision.
            if snapshot.revision == self._revisions.get(user_id, 0):
                self._snapshots[user_id] = snapshot

    def revision(self, user_id: str) -> int:
        with self._lock:
            return self._revisions.get(user_id, 0)

    def revalidate(self, user_id: str) -> int:
        """Invalidate the user's listing. Returns the new revision."""
        with self._lock:
            self._snapshots.pop(user_id, None)
            revision = self._revisions.get(user_id, 0) + 1
            self._revisions[user_id] = revision
        logger.debug("Root listing revalidated", extra={"user_id": user_id, "revision": revision})
        return revision

    def clear(self) -> None:
        with self._lock:
            self._snapshots.clear()
            self._revisions.clear()


def get_listing_cache(request: Request) -> RootListingCache:
    """FastAPI dependency returning the cache owned by the running app."""
    return request.app.state.listing_cache
