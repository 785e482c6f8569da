"""Root listing: the snapshot a client seeds its state from."""

import logging

from sqlalchemy.orm import Session

from ..core.auth import CurrentUser
from ..repositories.folder_repository import FolderRepository
from ..repositories.prompt_repository import PromptRepository
from ..schemas.folder import FolderResponse
from ..schemas.prompt import PromptResponse
from ..schemas.workspace import WorkspaceSnapshot, WorkspaceUser
from .listing_cache import RootListingCache

logger = logging.getLogger(__name__)


def load_snapshot(db: Session, user: CurrentUser, cache: RootListingCache) -> WorkspaceSnapshot:
    """Return the cached snapshot, loading it from the database when stale."""
    cached = cache.get(user.id)
    if cached is not None:
        return cached

    revision = cache.revision(user.id)
    folders = FolderRepository(db, user.id).get_all()
    prompts = PromptRepository(db, user.id).get_all()
    snapshot = WorkspaceSnapshot(
        user=WorkspaceUser(id=user.id, email=user.email),
        folders=[FolderResponse.model_validate(f) for f in folders],
        prompts=[PromptResponse.model_validate(p) for p in prompts],
        revision=revision,
    )
    cache.put(user.id, snapshot)
    logger.debug("Root listing loaded", extra={"user_id": user.id, "revision": revision})
    return snapshot
