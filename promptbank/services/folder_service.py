"""Folder operations for the signed-in user.

Each mutation touches exactly one row filtered by id and owner, then
revalidates the user's root listing. Deleting a folder removes its
prompts through the database cascade; nothing here cleans them up.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.auth import CurrentUser
from ..core.config import settings
from ..models.folder import Folder
from ..repositories.folder_repository import FolderRepository
from ..schemas.folder import FolderCreate, FolderUpdate
from .listing_cache import RootListingCache

logger = logging.getLogger(__name__)


def resolve_color(color: Optional[str]) -> str:
    """Blank or missing colors fall back to the configured default."""
    if color is None or not color.strip():
        return settings.default_folder_color
    return color.strip()


class FolderService:
    """Create, rename/recolor, delete and list folders."""

    def __init__(self, db: Session, user: CurrentUser, cache: RootListingCache):
        self.db = db
        self.user = user
        self.cache = cache
        self.repo = FolderRepository(db, user.id)

    def list_folders(self) -> List[Folder]:
        return self.repo.get_all()

    def get_folder(self, folder_id: str) -> Folder:
        return self.repo.get_by_id(folder_id)

    def create_folder(self, data: FolderCreate, revalidate: bool = True) -> Folder:
        folder = self.repo.create(name=data.name, color=resolve_color(data.color))
        logger.info("Folder created", extra={"folder_id": folder.id, "user_id": self.user.id})
        if revalidate:
            self.cache.revalidate(self.user.id)
        return folder

    def update_folder(self, folder_id: str, data: FolderUpdate) -> Folder:
        color = None if data.color is None else resolve_color(data.color)
        folder = self.repo.update(folder_id, name=data.name, color=color)
        logger.info("Folder updated", extra={"folder_id": folder_id, "user_id": self.user.id})
        self.cache.revalidate(self.user.id)
        return folder

    def delete_folder(self, folder_id: str) -> None:
        self.repo.delete(folder_id)
        logger.info("Folder deleted", extra={"folder_id": folder_id, "user_id": self.user.id})
        self.cache.revalidate(self.user.id)
