"""Repository for folder database operations."""

from typing import List

from ..exceptions import FolderNotFoundError
from ..models.folder import Folder
from .base import OwnedRepository


class FolderRepository(OwnedRepository[Folder]):
    """Data access layer for the current user's folders."""

    model_class = Folder
    not_found_error = FolderNotFoundError

    def create(self, name: str, color: str) -> Folder:
        folder = Folder(user_id=self.user_id, name=name, color=color)
        self.db.add(folder)
        self.commit(refresh=folder)
        return folder

    def get_all(self) -> List[Folder]:
        """All folders in creation order."""
        return self._base_query().order_by(Folder.created_at.asc(), Folder.id).all()

    def update(self, folder_id: str, name: str | None = None, color: str | None = None) -> Folder:
        folder = self.get_by_id(folder_id)
        if name is not None:
            folder.name = name
        if color is not None:
            folder.color = color
        self.commit(refresh=folder)
        return folder
