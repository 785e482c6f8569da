"""Repository for prompt database operations."""

from typing import List, Optional

from sqlalchemy import or_

from ..exceptions import PromptNotFoundError
from ..models.folder import Folder
from ..models.prompt import Prompt
from ..models._common import utcnow
from .base import OwnedRepository

# Columns a partial update may touch.
_UPDATABLE = ("folder_id", "title", "content", "tags")


class PromptRepository(OwnedRepository[Prompt]):
    """Data access layer for the current user's prompts."""

    model_class = Prompt
    not_found_error = PromptNotFoundError

    def _ordered(self, query):
        return query.order_by(Prompt.updated_at.desc(), Prompt.created_at.desc())

    def create(self, folder_id: str, title: str, content: str, tags: List[str]) -> Prompt:
        prompt = Prompt(
            user_id=self.user_id,
            folder_id=folder_id,
            title=title,
            content=content,
            tags=list(tags),
        )
        self.db.add(prompt)
        self.commit(refresh=prompt)
        return prompt

    def get_all(self, folder_id: Optional[str] = None) -> List[Prompt]:
        """Prompts, most recently updated first, optionally for one folder."""
        query = self._base_query()
        if folder_id:
            query = query.filter(Prompt.folder_id == folder_id)
        return self._ordered(query).all()

    def search(self, text: str) -> List[tuple[Prompt, Folder]]:
        """Case-insensitive substring match on title or content.

        Returns (prompt, folder) pairs so callers can show folder name and color.
        """
        query = (
            self.db.query(Prompt, Folder)
            .join(Folder, Folder.id == Prompt.folder_id)
            .filter(Prompt.user_id == self.user_id)
            .filter(
                or_(
                    Prompt.title.icontains(text, autoescape=True),
                    Prompt.content.icontains(text, autoescape=True),
                )
            )
        )
        return self._ordered(query).all()

    def update(self, prompt_id: str, changes: dict) -> Prompt:
        prompt = self.get_by_id(prompt_id)
        for key in _UPDATABLE:
            if key in changes:
                value = changes[key]
                setattr(prompt, key, list(value) if key == "tags" else value)
        # Bump explicitly: onupdate does not fire when no column changed.
        prompt.updated_at = utcnow()
        self.commit(refresh=prompt)
        return prompt
