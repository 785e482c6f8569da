"""Prompt operations for the signed-in user.

A prompt may only be filed in a folder the caller owns; create and
update re-check the folder on every call instead of trusting the id
the client sent.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..core.auth import CurrentUser
from ..models.prompt import Prompt
from ..repositories.folder_repository import FolderRepository
from ..repositories.prompt_repository import PromptRepository
from ..schemas.folder import FolderSummary
from ..schemas.prompt import PromptCreate, PromptUpdate, PromptSearchResult
from .listing_cache import RootListingCache

logger = logging.getLogger(__name__)


class PromptService:
    """Create, update, delete, list and search prompts."""

    def __init__(self, db: Session, user: CurrentUser, cache: RootListingCache):
        self.db = db
        self.user = user
        self.cache = cache
        self.repo = PromptRepository(db, user.id)
        self.folder_repo = FolderRepository(db, user.id)

    def list_prompts(self, folder_id: Optional[str] = None) -> List[Prompt]:
        return self.repo.get_all(folder_id)

    def get_prompt(self, prompt_id: str) -> Prompt:
        return self.repo.get_by_id(prompt_id)

    def search_prompts(self, text: str) -> List[PromptSearchResult]:
        results = []
        for prompt, folder in self.repo.search(text):
            result = PromptSearchResult.model_validate(prompt)
            result.folder = FolderSummary.model_validate(folder)
            results.append(result)
        return results

    def create_prompt(self, data: PromptCreate, revalidate: bool = True) -> Prompt:
        self.folder_repo.get_by_id(data.folder_id)
        prompt = self.repo.create(
            folder_id=data.folder_id,
            title=data.title,
            content=data.content,
            tags=data.tags,
        )
        logger.info("Prompt created", extra={"prompt_id": prompt.id, "user_id": self.user.id})
        if revalidate:
            self.cache.revalidate(self.user.id)
        return prompt

    def update_prompt(self, prompt_id: str, data: PromptUpdate) -> Prompt:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "folder_id" in changes:
            self.folder_repo.get_by_id(changes["folder_id"])
        prompt = self.repo.update(prompt_id, changes)
        logger.info(
            "Prompt updated",
            extra={"prompt_id": prompt_id, "user_id": self.user.id, "fields": sorted(changes)},
        )
        self.cache.revalidate(self.user.id)
        return prompt

    def delete_prompt(self, prompt_id: str) -> None:
        self.repo.delete(prompt_id)
        logger.info("Prompt deleted", extra={"prompt_id": prompt_id, "user_id": self.user.id})
        self.cache.revalidate(self.user.id)
