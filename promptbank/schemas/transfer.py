"""Export and import document schemas."""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Any, Optional, List

from .folder import FolderResponse
from .prompt import PromptResponse


class ExportDocument(BaseModel):
    """Every folder and prompt the caller owns, as stored."""
    exported_at: datetime = Field(..., alias="exportedAt")
    folders: List[FolderResponse]
    prompts: List[PromptResponse]

    model_config = {"populate_by_name": True}


class ImportFolder(BaseModel):
    # Rows are taken as-is; FolderCreate/PromptCreate validate each one in
    # the service so a bad row is skipped instead of failing the document.
    name: Optional[Any] = None
    color: Optional[Any] = None


class ImportPrompt(BaseModel):
    folder_name: Optional[Any] = None
    title: Optional[Any] = None
    content: Optional[Any] = None
    tags: Optional[Any] = None


class ImportRequest(BaseModel):
    """Folders by name, prompts referencing folders by name.

    Both keys are required; a document missing either is rejected
    before anything is written.
    """
    folders: List[ImportFolder]
    prompts: List[ImportPrompt]


class ImportResult(BaseModel):
    folders_created: int
    prompts_created: int
    prompts_skipped: int
