"""Root listing snapshot schemas."""

from pydantic import BaseModel
from typing import List

from .folder import FolderResponse
from .prompt import PromptResponse


class WorkspaceUser(BaseModel):
    id: str
    email: str


class WorkspaceSnapshot(BaseModel):
    """Everything the client needs to seed its state in one response.

    Folders are in creation order, prompts most recently updated first.
    ``revision`` increases every time a mutation invalidates the listing.
    """
    user: WorkspaceUser
    folders: List[FolderResponse]
    prompts: List[PromptResponse]
    revision: int


class WorkspaceRevision(BaseModel):
    revision: int
