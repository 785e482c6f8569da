"""Pydantic schemas for API validation."""

from .folder import (
    FolderCreate,
    FolderUpdate,
    FolderResponse,
    FolderSummary,
)
from .prompt import (
    PromptCreate,
    PromptUpdate,
    PromptResponse,
    PromptSearchResult,
)
from .transfer import (
    ExportDocument,
    ImportFolder,
    ImportPrompt,
    ImportRequest,
    ImportResult,
)
from .workspace import WorkspaceUser, WorkspaceSnapshot, WorkspaceRevision

__all__ = [
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    "FolderSummary",
    "PromptCreate",
    "PromptUpdate",
    "PromptResponse",
    "PromptSearchResult",
    "ExportDocument",
    "ImportFolder",
    "ImportPrompt",
    "ImportRequest",
    "ImportResult",
    "WorkspaceUser",
    "WorkspaceSnapshot",
    "WorkspaceRevision",
]
