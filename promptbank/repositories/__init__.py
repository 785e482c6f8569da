"""Data access repositories."""

from .base import OwnedRepository
from .folder_repository import FolderRepository
from .prompt_repository import PromptRepository

__all__ = [
    "OwnedRepository",
    "FolderRepository",
    "PromptRepository",
]
