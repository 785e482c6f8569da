"""Business logic services."""

from .folder_service import FolderService
from .prompt_service import PromptService
from .transfer_service import TransferService
from .listing_cache import RootListingCache

__all__ = ["FolderService", "PromptService", "TransferService", "RootListingCache"]
