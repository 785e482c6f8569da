"""Database models."""

from .user import User, AuthSession
from .folder import Folder
from .prompt import Prompt

__all__ = ["User", "AuthSession", "Folder", "Prompt"]
