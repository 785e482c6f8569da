"""Errors raised by Promptbank services.

Every error knows its HTTP status and a stable code, and renders as
``{"error": CODE, "message": ..., "details": {...}}`` through the
exception handlers in ``middleware.exception_handler``.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    UNAUTHENTICATED = "UNAUTHENTICATED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DATA_ERROR = "DATA_ERROR"
    FOLDER_NOT_FOUND = "FOLDER_NOT_FOUND"
    PROMPT_NOT_FOUND = "PROMPT_NOT_FOUND"
    RATE_LIMITED = "RATE_LIMITED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class PromptbankError(Exception):
    """Base class. ``details`` is free-form context for the client."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error_code.value, "message": self.message, "details": self.details}


class NotAuthenticatedError(PromptbankError):
    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, ErrorCode.UNAUTHENTICATED, status_code=401)


class ValidationError(PromptbankError):
    """Bad input. ``field`` names the offending field when there is one."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message,
            ErrorCode.VALIDATION_ERROR,
            status_code=400,
            details={"field": field} if field else None,
        )


class DataError(PromptbankError):
    """The data layer refused or failed; the driver's message is passed through."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.DATA_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code, status_code=status_code, details=details)


class FolderNotFoundError(DataError):
    """Missing, or owned by another user; the response is the same for both."""

    def __init__(self, folder_id: str):
        super().__init__(
            f"Folder not found: {folder_id}",
            ErrorCode.FOLDER_NOT_FOUND,
            status_code=404,
            details={"folder_id": folder_id},
        )


class PromptNotFoundError(DataError):
    def __init__(self, prompt_id: str):
        super().__init__(
            f"Prompt not found: {prompt_id}",
            ErrorCode.PROMPT_NOT_FOUND,
            status_code=404,
            details={"prompt_id": prompt_id},
        )
