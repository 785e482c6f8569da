"""Prompt schemas.

Titles and content must be non-blank but are stored exactly as typed.
Tags are not normalized here; the editor's tag input lowercases and
de-duplicates them.
"""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional, List

from ..models.prompt import TITLE_MAX_LENGTH
from .folder import FolderSummary


class PromptCreate(BaseModel):
    """Schema for creating a prompt."""
    folder_id: str = Field(..., min_length=1)
    title: str = Field(..., max_length=TITLE_MAX_LENGTH)
    content: str
    tags: List[str] = Field(default_factory=list)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v

    @field_validator('content')
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Content is required")
        return v

    @field_validator('tags', mode='before')
    @classmethod
    def default_tags(cls, v):
        return [] if v is None else v


class PromptUpdate(BaseModel):
    """Partial update. Omitted fields are left unchanged."""
    folder_id: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = Field(None, max_length=TITLE_MAX_LENGTH)
    content: Optional[str] = None
    tags: Optional[List[str]] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Title is required")
        return v

    @field_validator('content')
    @classmethod
    def validate_content(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Content is required")
        return v


class PromptResponse(BaseModel):
    """Schema for prompt response."""
    id: str
    user_id: str
    folder_id: str
    title: str
    content: str
    tags: List[str] = []
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class PromptSearchResult(PromptResponse):
    """Search hit with its folder's display fields."""
    folder: Optional[FolderSummary] = None
