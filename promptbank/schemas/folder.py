"""Folder schemas."""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional

FOLDER_NAME_MAX_LENGTH = 255
FOLDER_COLOR_MAX_LENGTH = 32


def _require_name(v: str) -> str:
    if not v.strip():
        raise ValueError("Folder name is required")
    return v


class FolderCreate(BaseModel):
    """Schema for creating a folder. A missing or blank color gets the default."""
    name: str = Field(..., max_length=FOLDER_NAME_MAX_LENGTH)
    color: Optional[str] = Field(None, max_length=FOLDER_COLOR_MAX_LENGTH)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _require_name(v)


class FolderUpdate(BaseModel):
    """Schema for renaming and/or recoloring a folder."""
    name: Optional[str] = Field(None, max_length=FOLDER_NAME_MAX_LENGTH)
    color: Optional[str] = Field(None, max_length=FOLDER_COLOR_MAX_LENGTH)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _require_name(v)


class FolderResponse(BaseModel):
    """Schema for folder response."""
    id: str
    user_id: str
    name: str
    color: str
    created_at: datetime

    class Config:
        from_attributes = True


class FolderSummary(BaseModel):
    """Folder fields joined onto search results."""
    name: str
    color: str

    class Config:
        from_attributes = True
