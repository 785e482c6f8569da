"""Folder API.

Thin endpoints over FolderService. Every route requires a signed-in
user and only ever sees that user's folders; a foreign id is a 404.
"""

import logging
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import List

from ..core.auth import CurrentUser, require_user
from ..database import get_db
from ..schemas.folder import FolderCreate, FolderUpdate, FolderResponse
from ..services.folder_service import FolderService
from ..services.listing_cache import RootListingCache, get_listing_cache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/folders", tags=["folders"])


def _service(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_user),
    cache: RootListingCache = Depends(get_listing_cache),
) -> FolderService:
    return FolderService(db, user, cache)


@router.get("", response_model=List[FolderResponse])
def list_folders(service: FolderService = Depends(_service)):
    """All of the caller's folders in creation order."""
    return service.list_folders()


@router.post("", response_model=FolderResponse, status_code=201)
def create_folder(data: FolderCreate, service: FolderService = Depends(_service)):
    return service.create_folder(data)


@router.get("/{folder_id}", response_model=FolderResponse)
def get_folder(folder_id: str, service: FolderService = Depends(_service)):
    return service.get_folder(folder_id)


@router.put("/{folder_id}", response_model=FolderResponse)
def update_folder(folder_id: str, data: FolderUpdate, service: FolderService = Depends(_service)):
    """Rename and/or recolor a folder."""
    return service.update_folder(folder_id, data)


@router.delete("/{folder_id}", status_code=204)
def delete_folder(folder_id: str, service: FolderService = Depends(_service)):
    """Delete a folder and, through the database cascade, its prompts."""
    service.delete_folder(folder_id)
    return Response(status_code=204)
