"""Root listing API used to seed and re-seed client state."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.auth import CurrentUser, require_user
from ..database import get_db
from ..schemas.workspace import WorkspaceSnapshot, WorkspaceRevision
from ..services.listing_cache import RootListingCache, get_listing_cache
from ..services.workspace_service import load_snapshot

router = APIRouter(prefix="/api/workspace", tags=["workspace"])


@router.get("", response_model=WorkspaceSnapshot)
def get_workspace(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_user),
    cache: RootListingCache = Depends(get_listing_cache),
):
    return load_snapshot(db, user, cache)


@router.get("/revision", response_model=WorkspaceRevision)
def get_revision(
    user: CurrentUser = Depends(require_user),
    cache: RootListingCache = Depends(get_listing_cache),
):
    """Current listing revision; changes whenever a mutation lands."""
    return WorkspaceRevision(revision=cache.revision(user.id))
