"""Export/import API."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.auth import CurrentUser, require_user
from ..database import get_db
from ..schemas.transfer import ExportDocument, ImportRequest, ImportResult
from ..services.listing_cache import RootListingCache, get_listing_cache
from ..services.transfer_service import TransferService

router = APIRouter(prefix="/api", tags=["transfer"])


def _service(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_user),
    cache: RootListingCache = Depends(get_listing_cache),
) -> TransferService:
    return TransferService(db, user, cache)


@router.get("/export", response_model=ExportDocument, response_model_by_alias=True)
def export_all(service: TransferService = Depends(_service)):
    """Every folder and prompt the caller owns, with an ``exportedAt`` stamp."""
    return service.export_all()


@router.post("/import", response_model=ImportResult)
def import_all(request: ImportRequest, service: TransferService = Depends(_service)):
    """Create new folders and prompts from a name-keyed import document."""
    return service.import_all(request)
