"""Prompt API.

Thin endpoints over PromptService, scoped to the signed-in user.
"""

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from typing import List, Optional

from ..core.auth import CurrentUser, require_user
from ..database import get_db
from ..schemas.prompt import PromptCreate, PromptUpdate, PromptResponse, PromptSearchResult
from ..services.listing_cache import RootListingCache, get_listing_cache
from ..services.prompt_service import PromptService

router = APIRouter(prefix="/api/prompts", tags=["prompts"])


def _service(
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(require_user),
    cache: RootListingCache = Depends(get_listing_cache),
) -> PromptService:
    return PromptService(db, user, cache)


@router.get("", response_model=List[PromptResponse])
def list_prompts(
    folder_id: Optional[str] = Query(None),
    service: PromptService = Depends(_service),
):
    """Prompts, most recently updated first, optionally limited to one folder."""
    return service.list_prompts(folder_id)


# Fixed-path endpoint must be declared before /{prompt_id} to avoid shadowing.
@router.get("/search", response_model=List[PromptSearchResult])
def search_prompts(
    q: str = Query(""),
    service: PromptService = Depends(_service),
):
    """Case-insensitive substring search over titles and content; an empty query matches every prompt."""
    return service.search_prompts(q)


@router.post("", response_model=PromptResponse, status_code=201)
def create_prompt(data: PromptCreate, service: PromptService = Depends(_service)):
    return service.create_prompt(data)


@router.get("/{prompt_id}", response_model=PromptResponse)
def get_prompt(prompt_id: str, service: PromptService = Depends(_service)):
    return service.get_prompt(prompt_id)


@router.put("/{prompt_id}", response_model=PromptResponse)
def update_prompt(prompt_id: str, data: PromptUpdate, service: PromptService = Depends(_service)):
    return service.update_prompt(prompt_id, data)


@router.delete("/{prompt_id}", status_code=204)
def delete_prompt(prompt_id: str, service: PromptService = Depends(_service)):
    service.delete_prompt(prompt_id)
    return Response(status_code=204)
