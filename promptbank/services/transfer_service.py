"""Export and import of a user's whole prompt library.

Export is a verbatim snapshot of every owned folder and prompt. Import
re-creates folders first, remembering ``name -> new id`` (a repeated name
maps to the folder created last), then files each prompt under the
folder its ``folder_name`` resolves to. Prompts whose folder does not
resolve are skipped. Rows are written one at a time with no rollback, so
a failure part-way leaves what was already written; failed rows are
logged and skipped rather than reported. Importing the same document
twice creates everything twice.
"""

import logging
from datetime import datetime, timezone

import pydantic
from sqlalchemy.orm import Session

from ..core.auth import CurrentUser
from ..exceptions import PromptbankError
from ..schemas.folder import FolderCreate, FolderResponse
from ..schemas.prompt import PromptCreate, PromptResponse
from ..schemas.transfer import ExportDocument, ImportRequest, ImportResult
from .folder_service import FolderService
from .listing_cache import RootListingCache
from .prompt_service import PromptService

logger = logging.getLogger(__name__)


class TransferService:
    """Build export documents and apply import requests."""

    def __init__(self, db: Session, user: CurrentUser, cache: RootListingCache):
        self.user = user
        self.cache = cache
        self.folders = FolderService(db, user, cache)
        self.prompts = PromptService(db, user, cache)

    def export_all(self) -> ExportDocument:
        folders = self.folders.list_folders()
        prompts = self.prompts.list_prompts()
        logger.info(
            "Export built",
            extra={"user_id": self.user.id, "folders": len(folders), "prompts": len(prompts)},
        )
        return ExportDocument(
            exported_at=datetime.now(timezone.utc),
            folders=[FolderResponse.model_validate(f) for f in folders],
            prompts=[PromptResponse.model_validate(p) for p in prompts],
        )

    def import_all(self, request: ImportRequest) -> ImportResult:
        folder_ids: dict[str, str] = {}
        folders_created = 0
        for row in request.folders:
            try:
                folder = self.folders.create_folder(
                    FolderCreate(name=row.name, color=row.color), revalidate=False
                )
            except (pydantic.ValidationError, PromptbankError) as e:
                logger.warning("Skipping folder during import: %s", e, extra={"user_id": self.user.id})
                continue
            folder_ids[row.name] = folder.id
            folders_created += 1

        prompts_created = 0
        prompts_skipped = 0
        for row in request.prompts:
            folder_name = row.folder_name if isinstance(row.folder_name, str) else None
            folder_id = folder_ids.get(folder_name)
            if folder_id is None:
                prompts_skipped += 1
                continue
            try:
                self.prompts.create_prompt(
                    PromptCreate(
                        folder_id=folder_id,
                        title=row.title,
                        content=row.content,
                        tags=row.tags or [],
                    ),
                    revalidate=False,
                )
            except (pydantic.ValidationError, PromptbankError) as e:
                logger.warning("Skipping prompt during import: %s", e, extra={"user_id": self.user.id})
                prompts_skipped += 1
                continue
            prompts_created += 1

        self.cache.revalidate(self.user.id)
        logger.info(
            "Import applied",
            extra={
                "user_id": self.user.id,
                "folders_created": folders_created,
                "prompts_created": prompts_created,
                "prompts_skipped": prompts_skipped,
            },
        )
        return ImportResult(
            folders_created=folders_created,
            prompts_created=prompts_created,
            prompts_skipped=prompts_skipped,
        )
