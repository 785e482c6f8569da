"""Client side of export and import.

Export writes the server's snapshot verbatim as pretty-printed JSON.
Import parses an export document, re-keys each prompt from its original
folder id to that folder's name, and hands the result to the server.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Union

from .gateway import ActionResult
from .notifications import Notifier
from .state import AppState

logger = logging.getLogger(__name__)

FALLBACK_FOLDER_NAME = "Imported"


class ImportFormatError(ValueError):
    """Import text rejected before any network call."""


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"promptbank-export-{today.isoformat()}.json"


def dump_export(document: dict) -> str:
    return json.dumps(document, indent=2)


def build_import_payload(text: str) -> dict:
    """Turn export JSON into the ``{folders, prompts}`` body of an import.

    Raises:
        ImportFormatError: blank input, malformed JSON, or missing arrays.
    """
    if not text.strip():
        raise ImportFormatError("Please paste your export data")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ImportFormatError("Invalid JSON format") from e

    if not isinstance(data, dict) or "folders" not in data or "prompts" not in data:
        raise ImportFormatError("Invalid export format")
    folders, prompts = data["folders"], data["prompts"]
    if not isinstance(folders, list) or not isinstance(prompts, list):
        raise ImportFormatError("Invalid export format")

    names_by_id = {}
    for folder in folders:
        if isinstance(folder, dict) and "id" in folder and folder["id"] not in names_by_id:
            names_by_id[folder["id"]] = folder.get("name")

    return {
        "folders": [
            {"name": f.get("name"), "color": f.get("color")}
            for f in folders if isinstance(f, dict)
        ],
        "prompts": [
            {
                "folder_name": names_by_id.get(p.get("folder_id")) or FALLBACK_FOLDER_NAME,
                "title": p.get("title"),
                "content": p.get("content"),
                "tags": p.get("tags"),
            }
            for p in prompts if isinstance(p, dict)
        ],
    }


class TransferActions:
    def __init__(self, state: AppState, notifier: Notifier):
        self.state = state
        self.notifier = notifier

    def export_to(self, directory: Union[str, Path], today: Optional[date] = None) -> Optional[Path]:
        """Write the export file into *directory*. Returns its path, or None on failure."""
        result = self.state.gateway.export_all()
        if not result.ok:
            self.notifier.error(result.error.message)
            return None
        path = Path(directory) / export_filename(today)
        path.write_text(dump_export(result.data), encoding="utf-8")
        logger.info("Exported %d folders, %d prompts to %s",
                    len(result.data.get("folders", [])), len(result.data.get("prompts", [])), path)
        self.notifier.success("Export downloaded")
        return path

    def import_text(self, text: str) -> ActionResult:
        try:
            payload = build_import_payload(text)
        except ImportFormatError as e:
            self.notifier.error(str(e))
            return ActionResult.invalid(str(e))

        result = self.state.gateway.import_all(payload["folders"], payload["prompts"])
        if not result.ok:
            self.notifier.error(result.error.message)
            return result
        self.notifier.success("Import successful")
        return result
