"""Read-only derivations over the folder and prompt lists held by AppState.

Folders and prompts are the plain dicts returned by the API. Nothing here
re-sorts: prompts keep server order (most recently updated first) and
folders keep creation order.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_COLOR = "#6366f1"
UNKNOWN_FOLDER = "Unknown"
TAG_PREVIEW_LIMIT = 2

EMPTY_NO_FOLDERS = "Create a folder first"
EMPTY_NO_PROMPTS = "No prompts found"


def matches_search(prompt: dict, query: str) -> bool:
    """Case-insensitive substring match on title or content. Empty matches all."""
    if not query:
        return True
    needle = query.lower()
    return needle in (prompt.get("title") or "").lower() or needle in (prompt.get("content") or "").lower()


def filter_prompts(prompts: list[dict], query: str = "", folder_id: Optional[str] = None) -> list[dict]:
    return [
        p for p in prompts
        if matches_search(p, query) and (folder_id is None or p.get("folder_id") == folder_id)
    ]


def filter_folders(folders: list[dict], query: str = "") -> list[dict]:
    needle = query.lower()
    return [f for f in folders if needle in (f.get("name") or "").lower()]


def find_by_id(items: list[dict], item_id: Optional[str]) -> Optional[dict]:
    if item_id is None:
        return None
    for item in items:
        if item.get("id") == item_id:
            return item
    return None


def folder_label(folders: list[dict], folder_id: Optional[str]) -> tuple[str, str]:
    """(name, color) for a folder id, falling back to Unknown / default color."""
    folder = find_by_id(folders, folder_id)
    if folder is None:
        return UNKNOWN_FOLDER, DEFAULT_COLOR
    return folder.get("name") or UNKNOWN_FOLDER, folder.get("color") or DEFAULT_COLOR


def tag_preview(tags: Optional[list[str]], limit: int = TAG_PREVIEW_LIMIT) -> tuple[list[str], int]:
    tags = list(tags or [])
    return tags[:limit], max(0, len(tags) - limit)


@dataclass(frozen=True)
class PromptRow:
    id: str
    title: str
    folder_name: str
    folder_color: str
    tags: list[str]
    more_tags: int
    selected: bool

    @property
    def overflow_label(self) -> str:
        return f"+{self.more_tags}" if self.more_tags else ""


def prompt_rows(
    prompts: list[dict],
    folders: list[dict],
    query: str = "",
    folder_id: Optional[str] = None,
    selected_prompt_id: Optional[str] = None,
) -> list[PromptRow]:
    rows = []
    for prompt in filter_prompts(prompts, query, folder_id):
        name, color = folder_label(folders, prompt.get("folder_id"))
        shown, more = tag_preview(prompt.get("tags"))
        rows.append(PromptRow(
            id=prompt["id"],
            title=prompt.get("title", ""),
            folder_name=name,
            folder_color=color,
            tags=shown,
            more_tags=more,
            selected=prompt["id"] == selected_prompt_id,
        ))
    return rows


def empty_state_message(folders: list[dict], rows: list) -> Optional[str]:
    """Message for an empty list, or None when there is something to show."""
    if rows:
        return None
    if not folders:
        return EMPTY_NO_FOLDERS
    return EMPTY_NO_PROMPTS
