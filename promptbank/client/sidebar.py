"""Folder sidebar: select, create, rename/recolor and delete folders."""

import logging
from typing import Optional

from .gateway import ActionResult
from .notifications import Notifier
from .state import AppState
from .views import DEFAULT_COLOR

logger = logging.getLogger(__name__)

COLORS = (
    "#ef4444", "#f97316", "#f59e0b", "#eab308", "#84cc16",
    "#22c55e", "#10b981", "#14b8a6", "#06b6d4", "#0ea5e9",
    "#3b82f6", "#6366f1", "#8b5cf6", "#a855f7", "#d946ef",
    "#ec4899", "#f43f5e",
)


class FolderSidebar:
    def __init__(self, state: AppState, notifier: Notifier):
        self.state = state
        self.notifier = notifier

    @property
    def folders(self) -> list[dict]:
        return self.state.folders

    def is_selected(self, folder_id: Optional[str]) -> bool:
        return self.state.selected_folder_id == folder_id

    def select(self, folder_id: Optional[str]) -> None:
        self.state.select_folder(folder_id)

    def create(self, name: str, color: str = DEFAULT_COLOR) -> ActionResult:
        if not name.strip():
            self.notifier.error("Folder name is required")
            return ActionResult.invalid("Folder name is required", field="name")
        result = self.state.gateway.create_folder(name, color)
        if not result.ok:
            self.notifier.error(result.error.message)
            return result
        self.notifier.success("Folder created")
        return result

    def update(self, folder_id: str, name: str, color: Optional[str] = None) -> ActionResult:
        if not name.strip():
            self.notifier.error("Folder name is required")
            return ActionResult.invalid("Folder name is required", field="name")
        fields = {"name": name}
        if color is not None:
            fields["color"] = color
        result = self.state.gateway.update_folder(folder_id, **fields)
        if not result.ok:
            self.notifier.error(result.error.message)
            return result
        self.notifier.success("Folder updated")
        return result

    def delete(self, folder_id: str) -> ActionResult:
        """Delete a folder and, through the database cascade, its prompts."""
        result = self.state.gateway.delete_folder(folder_id)
        if not result.ok:
            self.notifier.error(result.error.message)
            return result
        self.notifier.success("Folder deleted")
        self.state.folder_deleted(folder_id)
        return result
