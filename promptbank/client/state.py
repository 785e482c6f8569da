"""Application state shell.

AppState is the single owner of the in-memory folder and prompt lists.
It seeds them from the workspace snapshot and re-seeds whenever the
gateway reports a successful mutation. Everything else (views, editor,
palette, sidebar) reads from it and pushes changes back through its
methods; subscribers are called after every re-seed or selection change.

Re-seeds can arrive on an auto-save timer thread, so the lists are swapped
under a lock and subscribers are called outside it.
"""

import logging
import threading
from typing import Callable, Optional

from . import views
from .gateway import ActionResult, ActionsClient

logger = logging.getLogger(__name__)

SHORTCUT_PALETTE = "k"
SHORTCUT_NEW_PROMPT = "n"
SHORTCUT_FOCUS_SEARCH = "/"


class AppState:
    def __init__(self, gateway: ActionsClient):
        self.gateway = gateway
        self.user: Optional[dict] = None
        self.folders: list[dict] = []
        self.prompts: list[dict] = []
        self.revision = 0

        self.selected_folder_id: Optional[str] = None
        self.selected_prompt_id: Optional[str] = None
        self.is_creating_new = False
        self.search_query = ""
        self.palette_open = False
        self.search_focused = False

        self._listeners: list[Callable[["AppState"], None]] = []
        self._lock = threading.RLock()
        gateway.on_revalidate(self.refresh)

    # ----- seeding ---------------------------------------------------------

    def subscribe(self, listener: Callable[["AppState"], None]) -> None:
        self._listeners.append(listener)

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def seed(self, snapshot: dict) -> None:
        with self._lock:
            self.user = snapshot.get("user")
            self.folders = list(snapshot.get("folders") or [])
            self.prompts = list(snapshot.get("prompts") or [])
            self.revision = snapshot.get("revision", self.revision)
        self._changed()

    def refresh(self) -> ActionResult:
        """Reload the workspace snapshot. Prior state is kept on failure."""
        result = self.gateway.get_workspace()
        if result.ok:
            self.seed(result.data)
        else:
            logger.warning("Workspace refresh failed: %s", result.error.message)
        return result

    def is_stale(self) -> bool:
        """True when the server's listing revision moved past the seeded one."""
        result = self.gateway.get_revision()
        return result.ok and result.data.get("revision") != self.revision

    # ----- derived ---------------------------------------------------------

    @property
    def selected_prompt(self) -> Optional[dict]:
        return views.find_by_id(self.prompts, self.selected_prompt_id)

    def visible_prompts(self) -> list[dict]:
        return views.filter_prompts(self.prompts, self.search_query, self.selected_folder_id)

    def rows(self) -> list[views.PromptRow]:
        return views.prompt_rows(
            self.prompts,
            self.folders,
            self.search_query,
            self.selected_folder_id,
            self.selected_prompt_id,
        )

    def empty_message(self) -> Optional[str]:
        return views.empty_state_message(self.folders, self.rows())

    # ----- selection -------------------------------------------------------

    def select_folder(self, folder_id: Optional[str]) -> None:
        self.selected_folder_id = folder_id
        self._changed()

    def select_prompt(self, prompt_id: Optional[str]) -> None:
        self.selected_prompt_id = prompt_id
        self.is_creating_new = False
        self._changed()

    def set_search(self, query: str) -> None:
        self.search_query = query
        self._changed()

    def new_prompt(self) -> bool:
        """Enter creation mode. Returns False (no-op) when there are no folders."""
        if not self.folders:
            return False
        self.selected_prompt_id = None
        self.is_creating_new = True
        self._changed()
        return True

    def prompt_saved(self) -> None:
        self.is_creating_new = False
        self._changed()

    def prompt_deleted(self) -> None:
        self.selected_prompt_id = None
        self.is_creating_new = False
        self._changed()

    def cancel_new_prompt(self) -> None:
        self.is_creating_new = False
        self.selected_prompt_id = None
        self._changed()

    def folder_deleted(self, folder_id: str) -> None:
        if self.selected_folder_id == folder_id:
            self.select_folder(None)

    def signed_out(self) -> None:
        with self._lock:
            self.user = None
            self.folders = []
            self.prompts = []
            self.revision = 0
        self.selected_folder_id = None
        self.selected_prompt_id = None
        self.is_creating_new = False
        self.search_query = ""
        self.palette_open = False
        self._changed()

    # ----- palette / keyboard ---------------------------------------------

    def open_palette(self) -> None:
        self.palette_open = True

    def close_palette(self) -> None:
        self.palette_open = False

    def focus_search(self) -> None:
        self.search_focused = True

    def blur_search(self) -> None:
        self.search_focused = False

    def handle_key(self, key: str, ctrl: bool = False, meta: bool = False) -> bool:
        """Dispatch a keyboard chord. Returns True when the chord was consumed."""
        if not (ctrl or meta):
            return False
        key = key.lower()
        if key == SHORTCUT_PALETTE:
            self.open_palette()
            return True
        if key == SHORTCUT_NEW_PROMPT:
            self.new_prompt()
            return True
        if key == SHORTCUT_FOCUS_SEARCH:
            self.focus_search()
            return True
        return False
