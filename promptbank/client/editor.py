"""Prompt editor: edit buffer, manual save, debounced auto-save.

Modes:
    EMPTY     nothing selected
    CREATING  buffer for a prompt that does not exist yet
    EDITING   buffer for an existing prompt; edits auto-save after one
              second of inactivity

The buffer is guarded by a lock because auto-save fires on the timer's
thread. A successful auto-save revalidates, so ``AppState.refresh`` and
every state subscriber also run on that thread; a UI toolkit that must
touch widgets on its own thread should pass a ``timer_factory`` whose
timers post the callback to that thread. Manual save and a pending
auto-save are independent; whichever reaches the server last wins.
"""

import logging
import threading
from enum import Enum
from typing import Optional

from .clipboard import CopyFunc, copy_text
from .debounce import Debouncer, TimerFactory
from .gateway import ActionResult
from .notifications import Notifier
from .state import AppState

logger = logging.getLogger(__name__)

AUTOSAVE_DELAY = 1.0
TITLE_MAX_LENGTH = 200
TAG_COMMIT_KEYS = ("Enter", ",")


class Mode(str, Enum):
    EMPTY = "empty"
    CREATING = "creating"
    EDITING = "editing"


class PromptEditor:
    def __init__(
        self,
        state: AppState,
        notifier: Notifier,
        clipboard: Optional[CopyFunc] = None,
        timer_factory: Optional[TimerFactory] = None,
        autosave_delay: float = AUTOSAVE_DELAY,
    ):
        self.state = state
        self.notifier = notifier
        self._clipboard = clipboard
        self._lock = threading.RLock()
        self._debouncer = Debouncer(autosave_delay, self._autosave, timer_factory)

        self.mode = Mode.EMPTY
        self.prompt_id: Optional[str] = None
        self.title = ""
        self.content = ""
        self.tags: list[str] = []
        self.folder_id: Optional[str] = None
        self.tag_input = ""
        self.has_changes = False
        self.confirming_delete = False
        self._edits = 0

        state.subscribe(lambda _: self.sync())
        self.sync()

    # ----- loading ---------------------------------------------------------

    def sync(self) -> None:
        """Follow the shell's selection. A reload happens only on a different prompt."""
        prompt = self.state.selected_prompt
        if prompt is not None:
            if self.mode != Mode.EDITING or self.prompt_id != prompt["id"]:
                self.load(prompt)
        elif self.state.is_creating_new:
            if self.mode != Mode.CREATING:
                self.start_new()
        elif self.mode != Mode.EMPTY:
            self.clear()

    def load(self, prompt: dict) -> None:
        self._debouncer.cancel()
        with self._lock:
            self.mode = Mode.EDITING
            self.prompt_id = prompt["id"]
            self.title = prompt.get("title", "")
            self.content = prompt.get("content", "")
            self.tags = list(prompt.get("tags") or [])
            self.folder_id = prompt.get("folder_id")
            self._reset_flags()

    def start_new(self) -> None:
        self._debouncer.cancel()
        folders = self.state.folders
        with self._lock:
            self.mode = Mode.CREATING
            self.prompt_id = None
            self.title = ""
            self.content = ""
            self.tags = []
            self.folder_id = self.state.selected_folder_id or (folders[0]["id"] if folders else None)
            self._reset_flags()

    def clear(self) -> None:
        self._debouncer.cancel()
        with self._lock:
            self.mode = Mode.EMPTY
            self.prompt_id = None
            self.title = ""
            self.content = ""
            self.tags = []
            self.folder_id = None
            self._reset_flags()

    def _reset_flags(self) -> None:
        self.tag_input = ""
        self.has_changes = False
        self.confirming_delete = False

    # ----- field edits -----------------------------------------------------

    def _edited(self) -> None:
        # Caller holds the lock.
        self.has_changes = True
        self._edits += 1
        if self.mode == Mode.EDITING:
            self._debouncer.trigger()

    def set_title(self, value: str) -> None:
        with self._lock:
            self.title = value[:TITLE_MAX_LENGTH]
            self._edited()

    def set_content(self, value: str) -> None:
        with self._lock:
            self.content = value
            self._edited()

    def set_folder(self, folder_id: Optional[str]) -> None:
        with self._lock:
            self.folder_id = folder_id
            self._edited()

    def set_tag_input(self, value: str) -> None:
        self.tag_input = value

    def handle_tag_key(self, key: str) -> bool:
        """Commit the tag input on Enter or comma. Returns True if the key was consumed."""
        if key not in TAG_COMMIT_KEYS:
            return False
        with self._lock:
            tag = self.tag_input.strip().lower()
            if tag and tag not in self.tags:
                self.tags = self.tags + [tag]
                self._edited()
            self.tag_input = ""
        return True

    def remove_tag(self, tag: str) -> None:
        with self._lock:
            self.tags = [t for t in self.tags if t != tag]
            self._edited()

    # ----- saving ----------------------------------------------------------

    def _validate(self) -> Optional[ActionResult]:
        if not self.title.strip():
            return ActionResult.invalid("Title is required", field="title")
        if not self.content.strip():
            return ActionResult.invalid("Content is required", field="content")
        if not self.folder_id:
            return ActionResult.invalid("Please select a folder", field="folder_id")
        return None

    def save(self) -> ActionResult:
        """Manual save: create in CREATING mode, update in EDITING mode."""
        with self._lock:
            if self.mode == Mode.EMPTY:
                return ActionResult.invalid("Nothing to save")
            invalid = self._validate()
            if invalid is not None:
                self.notifier.error(invalid.error.message)
                return invalid
            mode, prompt_id = self.mode, self.prompt_id
            fields = self._buffer()

        if mode == Mode.CREATING:
            result = self.state.gateway.create_prompt(**fields)
            success = "Prompt created"
        else:
            result = self.state.gateway.update_prompt(prompt_id, **fields)
            success = "Prompt saved"

        if not result.ok:
            self.notifier.error(result.error.message)
            return result

        self.notifier.success(success)
        with self._lock:
            self.has_changes = False
        self.state.prompt_saved()
        return result

    def _buffer(self) -> dict:
        return {
            "folder_id": self.folder_id,
            "title": self.title,
            "content": self.content,
            "tags": list(self.tags),
        }

    def _autosave(self) -> None:
        with self._lock:
            if self.mode != Mode.EDITING or not self.has_changes:
                return
            if not self.title.strip() or not self.content.strip():
                return
            prompt_id = self.prompt_id
            fields = self._buffer()
            edits = self._edits

        result = self.state.gateway.update_prompt(prompt_id, **fields)
        if not result.ok:
            logger.warning("Auto-save of prompt %s failed: %s", prompt_id, result.error.message)
            return

        with self._lock:
            # Later edits re-armed the timer and stay unsaved.
            if self.prompt_id == prompt_id and self._edits == edits:
                self.has_changes = False

    @property
    def autosave_pending(self) -> bool:
        return self._debouncer.pending

    # ----- delete / cancel / copy -----------------------------------------

    def request_delete(self) -> None:
        if self.mode == Mode.EDITING:
            self.confirming_delete = True

    def cancel_delete(self) -> None:
        self.confirming_delete = False

    def confirm_delete(self) -> ActionResult:
        if self.mode != Mode.EDITING or not self.confirming_delete:
            return ActionResult.invalid("Nothing to delete")
        result = self.state.gateway.delete_prompt(self.prompt_id)
        if not result.ok:
            self.notifier.error(result.error.message)
            return result
        self.notifier.success("Prompt deleted")
        self._debouncer.cancel()
        self.confirming_delete = False
        self.state.prompt_deleted()
        return result

    def cancel(self) -> None:
        if self.mode == Mode.CREATING:
            self.state.cancel_new_prompt()

    def copy(self) -> bool:
        if not copy_text(self.content, self._clipboard):
            self.notifier.error("Could not copy to clipboard")
            return False
        self.notifier.success("Copied to clipboard")
        return True
