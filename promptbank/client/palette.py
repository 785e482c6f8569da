"""Command palette over the full in-memory folder and prompt lists."""

import logging
from dataclasses import dataclass
from typing import Optional

from . import views
from .clipboard import CopyFunc, copy_text
from .notifications import Notifier
from .state import AppState

logger = logging.getLogger(__name__)

MAX_PROMPT_RESULTS = 10

ACTION_NEW_PROMPT = "New Prompt"
ACTION_VIEW_ALL = "View All Prompts"


@dataclass(frozen=True)
class PaletteAction:
    label: str
    enabled: bool = True


@dataclass
class PaletteResults:
    actions: list[PaletteAction]
    folders: list[dict]
    prompts: list[dict]
    more_prompts: int

    @property
    def more_label(self) -> str:
        return f"+{self.more_prompts} more" if self.more_prompts else ""

    @property
    def empty(self) -> bool:
        return not self.folders and not self.prompts


class CommandPalette:
    """Search text resets whenever the palette opens or closes.

    Results ignore the sidebar's folder selection.
    """

    def __init__(self, state: AppState, notifier: Notifier, clipboard: Optional[CopyFunc] = None):
        self.state = state
        self.notifier = notifier
        self._clipboard = clipboard
        self.query = ""

    @property
    def is_open(self) -> bool:
        return self.state.palette_open

    def open(self) -> None:
        self.query = ""
        self.state.open_palette()

    def close(self) -> None:
        self.query = ""
        self.state.close_palette()

    def set_query(self, text: str) -> None:
        self.query = text

    def results(self) -> PaletteResults:
        prompts = views.filter_prompts(self.state.prompts, self.query)
        return PaletteResults(
            actions=[
                PaletteAction(ACTION_NEW_PROMPT, enabled=bool(self.state.folders)),
                PaletteAction(ACTION_VIEW_ALL),
            ],
            folders=views.filter_folders(self.state.folders, self.query),
            prompts=prompts[:MAX_PROMPT_RESULTS],
            more_prompts=max(0, len(prompts) - MAX_PROMPT_RESULTS),
        )

    def run_action(self, label: str) -> bool:
        if label == ACTION_NEW_PROMPT:
            if not self.state.folders:
                return False
            self.state.new_prompt()
        elif label == ACTION_VIEW_ALL:
            self.state.select_folder(None)
        else:
            raise ValueError(f"Unknown palette action: {label}")
        self.close()
        return True

    def select_folder(self, folder_id: str) -> None:
        self.state.select_folder(folder_id)
        self.close()

    def select_prompt(self, prompt_id: str) -> None:
        self.state.select_prompt(prompt_id)
        self.close()

    def copy_prompt(self, prompt: dict) -> bool:
        copied = copy_text(prompt.get("content", ""), self._clipboard)
        if copied:
            self.notifier.success(f'Copied "{prompt.get("title", "")}" to clipboard')
        else:
            self.notifier.error("Could not copy to clipboard")
        self.close()
        return copied
