"""Client core: state shell, views, editor, palette and gateway to the API."""

from .gateway import ActionsClient, ActionResult, ActionError, ErrorKind
from .notifications import Notifier
from .state import AppState
from .editor import PromptEditor, Mode
from .palette import CommandPalette
from .sidebar import FolderSidebar
from .auth import AuthForms
from .transfer import TransferActions

__all__ = [
    "ActionsClient",
    "ActionResult",
    "ActionError",
    "ErrorKind",
    "Notifier",
    "AppState",
    "PromptEditor",
    "Mode",
    "CommandPalette",
    "FolderSidebar",
    "AuthForms",
    "TransferActions",
]
