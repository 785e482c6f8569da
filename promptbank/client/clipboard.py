"""System clipboard access, injectable for tests."""

import logging
from typing import Callable, Optional

import pyperclip

logger = logging.getLogger(__name__)

CopyFunc = Callable[[str], None]


def copy_text(text: str, copy: Optional[CopyFunc] = None) -> bool:
    """Put *text* on the clipboard. Returns False when no clipboard is available."""
    copy = copy or pyperclip.copy
    try:
        copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning("Clipboard unavailable: %s", e)
        return False
    return True
