"""Clipboard output via pyperclip."""

import logging

import pyperclip

from bwd.core.errors import ClipboardError

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> None:
    """
    Put ``text`` on the system clipboard.

    Raises:
        ClipboardError: if no clipboard mechanism is available (e.g. SSH
            without X forwarding) or the write fails
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(str(e) or "clipboard unavailable") from e
    logger.debug("Copied %d characters to the clipboard", len(text))
