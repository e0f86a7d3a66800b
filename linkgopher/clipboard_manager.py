"""
clipboard_manager.py

Wraps the system clipboard behind a small read/write interface so the
conversion code never talks to pyperclip directly.
"""

import logging
from typing import Protocol

import pyperclip

logger = logging.getLogger(__name__)

# the subprocess backends (xclip, xsel, pbpaste) decode bytes and spawn tools
_CLIPBOARD_ERRORS = (pyperclip.PyperclipException, UnicodeDecodeError, OSError)


class ClipboardAccessError(Exception):
    """Raised when the clipboard can't be read or written."""


class Clipboard(Protocol):
    def read_text(self) -> str:
        ...

    def write_text(self, text: str) -> None:
        ...


class PyperclipClipboard:
    """
    Clipboard backed by pyperclip.

    # ASSUMPTION: on Linux a copy/paste mechanism (xclip, xsel, wl-clipboard)
    # is installed. pyperclip raises PyperclipException otherwise.
    """

    def read_text(self) -> str:
        try:
            text = pyperclip.paste()
        except _CLIPBOARD_ERRORS as e:
            logger.debug("Clipboard read failed", exc_info=True)
            raise ClipboardAccessError(str(e)) from e
        # some backends hand back None for an empty clipboard
        return text or ""

    def write_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except _CLIPBOARD_ERRORS as e:
            logger.debug("Clipboard write failed", exc_info=True)
            raise ClipboardAccessError(str(e)) from e
