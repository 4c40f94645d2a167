from __future__ import annotations

"""
Clipboard Access.

Thin wrapper around pyperclip so the CLI can plant a tree copied straight
from a terminal, chat window or README.
"""

import logging

import pyperclip

from treeseed.domain.errors import InputSourceError

logger = logging.getLogger(__name__)


def paste_text() -> str:
    """
    Return the current clipboard text.

    Raises:
        InputSourceError: If no clipboard mechanism is available or the
                          clipboard does not hold text.
    """
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        raise InputSourceError("clipboard", str(e)) from e

    if not isinstance(text, str):
        raise InputSourceError("clipboard", "clipboard does not contain text")

    logger.debug(f"Read {len(text)} characters from the clipboard.")
    return text
