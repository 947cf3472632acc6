# -*- coding: utf-8 -*-
"""
src/lorebook_reader/utils/clipboard_manager.py

A simple wrapper utility for interacting with the system clipboard.

Transcriptions are copied using the 'pyperclip' library. Environments
without a clipboard are reported instead of raising.
"""

import logging

import pyperclip

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """
    Copies the given text to the system clipboard.

    Args:
        text (str): The string to be copied.

    Returns:
        bool: True if the text was copied successfully, False otherwise.
    """
    try:
        pyperclip.copy(text)
        logger.info(f"Copied {len(text)} characters to the clipboard.")
        return True
    except pyperclip.PyperclipException as e:
        # Happens on systems without a clipboard mechanism (e.g. Linux without xclip/xsel).
        logger.error(f"Failed to copy text to clipboard: {e}")
        logger.warning(
            "Clipboard functionality may not be available on this system. "
            "If on Linux, please ensure 'xclip' or 'xsel' is installed."
        )
        return False
