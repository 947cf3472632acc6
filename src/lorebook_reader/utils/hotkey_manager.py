# -*- coding: utf-8 -*-
"""
src/lorebook_reader/utils/hotkey_manager.py

Global hotkey listener built on 'pynput'.

The listener runs in pynput's own daemon thread. The callback is invoked on
that thread, so GUI code should only emit a Qt signal from it.
"""

import logging
from typing import Callable, Optional

from pynput import keyboard

logger = logging.getLogger(__name__)


class HotkeyManager:
    """
    Manages a global hotkey listener in a separate thread.

    Attributes:
        hotkey_str (str): The hotkey in pynput notation (e.g., '<alt>+1').
        callback (Callable[[], None]): The function to call when the hotkey is pressed.
        listener (Optional[keyboard.GlobalHotKeys]): The pynput listener instance.
    """

    def __init__(self, hotkey_str: str, callback: Callable[[], None]):
        self.hotkey_str = hotkey_str
        self.callback = callback
        self.listener: Optional[keyboard.GlobalHotKeys] = None
        logger.info(f"Initializing hotkey manager for combination: {self.hotkey_str}")

    def _on_activate(self):
        logger.debug(f"Hotkey '{self.hotkey_str}' activated.")
        try:
            self.callback()
        except Exception as e:
            # An exception here would kill the listener thread.
            logger.error(f"Error executing hotkey callback: {e}", exc_info=True)

    def start(self) -> bool:
        """
        Starts the hotkey listener thread, restarting it if already running.

        Returns:
            bool: True if the listener is running.
        """
        if self.listener and self.listener.is_alive():
            logger.warning("Hotkey listener is already running. Stopping it before starting a new one.")
            self.stop()

        try:
            self.listener = keyboard.GlobalHotKeys({self.hotkey_str: self._on_activate})
            self.listener.start()
            logger.info(f"Global hotkey listener started for '{self.hotkey_str}'.")
            return True
        except ValueError as e:
            logger.error(f"Invalid hotkey '{self.hotkey_str}': {e}")
            self.listener = None
            return False

    def stop(self):
        """Stops the hotkey listener thread if it is running."""
        if self.listener and self.listener.is_alive():
            logger.info("Stopping global hotkey listener.")
            self.listener.stop()
            self.listener = None
        else:
            logger.debug("Attempted to stop listener, but it was not running.")
