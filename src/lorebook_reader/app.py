# -*- coding: utf-8 -*-
"""
src/lorebook_reader/app.py

Core application controller for the Lore Book Reader.

This module contains `LoreBookApp`, which owns the system tray icon and the
global hotkey listener and runs one locate-and-read cycle each time the user
asks for it. Reading is never triggered on a timer: nothing de-duplicates
repeated reads of an unchanged page.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, QRect, pyqtSignal
from PyQt6.QtGui import QAction, QIcon
from PyQt6.QtWidgets import QApplication, QMenu, QSystemTrayIcon

from .capture import ScreenCapturer
from .config import APP_NAME, ASSETS_PATH, Config, config
from .core.book_reader import LoreBookReader
from .core.formatter import format_html, format_text
from .core.glyph_reader import load_font
from .core.models import LoreBook
from .core.pixels import load_image_rgba
from .exceptions import AssetLoadError, LoreBookError
from .gui.results_window import ResultsWindow
from .utils.clipboard_manager import copy_to_clipboard
from .utils.hotkey_manager import HotkeyManager

logger = logging.getLogger(__name__)

ICON_FILE = ASSETS_PATH / "icon.png"


class LoreBookApp(QObject):
    """
    The main application controller. Manages the tray icon, hotkey and read workflow.
    """
    # Emitted from the hotkey thread; the read itself runs on the GUI thread.
    trigger_read = pyqtSignal()

    def __init__(self, app: QApplication, app_config: Config = config):
        super().__init__()
        self.app = app
        self.config = app_config
        self.results_window: Optional[ResultsWindow] = None

        self.capturer = ScreenCapturer()
        self.reader = self.load_reader()

        self.setup_tray_icon()

        self.trigger_read.connect(self.read_lore)
        self.hotkey_manager = HotkeyManager(self.config.hotkey, self.trigger_read.emit)
        self.hotkey_manager.start()

    def load_reader(self) -> Optional[LoreBookReader]:
        """Loads the calibration assets and builds the reader, or None if they are missing."""
        try:
            marker = load_image_rgba(self.config.marker_path)
            font = load_font(self.config.font_path)
        except AssetLoadError as e:
            logger.error(f"Lore book reader disabled: {e}")
            return None
        return LoreBookReader(marker, font, self.capturer)

    def setup_tray_icon(self):
        """Creates and configures the system tray icon and its menu."""
        self.tray_icon = QSystemTrayIcon()

        if ICON_FILE.exists():
            self.tray_icon.setIcon(QIcon(str(ICON_FILE)))
        else:
            logger.warning(f"Icon file not found at {ICON_FILE}")
            self.tray_icon.setIcon(QIcon.fromTheme("accessories-text-editor"))

        self.tray_icon.setToolTip(f"{APP_NAME} - Press {self.config.hotkey} to read a lore book")

        menu = QMenu()

        read_action = QAction(f"Read Lore Book ({self.config.hotkey})", self.app)
        read_action.triggered.connect(self.read_lore)
        menu.addAction(read_action)

        menu.addSeparator()

        quit_action = QAction("Quit", self.app)
        quit_action.triggered.connect(self.quit_app)
        menu.addAction(quit_action)

        self.tray_icon.setContextMenu(menu)
        self.tray_icon.show()

        if self.reader is None:
            self.tray_icon.showMessage(
                f"{APP_NAME} Error",
                f"Could not load the calibration assets ({self.config.marker_path.name}, "
                f"{self.config.font_path.name}). Check {self.config.config_file_path}.",
                QSystemTrayIcon.MessageIcon.Critical
            )

    def read_lore(self):
        """Runs one locate-and-read cycle and shows the result."""
        if self.reader is None:
            logger.warning("Cannot read: calibration assets are not loaded.")
            return

        try:
            book = self.reader.scan()
        except LoreBookError as e:
            logger.error(f"Reading the lore book failed: {e}")
            self.tray_icon.showMessage(
                "Read Failed", str(e), QSystemTrayIcon.MessageIcon.Warning
            )
            return

        if book is None:
            self.tray_icon.showMessage(
                "No Lore Book Found",
                "Open a lore book in game and make sure it is fully visible.",
                QSystemTrayIcon.MessageIcon.Information
            )
            return

        self.show_results(book)

    def show_results(self, book: LoreBook):
        """Copies the transcription (if enabled) and displays it next to the book."""
        copied = False
        if self.config.copy_to_clipboard:
            copied = copy_to_clipboard(format_text(book))

        book_rect = None
        if self.reader.pos is not None:
            monitor = self.capturer.monitor
            pos = self.reader.pos
            book_rect = QRect(monitor["left"] + pos.x, monitor["top"] + pos.y, pos.width, pos.height)

        if self.results_window is not None:
            self.results_window.close()
        window = ResultsWindow(
            format_html(book),
            book_rect=book_rect,
            copied=copied,
            timeout_ms=self.config.results_timeout_ms,
        )
        window.destroyed.connect(lambda *_: self._on_results_closed(window))
        self.results_window = window
        window.show()

    def _on_results_closed(self, window: ResultsWindow):
        if self.results_window is window:
            self.results_window = None

    def quit_app(self):
        """Stops the hotkey listener and quits the application."""
        logger.info(f"Quitting {APP_NAME}...")
        self.hotkey_manager.stop()
        self.capturer.close()
        self.tray_icon.hide()
        self.app.quit()
