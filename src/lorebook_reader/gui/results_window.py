# -*- coding: utf-8 -*-
"""
src/lorebook_reader/gui/results_window.py

Defines the ResultsWindow widget that shows a transcribed lore book.

The window appears beside the book on screen, never covering it, so the
player can turn the page and read again while the previous transcription is
still visible.
"""

from typing import Optional

from PyQt6.QtCore import QRect, Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import QApplication, QFrame, QLabel, QTextBrowser, QVBoxLayout, QWidget

WINDOW_WIDTH = 420
WINDOW_HEIGHT = 360
WINDOW_MARGIN = 10  # Pixels between the book and the window


class ResultsWindow(QWidget):
    """
    A frameless, stay-on-top window displaying one transcription.

    Args:
        book_html (str): Rich-text rendering of the book (see core.formatter.format_html).
        book_rect (Optional[QRect]): Screen geometry of the book, used for positioning.
        copied (bool): Whether the text was copied to the clipboard.
        timeout_ms (int): Auto-close delay; 0 keeps the window open until clicked.
    """

    def __init__(
        self,
        book_html: str,
        book_rect: Optional[QRect] = None,
        copied: bool = False,
        timeout_ms: int = 0,
        parent: QWidget = None
    ):
        super().__init__(parent)
        self.book_html = book_html
        self.book_rect = book_rect
        self.copied = copied

        self._setup_window_properties()
        self._setup_ui()
        self._position_window()

        if timeout_ms > 0:
            self.close_timer = QTimer(self)
            self.close_timer.setSingleShot(True)
            self.close_timer.timeout.connect(self.close)
            self.close_timer.start(timeout_ms)

    def _setup_window_properties(self):
        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint |
            Qt.WindowType.WindowStaysOnTopHint |
            Qt.WindowType.Tool
        )
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        self.setStyleSheet("""
            QWidget {
                background-color: #2E2E2E;
                color: #E0E0E0;
                border: 1px solid #555555;
                border-radius: 5px;
                font-family: serif;
            }
        """)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 12)
        layout.setSpacing(5)

        text_view = QTextBrowser()
        text_view.setHtml(self.book_html)
        text_view.setFrameShape(QFrame.Shape.NoFrame)
        layout.addWidget(text_view)

        hint = "(Copied to clipboard. Esc or double-click to close)" if self.copied \
            else "(Esc or double-click to close)"
        hint_label = QLabel(hint)
        hint_font = QFont()
        hint_font.setPointSize(8)
        hint_font.setItalic(True)
        hint_label.setFont(hint_font)
        hint_label.setStyleSheet("color: #AAAAAA; border: none;")
        layout.addWidget(hint_label)

        self.setLayout(layout)

    def _position_window(self):
        """
        Places the window to the right of the book, or to its left when there
        is no room, keeping it inside the screen.
        """
        screen_geometry = QApplication.primaryScreen().availableGeometry()
        if self.book_rect is None:
            self.move(screen_geometry.center() - self.rect().center())
            return

        window_size = self.size()
        pos_x = self.book_rect.right() + WINDOW_MARGIN
        if pos_x + window_size.width() > screen_geometry.right():
            pos_x = self.book_rect.left() - window_size.width() - WINDOW_MARGIN
        if pos_x < screen_geometry.left():
            pos_x = screen_geometry.left()

        pos_y = self.book_rect.top()
        if pos_y + window_size.height() > screen_geometry.bottom():
            pos_y = screen_geometry.bottom() - window_size.height()
        if pos_y < screen_geometry.top():
            pos_y = screen_geometry.top()

        self.move(pos_x, pos_y)

    def keyPressEvent(self, event: QKeyEvent):
        if event.key() == Qt.Key.Key_Escape:
            self.close()
        else:
            super().keyPressEvent(event)

    def mouseDoubleClickEvent(self, event):
        self.close()
        event.accept()
