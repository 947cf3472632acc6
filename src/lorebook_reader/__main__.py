import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import LoreBookApp
from .config import config


def main():
    """
    The main entry point for the Lore Book Reader.

    Configures logging, creates the QApplication and the tray controller, and
    runs the Qt event loop until the user quits from the tray menu.
    """
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = QApplication(sys.argv)

    # The app lives in the system tray; closing the results window must not exit it.
    app.setQuitOnLastWindowClosed(False)

    lore_book_app = LoreBookApp(app)

    sys.exit(app.exec())


if __name__ == '__main__':
    main()
