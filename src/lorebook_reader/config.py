# -*- coding: utf-8 -*-
"""
src/lorebook_reader/config.py

Module for handling application configuration.

This module defines default settings for the Lore Book Reader, such as the
global hotkey and the calibration asset paths. It loads user-defined settings
from a configuration file (config.ini), creating one with default values on
the first run.

Pixel calibration (offsets, colors, row pitch) is not user configurable; it
lives in `lorebook_reader.core.layout`.
"""

import configparser
import logging
import platform
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# --- Constants ---
APP_NAME = "LoreBookReader"
DEFAULT_CONFIG_FILENAME = "config.ini"
DEFAULT_MARKER_FILENAME = "lorebook_marker.png"
DEFAULT_FONT_FILENAME = "lorebook_font.json"
DEFAULT_HOTKEY = "<alt>+1"
DEFAULT_LOG_LEVEL = "INFO"

# Assets shipped next to the package take precedence over nothing at all.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
ASSETS_PATH = PROJECT_ROOT / "assets"


def get_app_dir() -> Path:
    """
    Gets the application's data directory in a cross-platform way.

    - Windows: %APPDATA%/LoreBookReader
    - macOS: ~/Library/Application Support/LoreBookReader
    - Linux: ~/.config/LoreBookReader

    Returns:
        Path: A Path object to the application's data directory.
    """
    if platform.system() == "Windows":
        app_dir = Path.home() / "AppData" / "Roaming" / APP_NAME
    elif platform.system() == "Darwin":  # macOS
        app_dir = Path.home() / "Library" / "Application Support" / APP_NAME
    else:  # Linux and other Unix-like
        app_dir = Path.home() / ".config" / APP_NAME

    app_dir.mkdir(parents=True, exist_ok=True)
    return app_dir


class Config:
    """
    Manages application configuration by loading defaults and overriding
    them with settings from a user-specific config file.

    Args:
        app_dir (Optional[Path]): Directory holding config.ini. Defaults to
            the per-user application directory.
    """

    def __init__(self, app_dir: Optional[Path] = None):
        self.parser = configparser.ConfigParser()
        self.app_dir = app_dir if app_dir is not None else get_app_dir()
        self.config_file_path = self.app_dir / DEFAULT_CONFIG_FILENAME

        self._load_defaults()
        self._load_from_file()

    def _load_defaults(self):
        """Sets the default configuration values in the parser object."""
        self.parser["General"] = {
            "hotkey": DEFAULT_HOTKEY
        }
        self.parser["Assets"] = {
            "marker_image": str(ASSETS_PATH / DEFAULT_MARKER_FILENAME),
            "font_file": str(ASSETS_PATH / DEFAULT_FONT_FILENAME)
        }
        self.parser["Output"] = {
            "copy_to_clipboard": "True",
            "results_timeout_ms": "0"
        }
        self.parser["Logging"] = {
            "level": DEFAULT_LOG_LEVEL
        }

    def _load_from_file(self):
        """
        Loads settings from the config.ini file, overriding defaults.
        If the file doesn't exist, it will be created with default values.
        """
        if not self.config_file_path.exists():
            self._save_defaults()
        else:
            self.parser.read(self.config_file_path)

    def _save_defaults(self):
        """Saves the current (default) configuration to the config file."""
        try:
            with open(self.config_file_path, 'w') as configfile:
                configfile.write(f"# {APP_NAME} Configuration File\n")
                configfile.write("# You can edit these values. Restart the app for changes to take effect.\n\n")
                self.parser.write(configfile)
        except IOError as e:
            # Non-critical, the defaults are still in memory
            logger.error(f"Could not write to config file at {self.config_file_path}: {e}")

    # --- Properties to access settings easily and with correct types ---

    @property
    def hotkey(self) -> str:
        """The global hotkey combination that triggers a read."""
        return self.parser.get("General", "hotkey", fallback=DEFAULT_HOTKEY)

    @property
    def marker_path(self) -> Path:
        """Marker template image used to locate and verify the book."""
        return self._asset_path("marker_image", DEFAULT_MARKER_FILENAME)

    @property
    def font_path(self) -> Path:
        """JSON glyph font used for page numbers and body text."""
        return self._asset_path("font_file", DEFAULT_FONT_FILENAME)

    @property
    def copy_to_clipboard(self) -> bool:
        """Whether a transcription is copied to the clipboard."""
        return self.parser.getboolean("Output", "copy_to_clipboard", fallback=True)

    @property
    def results_timeout_ms(self) -> int:
        """Auto-close delay of the results window; 0 keeps it open."""
        return self.parser.getint("Output", "results_timeout_ms", fallback=0)

    @property
    def log_level(self) -> str:
        return self.parser.get("Logging", "level", fallback=DEFAULT_LOG_LEVEL).upper()

    def _asset_path(self, key: str, default_filename: str) -> Path:
        value = self.parser.get("Assets", key, fallback=str(ASSETS_PATH / default_filename))
        path = Path(value).expanduser()
        # Relative paths are resolved against the app directory.
        return path if path.is_absolute() else self.app_dir / path


# --- Singleton Instance ---
# Other modules can import this instance directly.
# e.g., from lorebook_reader.config import config
config = Config()
