"""
Lore Book Reader Package.

Locates an open lore book on screen, verifies the capture and transcribes its
page numbers and body text using template matching and bitmap-font glyph
recognition.

The detection pipeline is importable without the GUI:

    from lorebook_reader.core import LoreBookReader
"""

__version__ = "0.1.0"
