# -*- coding: utf-8 -*-
"""
src/lorebook_reader/exceptions.py

Exception hierarchy for the Lore Book Reader.

Only the hard failures of a read cycle are raised as exceptions. Expected
outcomes such as "book not on screen" or "blank row" are returned as values.
"""


class LoreBookError(Exception):
    """Base class for all errors raised by the reader."""


class NoBookFoundError(LoreBookError):
    """A read was attempted without a located lore book position."""


class CaptureFailedError(LoreBookError):
    """The screen capture returned no pixel data for the requested region."""


class AssetLoadError(LoreBookError):
    """A calibration asset (marker image or glyph font) could not be loaded."""
