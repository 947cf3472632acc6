# -*- coding: utf-8 -*-
"""
src/lorebook_reader/capture.py

Screen capture backed by the 'mss' library.

Coordinates are relative to the captured monitor (the primary monitor by
default), so a rectangle located on a full-screen capture can be captured
again directly. All images are returned as RGBA NumPy arrays.
"""

import logging
from typing import Optional

import mss
import mss.exception
import numpy as np

from .core.models import Rect
from .core.pixels import bgra_to_rgba
from .exceptions import CaptureFailedError

logger = logging.getLogger(__name__)


class ScreenCapturer:
    """
    Grabs the full monitor or a region of it.

    Args:
        monitor_index (int): Index into `mss.mss().monitors`; 1 is the primary monitor.
    """

    def __init__(self, monitor_index: int = 1):
        self.monitor_index = monitor_index
        # mss instance for screen capturing, reused between grabs
        self.sct = mss.mss()

    @property
    def monitor(self) -> dict:
        return self.sct.monitors[self.monitor_index]

    def capture_full_screen(self) -> np.ndarray:
        """
        Captures the whole monitor.

        Raises:
            CaptureFailedError: mss could not grab the screen.
        """
        try:
            sct_img = self.sct.grab(self.monitor)
        except mss.exception.ScreenShotError as e:
            logger.error(f"Failed to capture the screen: {e}")
            raise CaptureFailedError(f"Failed to capture the screen: {e}") from e
        img_array = bgra_to_rgba(np.array(sct_img))
        logger.debug(f"Full screen captured with shape: {img_array.shape}")
        return img_array

    def capture_region(self, rect: Rect) -> Optional[np.ndarray]:
        """
        Captures `rect` of the monitor.

        Returns:
            Optional[np.ndarray]: The region, or None if mss could not grab it.
        """
        region = {
            "top": self.monitor["top"] + rect.y,
            "left": self.monitor["left"] + rect.x,
            "width": rect.width,
            "height": rect.height,
        }
        try:
            sct_img = self.sct.grab(region)
        except mss.exception.ScreenShotError as e:
            logger.error(f"Failed to capture screen region {region}: {e}")
            return None
        return bgra_to_rgba(np.array(sct_img))

    def close(self):
        self.sct.close()
