# -*- coding: utf-8 -*-
"""
src/lorebook_reader/core/verifier.py

Checks that a captured region really shows the book before it is read.
"""

import logging
from typing import Callable, Optional

import numpy as np

from .models import MatchResult, MatchStatus
from .pixels import simple_compare

logger = logging.getLogger(__name__)

Comparator = Callable[[np.ndarray, np.ndarray, int, int], float]


class MatchVerifier:
    """
    Compares a capture with the reference template at a fixed offset.

    Args:
        comparator (Optional[Comparator]): Tolerance comparison primitive;
            defaults to `pixels.simple_compare`.
    """

    def __init__(self, comparator: Optional[Comparator] = None):
        self.comparator = comparator if comparator is not None else simple_compare

    def verify(self, capture: np.ndarray, reference: np.ndarray, offset_x: int, offset_y: int) -> MatchResult:
        result = MatchResult.from_score(self.comparator(capture, reference, offset_x, offset_y))
        if result.status is MatchStatus.PARTIAL:
            logger.warning(
                f"The lore book match is not accurate (score {result.score:g}). "
                "Check that the book is fully visible and not covered by other windows."
            )
        elif result.status is MatchStatus.NO_OVERLAP:
            logger.debug("Capture does not overlap the reference template.")
        return result
