"""
Module: placement

Purpose:
    Provides the Placement dataclass - one instruction telling the
    encoder where the full surface image is drawn on one page.

    The same full-height image is drawn on every page, shifted upward
    by the height already consumed, so y_mm is 0 on the first page and
    negative afterwards. The page edge clips everything outside the
    window [0, page_height_mm].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Placement:
    """
    Image placement on a single page (immutable).

    Coordinates are top-down millimetres from the page's top-left.

    Attributes:
        page_index: 0-based page number
        x_mm: Horizontal offset (always 0)
        y_mm: Vertical offset, negative after the first page
        width_mm: Rendered width (page width)
        height_mm: Rendered height (scaled surface height)

    Example:
        >>> p = Placement(page_index=1, x_mm=0, y_mm=-297, width_mm=210, height_mm=840)
        >>> p.visible_band(297)
        (297, 594)
    """

    page_index: int
    x_mm: float
    y_mm: float
    width_mm: float
    height_mm: float

    @property
    def bottom_mm(self) -> float:
        """Bottom edge of the image box on the page."""
        return self.y_mm + self.height_mm

    def visible_band(self, page_height_mm: float) -> Tuple[float, float]:
        """
        Span of image content visible through this page's window.

        Args:
            page_height_mm: Height of the page window

        Returns:
            (start, end) in image millimetres, measured from the image top
        """
        start = min(max(-self.y_mm, 0), self.height_mm)
        end = min(max(page_height_mm - self.y_mm, 0), self.height_mm)
        return (start, end)
