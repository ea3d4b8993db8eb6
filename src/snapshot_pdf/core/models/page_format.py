"""
Module: page_format

Purpose:
    Physical page dimensions in millimetres. A4 portrait is the
    process-wide default; the paginator accepts any positive format.

Key Classes:
    - PageFormat: Immutable page size

Key Functions:
    - page_format_by_name(): Look up a preset by name
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

# Millimetres to PDF points (1/72 inch)
MM_TO_PT = 72.0 / 25.4


@dataclass(frozen=True)
class PageFormat:
    """
    Page size in millimetres (immutable).

    Attributes:
        width_mm: Page width (PW_mm)
        height_mm: Page height (PH_mm)
        name: Optional preset name

    Example:
        >>> PageFormat(210, 297).size_pt
        (595.27..., 841.88...)
    """

    width_mm: float
    height_mm: float
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        if self.width_mm <= 0:
            raise ValueError(f"width_mm must be positive: {self.width_mm}")
        if self.height_mm <= 0:
            raise ValueError(f"height_mm must be positive: {self.height_mm}")

    @property
    def width_pt(self) -> float:
        """Page width in PDF points."""
        return self.width_mm * MM_TO_PT

    @property
    def height_pt(self) -> float:
        """Page height in PDF points."""
        return self.height_mm * MM_TO_PT

    @property
    def size_pt(self) -> tuple[float, float]:
        """(width, height) in PDF points, as ReportLab expects a pagesize."""
        return (self.width_pt, self.height_pt)


A4 = PageFormat(210, 297, "a4")
A5 = PageFormat(148, 210, "a5")
LETTER = PageFormat(215.9, 279.4, "letter")

PAGE_FORMATS: Dict[str, PageFormat] = {
    fmt.name: fmt for fmt in (A4, A5, LETTER)
}


def page_format_by_name(name: str) -> PageFormat:
    """
    Look up a page format preset.

    Args:
        name: Case-insensitive preset name ("a4", "a5", "letter")

    Returns:
        Matching PageFormat

    Raises:
        ValueError: If no preset has that name
    """
    key = name.strip().lower()
    if key not in PAGE_FORMATS:
        known = ", ".join(sorted(PAGE_FORMATS))
        raise ValueError(f"Unknown page format {name!r} (known: {known})")
    return PAGE_FORMATS[key]
