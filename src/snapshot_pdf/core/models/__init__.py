"""
Core Models Package

Immutable data models passed between the capture, pagination and
output stages. All models are frozen dataclasses, so a surface or a
placement sequence can be handed between threads without copying.
"""

from .surface import RasterSurface
from .page_format import PageFormat, A4, A5, LETTER, PAGE_FORMATS, page_format_by_name
from .placement import Placement

__all__ = [
    "RasterSurface",
    "PageFormat",
    "A4",
    "A5",
    "LETTER",
    "PAGE_FORMATS",
    "page_format_by_name",
    "Placement",
]
