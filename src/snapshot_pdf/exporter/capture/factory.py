"""
Module: exporter.capture.factory

Purpose:
    Choose a renderer from a source path's suffix.
"""

from __future__ import annotations

from pathlib import Path

from .base import DEFAULT_BACKGROUND, Renderer, SourceRef
from .image_file import ImageFileRenderer
from .pdf import PdfRenderer


def renderer_for(
    ref: SourceRef,
    *,
    scale: float = 2.0,
    background: str = DEFAULT_BACKGROUND,
) -> Renderer:
    """
    Pick a renderer for ref.

    PDF sources are rasterised at scale; raster files keep their own
    pixels, since they were already rendered upstream.

    Example:
        >>> renderer_for("order.pdf")
        <...PdfRenderer object at ...>
    """
    if Path(ref).suffix.lower() == ".pdf":
        return PdfRenderer(scale=scale, background=background)
    return ImageFileRenderer(background=background)
