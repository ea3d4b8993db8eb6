"""
Module: exporter.capture.image_file

Purpose:
    Capture a raster file (PNG, JPEG, ...) as a surface using Pillow.
"""

from __future__ import annotations

import logging

from PIL import Image

from snapshot_pdf.core.errors import RenderError
from snapshot_pdf.core.models import RasterSurface

from .base import DEFAULT_BACKGROUND, Renderer, SourceRef, flatten, resolve_source

logger = logging.getLogger(__name__)


class ImageFileRenderer(Renderer):
    """
    Renderer for image files.

    Attributes:
        scale: Resample factor applied after loading (1.0 keeps pixels)
        background: Colour transparent pixels are flattened onto

    Example:
        >>> surface = ImageFileRenderer().capture("receipt.png")
        >>> surface.size
        (1000, 4000)
    """

    def __init__(self, scale: float = 1.0, background: str = DEFAULT_BACKGROUND) -> None:
        if scale <= 0:
            raise ValueError(f"scale must be positive: {scale}")
        self.scale = scale
        self.background = background

    def capture(self, ref: SourceRef) -> RasterSurface:
        """Load, flatten and optionally resample the image at ref."""
        path = resolve_source(ref)

        try:
            with Image.open(path) as img:
                image = flatten(img, self.background)
        except OSError as e:
            raise RenderError(f"Cannot read image {path}: {e}") from e

        if self.scale != 1.0:
            size = (
                max(1, round(image.width * self.scale)),
                max(1, round(image.height * self.scale)),
            )
            resized = image.resize(size, Image.Resampling.LANCZOS)
            image.close()
            image = resized

        logger.info(f"Captured {path.name} at {image.width}x{image.height}px")
        return RasterSurface.from_image(image, scale=self.scale)
