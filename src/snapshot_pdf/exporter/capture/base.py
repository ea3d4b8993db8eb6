"""
Module: exporter.capture.base

Purpose:
    Abstract capture interface. Implementations handle the actual
    source format; tests substitute deterministic fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from PIL import Image

from snapshot_pdf.core.errors import InvalidSurfaceError
from snapshot_pdf.core.models import RasterSurface

# Transparent pixels are flattened onto this colour
DEFAULT_BACKGROUND = "#ffffff"

SourceRef = Union[str, Path]


class Renderer(ABC):
    """
    Abstract interface for producing a raster surface.

    Renderers raise InvalidSurfaceError when the referenced source does
    not exist and RenderError for any other capture failure.
    """

    @abstractmethod
    def capture(self, ref: SourceRef) -> RasterSurface:
        """
        Render the referenced source to a raster surface.

        Args:
            ref: Source reference (typically a file path)

        Returns:
            Captured RasterSurface owned by the caller

        Raises:
            InvalidSurfaceError: If the source does not exist
            RenderError: If the source cannot be rendered
        """


def resolve_source(ref: SourceRef) -> Path:
    """Return ref as a Path, raising InvalidSurfaceError if it is missing."""
    path = Path(ref)
    if not path.is_file():
        raise InvalidSurfaceError(f"Source not found: {path}")
    return path


def flatten(image: Image.Image, background: str = DEFAULT_BACKGROUND) -> Image.Image:
    """
    Convert an image to RGB, compositing any transparency onto background.

    Args:
        image: Source image in any mode
        background: Colour for transparent regions

    Returns:
        New RGB image
    """
    if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        canvas = Image.new("RGB", rgba.size, background)
        canvas.paste(rgba, mask=rgba.getchannel("A"))
        return canvas
    return image.convert("RGB")
