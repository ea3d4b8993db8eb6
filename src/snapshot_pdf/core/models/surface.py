"""
Module: surface

Purpose:
    Provides the RasterSurface dataclass - a fully rendered pixel
    buffer with known dimensions, produced by a Renderer and consumed
    by the paginator and encoder.

Dependencies:
    - dataclasses (std)
    - PIL.Image (TYPE_CHECKING only)

Used By:
    - exporter.capture (produces)
    - exporter.layout.paginator (reads width/height)
    - exporter.output.encoder (embeds image)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from PIL import Image


@dataclass(frozen=True)
class RasterSurface:
    """
    Rendered raster captured from a source (immutable).

    Dimensions are not validated here: a zero-sized surface is a legal
    value that the paginator rejects with InvalidSurfaceError.

    Attributes:
        width: Pixel width (W_px)
        height: Pixel height (H_px)
        image: Embeddable PIL image, or None for dimension-only surfaces
        scale: Device scale the renderer captured at

    Example:
        >>> surface = RasterSurface(width=1000, height=4000, image=img)
        >>> surface.aspect_ratio
        4.0
    """

    width: int
    height: int
    image: Optional["Image.Image"] = None
    scale: float = 1.0

    @classmethod
    def from_image(cls, image: "Image.Image", scale: float = 1.0) -> "RasterSurface":
        """Wrap a PIL image, taking dimensions from the image itself."""
        return cls(width=image.width, height=image.height, image=image, scale=scale)

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) in pixels."""
        return (self.width, self.height)

    @property
    def aspect_ratio(self) -> float:
        """Height divided by width."""
        return self.height / self.width

    def close(self) -> None:
        """Release the underlying image buffer."""
        if self.image is not None:
            self.image.close()

    def __enter__(self) -> "RasterSurface":
        return self

    def __exit__(self, *args) -> None:
        self.close()
