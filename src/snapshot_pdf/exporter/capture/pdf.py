"""
Module: exporter.capture.pdf

Purpose:
    Capture a PDF document as one tall raster. Each selected page is
    rendered with PyMuPDF and the results are stitched top to bottom,
    so a multi-page source becomes a single surface for re-pagination.

Key Functions:
    - stitch_vertical(): Concatenate images into one composite

Key Classes:
    - PdfRenderer: Renderer for PDF files

Dependencies:
    - fitz (PyMuPDF): Page rasterisation
    - PIL.Image: Stitching
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import fitz
from PIL import Image

from snapshot_pdf.core.errors import InvalidSurfaceError, RenderError
from snapshot_pdf.core.models import RasterSurface

from .base import DEFAULT_BACKGROUND, Renderer, SourceRef, resolve_source

logger = logging.getLogger(__name__)

# PDF user space is 72 points per inch
PDF_BASE_DPI = 72.0


def stitch_vertical(
    images: Sequence[Image.Image],
    background: str = DEFAULT_BACKGROUND,
) -> Image.Image:
    """
    Stitch images into a single vertical composite.

    Narrower images are left-aligned; the remainder is filled with
    background.

    Args:
        images: Images to stack, top first

    Returns:
        RGB composite

    Raises:
        ValueError: If images is empty

    Example:
        >>> stitch_vertical([img_300x100, img_200x50]).size
        (300, 150)
    """
    if not images:
        raise ValueError("No images to stitch")

    total_height = sum(img.height for img in images)
    max_width = max(img.width for img in images)

    composite = Image.new("RGB", (max_width, total_height), background)

    y_offset = 0
    for img in images:
        composite.paste(img, (0, y_offset))
        y_offset += img.height

    return composite


class PdfRenderer(Renderer):
    """
    Renderer for PDF files.

    Attributes:
        scale: Zoom factor over 72 DPI (2.0 renders at 144 DPI)
        background: Fill colour behind pages of differing widths
        pages: Optional 0-based page indices to render (default: all)
    """

    def __init__(
        self,
        scale: float = 2.0,
        background: str = DEFAULT_BACKGROUND,
        pages: Optional[Sequence[int]] = None,
    ) -> None:
        if scale <= 0:
            raise ValueError(f"scale must be positive: {scale}")
        self.scale = scale
        self.background = background
        self.pages = tuple(pages) if pages is not None else None

    @property
    def dpi(self) -> float:
        """Effective render resolution."""
        return PDF_BASE_DPI * self.scale

    def capture(self, ref: SourceRef) -> RasterSurface:
        """Render the selected pages of the PDF at ref and stitch them."""
        path = resolve_source(ref)

        rendered: List[Image.Image] = []
        try:
            with fitz.open(path) as doc:
                if doc.page_count == 0:
                    raise InvalidSurfaceError(f"PDF has no pages: {path}")
                for i in self._page_indices(doc.page_count):
                    rendered.append(self._render_page(doc[i]))
            composite = stitch_vertical(rendered, self.background)
        except (RuntimeError, ValueError) as e:
            # fitz.FileDataError subclasses RuntimeError
            raise RenderError(f"Cannot render PDF {path}: {e}") from e
        finally:
            for img in rendered:
                img.close()

        logger.info(
            f"Captured {len(rendered)} page(s) of {path.name} at "
            f"{composite.width}x{composite.height}px ({self.dpi:.0f} DPI)"
        )
        return RasterSurface.from_image(composite, scale=self.scale)

    def _page_indices(self, page_count: int) -> List[int]:
        if self.pages is None:
            return list(range(page_count))
        for index in self.pages:
            if not 0 <= index < page_count:
                raise RenderError(f"Page index {index} out of range (0-{page_count - 1})")
        return list(self.pages)

    def _render_page(self, page: fitz.Page) -> Image.Image:
        matrix = fitz.Matrix(self.scale, self.scale)
        pix = page.get_pixmap(matrix=matrix, alpha=False, colorspace=fitz.csRGB)
        return Image.frombytes("RGB", (pix.width, pix.height), pix.samples)
