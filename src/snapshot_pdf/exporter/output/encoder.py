"""
Module: exporter.output.encoder

Purpose:
    Assemble placements into PDF bytes using ReportLab.
    Each Placement becomes one PDF page.

    Two strategies produce identical page counts and visible content:

    - "offset": the full surface image is embedded once and drawn on
      every page at the placement's (negative) offset. The page media
      box clips everything outside the page window. No re-encoding.
    - "crop": each page's visible band is cropped out of the raster
      with Pillow and drawn at the top of the page.

Key Classes:
    - Encoder: Abstract interface
    - ReportLabEncoder: ReportLab implementation

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling

Used By:
    - exporter.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from PIL import Image
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from snapshot_pdf.core.errors import EncodingError
from snapshot_pdf.core.models import A4, PageFormat, Placement, RasterSurface

logger = logging.getLogger(__name__)

STRATEGIES = ("offset", "crop")
DEFAULT_IMAGE_FORMAT = "PNG"


class Encoder(ABC):
    """Abstract interface for turning placements into document bytes."""

    @abstractmethod
    def assemble(
        self,
        surface: RasterSurface,
        placements: Sequence[Placement],
        page_format: PageFormat = A4,
    ) -> bytes:
        """
        Build a document from a surface and its placements.

        Args:
            surface: Source raster (image must be set)
            placements: Ordered placements, one per page
            page_format: Page size the placements were computed for

        Returns:
            Complete document bytes

        Raises:
            EncodingError: If the document cannot be assembled
        """


class ReportLabEncoder(Encoder):
    """
    PDF encoder built on ReportLab's canvas.

    Attributes:
        strategy: "offset" (default) or "crop"
        image_format: Format the raster is embedded as
        title: Optional document title metadata

    Example:
        >>> data = ReportLabEncoder().assemble(surface, paginate(surface))
        >>> data[:5]
        b'%PDF-'
    """

    def __init__(
        self,
        strategy: str = "offset",
        image_format: str = DEFAULT_IMAGE_FORMAT,
        title: Optional[str] = None,
    ) -> None:
        if strategy not in STRATEGIES:
            raise ValueError(f"strategy must be one of {STRATEGIES}: {strategy!r}")
        self.strategy = strategy
        self.image_format = image_format
        self.title = title

    def assemble(
        self,
        surface: RasterSurface,
        placements: Sequence[Placement],
        page_format: PageFormat = A4,
    ) -> bytes:
        if not placements:
            raise EncodingError("No placements to assemble")
        if surface.image is None:
            raise EncodingError("Surface has no image to embed")

        try:
            buf = io.BytesIO()
            c = canvas.Canvas(buf, pagesize=page_format.size_pt)
            if self.title:
                c.setTitle(self.title)

            if self.strategy == "offset":
                self._draw_offset(c, surface, placements, page_format)
            else:
                self._draw_cropped(c, surface, placements, page_format)

            c.save()
        except (OSError, KeyError, ValueError, TypeError) as e:
            raise EncodingError(f"Failed to assemble PDF: {e}") from e

        data = buf.getvalue()
        logger.info(
            f"Assembled {len(placements)} page(s), {len(data)} bytes "
            f"({self.strategy} strategy)"
        )
        return data

    def _draw_offset(
        self,
        c: canvas.Canvas,
        surface: RasterSurface,
        placements: Sequence[Placement],
        page_format: PageFormat,
    ) -> None:
        # One reader for every page: ReportLab caches the XObject by content
        reader = _pil_to_reader(surface.image, self.image_format)

        for placement in placements:
            y_pt = _transform_y(page_format.height_mm, placement.y_mm, placement.height_mm)
            logger.debug(f"Page {placement.page_index}: image top at {placement.y_mm:.2f}mm")
            c.drawImage(
                reader,
                placement.x_mm * mm,
                y_pt,
                width=placement.width_mm * mm,
                height=placement.height_mm * mm,
            )
            c.showPage()

    def _draw_cropped(
        self,
        c: canvas.Canvas,
        surface: RasterSurface,
        placements: Sequence[Placement],
        page_format: PageFormat,
    ) -> None:
        px_per_mm = surface.width / page_format.width_mm

        for placement in placements:
            start_mm, end_mm = placement.visible_band(page_format.height_mm)
            top_px = min(round(start_mm * px_per_mm), surface.height - 1)
            bottom_px = max(top_px + 1, min(round(end_mm * px_per_mm), surface.height))

            band = surface.image.crop((0, top_px, surface.width, bottom_px))
            band_height_mm = (bottom_px - top_px) / px_per_mm
            logger.debug(
                f"Page {placement.page_index}: rows {top_px}-{bottom_px} "
                f"({band_height_mm:.2f}mm)"
            )

            c.drawImage(
                _pil_to_reader(band, self.image_format),
                placement.x_mm * mm,
                _transform_y(page_format.height_mm, 0, band_height_mm),
                width=placement.width_mm * mm,
                height=band_height_mm * mm,
            )
            c.showPage()
            band.close()


def _pil_to_reader(img: Image.Image, image_format: str = DEFAULT_IMAGE_FORMAT) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    Args:
        img: PIL Image object
        image_format: Encoding used for the in-memory copy

    Returns:
        ImageReader for use with ReportLab
    """
    buf = io.BytesIO()
    img.save(buf, format=image_format)
    buf.seek(0)
    return ImageReader(buf)


def _transform_y(page_height_mm: float, y_mm_top: float, height_mm: float) -> float:
    """
    Convert a top-down mm offset to ReportLab's bottom-up points.

    Args:
        page_height_mm: Page height
        y_mm_top: Top edge of the element, from the page top
        height_mm: Element height

    Returns:
        Y of the element's bottom edge, in points from the page bottom
    """
    return (page_height_mm - y_mm_top - height_mm) * mm
