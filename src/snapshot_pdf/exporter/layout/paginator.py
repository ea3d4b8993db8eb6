"""
Module: exporter.layout.paginator

Purpose:
    Place a raster surface onto fixed-size pages without gaps or
    duplicated content.

Algorithm:
    1. Scale the surface so its width equals the page width; height
       scales proportionally (img_h = H_px * PW / W_px).
    2. Place the full image at offset 0 on the first page.
    3. While image height remains beyond the pages used so far, place
       the full image again on a new page, shifted upward by the height
       already consumed. The page window clips the visible band.

    No rounding happens before comparisons: a surface whose scaled
    height lands exactly on a page boundary gets no extra page.

Key Functions:
    - paginate(): Main pagination function

Dependencies:
    - core.models: RasterSurface, PageFormat, Placement

Used By:
    - exporter.controller: Main export pipeline
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Sequence, Tuple

from snapshot_pdf.core.errors import InvalidSurfaceError
from snapshot_pdf.core.models import A4, PageFormat, Placement, RasterSurface

logger = logging.getLogger(__name__)

# Log a warning (but still paginate) above this many pages
TALL_SURFACE_WARNING_PAGES = 100


def paginate(
    surface: RasterSurface,
    page_format: PageFormat = A4,
) -> Tuple[Placement, ...]:
    """
    Compute page placements for a surface.

    Args:
        surface: Captured raster surface
        page_format: Physical page size (default A4 portrait)

    Returns:
        Ordered tuple of placements, one per page

    Raises:
        InvalidSurfaceError: If surface width or height is not positive

    Example:
        >>> [p.y_mm for p in paginate(RasterSurface(1000, 4000))]
        [0, -297.0, -594.0]
    """
    placements = tuple(iter_placements(surface, page_format))

    if len(placements) > TALL_SURFACE_WARNING_PAGES:
        logger.warning(
            f"Surface {surface.width}x{surface.height}px spans "
            f"{len(placements)} pages"
        )
    logger.debug(f"Paginated {surface.width}x{surface.height}px onto {len(placements)} pages")
    return placements


def iter_placements(
    surface: RasterSurface,
    page_format: PageFormat = A4,
) -> Iterator[Placement]:
    """
    Yield placements lazily, one per page.

    The surface is validated before the first placement is yielded, so
    an invalid surface never produces partial output.

    Raises:
        InvalidSurfaceError: If surface width or height is not positive
    """
    _validate_surface(surface)
    return _generate(surface, page_format)


def _generate(surface: RasterSurface, page_format: PageFormat) -> Iterator[Placement]:
    page_width = page_format.width_mm
    page_height = page_format.height_mm
    img_height = scaled_height(surface.width, surface.height, page_format)

    height_left = img_height
    position = 0
    page_index = 0

    yield Placement(page_index, 0, position, page_width, img_height)
    height_left -= page_height

    while height_left > 0:
        position = height_left - img_height
        page_index += 1
        yield Placement(page_index, 0, position, page_width, img_height)
        height_left -= page_height


def _validate_surface(surface: RasterSurface) -> None:
    if surface.width <= 0 or surface.height <= 0:
        raise InvalidSurfaceError(
            f"Surface dimensions must be positive: {surface.width}x{surface.height}px"
        )


def scaled_height(width_px: int, height_px: int, page_format: PageFormat = A4) -> float:
    """
    Rendered height in mm of a surface drawn at full page width.

    Raises:
        InvalidSurfaceError: If width_px is not positive
    """
    if width_px <= 0:
        raise InvalidSurfaceError(f"Surface width must be positive: {width_px}")
    return (height_px * page_format.width_mm) / width_px


def expected_page_count(
    width_px: int,
    height_px: int,
    page_format: PageFormat = A4,
) -> int:
    """
    Number of pages paginate() produces, without building placements.

    Runs the same repeated subtraction as the paginator, so the count
    agrees with it even where float error makes the closed form
    1 + max(0, ceil((img_h - PH) / PH)) land on the other side of a
    page boundary.

    Raises:
        InvalidSurfaceError: If either dimension is not positive
    """
    _validate_surface(RasterSurface(width_px, height_px))
    img_height = scaled_height(width_px, height_px, page_format)
    page_height = page_format.height_mm

    count = 1
    height_left = img_height - page_height
    while height_left > 0:
        count += 1
        height_left -= page_height
    return count


def visible_bands(
    placements: Sequence[Placement],
    page_format: PageFormat = A4,
) -> List[Tuple[float, float]]:
    """
    Visible image span for each placement, in image millimetres.

    Concatenating the returned spans covers [0, img_h] once.

    Example:
        >>> visible_bands(paginate(RasterSurface(1000, 4000)))
        [(0, 297), (297.0, 594.0), (594.0, 840.0)]
    """
    return [p.visible_band(page_format.height_mm) for p in placements]
