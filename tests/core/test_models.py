"""
Unit Tests for core models

Tests for RasterSurface, PageFormat and Placement.
"""

import pytest
from unittest.mock import MagicMock
from PIL import Image

from snapshot_pdf.core.models import (
    A4,
    LETTER,
    PageFormat,
    Placement,
    RasterSurface,
    page_format_by_name,
)


class TestPageFormat:
    """Tests for PageFormat dataclass."""

    def test_a4_is_210_by_297(self):
        assert A4.width_mm == 210
        assert A4.height_mm == 297
        assert A4.name == "a4"

    def test_size_pt_matches_a4_points(self):
        width_pt, height_pt = A4.size_pt
        assert width_pt == pytest.approx(595.276, abs=0.01)
        assert height_pt == pytest.approx(841.890, abs=0.01)

    @pytest.mark.parametrize("width,height", [(0, 297), (210, 0), (-1, 297), (210, -5)])
    def test_init_when_non_positive_then_raises_error(self, width, height):
        with pytest.raises(ValueError, match="must be positive"):
            PageFormat(width, height)

    def test_page_format_by_name_is_case_insensitive(self):
        assert page_format_by_name("A4") is A4
        assert page_format_by_name(" letter ") is LETTER

    def test_page_format_by_name_when_unknown_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown page format"):
            page_format_by_name("b5")

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            A4.width_mm = 100


class TestPlacement:
    """Tests for Placement dataclass."""

    def test_bottom_mm(self):
        p = Placement(page_index=1, x_mm=0, y_mm=-297, width_mm=210, height_mm=840)
        assert p.bottom_mm == 543

    def test_visible_band_first_page(self):
        p = Placement(0, 0, 0, 210, 840)
        assert p.visible_band(297) == (0, 297)

    def test_visible_band_middle_page(self):
        p = Placement(1, 0, -297, 210, 840)
        assert p.visible_band(297) == (297, 594)

    def test_visible_band_last_page_is_clipped_to_image(self):
        p = Placement(2, 0, -594, 210, 840)
        assert p.visible_band(297) == (594, 840)

    def test_visible_band_short_image(self):
        p = Placement(0, 0, 0, 210, 100)
        assert p.visible_band(297) == (0, 100)


class TestRasterSurface:
    """Tests for RasterSurface dataclass."""

    def test_from_image_takes_dimensions(self):
        img = Image.new("RGB", (300, 120))
        surface = RasterSurface.from_image(img, scale=2.0)
        assert surface.size == (300, 120)
        assert surface.scale == 2.0
        assert surface.image is img

    def test_zero_dimensions_are_constructible(self):
        surface = RasterSurface(width=0, height=10)
        assert surface.size == (0, 10)

    def test_aspect_ratio(self):
        assert RasterSurface(1000, 4000).aspect_ratio == 4.0

    def test_close_releases_image(self):
        image = MagicMock()
        surface = RasterSurface(10, 10, image=image)
        surface.close()
        image.close.assert_called_once()

    def test_context_manager_closes_image(self):
        image = MagicMock()
        with RasterSurface(10, 10, image=image):
            pass
        image.close.assert_called_once()

    def test_close_without_image_is_noop(self):
        RasterSurface(10, 10).close()
