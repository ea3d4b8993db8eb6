"""
Tests for the export controller.

Unit tests substitute fake renderers and encoders; the end-to-end
tests run the real Pillow/PyMuPDF/ReportLab stack.
"""

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pypdf import PdfReader

from snapshot_pdf.core.errors import (
    EncodingError,
    InvalidSurfaceError,
    PaginationError,
    RenderError,
)
from snapshot_pdf.core.models import PageFormat, RasterSurface
from snapshot_pdf.exporter import ExportConfig, build_document, export_document
from snapshot_pdf.exporter.capture import Renderer
from snapshot_pdf.exporter.output import Encoder


class FakeRenderer(Renderer):
    """Returns a fixed surface, or raises the configured error."""

    def __init__(self, surface=None, error=None):
        self.surface = surface
        self.error = error
        self.captured = []

    def capture(self, ref):
        self.captured.append(ref)
        if self.error is not None:
            raise self.error
        return self.surface


class FakeEncoder(Encoder):
    """Records the placements it receives."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def assemble(self, surface, placements, page_format):
        self.calls.append((surface, placements, page_format))
        if self.error is not None:
            raise self.error
        return f"pages={len(placements)}".encode()


@pytest.fixture
def image_mock():
    return MagicMock()


@pytest.fixture
def tall_surface(image_mock):
    return RasterSurface(1000, 4000, image=image_mock)


class TestBuildDocument:

    def test_passes_placements_to_encoder(self, tall_surface):
        # Arrange
        renderer = FakeRenderer(tall_surface)
        encoder = FakeEncoder()

        # Act
        build = build_document("node-1", renderer=renderer, encoder=encoder)

        # Assert
        assert renderer.captured == ["node-1"]
        assert build.data == b"pages=3"
        assert build.page_count == 3
        assert build.surface_size == (1000, 4000)
        surface, placements, page_format = encoder.calls[0]
        assert surface is tall_surface
        assert [p.y_mm for p in placements] == [0, -297, -594]
        assert page_format.name == "a4"

    def test_uses_configured_page_format(self, tall_surface):
        encoder = FakeEncoder()
        config = ExportConfig(page_format=PageFormat(210, 840))

        build = build_document("n", config, renderer=FakeRenderer(tall_surface), encoder=encoder)

        assert build.page_count == 1

    def test_releases_surface_on_success(self, tall_surface, image_mock):
        build_document("n", renderer=FakeRenderer(tall_surface), encoder=FakeEncoder())
        image_mock.close.assert_called_once()

    def test_releases_surface_when_encoder_fails(self, tall_surface, image_mock):
        encoder = FakeEncoder(error=EncodingError("boom"))

        with pytest.raises(EncodingError):
            build_document("n", renderer=FakeRenderer(tall_surface), encoder=encoder)

        image_mock.close.assert_called_once()

    def test_releases_surface_when_surface_invalid(self, image_mock):
        surface = RasterSurface(0, 100, image=image_mock)
        encoder = FakeEncoder()

        with pytest.raises(InvalidSurfaceError):
            build_document("n", renderer=FakeRenderer(surface), encoder=encoder)

        assert encoder.calls == []
        image_mock.close.assert_called_once()

    def test_unexpected_encoder_error_becomes_encoding_error(self, tall_surface):
        encoder = FakeEncoder(error=RuntimeError("disk full"))

        with pytest.raises(EncodingError, match="disk full"):
            build_document("n", renderer=FakeRenderer(tall_surface), encoder=encoder)

    def test_unexpected_renderer_error_becomes_render_error(self):
        renderer = FakeRenderer(error=RuntimeError("GPU lost"))

        with pytest.raises(RenderError, match="GPU lost"):
            build_document("n", renderer=renderer, encoder=FakeEncoder())

    def test_max_pages_is_enforced_before_encoding(self, tall_surface, image_mock):
        encoder = FakeEncoder()

        with pytest.raises(PaginationError, match="limit is 2"):
            build_document(
                "n",
                ExportConfig(max_pages=2),
                renderer=FakeRenderer(tall_surface),
                encoder=encoder,
            )

        assert encoder.calls == []
        image_mock.close.assert_called_once()


class TestExportDocument:

    def test_writes_order_artifact(self, tall_surface, tmp_path: Path):
        result = export_document(
            "A1B2",
            "node-1",
            ExportConfig(output_dir=tmp_path),
            renderer=FakeRenderer(tall_surface),
            encoder=FakeEncoder(),
        )

        assert result.success
        assert result.error is None
        assert result.identifier == "A1B2"
        assert result.page_count == 3
        assert result.path == tmp_path / "order-A1B2.pdf"
        assert result.path.read_bytes() == b"pages=3"

    def test_output_dir_argument_overrides_config(self, tall_surface, tmp_path: Path):
        target = tmp_path / "override"
        result = export_document(
            7,
            "node",
            ExportConfig(output_dir=tmp_path / "configured"),
            renderer=FakeRenderer(tall_surface),
            encoder=FakeEncoder(),
            output_dir=target,
        )

        assert result.path == target / "order-7.pdf"
        assert not (tmp_path / "configured").exists()

    def test_without_output_dir_returns_bytes_only(self, tall_surface):
        result = export_document(
            "A1B2", "node", renderer=FakeRenderer(tall_surface), encoder=FakeEncoder()
        )

        assert result.success
        assert result.path is None
        assert result.data == b"pages=3"

    @pytest.mark.parametrize(
        "error",
        [
            InvalidSurfaceError("Source not found: #order"),
            RenderError("capture failed"),
        ],
    )
    def test_renderer_failures_are_returned_not_raised(self, error, tmp_path: Path):
        result = export_document(
            "A1B2",
            "#order",
            ExportConfig(output_dir=tmp_path),
            renderer=FakeRenderer(error=error),
            encoder=FakeEncoder(),
        )

        assert not result.success
        assert result.error is error
        assert result.data is None
        assert result.page_count == 0
        assert not (tmp_path / "order-A1B2.pdf").exists()

    @pytest.mark.parametrize("identifier", ["..", "///", ""])
    def test_unusable_identifier_is_returned_as_failure(self, tall_surface, tmp_path: Path, identifier):
        result = export_document(
            identifier,
            "node",
            renderer=FakeRenderer(tall_surface),
            encoder=FakeEncoder(),
            output_dir=tmp_path,
        )

        assert result.success is False
        assert isinstance(result.error, EncodingError)
        assert list(tmp_path.iterdir()) == []

    def test_encoder_failure_is_returned(self, tall_surface, caplog):
        result = export_document(
            "A1B2",
            "node",
            renderer=FakeRenderer(tall_surface),
            encoder=FakeEncoder(error=ValueError("bad image")),
        )

        assert not result.success
        assert isinstance(result.error, EncodingError)
        assert "Document generation failed for A1B2" in caplog.text


class TestEndToEnd:

    @pytest.mark.parametrize("strategy", ["offset", "crop"])
    def test_png_source_to_pdf(self, banded_png, tmp_path: Path, strategy):
        result = export_document(
            "1042", banded_png, ExportConfig(output_dir=tmp_path, strategy=strategy)
        )

        assert result.success, result.error
        assert result.path.name == "order-1042.pdf"
        assert len(PdfReader(result.path).pages) == 3

    def test_pdf_source_to_pdf(self, sample_pdf):
        # Two 200x100pt pages stitch to a 1:1 surface -> 210mm, one A4 page
        build = build_document(sample_pdf, ExportConfig(scale=1.0))

        assert build.surface_size == (200, 200)
        assert build.page_count == 1
        assert len(PdfReader(io.BytesIO(build.data)).pages) == 1

    def test_missing_source_reports_invalid_surface(self, tmp_path: Path):
        result = export_document("1", tmp_path / "nope.png", ExportConfig(output_dir=tmp_path))

        assert not result.success
        assert isinstance(result.error, InvalidSurfaceError)
