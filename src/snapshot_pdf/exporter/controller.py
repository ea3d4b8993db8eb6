"""
Module: exporter.controller

Purpose:
    Orchestrate the complete export pipeline.
    Capture → Paginate → Assemble → Deliver

    The surface is released on every path, success or failure.

Key Functions:
    - build_document(): Run the pipeline and return bytes (raises)
    - export_document(): Host-facing entry point returning ExportResult

Key Classes:
    - DocumentBuild: Bytes plus layout details
    - ExportResult: Success flag, artifact and typed error

Used By:
    - scripts/export_order_pdf.py
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from snapshot_pdf.core.errors import DocumentError, EncodingError, PaginationError, RenderError
from snapshot_pdf.core.models import Placement, RasterSurface

from .capture import Renderer, renderer_for
from .capture.base import SourceRef
from .config import ExportConfig
from .layout import paginate
from .output import Encoder, ReportLabEncoder, write_artifact

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentBuild:
    """
    Assembled document (immutable).

    Attributes:
        data: Document bytes
        placements: Placements the document was built from
        surface_size: (width, height) of the captured surface in pixels
    """
    data: bytes
    placements: Tuple[Placement, ...]
    surface_size: Tuple[int, int]

    @property
    def page_count(self) -> int:
        """Number of pages in the document."""
        return len(self.placements)


@dataclass(frozen=True)
class ExportResult:
    """
    Outcome of export_document (immutable).

    Attributes:
        success: True if the artifact was produced
        identifier: Identifier the export was requested for
        path: Written artifact path (None when bytes-only or failed)
        data: Document bytes (None on failure)
        page_count: Pages in the document (0 on failure)
        error: Typed failure (None on success)
        elapsed_s: Wall time of the export

    Example:
        >>> result = export_document("A1B2", "receipt.png", ExportConfig(output_dir=out))
        >>> result.path.name if result.success else str(result.error)
        'order-A1B2.pdf'
    """
    success: bool
    identifier: str
    path: Optional[Path] = None
    data: Optional[bytes] = None
    page_count: int = 0
    error: Optional[DocumentError] = None
    elapsed_s: float = 0.0


def build_document(
    source: SourceRef,
    config: Optional[ExportConfig] = None,
    *,
    renderer: Optional[Renderer] = None,
    encoder: Optional[Encoder] = None,
) -> DocumentBuild:
    """
    Capture a source and assemble it into a paginated document.

    Pipeline:
    1. Capture the source to a raster surface
    2. Paginate the surface onto the configured page format
    3. Assemble placements into document bytes
    4. Release the surface

    Args:
        source: Source reference passed to the renderer
        config: Export configuration (defaults to ExportConfig())
        renderer: Renderer override (default chosen from source suffix)
        encoder: Encoder override (default ReportLabEncoder)

    Returns:
        DocumentBuild with bytes and placements

    Raises:
        InvalidSurfaceError: If the source is missing or has no pixels
        PaginationError: If the page count exceeds config.max_pages
        RenderError: If capture fails
        EncodingError: If assembly fails
    """
    config = config or ExportConfig()
    renderer = renderer or renderer_for(source, scale=config.scale, background=config.background)
    encoder = encoder or ReportLabEncoder(strategy=config.strategy, image_format=config.image_format)

    surface = _capture(renderer, source)
    try:
        placements = paginate(surface, config.page_format)
        logger.info(
            f"Paginated {surface.width}x{surface.height}px onto "
            f"{len(placements)} {config.page_format.name or 'custom'} page(s)"
        )

        if config.max_pages is not None and len(placements) > config.max_pages:
            raise PaginationError(
                f"Document needs {len(placements)} pages, limit is {config.max_pages}"
            )

        data = _assemble(encoder, surface, placements, config)
        return DocumentBuild(data=data, placements=placements, surface_size=surface.size)
    finally:
        surface.close()


def export_document(
    identifier: Union[str, int],
    source: SourceRef,
    config: Optional[ExportConfig] = None,
    *,
    renderer: Optional[Renderer] = None,
    encoder: Optional[Encoder] = None,
    output_dir: Optional[Path] = None,
) -> ExportResult:
    """
    Export a source to a document artifact without raising.

    Failures are logged and returned as ExportResult.error so the host
    can show a message and let the user retry.

    Args:
        identifier: Identifier for the artifact name (order-<id>.pdf)
        source: Source reference passed to the renderer
        config: Export configuration
        renderer: Renderer override
        encoder: Encoder override
        output_dir: Overrides config.output_dir; None with no configured
            directory returns the bytes without writing

    Returns:
        ExportResult
    """
    config = config or ExportConfig()
    target_dir = output_dir if output_dir is not None else config.output_dir
    start_time = time.perf_counter()

    logger.info(f"Exporting document {identifier} from {source}")

    try:
        build = build_document(source, config, renderer=renderer, encoder=encoder)
        path = None
        if target_dir is not None:
            path = write_artifact(
                build.data,
                Path(target_dir),
                identifier,
                prefix=config.filename_prefix,
                extension=config.extension,
            )
    except DocumentError as e:
        logger.error(f"Document generation failed for {identifier}: {e}")
        return ExportResult(
            success=False,
            identifier=str(identifier),
            error=e,
            elapsed_s=time.perf_counter() - start_time,
        )

    elapsed = time.perf_counter() - start_time
    logger.info(f"Exported {identifier}: {build.page_count} page(s) in {elapsed:.2f}s")
    return ExportResult(
        success=True,
        identifier=str(identifier),
        path=path,
        data=build.data,
        page_count=build.page_count,
        elapsed_s=elapsed,
    )


def _capture(renderer: Renderer, source: SourceRef) -> RasterSurface:
    try:
        return renderer.capture(source)
    except DocumentError:
        raise
    except Exception as e:
        raise RenderError(f"Failed to capture {source}: {e}") from e


def _assemble(
    encoder: Encoder,
    surface: RasterSurface,
    placements: Tuple[Placement, ...],
    config: ExportConfig,
) -> bytes:
    try:
        return encoder.assemble(surface, placements, config.page_format)
    except DocumentError:
        raise
    except Exception as e:
        raise EncodingError(f"Failed to assemble document: {e}") from e
