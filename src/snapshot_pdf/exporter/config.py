"""
Module: exporter.config

Purpose:
    Configuration dataclass for the export pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - ExportConfig: Main configuration for exporting a document

Used By:
    - exporter.controller: Main export controller
    - scripts/export_order_pdf.py
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from snapshot_pdf.core.models import A4, PageFormat

from .capture.base import DEFAULT_BACKGROUND
from .output.encoder import DEFAULT_IMAGE_FORMAT, STRATEGIES
from .output.writer import DEFAULT_EXTENSION, DEFAULT_PREFIX


@dataclass(frozen=True)
class ExportConfig:
    """
    Configuration for exporting a document (immutable).

    Attributes:
        page_format: Physical page size
        scale: Capture scale for renderers that rasterise (2.0 = 144 DPI for PDFs)
        background: Fill colour for transparent or uncovered pixels
        strategy: Encoder strategy, "offset" or "crop"
        image_format: Format the raster is embedded as
        filename_prefix: Artifact name prefix ("order" -> order-<id>.pdf)
        extension: Artifact file extension
        output_dir: Directory to write artifacts to; None returns bytes only
        max_pages: Optional page ceiling enforced before encoding

    Example:
        >>> config = ExportConfig(output_dir=Path("out"), strategy="crop")
    """

    page_format: PageFormat = A4
    scale: float = 2.0
    background: str = DEFAULT_BACKGROUND

    # Output
    strategy: str = "offset"
    image_format: str = DEFAULT_IMAGE_FORMAT
    filename_prefix: str = DEFAULT_PREFIX
    extension: str = DEFAULT_EXTENSION
    output_dir: Optional[Path] = None

    # Host ceiling; the paginator itself is uncapped
    max_pages: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.scale <= 0:
            raise ValueError(f"scale must be positive: {self.scale}")
        if self.strategy not in STRATEGIES:
            raise ValueError(f"strategy must be one of {STRATEGIES}: {self.strategy!r}")
        if not self.filename_prefix:
            raise ValueError("filename_prefix must not be empty")
        if self.max_pages is not None and self.max_pages <= 0:
            raise ValueError(f"max_pages must be positive: {self.max_pages}")
