"""
Module: exporter.layout

Purpose:
    Pagination engine. Converts a captured raster surface into the
    ordered per-page placements consumed by the encoder.

Key Functions:
    - paginate(): Compute placements for a surface
    - iter_placements(): Lazy version of paginate()
    - expected_page_count(): Closed-form page count
    - visible_bands(): Per-page visible content spans

Used By:
    - exporter.controller: Main export pipeline
    - exporter.output.encoder: Crop strategy
"""

from .paginator import (
    paginate,
    iter_placements,
    scaled_height,
    expected_page_count,
    visible_bands,
)

__all__ = [
    "paginate",
    "iter_placements",
    "scaled_height",
    "expected_page_count",
    "visible_bands",
]
