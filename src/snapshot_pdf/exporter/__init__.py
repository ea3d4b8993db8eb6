"""
Module: exporter

Purpose:
    Export pipeline that captures a rendered source as one raster,
    paginates it onto fixed-size pages and writes a PDF artifact.

Key Functions:
    - export_document(): Main entry point (returns ExportResult)
    - build_document(): Pipeline returning bytes, raises DocumentError
    - paginate(): Pagination engine

Key Classes:
    - ExportConfig: Export configuration
    - ExportResult: Export outcome
"""

from .config import ExportConfig
from .controller import DocumentBuild, ExportResult, build_document, export_document
from .layout import paginate, expected_page_count

__all__ = [
    "ExportConfig",
    "DocumentBuild",
    "ExportResult",
    "build_document",
    "export_document",
    "paginate",
    "expected_page_count",
]
