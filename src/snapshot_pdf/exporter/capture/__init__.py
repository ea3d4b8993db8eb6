"""
Module: exporter.capture

Purpose:
    Renderer abstractions that turn a source reference into a
    RasterSurface.

Key Classes:
    - Renderer: Abstract capture interface
    - ImageFileRenderer: Raster files via Pillow
    - PdfRenderer: PDF documents via PyMuPDF, pages stitched vertically

Key Functions:
    - renderer_for(): Pick a renderer from the source file type

Dependencies:
    - PIL: Image loading and stitching
    - fitz (PyMuPDF): PDF rasterisation

Used By:
    - exporter.controller: Main export pipeline
"""

from .base import Renderer, DEFAULT_BACKGROUND
from .image_file import ImageFileRenderer
from .pdf import PdfRenderer, stitch_vertical
from .factory import renderer_for

__all__ = [
    "Renderer",
    "DEFAULT_BACKGROUND",
    "ImageFileRenderer",
    "PdfRenderer",
    "stitch_vertical",
    "renderer_for",
]
