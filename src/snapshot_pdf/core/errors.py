"""
Module: core.errors

Purpose:
    Typed failures for the export pipeline. Every failure that leaves
    the pipeline is a DocumentError so hosts can catch one type and
    show a retryable message.

Key Classes:
    - DocumentError: Base class
    - PaginationError / InvalidSurfaceError: Raised before any placement
    - RenderError: Renderer could not produce a surface
    - EncodingError: Encoder could not assemble or persist the document

Used By:
    - exporter.layout.paginator
    - exporter.capture
    - exporter.output
    - exporter.controller
"""


class DocumentError(Exception):
    """Base error for document export failures."""
    pass


class PaginationError(DocumentError):
    """Placements could not be computed."""
    pass


class InvalidSurfaceError(PaginationError):
    """Surface has non-positive dimensions or its source does not exist."""
    pass


class RenderError(DocumentError):
    """Renderer failed to produce a raster surface."""
    pass


class EncodingError(DocumentError):
    """Encoder failed to assemble placements into document bytes."""
    pass
