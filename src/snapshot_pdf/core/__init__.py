"""
Core package: immutable data models and the error taxonomy shared by
every stage of the export pipeline.
"""

from .errors import (
    DocumentError,
    PaginationError,
    InvalidSurfaceError,
    RenderError,
    EncodingError,
)

__all__ = [
    "DocumentError",
    "PaginationError",
    "InvalidSurfaceError",
    "RenderError",
    "EncodingError",
]
