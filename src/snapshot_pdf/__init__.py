"""Top-level package for snapshot_pdf.

Provides subpackages:
- snapshot_pdf.core – immutable models and the error taxonomy
- snapshot_pdf.exporter – capture, pagination and PDF output pipeline
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("snapshot_pdf")
except PackageNotFoundError:
    # Running from a source checkout without installing
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
