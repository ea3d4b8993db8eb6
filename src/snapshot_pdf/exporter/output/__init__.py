"""
Module: exporter.output

Purpose:
    PDF assembly and artifact delivery.
    Converts placements into PDF bytes using ReportLab and writes
    them to disk under a stable artifact name.

Key Classes:
    - Encoder: Abstract assembly interface
    - ReportLabEncoder: Offset or crop strategy

Key Functions:
    - artifact_name(): "order-<id>.pdf" naming
    - write_artifact(): Locked write to an output directory

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
    - portalocker: Cross-platform file locking

Used By:
    - exporter.controller: Pipeline orchestration
"""

from .encoder import Encoder, ReportLabEncoder, STRATEGIES
from .writer import artifact_name, write_artifact, locked_file

__all__ = [
    "Encoder",
    "ReportLabEncoder",
    "STRATEGIES",
    "artifact_name",
    "write_artifact",
    "locked_file",
]
