"""
Module: exporter.output.writer

Purpose:
    Name and persist document artifacts. Writes hold an exclusive
    portalocker lock so concurrent exports of the same identifier never
    interleave bytes.

Key Functions:
    - artifact_name(): Build "<prefix>-<id>.<ext>"
    - write_artifact(): Locked write into an output directory
    - locked_file(): Context manager for locked file access

Dependencies:
    - portalocker: Cross-platform file locking
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Union

import portalocker

from snapshot_pdf.core.errors import EncodingError

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "order"
DEFAULT_EXTENSION = "pdf"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


@contextmanager
def locked_file(
    path: Path,
    mode: str = "a+b",
    lock_type: int = portalocker.LOCK_EX,
) -> Generator:
    """
    Context manager for cross-platform locked file access.

    Args:
        path: Path to file.
        mode: File open mode. Must not truncate on open, since the lock
            is only held after opening.
        lock_type: Lock type (LOCK_EX for exclusive, LOCK_SH for shared).

    Yields:
        Open file handle with lock held.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, mode) as f:
        portalocker.lock(f, lock_type)
        try:
            yield f
        finally:
            portalocker.unlock(f)


def artifact_name(
    identifier: Union[str, int],
    prefix: str = DEFAULT_PREFIX,
    extension: str = DEFAULT_EXTENSION,
) -> str:
    """
    Build the artifact filename for an identifier.

    Characters outside [A-Za-z0-9._-] are replaced so the name cannot
    escape its output directory.

    Raises:
        ValueError: If nothing usable remains of the identifier

    Example:
        >>> artifact_name("A1B2")
        'order-A1B2.pdf'
        >>> artifact_name("../etc/passwd")
        'order-etc_passwd.pdf'
    """
    safe = _UNSAFE_CHARS.sub("_", str(identifier)).strip("._")
    if not safe:
        raise ValueError(f"Identifier has no usable characters: {identifier!r}")
    return f"{prefix}-{safe}.{extension.lstrip('.')}"


def write_artifact(
    data: bytes,
    output_dir: Path,
    identifier: Union[str, int],
    *,
    prefix: str = DEFAULT_PREFIX,
    extension: str = DEFAULT_EXTENSION,
) -> Path:
    """
    Write document bytes to output_dir under the artifact name.

    Args:
        data: Document bytes
        output_dir: Directory to write into (created if missing)
        identifier: Identifier embedded in the filename

    Returns:
        Path of the written file

    Raises:
        EncodingError: If the identifier is unusable or the file cannot be written
    """
    try:
        path = Path(output_dir) / artifact_name(identifier, prefix, extension)
    except ValueError as e:
        raise EncodingError(f"Cannot name artifact: {e}") from e

    try:
        with locked_file(path) as f:
            f.seek(0)
            f.truncate()
            f.write(data)
    except OSError as e:
        raise EncodingError(f"Cannot write artifact {path}: {e}") from e

    logger.info(f"Wrote {len(data)} bytes to {path}")
    return path
