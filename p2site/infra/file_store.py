"""
File store infrastructure for p2site.

Provides atomic writes (write to temp, then rename) so a failed run never
leaves a half-written output file in place.
"""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def write_atomic(path: Path, data: bytes) -> Path:
    """
    Write bytes to ``path`` atomically using a temp file and rename.

    Any existing file is replaced.

    Args:
        path: Destination file
        data: Bytes to write

    Returns:
        The destination path

    Raises:
        OSError: If the temp file cannot be created, written or renamed
    """
    path = Path(path)
    fd, temp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp"
    )

    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        os.chmod(temp_path, 0o644)

        # Atomic rename
        os.replace(temp_path, path)

    except Exception:
        # Clean up temp file on error
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise

    logger.debug(f"Wrote {len(data)} bytes to {path}")
    return path
