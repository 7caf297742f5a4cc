"""Output file writing."""

import os
import tempfile
from pathlib import Path

from ..errors import FilesystemWriteError


def atomic_write(path: Path, data: str) -> None:
    """Atomically write UTF-8 text to ``path``.

    Raises:
        FilesystemWriteError: Wrapping the underlying OSError.
    """
    path = Path(path)
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=".webflow-build-", dir=str(path.parent))
    except OSError as e:
        raise FilesystemWriteError(str(path), e) from e
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(data)
        os.replace(tmp_name, path)
    except OSError as e:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise FilesystemWriteError(str(path), e) from e


def ensure_output_dir(path: Path) -> bool:
    """Create ``path`` if missing. Returns True if it was created."""
    path = Path(path)
    if path.is_dir():
        return False
    try:
        path.mkdir(parents=True)
    except OSError as e:
        raise FilesystemWriteError(str(path), e) from e
    return True
