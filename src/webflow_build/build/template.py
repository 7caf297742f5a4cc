"""Source document loading."""

from pathlib import Path

from ..errors import SourceFileMissingError


def read_source(path: str) -> str:
    """Read the source HTML document as UTF-8 text.

    Raises:
        SourceFileMissingError: If ``path`` is not an existing file.
    """
    source_path = Path(path)
    if not source_path.is_file():
        raise SourceFileMissingError(path)
    return source_path.read_text(encoding="utf-8")
