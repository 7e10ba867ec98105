"""Read markdown fragments from disk."""

from __future__ import annotations

from pathlib import Path

from mddoc.config import MDDOC_ENCODING
from mddoc.exceptions import ReadError


def read_text(path: Path, encoding: str = MDDOC_ENCODING) -> str:
    """Return the full text of a fragment.

    Args:
        path: File to read.
        encoding: Text encoding to use.

    Returns:
        The file contents, with line endings normalized to ``\\n``.

    Raises:
        ReadError: If the file cannot be opened or decoded.
    """
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(path, exc) from exc
