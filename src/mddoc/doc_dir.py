"""Build a document tree from the file system."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from mddoc.config import MDDOC_MARKDOWN_SUFFIXES
from mddoc.exceptions import ScanError
from mddoc.schemas import DocDir
from mddoc.utils.logging_config import get_logger

logger = get_logger(__name__)


def scan_doc_dir(root: Path | str, *, suffixes: Iterable[str] = MDDOC_MARKDOWN_SUFFIXES) -> DocDir:
    """Return the tree of markdown fragments under ``root``.

    Children are ordered by name. Hidden entries and files whose suffix is
    not in ``suffixes`` are left out. A root that is a file gives a single
    file node.

    Raises:
        ScanError: If ``root`` does not exist.
    """
    path = Path(root)
    if not path.exists():
        raise ScanError(f"Document root not found: {path}")
    allowed = {suffix.lower() for suffix in suffixes}
    return _scan(path, allowed)


def _scan(path: Path, allowed: set[str]) -> DocDir:
    if not path.is_dir():
        return DocDir(path=path, is_dir=False)

    children: list[DocDir] = []
    for entry in sorted(path.iterdir(), key=lambda item: item.name):
        if entry.name.startswith("."):
            continue
        if entry.is_dir():
            children.append(_scan(entry, allowed))
        elif entry.suffix.lower() in allowed:
            children.append(DocDir(path=entry, is_dir=False))
        else:
            logger.debug("scan_doc_dir | ignoring %s", entry)
    return DocDir(path=path, is_dir=True, children=children)
