"""Custom exceptions for mddoc."""

from __future__ import annotations

from pathlib import Path


class MdDocError(Exception):
    """Base exception for mddoc operations."""


class ReadError(MdDocError):
    """A markdown fragment could not be read or decoded."""

    def __init__(self, path: Path, reason: Exception | str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path


class TitlePageError(MdDocError):
    """Front matter was found but does not describe a title page."""


class ScanError(MdDocError):
    """The document tree could not be built from disk."""
