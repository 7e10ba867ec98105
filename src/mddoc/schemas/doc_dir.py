"""Directory tree model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from mddoc.headers import header_from_name


class DocDir(BaseModel):
    """A node of the document tree, mirroring a file or folder on disk.

    Attributes:
        path: Location of the file or folder.
        is_dir: True for folders, False for markdown fragments.
        children: Ordered child nodes. Only used when ``is_dir`` is True.
    """

    path: Path
    is_dir: bool = False
    children: list["DocDir"] = Field(default_factory=list)

    def header(self) -> str:
        """Return the section label derived from the last path segment."""
        name = self.path.name if self.is_dir else self.path.stem
        return header_from_name(name)
