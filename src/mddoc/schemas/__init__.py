"""Shared schemas for mddoc."""

from mddoc.schemas.doc_dir import DocDir
from mddoc.schemas.title import Title

__all__ = ["DocDir", "Title"]
