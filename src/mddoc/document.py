"""Markdown document assembled from a tree of fragments."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel

from mddoc.combine import TextReader, TitleExtractor, combine_tree
from mddoc.doc_dir import scan_doc_dir
from mddoc.pagebreaks import BODY_CONTENT, PAGEBREAK, add_pagebreaks
from mddoc.reader import read_text as default_read_text
from mddoc.schemas import DocDir, Title
from mddoc.summary import format_summary
from mddoc.title_page import extract_title as default_extract_title
from mddoc.utils.logging_config import get_logger

logger = get_logger(__name__)


class MdDoc(BaseModel):
    """Combined markdown document.

    Attributes:
        source: Tree the document was read from.
        title: Title page, if one was found.
        markdown: Combined body with page breaks.
        html: Rendered form, attached by the caller via ``with_html``.
    """

    PAGEBREAK: ClassVar[str] = PAGEBREAK
    BODY_CONTENT: ClassVar[str] = BODY_CONTENT

    source: DocDir
    title: Title | None = None
    markdown: str = ""
    html: str = ""

    @classmethod
    def from_dir(
        cls,
        source: DocDir,
        *,
        extract_title: TitleExtractor = default_extract_title,
        read_text: TextReader = default_read_text,
    ) -> MdDoc:
        """Combine the fragments under ``source`` into one document."""
        logger.debug("MdDoc.from_dir | path: %s", source.path)
        result = combine_tree(source, extract_title=extract_title, read_text=read_text)
        return cls(source=source, title=result.title, markdown=add_pagebreaks(result.body))

    @classmethod
    def from_path(cls, path: Path | str, **kwargs) -> MdDoc:
        """Scan ``path`` from disk and combine it."""
        return cls.from_dir(scan_doc_dir(path), **kwargs)

    def with_html(self, html: str) -> MdDoc:
        return self.model_copy(update={"html": html})

    def with_md(self, md: str) -> MdDoc:
        return self.model_copy(update={"markdown": md})

    def joined(self) -> str:
        """Return the title page text followed by the body."""
        title_raw = self.title.raw if self.title else ""
        return f"{title_raw}{self.markdown}"

    def summary(self) -> str:
        return format_summary(self)
