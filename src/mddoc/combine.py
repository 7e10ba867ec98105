"""Combine a tree of markdown fragments into one document body."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from mddoc.exceptions import ReadError
from mddoc.pagebreaks import PAGEBREAK, ends_with_pagebreak
from mddoc.reader import read_text as default_read_text
from mddoc.schemas import DocDir, Title
from mddoc.title_page import extract_title as default_extract_title
from mddoc.utils.logging_config import get_logger

logger = get_logger(__name__)

TitleExtractor = Callable[[Path], "Title | None"]
TextReader = Callable[[Path], str]

_HEADING_RE = re.compile(r"^[ \t]*(#*)[ \t](.*)$")


@dataclass
class CombineResult:
    """Accumulator filled by a combine pass.

    Attributes:
        title: First title page found, if any.
        parts: Markdown pieces collected so far, in traversal order.
    """

    title: Title | None = None
    parts: list[str] = field(default_factory=list)

    @property
    def body(self) -> str:
        return "".join(self.parts)

    def append(self, text: str) -> None:
        if text:
            self.parts.append(text)

    def tail(self) -> str:
        """Return the trailing pieces back to the start of the last non-blank line."""
        tail = ""
        for part in reversed(self.parts):
            tail = part + tail
            if "\n" in tail.rstrip():
                break
        return tail


def combine_tree(
    root: DocDir,
    *,
    extract_title: TitleExtractor = default_extract_title,
    read_text: TextReader = default_read_text,
) -> CombineResult:
    """Walk ``root`` depth-first and return the combined body and title."""
    result = CombineResult()
    combine(root, result, extract_title=extract_title, read_text=read_text)
    return result


def combine(
    node: DocDir,
    result: CombineResult,
    *,
    extract_title: TitleExtractor = default_extract_title,
    read_text: TextReader = default_read_text,
) -> None:
    """Append ``node`` and everything below it to ``result``.

    Files are appended verbatim, except the first title page, which is stored
    in ``result.title`` instead. Folders contribute a rebuilt header taken
    from their header-source file, then their children, and always end with
    a blank line followed by a page break.
    """
    logger.debug("combine | path: %s", node.path)
    if not node.is_dir:
        _combine_file(node, result, extract_title=extract_title, read_text=read_text)
        return

    result.append(read_header(node, read_text=read_text))
    header_source = find_header_source(node)
    for child in node.children:
        if child is header_source:
            continue
        combine(child, result, extract_title=extract_title, read_text=read_text)

    result.append(_blank_line_suffix(result.tail()))
    if not ends_with_pagebreak(result.tail()):
        result.append(PAGEBREAK + "\n\n")


def _combine_file(
    node: DocDir,
    result: CombineResult,
    *,
    extract_title: TitleExtractor,
    read_text: TextReader,
) -> None:
    if result.title is None:
        title = extract_title(node.path)
        if title is not None:
            logger.debug("combine | title page: %s", node.path)
            result.title = title
            return
    try:
        content = read_text(node.path)
    except ReadError as exc:
        logger.debug("combine | skipping unreadable file %s: %s", node.path, exc)
        return
    result.append(content)


def _blank_line_suffix(text: str) -> str:
    if text.endswith("\n\n"):
        return ""
    if text.endswith("\n"):
        return "\n"
    return "\n\n"


def find_header_source(directory: DocDir) -> DocDir | None:
    """Return the first file child labelled like ``directory`` itself."""
    header = directory.header()
    return next(
        (child for child in directory.children if not child.is_dir and child.header() == header),
        None,
    )


def read_header(directory: DocDir, *, read_text: TextReader = default_read_text) -> str:
    """Return the rebuilt header document for ``directory``.

    Returns an empty string when the folder has no header-source file or the
    file cannot be read.
    """
    source = find_header_source(directory)
    if source is None:
        logger.warning("read_header | header not found in %s", directory.path)
        return ""
    try:
        text = read_text(source.path)
    except ReadError as exc:
        logger.debug("read_header | skipping unreadable header %s: %s", source.path, exc)
        return ""
    return rebuild_header(text, directory.header())


def rebuild_header(text: str, header: str) -> str:
    """Prefix the first heading of ``text`` with ``header``.

    ``# Doc header`` with header ``Part 01`` becomes ``# Part 01. Doc header``
    followed by a blank line and the rest of the file. Text whose first line
    is not a heading is returned unchanged.
    """
    lines = text.split("\n")
    match = _HEADING_RE.match(lines[0])
    if match is None:
        return text
    hashes, heading = match.groups()
    rest = "\n".join(lines[1:]).lstrip("\n")
    if not rest.strip():
        rest = "\n\n"
    return f"{hashes} {header}. {heading}\n\n{rest}"
