"""Recognize and parse title pages.

A title page is a markdown file that opens with a YAML front-matter block
holding a ``title`` key::

    ---
    title: Operations Manual
    subtitle: Volume 1
    author: [Ada Lovelace, Charles Babbage]
    date: 2024-05-01
    ---
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from mddoc.exceptions import ReadError, TitlePageError
from mddoc.reader import read_text
from mddoc.schemas import Title
from mddoc.utils.logging_config import get_logger

logger = get_logger(__name__)

_OPEN_FENCE = "---"
_CLOSE_FENCES = ("---", "...")
_KNOWN_KEYS = ("title", "subtitle", "author", "authors", "date")


def split_front_matter(text: str) -> tuple[str, str] | None:
    """Split ``text`` into its front-matter block and the remaining body.

    Returns None when the text does not open with a closed front-matter block.
    """
    lines = text.lstrip("\ufeff").split("\n")
    if lines[0].rstrip() != _OPEN_FENCE:
        return None
    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() in _CLOSE_FENCES:
            return "\n".join(lines[1:index]), "\n".join(lines[index + 1 :])
    return None


def parse_title(text: str, path: Path) -> Title:
    """Build a Title from title-page text.

    Raises:
        TitlePageError: If the text has no front matter, the front matter is
            not a YAML mapping, or it has no title.
    """
    parts = split_front_matter(text)
    if parts is None:
        raise TitlePageError(f"No front matter in {path}")
    return _title_from_front_matter(parts[0], text, path)


def _title_from_front_matter(front_matter: str, text: str, path: Path) -> Title:
    # Out-of-range scalars such as `date: 2024-02-30` raise ValueError, not YAMLError.
    try:
        data = yaml.safe_load(front_matter)
    except (yaml.YAMLError, ValueError) as exc:
        raise TitlePageError(f"Invalid front matter in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TitlePageError(f"Front matter in {path} is not a mapping")

    title = _as_text(data.get("title"))
    if not title:
        raise TitlePageError(f"Front matter in {path} has no title")

    raw = text if text.endswith("\n\n") else text.rstrip("\n") + "\n\n"
    return Title(
        path=path,
        raw=raw,
        title=title,
        subtitle=_as_text(data.get("subtitle")),
        authors=_as_authors(data.get("authors", data.get("author"))),
        date=_as_text(data.get("date")),
        metadata={str(key): value for key, value in data.items() if key not in _KNOWN_KEYS},
    )


def extract_title(path: Path) -> Title | None:
    """Return the parsed title page at ``path``, or None if it is not one."""
    try:
        text = read_text(path)
    except ReadError as exc:
        logger.debug("extract_title | %s", exc)
        return None

    parts = split_front_matter(text)
    if parts is None:
        return None
    try:
        return _title_from_front_matter(parts[0], text, path)
    except TitlePageError as exc:
        logger.debug("extract_title | %s", exc)
        return None


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_authors(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        names = [_as_text(item) for item in value]
        return [name for name in names if name]
    name = _as_text(value)
    return [name] if name else []
