"""Local configuration for mddoc."""

from __future__ import annotations

import os


DEFAULT_ENCODING = "utf-8"
DEFAULT_MARKDOWN_SUFFIXES = ".md,.markdown"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TOKEN_ENCODING = "o200k_base"


def _parse_suffixes(value: str) -> tuple[str, ...]:
    suffixes = []
    for item in value.split(","):
        item = item.strip().lower()
        if not item:
            continue
        suffixes.append(item if item.startswith(".") else f".{item}")
    return tuple(suffixes)


# Encoding used to read markdown fragments and title pages.
MDDOC_ENCODING = os.getenv("MDDOC_ENCODING", DEFAULT_ENCODING)
MDDOC_MARKDOWN_SUFFIXES = _parse_suffixes(os.getenv("MDDOC_MARKDOWN_SUFFIXES", DEFAULT_MARKDOWN_SUFFIXES))
MDDOC_LOG_LEVEL = os.getenv("MDDOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
MDDOC_TOKEN_ENCODING = os.getenv("MDDOC_TOKEN_ENCODING", DEFAULT_TOKEN_ENCODING)
