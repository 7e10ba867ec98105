"""Summarize a combined document."""

from __future__ import annotations

from typing import TYPE_CHECKING

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

from mddoc.config import MDDOC_TOKEN_ENCODING
from mddoc.pagebreaks import PAGEBREAK

if TYPE_CHECKING:
    from mddoc.document import MdDoc


def format_summary(doc: "MdDoc") -> str:
    """Create a short plain-text summary of ``doc``."""
    lines = []
    if doc.title:
        lines.append(f"Title: {doc.title.title}")
        if doc.title.authors:
            lines.append(f"Authors: {', '.join(doc.title.authors)}")
    lines.append(f"Root: {doc.source.path}")
    lines.append(f"Sections: {len(top_level_headings(doc.markdown))}")
    lines.append(f"Page breaks: {count_pagebreaks(doc.markdown)}")

    token_estimate = _format_token_count(doc.joined())
    if token_estimate:
        lines.append(f"Estimated tokens: {token_estimate}")
    return "\n".join(lines)


def top_level_headings(text: str) -> list[str]:
    """Return the text of every ``# `` heading line."""
    return [line[2:].strip() for line in text.split("\n") if line.startswith("# ")]


def count_pagebreaks(text: str) -> int:
    return sum(1 for line in text.split("\n") if PAGEBREAK in line)


def _format_token_count(text: str) -> str | None:
    if not tiktoken:
        return None
    try:
        encoding = tiktoken.get_encoding(MDDOC_TOKEN_ENCODING)
        total_tokens = len(encoding.encode(text, disallowed_special=()))
    except Exception:
        return None

    if total_tokens >= 1_000_000:
        return f"{total_tokens / 1_000_000:.1f}M"
    if total_tokens >= 1_000:
        return f"{total_tokens / 1_000:.1f}k"
    return str(total_tokens)
