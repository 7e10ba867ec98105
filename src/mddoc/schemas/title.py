"""Title page model."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Title(BaseModel):
    """Parsed title page.

    Attributes:
        path: File the title page was read from.
        raw: Full file text, ending with a blank line. Prepended verbatim to
            the combined document.
        title: Document title.
        subtitle: Optional subtitle.
        authors: Author names, in the order given.
        date: Optional date, as text.
        metadata: Every other front-matter key.
    """

    path: Path
    raw: str
    title: str
    subtitle: str | None = None
    authors: list[str] = Field(default_factory=list)
    date: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
