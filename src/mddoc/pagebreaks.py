"""Page-break markers and the pass that places them before headings."""

from __future__ import annotations

import re

# Replaced by the renderer with its own page-break construct,
# e.g. ``<div class="pagebreak"> </div>``.
PAGEBREAK = "======================pagebreak======================"

# Insertion point for the rendered body inside an enclosing template.
BODY_CONTENT = "======================body-section-content======================"

_BLANK_RE = re.compile(r"^\s*$")
_TOP_LEVEL_HEADING = "# "


def is_blank(line: str) -> bool:
    return bool(_BLANK_RE.match(line))


def _last_non_blank(lines: list[str]) -> str | None:
    for line in reversed(lines):
        if not is_blank(line):
            return line
    return None


def ends_with_pagebreak(text: str) -> bool:
    """Return True if the last non-blank line of ``text`` holds a page break."""
    last_line = _last_non_blank(text.split("\n"))
    return last_line is not None and PAGEBREAK in last_line


def add_pagebreaks(doc: str) -> str:
    """Insert a page break before every top-level heading except the first line.

    The marker is separated from the surrounding text by single blank lines.
    Headings already preceded by a marker are left alone, so running the pass
    twice gives the same result as running it once.
    """
    lines = doc.split("\n")
    result = [lines[0]]
    for line in lines[1:]:
        if line.startswith(_TOP_LEVEL_HEADING):
            last_line = _last_non_blank(result)
            has_break = last_line is not None and PAGEBREAK in last_line
            if not is_blank(result[-1]):
                result.append("")
            if not has_break:
                result.extend([PAGEBREAK, ""])
        result.append(line)
    return "\n".join(result)
