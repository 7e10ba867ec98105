"""Header labels derived from file and folder names."""

from __future__ import annotations

import re

_PREFIX_RE = re.compile(r"^([^\W\d_]*)(\d*)$")


def header_from_name(name: str) -> str:
    """Derive a section label from a path segment.

    The segment is cut at the first underscore and the prefix is split into
    its word and number parts::

        part01_xyz    -> Part 01
        chapter2_intro -> Chapter 2
        appendix_a    -> Appendix
        01_preface    -> 01

    A prefix that does not split that way is capitalized as is.
    """
    prefix = name.split("_", 1)[0].strip()
    match = _PREFIX_RE.match(prefix)
    if match is None:
        return prefix.capitalize()
    word, number = match.groups()
    parts = [part for part in (word.capitalize(), number) if part]
    return " ".join(parts)
