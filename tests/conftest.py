"""Test setup for mddoc."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mddoc.schemas import DocDir  # noqa: E402

TITLE_PAGE = """---
title: Operations Manual
subtitle: Volume 1
author: [Ada Lovelace, Charles Babbage]
date: 2024-05-01
lang: en
---
"""


def _write(base: Path, layout: dict) -> None:
    for name, value in layout.items():
        path = base / name
        if isinstance(value, dict):
            path.mkdir()
            _write(path, value)
        else:
            path.write_text(value, encoding="utf-8")


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict], Path]:
    """Write a nested dict of folders and files under tmp_path/book."""

    def _make(layout: dict) -> Path:
        root = tmp_path / "book"
        root.mkdir()
        _write(root, layout)
        return root

    return _make


def file_node(path: str) -> DocDir:
    return DocDir(path=Path(path), is_dir=False)


def dir_node(path: str, *children: DocDir) -> DocDir:
    return DocDir(path=Path(path), is_dir=True, children=list(children))
