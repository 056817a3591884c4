"""Pytest configuration.

The scripts import each other by bare module name, so the scripts directory
and the repository root both need to be importable without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SCRIPTS = ROOT / "scripts"
for p in (ROOT, SCRIPTS):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from tests._paths import write_schema  # noqa: E402


@pytest.fixture
def src_tree(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    write_schema(src, "v1/a.json", '{"title": "a v1"}')
    write_schema(src, "v1/b.json", '{"title": "b v1"}')
    write_schema(src, "v1/nested/c.json", '{"title": "c v1"}')
    write_schema(src, "v2/a.json", '{"title": "a v2"}')
    write_schema(src, "v2/README.md", "not a schema")
    write_schema(src, "v10/b.json", '{"title": "b v10"}')
    write_schema(src, "drafts/z.json", '{"title": "draft"}')
    return src
