from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def write_html(tmp_path: Path):
    def _write(body: str, name: str = "doc.html") -> Path:
        path = tmp_path / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write
