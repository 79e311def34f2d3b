"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A small front-end project tree to scan."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "a.html").write_text("<div class='bg-background'></div>")
    (tmp_path / "src" / "b.ext").write_text("class=\"text-accent-1\"")
    (tmp_path / "index.html").write_text("<body class='font-fira-sans'></body>")
    (tmp_path / "other.txt").write_text("not scanned")
    return tmp_path


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a config document (dict as YAML, str verbatim) and return its path."""

    def _write(data: dict[str, Any] | str, name: str = "theme.config.yaml") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
