from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture
def write_package_json(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a package.json with the given ``repository`` field into tmp_path."""

    def _write(repository: Any) -> Path:
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "widgets", "repository": repository}), encoding="utf-8")
        return path

    return _write
