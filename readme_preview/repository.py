"""Repository metadata discovery from package.json or pyproject.toml."""

from __future__ import annotations

import json
import re
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

_GITHUB_PATTERN = re.compile(r"github\.com[:/](.+?)/(.+?)(?:\.git)?$")
_PYPROJECT_URL_KEYS = ("repository", "source", "homepage")


@dataclass(frozen=True)
class RepositorySlug:
    """Owner/name pair of a GitHub repository."""

    owner: str
    name: str

    def raw_base_url(self, branch: str) -> str:
        return f"https://raw.githubusercontent.com/{self.owner}/{self.name}/{branch}/"


def read_repository_url(cwd: Path) -> Optional[str]:
    """Return the repository URL declared by the project in ``cwd``, if any.

    ``package.json`` wins over ``pyproject.toml``. Missing or malformed files
    are treated as "no metadata".
    """
    return _from_package_json(cwd / "package.json") or _from_pyproject(
        cwd / "pyproject.toml"
    )


def parse_repository_slug(url: str) -> Optional[RepositorySlug]:
    match = _GITHUB_PATTERN.search(url.strip())
    if not match:
        return None
    return RepositorySlug(owner=match.group(1), name=match.group(2))


def find_repository_slug(cwd: Path) -> Optional[RepositorySlug]:
    url = read_repository_url(cwd)
    return parse_repository_slug(url) if url else None


def _from_package_json(path: Path) -> Optional[str]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    repository = data.get("repository")
    if isinstance(repository, dict):
        repository = repository.get("url")
    return _as_url(repository)


def _from_pyproject(path: Path) -> Optional[str]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    project = data.get("project")
    urls = project.get("urls") if isinstance(project, dict) else None
    if not isinstance(urls, dict):
        return None
    by_key = {str(key).lower(): value for key, value in urls.items()}
    for key in _PYPROJECT_URL_KEYS:
        url = _as_url(by_key.get(key))
        if url and parse_repository_slug(url):
            return url
    return None


def _as_url(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value.strip() else None


__all__ = [
    "RepositorySlug",
    "find_repository_slug",
    "parse_repository_slug",
    "read_repository_url",
]
