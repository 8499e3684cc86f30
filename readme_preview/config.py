"""Configuration loading for readme-preview (.readme-preview.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".readme-preview.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class PreviewConfig:
    """Project defaults read from .readme-preview.yml.

    Every field is optional; ``None`` means "not configured" so command line
    flags and built-in defaults can be layered on top.
    """

    root: Path
    file: Optional[str] = None
    port: Optional[int] = None
    theme: Optional[str] = None
    branch: Optional[str] = None
    base_url: Optional[str] = None
    rewrite_links: Optional[bool] = None
    title: Optional[str] = None
    strict: Optional[bool] = None
    open_browser: Optional[bool] = None
    workflow_name: Optional[str] = None


def load_config(config_path: Path) -> PreviewConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PreviewConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    return PreviewConfig(
        root=root,
        file=_as_str(data.get("file")),
        port=_as_int(data.get("port")),
        theme=_as_str(data.get("theme")),
        branch=_as_str(data.get("branch")),
        base_url=_as_str(data.get("base_url")),
        rewrite_links=_as_bool(data.get("rewrite_links")),
        title=_as_str(data.get("title")),
        strict=_as_bool(data.get("strict")),
        open_browser=_as_bool(data.get("open_browser")),
        workflow_name=_as_str(data.get("workflow_name")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def as_dict(config: PreviewConfig) -> Dict[str, Any]:
    """Return the configured (non-``None``) values keyed by field name."""
    values = {
        "file": config.file,
        "port": config.port,
        "theme": config.theme,
        "branch": config.branch,
        "base_url": config.base_url,
        "rewrite_links": config.rewrite_links,
        "title": config.title,
        "strict": config.strict,
        "open_browser": config.open_browser,
        "workflow_name": config.workflow_name,
    }
    return {key: value for key, value in values.items() if value is not None}


__all__ = ["CONFIG_FILENAME", "ConfigError", "PreviewConfig", "as_dict", "load_config"]
