"""Jinja environments for the preview page and scaffolded files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATES_DIR = Path(__file__).with_name("templates")


@lru_cache(maxsize=None)
def get_environment(*, autoescape: bool) -> Environment:
    """Return a shared environment; HTML output uses ``autoescape=True``."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=autoescape,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=not autoescape,
        undefined=StrictUndefined,
    )


def render_template(template_name: str, /, *, autoescape: bool = False, **context: object) -> str:
    return get_environment(autoescape=autoescape).get_template(template_name).render(**context)


__all__ = ["TEMPLATES_DIR", "get_environment", "render_template"]
