"""Rewrites relative image and link targets to an absolute base URL."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..logging import get_logger
from ..repository import find_repository_slug

_IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\((?!https?://|data:)([^)]+)\)")
# Images are handled by the image pass, so plain links exclude a leading "!".
_LINK_PATTERN = re.compile(r"(?<!!)\[([^\]]+)\]\((?!https?://|mailto:|#)([^)]+)\)")
_LEADING_DOT_SLASH = re.compile(r"^\./")

logger = get_logger("render.assets")


@dataclass
class RewriteOptions:
    """Inputs for resolving and applying a base URL."""

    cwd: Path
    branch: str = "HEAD"
    base_url: Optional[str] = None
    rewrite_links: bool = False


def ensure_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else url + "/"


def resolve_base_url(cwd: Path, branch: str, base_url: Optional[str] = None) -> Optional[str]:
    """Return the explicit ``base_url`` or one inferred from repository metadata."""
    if base_url:
        return ensure_trailing_slash(base_url)
    slug = find_repository_slug(cwd)
    if slug is None:
        return None
    return slug.raw_base_url(branch)


class AssetRewriter:
    """Makes relative README assets fetchable from a rendered preview."""

    def rewrite(self, markdown: str, options: RewriteOptions) -> str:
        base = resolve_base_url(Path(options.cwd), options.branch, options.base_url)
        if not base:
            logger.debug("No base URL resolved; leaving relative targets untouched")
            return markdown
        logger.debug("Rewriting relative targets against %s", base)

        def _image(match: re.Match[str]) -> str:
            return f"![{match.group(1)}]({base}{_strip_dot_slash(match.group(2))})"

        def _link(match: re.Match[str]) -> str:
            return f"[{match.group(1)}]({base}{_strip_dot_slash(match.group(2))})"

        rewritten = _IMAGE_PATTERN.sub(_image, markdown)
        if options.rewrite_links:
            rewritten = _LINK_PATTERN.sub(_link, rewritten)
        return rewritten


def _strip_dot_slash(path: str) -> str:
    return _LEADING_DOT_SLASH.sub("", path)


def rewrite_assets(markdown: str, options: RewriteOptions) -> str:
    return AssetRewriter().rewrite(markdown, options)


__all__ = [
    "AssetRewriter",
    "RewriteOptions",
    "ensure_trailing_slash",
    "resolve_base_url",
    "rewrite_assets",
]
