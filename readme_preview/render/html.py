"""Markdown to sanitized, themed HTML."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional

import bleach
from bleach.linkifier import LinkifyFilter
from markdown_it import MarkdownIt
from markupsafe import Markup
from mdit_py_plugins.tasklists import tasklists_plugin

from ..logging import get_logger
from ..templating import render_template
from .assets import AssetRewriter, RewriteOptions
from .themes import THEMES, pick_theme

DEFAULT_TITLE = "README Preview"
PAGE_TEMPLATE = "page.html.j2"

# bleach's defaults are inline-only; add the block elements a README needs.
DEFAULT_TAGS: FrozenSet[str] = frozenset(bleach.sanitizer.ALLOWED_TAGS) | {
    "p",
    "br",
    "hr",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "pre",
    "del",
    "s",
    "sub",
    "sup",
    "div",
    "span",
}
TABLE_TAGS: FrozenSet[str] = frozenset({"table", "thead", "tbody", "tr", "th", "td"})
ALLOWED_TAGS: FrozenSet[str] = DEFAULT_TAGS | TABLE_TAGS | {"img"}
ALLOWED_ATTRIBUTES: Dict[str, List[str]] = {
    "a": ["href", "target", "rel"],
    "img": ["src", "alt", "title"],
    "*": ["id"],
}
ALLOWED_PROTOCOLS: FrozenSet[str] = frozenset({"http", "https", "mailto", "ftp", "tel"})

# Bare URLs are already linked by the parser; the link filter only decorates anchors.
_NO_BARE_URLS = re.compile(r"(?!)")


def _open_in_new_tab(attrs: Dict[object, str], new: bool = False) -> Dict[object, str]:
    attrs[(None, "target")] = "_blank"
    attrs[(None, "rel")] = "noreferrer noopener"
    return attrs


def build_markdown_parser() -> MarkdownIt:
    """CommonMark with tables, strikethrough, autolinks and task lists."""
    return MarkdownIt("gfm-like").use(tasklists_plugin)


def build_cleaner() -> bleach.Cleaner:
    return bleach.Cleaner(
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
        filters=[
            partial(
                LinkifyFilter,
                callbacks=[_open_in_new_tab],
                url_re=_NO_BARE_URLS,
                parse_email=False,
            )
        ],
    )


@dataclass
class RenderOptions:
    """Options for rendering a README preview page."""

    cwd: Path = field(default_factory=Path.cwd)
    branch: str = "HEAD"
    base_url: Optional[str] = None
    rewrite_links: bool = False
    title: str = DEFAULT_TITLE
    theme: str = THEMES[0]


class HtmlRenderer:
    """Rewrites assets, converts markdown, sanitizes and wraps it in a page."""

    def __init__(
        self,
        parser: MarkdownIt | None = None,
        cleaner: bleach.Cleaner | None = None,
        rewriter: AssetRewriter | None = None,
    ) -> None:
        self.parser = parser or build_markdown_parser()
        self.cleaner = cleaner or build_cleaner()
        self.rewriter = rewriter or AssetRewriter()
        self.logger = get_logger("render")

    def render_fragment(self, markdown: str, options: RenderOptions) -> str:
        """Return the sanitized HTML body for ``markdown``."""
        processed = self.rewriter.rewrite(
            markdown,
            RewriteOptions(
                cwd=Path(options.cwd),
                branch=options.branch,
                base_url=options.base_url,
                rewrite_links=options.rewrite_links,
            ),
        )
        raw = self.parser.render(processed)
        return self.cleaner.clean(raw)

    def render(self, markdown: str, options: RenderOptions | None = None) -> str:
        options = options or RenderOptions()
        fragment = self.render_fragment(markdown, options)
        self.logger.debug(
            "Rendered %d chars of markdown into %d chars of HTML (theme=%s)",
            len(markdown),
            len(fragment),
            options.theme,
        )
        return render_template(
            PAGE_TEMPLATE,
            autoescape=True,
            title=options.title,
            stylesheet=Markup(pick_theme(options.theme)),
            content=Markup(fragment),
        )


def render_readme_html(markdown: str, options: RenderOptions | None = None) -> str:
    """Render ``markdown`` into a complete HTML document."""
    return HtmlRenderer().render(markdown, options)


__all__ = [
    "ALLOWED_ATTRIBUTES",
    "ALLOWED_TAGS",
    "HtmlRenderer",
    "RenderOptions",
    "build_cleaner",
    "build_markdown_parser",
    "render_readme_html",
]
