"""README rendering pipeline: asset rewriting, markdown conversion, sanitizing."""

from .assets import AssetRewriter, RewriteOptions, resolve_base_url, rewrite_assets
from .html import HtmlRenderer, RenderOptions, render_readme_html
from .themes import THEMES, pick_theme

__all__ = [
    "AssetRewriter",
    "HtmlRenderer",
    "RenderOptions",
    "RewriteOptions",
    "THEMES",
    "pick_theme",
    "render_readme_html",
    "resolve_base_url",
    "rewrite_assets",
]
