"""Stylesheets for the preview page."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

NPM_THEME = """
  :root { color-scheme: light dark; }
  body {
    margin: 0;
    font: 16px/1.6 -apple-system,BlinkMacSystemFont,Segoe UI,Helvetica,Arial,sans-serif;
    background: #fff;
    color: #111;
  }
  .wrap { max-width: 960px; margin: 0 auto; padding: 32px 16px; }
  h1 { font-size: 32px; margin-top: 0; }
  h2 { font-size: 24px; margin-top: 32px; }
  h3 { font-size: 20px; margin-top: 24px; }
  pre { background: #f6f8fa; padding: 16px; border-radius: 8px; overflow: auto; }
  code { font-family: ui-monospace,SFMono-Regular,Menlo,monospace; background: #f6f8fa; padding: 2px 6px; border-radius: 4px; }
  table { border-collapse: collapse; width: 100%; }
  th, td { border: 1px solid #d0d7de; padding: 8px; }
  img { max-width: 100%; }
  a { color: #0969da; text-decoration: none; }
  a:hover { text-decoration: underline; }
  blockquote { border-left: 4px solid #d0d7de; margin: 0; padding-left: 16px; color: #57606a; }
"""

GITHUB_THEME = """
  :root { color-scheme: light dark; }
  body { margin: 0; font: 16px/1.6 -apple-system,BlinkMacSystemFont,Segoe UI,Helvetica,Arial,sans-serif; }
  .wrap { max-width: 980px; margin: 0 auto; padding: 32px 16px; }
  pre { padding: 16px; border-radius: 6px; overflow: auto; border: 1px solid rgba(127,127,127,.25); }
  code { font-family: ui-monospace,SFMono-Regular,Menlo,monospace; }
  table { border-collapse: collapse; width: 100%; }
  th, td { border: 1px solid rgba(127,127,127,.25); padding: 8px; }
  img { max-width: 100%; }
  blockquote { margin: 0; padding-left: 16px; border-left: 4px solid rgba(127,127,127,.35); }
"""

# The first entry is the default theme.
THEMES: Tuple[str, ...] = ("npm", "github")

_STYLESHEETS: Dict[str, str] = {
    "npm": NPM_THEME,
    "github": GITHUB_THEME,
}


def pick_theme(theme: Optional[str]) -> str:
    """Return the stylesheet for ``theme``; unknown names get the default."""
    key = str(theme or "").lower()
    return _STYLESHEETS.get(key, _STYLESHEETS[THEMES[0]])


__all__ = ["GITHUB_THEME", "NPM_THEME", "THEMES", "pick_theme"]
