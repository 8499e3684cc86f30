"""Tests for HTML rendering and sanitizing."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from readme_preview.render import RenderOptions, render_readme_html
from readme_preview.render.themes import GITHUB_THEME, NPM_THEME, pick_theme


@pytest.fixture
def options(tmp_path: Path) -> RenderOptions:
    return RenderOptions(cwd=tmp_path)


def test_renders_basic_document(options: RenderOptions) -> None:
    html = render_readme_html("# Hello\n\nWorld", options)
    assert html.startswith("<!doctype html>")
    assert "<h1>Hello</h1>" in html
    assert "World" in html


def test_page_shell_contains_meta_and_wrapper(options: RenderOptions) -> None:
    html = render_readme_html("# Test", options)
    assert '<meta charset="utf-8"/>' in html
    assert 'name="viewport"' in html
    assert '<div class="wrap">' in html


def test_title_is_set_and_escaped(tmp_path: Path) -> None:
    html = render_readme_html("# Test", RenderOptions(cwd=tmp_path, title="Custom Title"))
    assert "<title>Custom Title</title>" in html

    html = render_readme_html("# Test", RenderOptions(cwd=tmp_path, title="<b>x</b>"))
    assert "<title>&lt;b&gt;x&lt;/b&gt;</title>" in html


def test_default_theme_is_npm(options: RenderOptions) -> None:
    html = render_readme_html("# Test", options)
    assert NPM_THEME in html
    assert "color-scheme: light dark" in html


@pytest.mark.parametrize("theme", ["github", "GitHub", "GITHUB"])
def test_github_theme_is_case_insensitive(tmp_path: Path, theme: str) -> None:
    html = render_readme_html("# Test", RenderOptions(cwd=tmp_path, theme=theme))
    assert GITHUB_THEME in html
    assert NPM_THEME not in html


def test_unknown_theme_falls_back_to_default() -> None:
    assert pick_theme("solarized") == NPM_THEME
    assert pick_theme(None) == NPM_THEME


@pytest.mark.parametrize(
    "markdown",
    [
        "# Test\n\n<script>alert('xss')</script>\n\nSafe",
        "# Test\n\nInline <SCRIPT src=x></SCRIPT> Safe",
        "<scr<script>ipt>alert(1)</script>\n\nSafe",
    ],
)
def test_script_tags_are_removed(options: RenderOptions, markdown: str) -> None:
    html = render_readme_html(markdown, options)
    assert "<script" not in html.lower()
    assert "Safe" in html


def test_event_handler_attributes_are_removed(options: RenderOptions) -> None:
    html = render_readme_html('# Test\n\n<img src="x.png" onerror="alert(1)">', options)
    assert "onerror" not in html


def test_tables_are_allowed(options: RenderOptions) -> None:
    html = render_readme_html("# Test\n\n| Header |\n|--------|\n| Cell   |", options)
    assert "<table>" in html
    assert "<th>Header</th>" in html
    assert "<td>Cell</td>" in html


def test_code_blocks_and_inline_code(options: RenderOptions) -> None:
    html = render_readme_html("# Test\n\n```bash\necho hello\n```\n\nUse `pip install`", options)
    assert "<pre>" in html
    assert "<code>" in html
    assert "echo hello" in html
    assert "pip install" in html


def test_strikethrough_and_blockquote(options: RenderOptions) -> None:
    html = render_readme_html("# Test\n\n~~gone~~\n\n> This is a quote", options)
    assert "<s>gone</s>" in html
    assert "<blockquote>" in html
    assert "This is a quote" in html


def test_task_list_checkboxes_are_stripped(options: RenderOptions) -> None:
    html = render_readme_html("# Test\n\n- [x] done\n- [ ] todo", options)
    assert "<input" not in html
    assert "done" in html
    assert "todo" in html


def test_all_anchors_open_in_new_tab(options: RenderOptions) -> None:
    md = (
        "# Test\n\n[Example](https://example.com) and https://autolink.example.org\n\n"
        '<a href="https://raw.example" target="_self" rel="opener">raw</a>'
    )
    html = render_readme_html(md, options)
    anchors = re.findall(r"<a\s[^>]*>", html)
    assert len(anchors) == 3
    for anchor in anchors:
        assert 'target="_blank"' in anchor
        assert 'rel="noreferrer noopener"' in anchor


def test_images_keep_alt_text(options: RenderOptions) -> None:
    html = render_readme_html("# Test\n\n![Screenshot](https://example.com/img.png)", options)
    assert "<img" in html
    assert 'alt="Screenshot"' in html
    assert 'src="https://example.com/img.png"' in html


def test_relative_images_rewritten_with_base_url(tmp_path: Path) -> None:
    html = render_readme_html(
        "# T\n\n![i](./a.png)",
        RenderOptions(cwd=tmp_path, base_url="https://example.com/"),
    )
    assert "https://example.com/a.png" in html


def test_relative_links_rewritten_when_enabled(tmp_path: Path) -> None:
    html = render_readme_html(
        "# Test\n\n[link](./other.md)",
        RenderOptions(cwd=tmp_path, base_url="https://example.com/", rewrite_links=True),
    )
    assert "https://example.com/other.md" in html


def test_hash_and_mailto_links_survive(tmp_path: Path) -> None:
    html = render_readme_html(
        "# T\n\n[l](#x) [email](mailto:test@example.com)",
        RenderOptions(cwd=tmp_path, base_url="https://example.com/", rewrite_links=True),
    )
    assert 'href="#x"' in html
    assert "mailto:test@example.com" in html


def test_absolute_image_urls_are_kept(tmp_path: Path) -> None:
    html = render_readme_html(
        "# Test\n\n![img](https://example.com/img.png)",
        RenderOptions(cwd=tmp_path, base_url="https://other.com/"),
    )
    assert "https://example.com/img.png" in html
    assert "https://other.com/" not in html
