"""Tests for relative asset rewriting."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

from readme_preview.render.assets import RewriteOptions, resolve_base_url, rewrite_assets


def test_rewrite_is_noop_without_base_or_metadata(tmp_path: Path) -> None:
    md = "# T\n\n![i](./a.png)\n[l](./docs.md)"
    result = rewrite_assets(md, RewriteOptions(cwd=tmp_path, rewrite_links=True))
    assert result is md


def test_rewrite_uses_explicit_base_url(tmp_path: Path) -> None:
    md = "# T\n\n![i](./a.png)"
    result = rewrite_assets(md, RewriteOptions(cwd=tmp_path, base_url="https://example.com/"))
    assert result == "# T\n\n![i](https://example.com/a.png)"


def test_explicit_base_url_gets_trailing_slash(tmp_path: Path) -> None:
    result = rewrite_assets(
        "![logo](img/logo.svg)",
        RewriteOptions(cwd=tmp_path, base_url="https://cdn.test/assets"),
    )
    assert result == "![logo](https://cdn.test/assets/img/logo.svg)"


def test_absolute_and_data_images_are_untouched(tmp_path: Path) -> None:
    md = "![a](https://example.com/a.png) ![b](data:image/png;base64,AAA)"
    result = rewrite_assets(md, RewriteOptions(cwd=tmp_path, base_url="https://other.test/"))
    assert result == md


def test_base_url_inferred_from_package_json(
    tmp_path: Path, write_package_json: Callable[[Any], Path]
) -> None:
    write_package_json("https://github.com/octo/widgets.git")
    result = rewrite_assets("![s](./shot.png)", RewriteOptions(cwd=tmp_path, branch="main"))
    assert result == "![s](https://raw.githubusercontent.com/octo/widgets/main/shot.png)"


def test_base_url_inferred_from_repository_object(
    tmp_path: Path, write_package_json: Callable[[Any], Path]
) -> None:
    write_package_json({"type": "git", "url": "git+https://github.com/octo/widgets.git"})
    assert (
        resolve_base_url(tmp_path, "HEAD")
        == "https://raw.githubusercontent.com/octo/widgets/HEAD/"
    )


def test_explicit_base_url_wins_over_metadata(
    tmp_path: Path, write_package_json: Callable[[Any], Path]
) -> None:
    write_package_json("https://github.com/octo/widgets")
    assert resolve_base_url(tmp_path, "main", "https://example.com") == "https://example.com/"


def test_unrecognised_repository_is_noop(
    tmp_path: Path, write_package_json: Callable[[Any], Path]
) -> None:
    write_package_json("https://gitlab.com/octo/widgets.git")
    md = "![s](./shot.png)"
    assert rewrite_assets(md, RewriteOptions(cwd=tmp_path)) == md


def test_malformed_package_json_is_noop(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
    md = "![s](./shot.png)"
    assert rewrite_assets(md, RewriteOptions(cwd=tmp_path)) == md


def test_links_are_only_rewritten_when_requested(tmp_path: Path) -> None:
    md = "[guide](./docs/guide.md)"
    base = "https://example.com/"
    assert rewrite_assets(md, RewriteOptions(cwd=tmp_path, base_url=base)) == md
    assert (
        rewrite_assets(md, RewriteOptions(cwd=tmp_path, base_url=base, rewrite_links=True))
        == "[guide](https://example.com/docs/guide.md)"
    )


def test_hash_mailto_and_absolute_links_are_kept(tmp_path: Path) -> None:
    md = "[a](#x) [b](mailto:me@example.com) [c](https://example.org/page) [d](http://x.test)"
    options = RewriteOptions(cwd=tmp_path, base_url="https://example.com/", rewrite_links=True)
    assert rewrite_assets(md, options) == md


def test_images_are_not_rewritten_twice_by_link_pass(tmp_path: Path) -> None:
    options = RewriteOptions(cwd=tmp_path, base_url="/static/", rewrite_links=True)
    assert rewrite_assets("![a](./a.png)", options) == "![a](/static/a.png)"
