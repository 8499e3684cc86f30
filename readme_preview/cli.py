"""CLI entrypoints for readme-preview commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List

from . import __version__
from .checks import run_checks
from .config import ConfigError, as_dict, load_config
from .logging import configure_logging, get_logger
from .render import THEMES, RenderOptions, render_readme_html
from .scaffold import DEFAULT_WORKFLOW_NAME, ScaffoldOptions, run_init
from .service import run_preview, write_build

COMMANDS = ("preview", "build", "check", "init")

DEFAULTS: Dict[str, Any] = {
    "file": "README.md",
    "port": 4173,
    "theme": THEMES[0],
    "branch": "HEAD",
    "base_url": None,
    "rewrite_links": False,
    "title": "README Preview",
    "strict": False,
    "open_browser": True,
    "workflow_name": DEFAULT_WORKFLOW_NAME,
}

logger = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write log records to this file.",
    )


def _add_file_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--file",
        default=None,
        help="Markdown file to read (default: README.md).",
    )


def _add_render_options(parser: argparse.ArgumentParser) -> None:
    _add_file_option(parser)
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Page stylesheet, one of: {', '.join(THEMES)} (default: {THEMES[0]}).",
    )
    parser.add_argument("--title", default=None, help="Title of the preview page.")
    parser.add_argument(
        "--branch",
        default=None,
        help="Git branch used for raw asset URLs (default: HEAD).",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Override the base URL used to rewrite relative assets.",
    )
    parser.add_argument(
        "--rewrite-links",
        action="store_true",
        default=None,
        help="Also rewrite relative markdown links, not just images.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readme-preview",
        description="Preview, lint, and bootstrap README quality before publishing.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    preview_parser = subparsers.add_parser(
        "preview",
        help="Preview the README in a browser (default command).",
    )
    _add_verbose_option(preview_parser, suppress_default=True)
    _add_log_file_option(preview_parser, suppress_default=True)
    _add_render_options(preview_parser)
    preview_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Preview port (default: 4173).",
    )
    preview_parser.add_argument(
        "--no-open",
        dest="open_browser",
        action="store_false",
        default=None,
        help="Do not open a browser tab.",
    )

    build_parser = subparsers.add_parser(
        "build",
        help="Write a static HTML preview to .readme-preview/index.html.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    _add_log_file_option(build_parser, suppress_default=True)
    _add_render_options(build_parser)

    check_parser = subparsers.add_parser(
        "check",
        help="Run README validation.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_log_file_option(check_parser, suppress_default=True)
    _add_file_option(check_parser)
    check_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Also fail on strict (advisory) rules.",
    )

    init_parser = subparsers.add_parser(
        "init",
        help="Scaffold README boilerplate and a CI workflow.",
    )
    _add_verbose_option(init_parser, suppress_default=True)
    _add_log_file_option(init_parser, suppress_default=True)
    init_parser.add_argument(
        "--assets",
        dest="add_assets",
        action="store_true",
        help="Add a placeholder assets/screenshot.png.",
    )
    init_parser.add_argument(
        "--workflow-only",
        action="store_true",
        help="Only create the GitHub Actions workflow.",
    )
    init_parser.add_argument(
        "--readme-only",
        action="store_true",
        help="Only patch the README.",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing files.",
    )
    init_parser.add_argument(
        "--workflow-name",
        default=None,
        help=f'Workflow name (default: "{DEFAULT_WORKFLOW_NAME}").',
    )

    return parser


_GLOBAL_FLAGS = {"-v", "--verbose"}
_GLOBAL_OPTIONS = {"--log-file"}


def _command_index(argv: List[str]) -> int:
    """Return the position of the first token after the global options."""
    index = 0
    while index < len(argv):
        token = argv[index]
        if token in _GLOBAL_FLAGS or token.startswith("--log-file="):
            index += 1
        elif token in _GLOBAL_OPTIONS:
            index += 2
        else:
            break
    return index


def _normalise_argv(argv: List[str]) -> List[str]:
    """Insert the default ``preview`` command when none is given."""
    index = _command_index(argv)
    if index >= len(argv):
        return argv + ["preview"]
    token = argv[index]
    if not token.startswith("-") or token in {"-h", "--help", "--version"}:
        return argv
    return argv[:index] + ["preview"] + argv[index:]


def _unknown_command(argv: List[str]) -> str | None:
    index = _command_index(argv)
    if index < len(argv) and not argv[index].startswith("-") and argv[index] not in COMMANDS:
        return argv[index]
    return None


def _settings(args: argparse.Namespace, cwd: Path) -> Dict[str, Any]:
    """Layer CLI flags over .readme-preview.yml over built-in defaults."""
    settings = dict(DEFAULTS)
    settings.update(as_dict(load_config(cwd)))
    for key in DEFAULTS:
        value = getattr(args, key, None)
        if value is not None:
            settings[key] = value
    return settings


def _read_markdown(parser: argparse.ArgumentParser, path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        parser.exit(1, f"Could not read file: {path}\n")


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for readme-preview commands."""
    parser = _build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    unknown = _unknown_command(argv)
    if unknown is not None:
        parser.print_usage(sys.stderr)
        parser.exit(1, f"Unknown command: {unknown}\n")
    args = parser.parse_args(_normalise_argv(argv))

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    cwd = Path.cwd()

    try:
        settings = _settings(args, cwd)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    logger.debug("Running %s with settings %s", args.command, settings)

    if args.command == "init":
        result = run_init(
            ScaffoldOptions(
                cwd=cwd,
                force=bool(args.force),
                workflow_only=bool(args.workflow_only),
                readme_only=bool(args.readme_only),
                add_assets=bool(args.add_assets),
                workflow_name=str(settings["workflow_name"]),
            )
        )
        if result.wrote_any:
            print("Init complete.")
        else:
            print("Nothing to do. Try --force to overwrite existing files.")
        return

    markdown = _read_markdown(parser, (cwd / settings["file"]).resolve())

    if args.command == "check":
        check_result = run_checks(markdown)
        reported = check_result.all(strict=bool(settings["strict"]))
        if not reported:
            print("README passed checks.")
            return
        print("README issues:")
        for issue in reported:
            print(f"- {issue}")
        parser.exit(1)

    html = render_readme_html(
        markdown,
        RenderOptions(
            cwd=cwd,
            branch=str(settings["branch"]),
            base_url=settings["base_url"],
            rewrite_links=bool(settings["rewrite_links"]),
            title=str(settings["title"]),
            theme=str(settings["theme"]),
        ),
    )

    if args.command == "build":
        output = write_build(html, cwd)
        print(f"Wrote preview to: {_relativize(output)}")
        return

    run_preview(
        html,
        port=int(settings["port"]),
        open_browser=bool(settings["open_browser"]),
    )


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


__all__ = ["main"]
