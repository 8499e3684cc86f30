"""`readme-preview init`: CI workflow, README boilerplate and placeholder assets."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..logging import get_logger
from ..repository import find_repository_slug
from ..templating import render_template
from .readme import WORKFLOW_FILENAME, ReadmePatcher

DEFAULT_WORKFLOW_NAME = "README Preview Check"
DEFAULT_PYTHON_VERSION = "3.12"

# 1x1 transparent PNG
PLACEHOLDER_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/x8AAwMCAO3Z5uQAAAAASUVORK5CYII="
)

logger = get_logger("scaffold")


@dataclass
class ScaffoldOptions:
    """Flags accepted by the init command."""

    cwd: Path
    force: bool = False
    workflow_only: bool = False
    readme_only: bool = False
    add_assets: bool = False
    workflow_name: str = DEFAULT_WORKFLOW_NAME


@dataclass
class InitResult:
    """Files written or left alone by an init run."""

    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)

    @property
    def wrote_any(self) -> bool:
        return bool(self.written)


def _write_if_allowed(path: Path, content: str | bytes, *, force: bool, result: InitResult) -> None:
    if path.exists() and not force:
        logger.info("Skipped %s (already exists). Use --force to overwrite.", path)
        result.skipped.append(path)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s", path)
    result.written.append(path)


def workflow_yaml(workflow_name: str = DEFAULT_WORKFLOW_NAME) -> str:
    return render_template(
        "workflow.yml.j2",
        workflow_name=workflow_name,
        python_version=DEFAULT_PYTHON_VERSION,
    )


def run_init(options: ScaffoldOptions) -> InitResult:
    """Scaffold the workflow, README block and assets selected by ``options``."""
    cwd = Path(options.cwd).resolve()
    slug = find_repository_slug(cwd)
    result = InitResult()

    if not options.readme_only:
        workflow_path = cwd / ".github" / "workflows" / WORKFLOW_FILENAME
        _write_if_allowed(
            workflow_path,
            workflow_yaml(options.workflow_name),
            force=options.force,
            result=result,
        )

    if not options.workflow_only:
        readme_path = cwd / "README.md"
        patcher = ReadmePatcher(project=slug.name if slug else cwd.name, slug=slug)
        exists = readme_path.exists()
        current = readme_path.read_text(encoding="utf-8") if exists else patcher.default_readme()
        patched = patcher.apply(current)
        if patched.updated or not exists:
            # A new README is always written; an existing one only with --force.
            _write_if_allowed(
                readme_path,
                patched.content,
                force=options.force or not exists,
                result=result,
            )
        else:
            logger.info("README already contains a badges section; no changes made.")

    if options.add_assets:
        _write_if_allowed(
            cwd / "assets" / "screenshot.png",
            PLACEHOLDER_PNG,
            force=options.force,
            result=result,
        )

    return result


__all__ = [
    "DEFAULT_WORKFLOW_NAME",
    "InitResult",
    "PLACEHOLDER_PNG",
    "ScaffoldOptions",
    "run_init",
    "workflow_yaml",
]
