"""README boilerplate: default document and the badge/screenshot block."""

from __future__ import annotations

from dataclasses import dataclass

from ..repository import RepositorySlug
from ..templating import render_template

BADGES_MARKER = "## Badges"
WORKFLOW_FILENAME = "readme-preview.yml"

PLACEHOLDER_OWNER = "YOUR_USERNAME"
PLACEHOLDER_NAME = "YOUR_REPO"


@dataclass
class PatchResult:
    """Outcome of applying the badge block to a README."""

    updated: bool
    content: str


@dataclass
class ReadmePatcher:
    """Appends the badge block to READMEs that do not have one yet."""

    project: str
    slug: RepositorySlug | None = None

    def default_readme(self) -> str:
        return render_template("readme.md.j2", project=self.project)

    def badge_block(self) -> str:
        slug = self.slug or RepositorySlug(owner=PLACEHOLDER_OWNER, name=PLACEHOLDER_NAME)
        return render_template(
            "badges.md.j2",
            project=self.project,
            owner=slug.owner,
            name=slug.name,
            workflow_file=WORKFLOW_FILENAME,
        )

    def apply(self, markdown: str) -> PatchResult:
        """Append the block unless the README already has a badges section."""
        if BADGES_MARKER in markdown:
            return PatchResult(updated=False, content=markdown)
        content = markdown.rstrip() + "\n" + self.badge_block()
        return PatchResult(updated=True, content=content.rstrip("\n") + "\n")


__all__ = ["BADGES_MARKER", "PatchResult", "ReadmePatcher", "WORKFLOW_FILENAME"]
