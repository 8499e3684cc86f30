"""Pattern-based README rules.

Each rule pairs a message with a predicate that returns ``True`` when the
document violates it. Rules read either the raw markdown or the lint view
(the markdown with code removed, see :mod:`readme_preview.checks.fences`).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Tuple

RAW = "raw"
LINT = "lint"

MIN_LENGTH = 400

HTML_TAG_NAMES: Tuple[str, ...] = (
    "div",
    "span",
    "p",
    "br",
    "hr",
    "img",
    "a",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "ul",
    "ol",
    "li",
    "table",
    "thead",
    "tbody",
    "tr",
    "th",
    "td",
    "pre",
    "code",
    "blockquote",
    "details",
    "summary",
)

RELATIVE_IMAGE_PATTERN = re.compile(r"!\[[^\]]*\]\((?!https?://|data:)([^)]+)\)")
H1_PATTERN = re.compile(r"^#\s+\S+", re.MULTILINE)
CODE_FENCE_PATTERN = re.compile(r"```")
# Any H1 line followed (anywhere later) by a blank line and non-blank text.
DESCRIPTION_PATTERN = re.compile(r"^#\s+.+\n\n.*?\S", re.MULTILINE | re.DOTALL)
# Placeholders such as <path> or <number> are not in the list and never match.
HTML_TAG_PATTERN = re.compile(
    r"</?\s*(?:{})\b[^>]*>".format("|".join(HTML_TAG_NAMES)), re.IGNORECASE
)
INSTALL_PATTERN = re.compile(r"\binstall\b", re.IGNORECASE)
USAGE_PATTERN = re.compile(r"\busage\b", re.IGNORECASE)
LINK_OR_IMAGE_PATTERN = re.compile(r"!?\[[^\]]*\]\(([^)]+)\)")
_INNER_WHITESPACE = re.compile(r"\S\s+\S")


@dataclass(frozen=True)
class Rule:
    """A single README rule evaluated against one view of the document."""

    name: str
    message: str
    view: str
    violated: Callable[[str], bool]

    def evaluate(self, raw: str, lint: str) -> str | None:
        """Return the rule message when the document violates the rule."""
        text = lint if self.view == LINT else raw
        return self.message if self.violated(text) else None


def has_relative_images(text: str) -> bool:
    return RELATIVE_IMAGE_PATTERN.search(text) is not None


def lacks_h1(text: str) -> bool:
    return H1_PATTERN.search(text) is None


def is_too_short(text: str) -> bool:
    return len(text) < MIN_LENGTH


def lacks_code_block(text: str) -> bool:
    return CODE_FENCE_PATTERN.search(text) is None


def lacks_description(text: str) -> bool:
    return DESCRIPTION_PATTERN.search(text) is None


def has_raw_html(text: str) -> bool:
    return HTML_TAG_PATTERN.search(text) is not None


def lacks_install(text: str) -> bool:
    return INSTALL_PATTERN.search(text) is None


def lacks_usage(text: str) -> bool:
    return USAGE_PATTERN.search(text) is None


def has_spaced_urls(text: str) -> bool:
    """Return ``True`` if any link or image target has whitespace between words.

    Padding around the target (``( https://x )``) is not reported.
    """
    return any(
        _INNER_WHITESPACE.search(match.group(1).strip())
        for match in LINK_OR_IMAGE_PATTERN.finditer(text)
    )


BASIC_RULES: Tuple[Rule, ...] = (
    Rule("relative-images", "Relative image URLs detected.", LINT, has_relative_images),
    Rule("missing-h1", "Missing H1 title.", RAW, lacks_h1),
)

STRICT_RULES: Tuple[Rule, ...] = (
    Rule("too-short", f"README is very short (<{MIN_LENGTH} chars).", RAW, is_too_short),
    Rule("no-code-blocks", "No code blocks found.", RAW, lacks_code_block),
    Rule("missing-description", "Missing description text under H1.", RAW, lacks_description),
    Rule(
        "raw-html",
        "Raw HTML detected (may be sanitized by package registries).",
        LINT,
        has_raw_html,
    ),
    Rule(
        "missing-install",
        'No "Install" section detected (keyword "install" not found).',
        RAW,
        lacks_install,
    ),
    Rule(
        "missing-usage",
        'No "Usage" section detected (keyword "usage" not found).',
        RAW,
        lacks_usage,
    ),
    Rule(
        "spaced-urls",
        "Found spaces inside markdown URLs (likely broken links).",
        LINT,
        has_spaced_urls,
    ),
)


__all__ = [
    "BASIC_RULES",
    "HTML_TAG_NAMES",
    "LINT",
    "MIN_LENGTH",
    "RAW",
    "Rule",
    "STRICT_RULES",
    "has_raw_html",
    "has_relative_images",
    "has_spaced_urls",
    "is_too_short",
    "lacks_code_block",
    "lacks_description",
    "lacks_h1",
    "lacks_install",
    "lacks_usage",
]
