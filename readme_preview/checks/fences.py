"""Code-span removal used to build the lint view of a README."""

from __future__ import annotations

import re

# Unterminated fences simply fail to match and are left in place.
_FENCED_CODE = re.compile(r"```.*?```", re.DOTALL)
_INLINE_CODE = re.compile(r"`[^`]*`")


def strip_fenced_code(text: str) -> str:
    """Remove triple-backtick blocks, including their info string."""
    return _FENCED_CODE.sub("", text)


def strip_inline_code(text: str) -> str:
    """Remove single-backtick code spans."""
    return _INLINE_CODE.sub("", text)


def lint_view(text: str) -> str:
    """Return ``text`` without fenced blocks and inline code.

    Fences are removed first so a fence's backticks are never paired up as
    inline spans.
    """
    return strip_inline_code(strip_fenced_code(text))


__all__ = ["lint_view", "strip_fenced_code", "strip_inline_code"]
