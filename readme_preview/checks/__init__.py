"""Heuristic README checks."""

from .checker import CheckResult, ReadmeChecker, run_checks
from .fences import lint_view, strip_fenced_code, strip_inline_code
from .rules import BASIC_RULES, STRICT_RULES, Rule

__all__ = [
    "BASIC_RULES",
    "CheckResult",
    "ReadmeChecker",
    "Rule",
    "STRICT_RULES",
    "lint_view",
    "run_checks",
    "strip_fenced_code",
    "strip_inline_code",
]
