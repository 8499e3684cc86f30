"""README content checks with a basic/strict severity split."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from ..logging import get_logger
from .fences import lint_view
from .rules import BASIC_RULES, STRICT_RULES, Rule


@dataclass(frozen=True)
class CheckResult:
    """Issues found in a README, split by severity."""

    issues: Tuple[str, ...] = ()
    strict_issues: Tuple[str, ...] = ()

    def all(self, *, strict: bool = False) -> Tuple[str, ...]:
        """Return the issues that block for the requested mode."""
        return self.issues + self.strict_issues if strict else self.issues


class ReadmeChecker:
    """Runs the basic and strict rule sets against a markdown document."""

    def __init__(
        self,
        basic_rules: Sequence[Rule] = BASIC_RULES,
        strict_rules: Sequence[Rule] = STRICT_RULES,
    ) -> None:
        self.basic_rules = tuple(basic_rules)
        self.strict_rules = tuple(strict_rules)
        self.logger = get_logger("checks")

    def check(self, markdown: str) -> CheckResult:
        lint = lint_view(markdown)
        issues = self._evaluate(self.basic_rules, markdown, lint)
        strict_issues = self._evaluate(self.strict_rules, markdown, lint)
        self.logger.debug(
            "Checked %d chars: %d basic, %d strict issues",
            len(markdown),
            len(issues),
            len(strict_issues),
        )
        return CheckResult(issues=issues, strict_issues=strict_issues)

    @staticmethod
    def _evaluate(rules: Iterable[Rule], raw: str, lint: str) -> Tuple[str, ...]:
        found = (rule.evaluate(raw, lint) for rule in rules)
        return tuple(message for message in found if message is not None)


def run_checks(markdown: str) -> CheckResult:
    """Check ``markdown`` with the default rule sets."""
    return ReadmeChecker().check(markdown)


__all__ = ["CheckResult", "ReadmeChecker", "run_checks"]
