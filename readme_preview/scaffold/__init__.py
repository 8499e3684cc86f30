"""Project scaffolding for README quality checks."""

from .init import DEFAULT_WORKFLOW_NAME, InitResult, ScaffoldOptions, run_init, workflow_yaml
from .readme import BADGES_MARKER, PatchResult, ReadmePatcher

__all__ = [
    "BADGES_MARKER",
    "DEFAULT_WORKFLOW_NAME",
    "InitResult",
    "PatchResult",
    "ReadmePatcher",
    "ScaffoldOptions",
    "run_init",
    "workflow_yaml",
]
