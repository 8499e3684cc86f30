"""Preview, lint, and scaffold README documents."""

from .checks import CheckResult, ReadmeChecker, run_checks
from .render import RenderOptions, render_readme_html

__version__ = "0.3.0"

__all__ = [
    "CheckResult",
    "ReadmeChecker",
    "RenderOptions",
    "__version__",
    "render_readme_html",
    "run_checks",
]
