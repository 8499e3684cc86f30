"""HTTP preview server and static build output."""

from .app import create_app, run_preview, write_build

__all__ = ["create_app", "run_preview", "write_build"]
