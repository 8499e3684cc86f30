"""FastAPI application serving a rendered README preview."""

from __future__ import annotations

import threading
import webbrowser
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from ..logging import get_logger

BUILD_DIRNAME = ".readme-preview"
BUILD_FILENAME = "index.html"

logger = get_logger("service")


class HealthResponse(BaseModel):
    status: str


def create_app(html: str) -> FastAPI:
    """Create an app that serves the pre-rendered ``html`` page."""
    app = FastAPI(title="README Preview", docs_url=None, redoc_url=None)

    @app.get("/", response_class=HTMLResponse)
    async def preview() -> HTMLResponse:
        return HTMLResponse(content=html, media_type="text/html; charset=utf-8")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    return app


def _open_browser(url: str) -> None:
    try:
        webbrowser.open(url)
    except webbrowser.Error as exc:
        logger.debug("Could not open browser for %s: %s", url, exc)


def run_preview(
    html: str,
    *,
    host: str = "127.0.0.1",
    port: int = 4173,
    open_browser: bool = True,
) -> None:  # pragma: no cover - integration path
    """Serve ``html`` until interrupted."""
    url = f"http://localhost:{port}"
    logger.info("Preview: %s", url)
    logger.info("Press Ctrl+C to stop.")
    if open_browser:
        # Give uvicorn a moment to bind before the browser connects.
        threading.Timer(0.5, _open_browser, args=(url,)).start()
    uvicorn.run(create_app(html), host=host, port=port, log_level="warning")


def write_build(html: str, root: Path | None = None) -> Path:
    """Write ``html`` to ``<root>/.readme-preview/index.html`` and return the path."""
    base = Path(root) if root is not None else Path.cwd()
    build_dir = base / BUILD_DIRNAME
    build_dir.mkdir(parents=True, exist_ok=True)
    output = build_dir / BUILD_FILENAME
    output.write_text(html, encoding="utf-8")
    return output


__all__ = ["create_app", "run_preview", "write_build"]
