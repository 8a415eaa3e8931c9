"""
FastAPI Application - lumui demo dashboard

Serves a dashboard page assembled from lumui components. The library
itself performs no I/O; this app is the HTTP collaborator that returns
the rendered markup.

Usage:
    # Development
    uvicorn lumui.api.app:app --reload --port 8000

    # Or with LUMUI_* settings from .env
    python -m lumui.api.app
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from lumui import VERSION
from lumui.core import get_config, get_logger
from lumui.framework.theme import Theme, create_theme

from .pages import render_dashboard, render_metrics_grid

logger = get_logger(__name__)


def create_app(theme: Theme | None = None) -> FastAPI:
    """
    Create and configure the demo application.

    Args:
        theme: Theme for rendered pages (default: built from LUMUI_BRAND_* overrides)
    """
    if theme is None:
        theme = create_theme(get_config().get_theme_overrides())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("lumui demo starting up", extra={"version": VERSION})
        yield
        logger.info("lumui demo shutting down")

    app = FastAPI(
        title="lumui demo",
        description="Dashboard rendered with lumui server-side components",
        version=VERSION,
        lifespan=lifespan,
    )

    @app.get("/", response_class=HTMLResponse, tags=["Pages"])
    async def dashboard() -> str:
        """Full dashboard page."""
        html = render_dashboard(theme)
        logger.info("Dashboard rendered", extra={"bytes": len(html)})
        return html

    @app.get("/partials/metrics", response_class=HTMLResponse, tags=["Partials"])
    async def metrics_partial() -> str:
        """Metric grid fragment for HTMX polling."""
        return render_metrics_grid()

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, Any]:
        """Liveness probe."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": VERSION,
        }

    return app


def main() -> None:
    import uvicorn

    from lumui.core import setup_logging, validate_config_on_startup

    validate_config_on_startup(["server", "theme"])
    server = get_config().get_server_config()
    setup_logging(level=server.log_level, json_output=server.json_logs)

    logger.info("Starting lumui demo", extra={"host": server.host, "port": server.port})
    uvicorn.run("lumui.api.app:app", host=server.host, port=server.port, log_level=server.log_level.lower())


app = create_app()


if __name__ == "__main__":
    main()
