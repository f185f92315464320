# showcase/main.py
"""
Entry point for the Project Showcase API.

``create_app`` assembles the FastAPI application: logging, the
read-only catalogue, the metrics random source, the API routers and
the fallback handlers. The module-level ``app`` lets uvicorn discover
the application::

    uvicorn showcase.main:app --port 4000
"""

import logging
import random
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog import catalog_router
from .catalog.store import Catalog, load_catalog
from .config import Settings, settings as default_settings
from .contact import router as contact_router
from .envelope import NOT_FOUND, failure
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"

LANDING_PAGE = """<!doctype html>
<html lang="en">
<head><meta charset="utf-8"><title>Project Showcase</title></head>
<body>
<h1>Project Showcase</h1>
<p>Browse the catalogue through the JSON API:</p>
<ul>
<li><a href="/api/v1/projects">/api/v1/projects</a></li>
<li><a href="/api/v1/skills">/api/v1/skills</a></li>
<li><a href="/api/v1/metrics">/api/v1/metrics</a></li>
</ul>
</body>
</html>
"""


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[Catalog] = None,
    rng: Optional[random.Random] = None,
) -> FastAPI:
    """Create and configure the application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration; the process-wide settings are used by default.
    catalog : Optional[Catalog]
        Pre-built catalogue. When omitted it is loaded from
        ``settings.catalog_file`` or the built-in seed data.
    rng : Optional[random.Random]
        Random source for the decorative metrics. Seeded from
        ``settings.metrics_seed`` when omitted.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.catalog = catalog if catalog is not None else load_catalog(settings.catalog_file)
    app.state.rng = rng if rng is not None else random.Random(settings.metrics_seed)

    app.include_router(catalog_router)
    app.include_router(contact_router)

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def landing_page():
        return LANDING_PAGE

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if request.url.path.startswith(API_PREFIX):
            # unmatched paths and unsupported methods alike
            if exc.status_code in (404, 405):
                logger.debug("No API route for %s %s", request.method, request.url.path)
                return failure(NOT_FOUND, 404)
            return failure(str(exc.detail).lower().replace(" ", "_"), exc.status_code)
        return HTMLResponse(LANDING_PAGE, status_code=404)

    logger.info("%s %s ready with %d projects", settings.project_name, settings.api_version, len(app.state.catalog))
    return app


app = create_app()


def run() -> None:
    """Serve ``app`` with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    run()
