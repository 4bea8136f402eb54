"""FastAPI application exposing the getRoute bridge over HTTP.

WHY: A browser extension popup, a bookmarklet, or a script needs a way
to hand a map page to the extractor and get copy-ready text back. An
HTTP endpoint replaces the extension's in-page message listener with an
explicit request/response exchange.

HOW: A single FastAPI app exposes POST /route (delegating to
handle_route_request) and GET /health. run_api() serves it with uvicorn.

RULES:
- POST /route always answers 200 with RouteResponse for valid requests;
  outcome tiers travel in ``data``, not in HTTP status codes
- Malformed requests (wrong action, both/neither of html and url) → 422
- The app holds no per-request state
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from route_copier import __version__
from route_copier.bridge.handler import handle_route_request
from route_copier.bridge.models import (
    HealthResponse,
    RouteRequest,
    RouteResponse,
)
from route_copier.config import SERVER_HOST, SERVER_PORT

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Route Copier API",
    description=(
        "Extract copy-ready transit directions from a map page. Send an HTML "
        "snapshot or a page URL; receive one line per step, each anchored by "
        "its departure time."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.post(
    "/route",
    response_model=RouteResponse,
    tags=["route"],
    summary="Extract route text",
    description=(
        "Locate the directions region in the page, trim it to the steps, "
        "and reassemble one line per step. Failures to find or reach the "
        "page are reported as messages in the data field."
    ),
)
async def get_route(payload: RouteRequest) -> RouteResponse:
    return await handle_route_request(payload)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for supervisors and local tooling.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api() -> None:
    """Entry point for the route-copier-api console script."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.info("Starting Route Copier API on %s:%d", SERVER_HOST, SERVER_PORT)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
