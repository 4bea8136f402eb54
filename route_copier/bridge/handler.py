"""Request handler: one getRoute request in, one RouteResponse out.

WHY: The route text is requested by a UI surface that lives apart from
the page holding the directions. The handler is the single seam between
them: it obtains the page, finds the directions region, runs the core,
and folds every failure into a user-facing message.

HOW: If the request carries a URL, the page is fetched with an
httpx.AsyncClient. The markup goes through find_candidate_region(); the
region's lines go through normalize_route().

RULES:
- No module-level mutable state; every call is independent
- URL not on Google Maps → WRONG_PAGE_MESSAGE (no fetch attempted)
- httpx.HTTPError while fetching → SOURCE_UNREACHABLE_MESSAGE
- No region found → SOURCE_NOT_FOUND_MESSAGE (core not invoked)
- Core produced nothing → NO_ROUTE_MESSAGE (from normalize_route)
- Nothing is retried; a fresh request is the only recovery
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from route_copier import __version__
from route_copier.bridge.models import RouteOptionsPayload, RouteRequest, RouteResponse
from route_copier.config import (
    FETCH_TIMEOUT_S,
    SOURCE_NOT_FOUND_MESSAGE,
    SOURCE_UNREACHABLE_MESSAGE,
    WRONG_PAGE_MESSAGE,
)
from route_copier.core.options import RouteOptions
from route_copier.core.pipeline import normalize_route
from route_copier.locators import find_candidate_region

logger = logging.getLogger(__name__)

_MAPS_URL_FRAGMENT = "google.com/maps"


def is_maps_url(url: str) -> bool:
    return _MAPS_URL_FRAGMENT in url


def build_options(payload: Optional[RouteOptionsPayload]) -> RouteOptions:
    """Apply request overrides on top of the configured defaults."""
    options = RouteOptions()
    if payload is None:
        return options
    return options.with_overrides(
        start_markers=payload.start_markers,
        end_markers=payload.end_markers,
        mode_words=payload.mode_words,
        currency_markers=payload.currency_markers,
        arrival_markers=payload.arrival_markers,
    )


async def fetch_page(url: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """Download a page and return its markup.

    Raises:
        httpx.HTTPError: On network failure or a non-2xx status.
    """
    if client is not None:
        resp = await client.get(url, follow_redirects=True)
        resp.raise_for_status()
        return resp.text

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(FETCH_TIMEOUT_S),
        headers={"User-Agent": "route-copier/{}".format(__version__)},
    ) as own_client:
        resp = await own_client.get(url, follow_redirects=True)
        resp.raise_for_status()
        return resp.text


def extract_route(html: str, request: RouteRequest) -> str:
    """Locate the directions region in markup and normalize it."""
    region = find_candidate_region(html, policy=request.policy)
    if not region.found:
        return SOURCE_NOT_FOUND_MESSAGE
    return normalize_route(region.lines, build_options(request.options))


async def handle_route_request(
    request: RouteRequest,
    http_client: Optional[httpx.AsyncClient] = None,
) -> RouteResponse:
    """Answer a getRoute request.

    Args:
        request: The validated request (HTML snapshot or URL).
        http_client: Optional client to fetch URLs with (tests inject one).

    Returns:
        RouteResponse whose data is the route text or an outcome message.
    """
    if request.url is not None:
        if not is_maps_url(request.url):
            logger.info("Rejected non-maps URL: %s", request.url)
            return RouteResponse(data=WRONG_PAGE_MESSAGE)
        try:
            html = await fetch_page(request.url, http_client)
        except httpx.HTTPError as exc:
            logger.warning("Could not fetch %s: %s", request.url, exc)
            return RouteResponse(data=SOURCE_UNREACHABLE_MESSAGE)
    else:
        html = request.html or ""

    return RouteResponse(data=extract_route(html, request))
