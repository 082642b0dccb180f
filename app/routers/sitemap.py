"""Crawler-facing endpoints: sitemap, sitemap index and robots.txt."""

import logging
from typing import List, Tuple

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from app.config import settings
from app.limiter import limiter
from app.models.entity import Country, Location
from app.routers.errors import fetch_or_raise
from app.services.repository import fetch_countries, fetch_locations
from app.services.robots import render_robots
from app.services.sitemap import build_sitemap_entries, render_sitemap, render_sitemap_index
from app.services.static_params import REVALIDATION_TIMES

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sitemap"])

_CACHE_HEADERS = {
    "Cache-Control": (
        f"public, max-age={REVALIDATION_TIMES['sitemap']}, "
        f"s-maxage={REVALIDATION_TIMES['sitemap']}"
    )
}


async def _load_entities() -> Tuple[List[Country], List[Location]]:
    """Fetch countries and locations; an unconfigured backend yields static pages only."""
    if not settings.SUPABASE_URL:
        logger.warning("Backend not configured, sitemap lists static pages only")
        return [], []
    countries = await fetch_or_raise(fetch_countries(), "countries")
    locations = await fetch_or_raise(fetch_locations(), "locations")
    return countries, locations


@router.get("/sitemap.xml", summary="Sitemap of every public page in every locale")
@limiter.limit(settings.RATE_LIMIT)
async def sitemap(request: Request) -> Response:
    countries, locations = await _load_entities()
    xml = render_sitemap(build_sitemap_entries(countries, locations))
    return Response(xml, media_type="application/xml", headers=_CACHE_HEADERS)


@router.get("/sitemap-index.xml", summary="Index of the service's sitemaps")
@limiter.limit(settings.RATE_LIMIT)
async def sitemap_index(request: Request) -> Response:
    return Response(render_sitemap_index(), media_type="application/xml", headers=_CACHE_HEADERS)


@router.get("/robots.txt", response_class=PlainTextResponse, summary="robots.txt")
@limiter.limit(settings.RATE_LIMIT)
async def robots(request: Request) -> PlainTextResponse:
    return PlainTextResponse(render_robots(), headers=_CACHE_HEADERS)
