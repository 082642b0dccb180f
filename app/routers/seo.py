"""Per-page SEO endpoints: metadata, alternates, head tags and site JSON-LD."""

import logging
from typing import List, Tuple

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import HTMLResponse

from app.config import settings
from app.limiter import limiter
from app.models.entity import Location
from app.models.locale import Locale
from app.models.page import CountryPage, LocationPage
from app.models.seo import PageMetadata
from app.routers.errors import fetch_or_raise
from app.services import jsonld
from app.services.alternates import country_alternates
from app.services.head import render_head_tags
from app.services.locales import default_catalog
from app.services.metadata import (
    assemble_entity_metadata,
    assemble_page_metadata,
    localized_text,
)
from app.services.page_seo import FALLBACK_PAGE, PAGE_PATHS, PAGE_SEO, get_page_seo
from app.services.repository import fetch_country_by_slug, fetch_location_by_slug
from app.services.slugs import is_valid_slug
from app.services.static_params import REVALIDATION_TIMES
from app.services.urls import build_canonical_url

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seo", tags=["seo"])

# Revalidation window per static page key (seconds)
_PAGE_MAX_AGE = {
    "home": REVALIDATION_TIMES["home"],
    "promotions": REVALIDATION_TIMES["promotions"],
    "contact": REVALIDATION_TIMES["contact"],
    "locations": REVALIDATION_TIMES["locations"],
}


def _cache_control(max_age: int) -> str:
    return f"public, max-age={max_age}, s-maxage={max_age}"


def _set_cache(response: Response, max_age: int) -> None:
    response.headers["Cache-Control"] = _cache_control(max_age)


def _require_page(page_key: str) -> None:
    if page_key not in PAGE_SEO:
        raise HTTPException(status_code=404, detail=f"Unknown page '{page_key}'.")


@router.get("/jsonld/site", summary="Organization and WebSite structured data")
@limiter.limit(settings.RATE_LIMIT)
async def site_jsonld(request: Request, response: Response) -> List[dict]:
    catalog = default_catalog()
    _set_cache(response, REVALIDATION_TIMES["static_pages"])
    return [jsonld.organization(), jsonld.website(locale=catalog.default)]


@router.get(
    "/{locale}/pages/{page_key}",
    response_model=PageMetadata,
    summary="Metadata of a static page",
)
@limiter.limit(settings.RATE_LIMIT)
async def page_metadata(
    request: Request, response: Response, locale: str, page_key: str
) -> PageMetadata:
    """Return title, description, alternates, Open Graph and robots for *page_key*.

    An unsupported *locale* renders the default locale.
    """
    _require_page(page_key)
    _set_cache(response, _PAGE_MAX_AGE.get(page_key, REVALIDATION_TIMES["static_pages"]))
    return assemble_page_metadata(page_key, locale)


@router.get(
    "/{locale}/head/{page_key}",
    response_class=HTMLResponse,
    summary="Rendered <head> tags of a static page",
)
@limiter.limit(settings.RATE_LIMIT)
async def page_head(request: Request, locale: str, page_key: str) -> HTMLResponse:
    _require_page(page_key)
    catalog = default_catalog()
    resolved = catalog.resolve(locale)
    metadata = assemble_page_metadata(page_key, resolved, catalog=catalog)

    crumbs = [
        (
            get_page_seo(FALLBACK_PAGE, resolved, catalog).title,
            build_canonical_url(settings.base_url, resolved),
        )
    ]
    if page_key != FALLBACK_PAGE:
        page_url = build_canonical_url(settings.base_url, resolved, PAGE_PATHS[page_key])
        crumbs.append((metadata.title, page_url))

    html = render_head_tags(metadata, [jsonld.breadcrumbs(crumbs)], catalog)
    max_age = _PAGE_MAX_AGE.get(page_key, REVALIDATION_TIMES["static_pages"])
    return HTMLResponse(html, headers={"Cache-Control": _cache_control(max_age)})


def _require_slugs(*slugs: str) -> None:
    if not all(is_valid_slug(slug) for slug in slugs):
        raise HTTPException(status_code=404, detail="Not found.")


async def _location_page(
    country: str, location: str, locale: Locale
) -> Tuple[Location, PageMetadata]:
    """Fetch a location and assemble its metadata, or raise 404."""
    _require_slugs(country, location)
    entity = await fetch_or_raise(
        fetch_location_by_slug(country, location, locale), f"location '{location}'"
    )
    metadata = assemble_entity_metadata(LocationPage(location=entity), locale) if entity else None
    if metadata is None:
        raise HTTPException(status_code=404, detail="Location not found.")
    return entity, metadata


@router.get(
    "/{locale}/locations/{country}",
    response_model=PageMetadata,
    summary="Metadata of a country page",
)
@limiter.limit(settings.RATE_LIMIT)
async def country_metadata(
    request: Request, response: Response, locale: str, country: str
) -> PageMetadata:
    resolved = default_catalog().resolve(locale)
    logger.info("Country metadata requested", extra={"country": country, "locale": resolved.value})
    _require_slugs(country)

    entity = await fetch_or_raise(fetch_country_by_slug(country, resolved), f"country '{country}'")
    metadata = assemble_entity_metadata(CountryPage(country=entity), resolved) if entity else None
    if metadata is None:
        raise HTTPException(status_code=404, detail="Country not found.")

    _set_cache(response, REVALIDATION_TIMES["countries"])
    return metadata


@router.get(
    "/{locale}/locations/{country}/{location}",
    response_model=PageMetadata,
    summary="Metadata of a location page",
)
@limiter.limit(settings.RATE_LIMIT)
async def location_metadata(
    request: Request, response: Response, locale: str, country: str, location: str
) -> PageMetadata:
    resolved = default_catalog().resolve(locale)
    logger.info(
        "Location metadata requested",
        extra={"country": country, "location": location, "locale": resolved.value},
    )

    _, metadata = await _location_page(country, location, resolved)
    _set_cache(response, REVALIDATION_TIMES["locations"])
    return metadata


@router.get(
    "/{locale}/head/locations/{country}/{location}",
    response_class=HTMLResponse,
    summary="Rendered <head> tags of a location page",
)
@limiter.limit(settings.RATE_LIMIT)
async def location_head(
    request: Request, locale: str, country: str, location: str
) -> HTMLResponse:
    """Head tags of a location page with BreadcrumbList and TouristAttraction JSON-LD."""
    catalog = default_catalog()
    resolved = catalog.resolve(locale)
    entity, metadata = await _location_page(country, location, resolved)

    name = localized_text(entity.names, resolved, catalog)
    country_name = localized_text(entity.country.names, resolved, catalog)
    country_page = country_alternates(entity.country, resolved, catalog=catalog)
    crumbs = jsonld.breadcrumbs(
        [
            (
                get_page_seo(FALLBACK_PAGE, resolved, catalog).title,
                build_canonical_url(settings.base_url, resolved),
            ),
            (
                get_page_seo("locations", resolved, catalog).title,
                build_canonical_url(settings.base_url, resolved, PAGE_PATHS["locations"]),
            ),
            # The location is linkable, so its country is too.
            (country_name, country_page.canonical),
            (name, metadata.alternates.canonical),
        ]
    )
    attraction = jsonld.tourist_attraction(
        name,
        metadata.description,
        metadata.alternates.canonical,
        country_name,
        image=entity.og_image_url,
        rating=entity.rating,
        rating_count=entity.rating_count,
        altitude=entity.altitude,
    )

    html = render_head_tags(metadata, [crumbs, attraction], catalog)
    return HTMLResponse(
        html, headers={"Cache-Control": _cache_control(REVALIDATION_TIMES["locations"])}
    )
