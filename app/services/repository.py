"""Read access to the backend's ``countries`` and ``locations`` tables.

The backend is a hosted Postgres exposed through its PostgREST endpoint
(``<SUPABASE_URL>/rest/v1/<table>``).  Every call is a single query; rows
are converted to :class:`~app.models.entity.Country` /
:class:`~app.models.entity.Location` at this boundary so that nothing
downstream looks columns up by name.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.config import settings
from app.models.entity import Country, Location
from app.models.locale import Locale, LocaleCatalog
from app.services.locales import default_catalog
from app.services.slugs import resolve_slug

logger = logging.getLogger(__name__)

_LOCATION_SELECT = "*,countries!inner(*)"


class BackendNotConfiguredError(RuntimeError):
    """Raised when no backend URL/key is configured."""


def _headers() -> Dict[str, str]:
    return {
        "apikey": settings.SUPABASE_KEY,
        "Authorization": f"Bearer {settings.SUPABASE_KEY}",
        "Accept": "application/json",
    }


def _quote(value: str) -> str:
    """Double-quote a filter value so commas and parentheses stay literal."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _slug_filter(slug: str, locale: Locale, catalog: LocaleCatalog) -> str:
    """PostgREST ``or`` filter matching *slug* in the locale's or the default locale's column."""
    columns = [f"slug_{locale.value}"]
    if catalog.default != locale:
        columns.append(f"slug_{catalog.default.value}")
    return "(" + ",".join(f"{column}.eq.{_quote(slug)}" for column in columns) + ")"


async def _select(
    table: str,
    params: Dict[str, str],
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[Dict[str, Any]]:
    """Run one ``GET /rest/v1/<table>`` query and return the decoded rows.

    Raises:
        BackendNotConfiguredError: if ``SUPABASE_URL`` is not set.
        httpx.HTTPError: on network or HTTP errors.
    """
    if not settings.SUPABASE_URL:
        raise BackendNotConfiguredError("SUPABASE_URL is not configured.")

    url = f"{settings.SUPABASE_URL.rstrip('/')}/rest/v1/{table}"
    async with httpx.AsyncClient(
        timeout=settings.SUPABASE_TIMEOUT, headers=_headers(), transport=transport
    ) as client:
        response = await client.get(url, params=params)
        response.raise_for_status()
        rows = response.json()

    logger.debug("Backend query", extra={"table": table, "rows": len(rows)})
    return rows


async def fetch_countries(active_only: bool = True) -> List[Country]:
    params = {"select": "*"}
    if active_only:
        params["is_active"] = "eq.true"
    rows = await _select("countries", params)
    return [Country.from_row(row) for row in rows]


async def fetch_locations(active_countries_only: bool = True) -> List[Location]:
    params = {"select": _LOCATION_SELECT}
    if active_countries_only:
        params["countries.is_active"] = "eq.true"
    rows = await _select("locations", params)
    return [Location.from_row(row) for row in rows]


async def fetch_country_by_slug(
    slug: str,
    locale: Locale,
    catalog: Optional[LocaleCatalog] = None,
) -> Optional[Country]:
    """Return the active country whose *locale* slug (or default slug) is *slug*."""
    catalog = catalog or default_catalog()
    params = {
        "select": "*",
        "or": _slug_filter(slug, locale, catalog),
        "is_active": "eq.true",
        "limit": "1",
    }
    rows = await _select("countries", params)
    if not rows:
        return None
    return Country.from_row(rows[0])


async def fetch_location_by_slug(
    country_slug: str,
    location_slug: str,
    locale: Locale,
    catalog: Optional[LocaleCatalog] = None,
) -> Optional[Location]:
    """Return the location at ``locations/<country_slug>/<location_slug>`` in *locale*.

    Both slugs are matched in the query, the country one on the embedded
    relation, and only locations under an active country are returned.  A
    row whose country still resolves to a different slug in *locale* (it
    matched through the default-locale column) is treated as not found.
    """
    catalog = catalog or default_catalog()
    params = {
        "select": _LOCATION_SELECT,
        "or": _slug_filter(location_slug, locale, catalog),
        "countries.or": _slug_filter(country_slug, locale, catalog),
        "countries.is_active": "eq.true",
        "limit": "1",
    }
    rows = await _select("locations", params)
    if not rows:
        return None

    location = Location.from_row(rows[0])
    if resolve_slug(location.country, locale, catalog) != country_slug:
        logger.info(
            "Location found under a different country",
            extra={"location": location_slug, "country": country_slug, "locale": locale.value},
        )
        return None
    return location
