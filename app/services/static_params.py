"""Parameters for pre-rendering every (page, locale) pair, plus revalidation windows."""

from typing import Dict, Iterable, List, Optional

from app.models.entity import Country, Location
from app.models.locale import LocaleCatalog
from app.services.locales import default_catalog
from app.services.slugs import is_linkable, resolve_slug

# Recommended revalidation windows in seconds
REVALIDATION_TIMES: Dict[str, int] = {
    "static_pages": 86400,  # about, terms, privacy
    "home": 3600,
    "locations": 14400,  # prices and availability move
    "countries": 43200,
    "promotions": 3600,
    "contact": 604800,
    "sitemap": 86400,
}


def generate_locale_params(catalog: Optional[LocaleCatalog] = None) -> List[Dict[str, str]]:
    catalog = catalog or default_catalog()
    return [{"locale": locale.value} for locale in catalog.locales]


def generate_country_params(
    countries: Iterable[Country], catalog: Optional[LocaleCatalog] = None
) -> List[Dict[str, str]]:
    """One ``{locale, country}`` dict per active, linkable country and locale."""
    catalog = catalog or default_catalog()
    params: List[Dict[str, str]] = []
    for country in countries:
        if not country.is_active or not is_linkable(country, catalog):
            continue
        for locale in catalog.locales:
            slug = resolve_slug(country, locale, catalog)
            if slug:
                params.append({"locale": locale.value, "country": slug})
    return params


def generate_location_params(
    locations: Iterable[Location], catalog: Optional[LocaleCatalog] = None
) -> List[Dict[str, str]]:
    """One ``{locale, country, location}`` dict per location under an active country."""
    catalog = catalog or default_catalog()
    params: List[Dict[str, str]] = []
    for location in locations:
        if not location.country.is_active:
            continue
        if not is_linkable(location, catalog) or not is_linkable(location.country, catalog):
            continue
        for locale in catalog.locales:
            location_slug = resolve_slug(location, locale, catalog)
            country_slug = resolve_slug(location.country, locale, catalog)
            if location_slug and country_slug:
                params.append(
                    {"locale": locale.value, "country": country_slug, "location": location_slug}
                )
    return params
