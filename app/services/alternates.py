"""Canonical and hreflang alternate URL sets for every kind of public page."""

import logging
from typing import Dict, List, Optional, Union

from app.config import settings
from app.models.entity import Country, Location
from app.models.locale import X_DEFAULT, Locale, LocaleCatalog
from app.models.page import CountryPage, LocationPage, PageRef, StaticPage
from app.models.seo import AlternateUrlSet
from app.services.locales import default_catalog
from app.services.slugs import resolve_slug
from app.services.urls import build_url, split_path

logger = logging.getLogger(__name__)

LOCATIONS_SEGMENT = "locations"


def page_segments(page: PageRef, locale: Locale, catalog: LocaleCatalog) -> Optional[List[str]]:
    """Return the path segments of *page* in *locale*, or *None* if it has no URL there."""
    if isinstance(page, StaticPage):
        return split_path(page.path)

    if isinstance(page, CountryPage):
        country_slug = resolve_slug(page.country, locale, catalog)
        if country_slug is None:
            return None
        return [LOCATIONS_SEGMENT, country_slug]

    if isinstance(page, LocationPage):
        country_slug = resolve_slug(page.location.country, locale, catalog)
        location_slug = resolve_slug(page.location, locale, catalog)
        if country_slug is None or location_slug is None:
            return None
        return [LOCATIONS_SEGMENT, country_slug, location_slug]

    raise TypeError(f"Unsupported page reference: {type(page).__name__}")


def localized_urls(
    page: PageRef,
    base_url: Optional[str] = None,
    catalog: Optional[LocaleCatalog] = None,
) -> Dict[Locale, str]:
    """Return the URL of *page* in every catalog locale it can be linked in."""
    base_url = base_url or settings.base_url
    catalog = catalog or default_catalog()

    urls: Dict[Locale, str] = {}
    for locale in catalog.locales:
        segments = page_segments(page, locale, catalog)
        if segments is not None:
            urls[locale] = build_url(base_url, locale, segments)
    return urls


def build_alternate_urls(
    page: PageRef,
    requested_locale: Union[Locale, str, None],
    base_url: Optional[str] = None,
    catalog: Optional[LocaleCatalog] = None,
) -> Optional[AlternateUrlSet]:
    """Build the canonical URL and hreflang map of *page* for *requested_locale*.

    The map holds one entry per catalog locale, in catalog order, followed by
    ``"x-default"`` pointing at the catalog's x-default locale.  Locales the
    page cannot be linked in are left out.  An unsupported
    *requested_locale* is treated as the default locale.

    Returns *None* when no canonical URL can be built, i.e. the page refers
    to an entity without a default-locale slug.
    """
    catalog = catalog or default_catalog()
    locale = catalog.resolve(requested_locale)

    urls = localized_urls(page, base_url, catalog)
    canonical = urls.get(locale)
    if canonical is None:
        logger.info(
            "No canonical URL for page",
            extra={"kind": page.kind, "locale": locale.value},
        )
        return None

    languages = {loc.hreflang: url for loc, url in urls.items()}
    if catalog.x_default in urls:
        languages[X_DEFAULT] = urls[catalog.x_default]
    return AlternateUrlSet(canonical=canonical, languages=languages)


def static_page_alternates(
    path: str,
    locale: Union[Locale, str, None],
    base_url: Optional[str] = None,
    catalog: Optional[LocaleCatalog] = None,
) -> AlternateUrlSet:
    """Alternates of a page with the same path in every locale (about, terms, ...)."""
    alternates = build_alternate_urls(StaticPage(path=path), locale, base_url, catalog)
    if alternates is None:
        raise RuntimeError(f"No alternates for static path '{path}'.")
    return alternates


def country_alternates(
    country: Country,
    locale: Union[Locale, str, None],
    base_url: Optional[str] = None,
    catalog: Optional[LocaleCatalog] = None,
) -> Optional[AlternateUrlSet]:
    return build_alternate_urls(CountryPage(country=country), locale, base_url, catalog)


def location_alternates(
    location: Location,
    locale: Union[Locale, str, None],
    base_url: Optional[str] = None,
    catalog: Optional[LocaleCatalog] = None,
) -> Optional[AlternateUrlSet]:
    return build_alternate_urls(LocationPage(location=location), locale, base_url, catalog)
