"""Sitemap generation: one ``<url>`` per page and locale, with hreflang alternates."""

import logging
from datetime import datetime
from typing import Iterable, List, Optional
from xml.etree import ElementTree

from app.config import settings
from app.models.entity import Country, Location
from app.models.locale import LocaleCatalog
from app.models.page import CountryPage, LocationPage, PageRef, StaticPage
from app.models.sitemap import ChangeFrequency, SitemapEntry
from app.services.alternates import build_alternate_urls
from app.services.locales import default_catalog
from app.services.slugs import is_linkable
from app.services.urls import build_absolute_url

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"

ElementTree.register_namespace("", SITEMAP_NS)
ElementTree.register_namespace("xhtml", XHTML_NS)

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Public pages that exist in every locale ("" is the home page)
STATIC_ROUTES = (
    "",
    "/about",
    "/contact",
    "/locations",
    "/promotions",
    "/terms",
    "/privacy",
)

_LEGAL_ROUTES = {"/terms", "/privacy"}

SITEMAP_FILES = ("/sitemap.xml",)


def parse_lastmod(value: str) -> datetime:
    """Parse an ISO timestamp, accepting the ``Z`` suffix on every Python version."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _static_schedule(route: str) -> tuple[ChangeFrequency, float]:
    if route == "":
        return "daily", 1.0
    if route in _LEGAL_ROUTES:
        return "yearly", 0.3
    return "weekly", 0.8


def _entries_for(
    page: PageRef,
    last_modified: datetime,
    change_frequency: ChangeFrequency,
    priority: float,
    base_url: str,
    catalog: LocaleCatalog,
) -> List[SitemapEntry]:
    entries: List[SitemapEntry] = []
    for locale in catalog.locales:
        alternates = build_alternate_urls(page, locale, base_url, catalog)
        if alternates is None:
            continue
        entries.append(
            SitemapEntry(
                url=alternates.canonical,
                last_modified=last_modified,
                change_frequency=change_frequency,
                priority=priority,
                alternates=alternates.languages,
            )
        )
    return entries


def build_sitemap_entries(
    countries: Iterable[Country],
    locations: Iterable[Location],
    base_url: Optional[str] = None,
    catalog: Optional[LocaleCatalog] = None,
    static_last_modified: Optional[datetime] = None,
) -> List[SitemapEntry]:
    """Return sitemap entries for static pages, active countries and locations.

    Entities without a default-locale slug (or whose country has none) are
    skipped entirely.  Entities without ``updated_at`` report the static
    pages' date.
    """
    base_url = base_url or settings.base_url
    catalog = catalog or default_catalog()
    static_date = static_last_modified or parse_lastmod(settings.STATIC_PAGES_LASTMOD)

    entries: List[SitemapEntry] = []

    for route in STATIC_ROUTES:
        change_frequency, priority = _static_schedule(route)
        entries.extend(
            _entries_for(
                StaticPage(path=route), static_date, change_frequency, priority, base_url, catalog
            )
        )
    static_count = len(entries)

    country_count = 0
    for country in countries:
        if not country.is_active or not is_linkable(country, catalog):
            logger.debug("Sitemap: skipping country %s", country.id)
            continue
        country_count += 1
        entries.extend(
            _entries_for(
                CountryPage(country=country),
                country.updated_at or static_date,
                "weekly",
                0.9,
                base_url,
                catalog,
            )
        )

    location_count = 0
    for location in locations:
        if not is_linkable(location, catalog) or not is_linkable(location.country, catalog):
            logger.debug("Sitemap: skipping location %s", location.id)
            continue
        location_count += 1
        entries.extend(
            _entries_for(
                LocationPage(location=location),
                location.updated_at or static_date,
                "weekly",
                0.85,
                base_url,
                catalog,
            )
        )

    logger.info(
        "Sitemap generated",
        extra={
            "urls": len(entries),
            "static_urls": static_count,
            "countries": country_count,
            "locations": location_count,
        },
    )
    return entries


def render_sitemap(entries: Iterable[SitemapEntry]) -> str:
    """Serialise *entries* as a ``<urlset>`` document with ``xhtml:link`` alternates."""
    root = ElementTree.Element(f"{{{SITEMAP_NS}}}urlset")
    for entry in entries:
        url = ElementTree.SubElement(root, f"{{{SITEMAP_NS}}}url")
        ElementTree.SubElement(url, f"{{{SITEMAP_NS}}}loc").text = entry.url
        ElementTree.SubElement(url, f"{{{SITEMAP_NS}}}lastmod").text = (
            entry.last_modified.isoformat()
        )
        ElementTree.SubElement(url, f"{{{SITEMAP_NS}}}changefreq").text = entry.change_frequency
        ElementTree.SubElement(url, f"{{{SITEMAP_NS}}}priority").text = f"{entry.priority:.2f}"
        for hreflang, href in entry.alternates.items():
            ElementTree.SubElement(
                url,
                f"{{{XHTML_NS}}}link",
                {"rel": "alternate", "hreflang": hreflang, "href": href},
            )
    return _XML_DECLARATION + ElementTree.tostring(root, encoding="unicode")


def render_sitemap_index(
    base_url: Optional[str] = None, last_modified: Optional[datetime] = None
) -> str:
    """Serialise the ``<sitemapindex>`` that points at every sitemap the service serves."""
    base_url = base_url or settings.base_url
    last_modified = last_modified or datetime.now().astimezone()

    root = ElementTree.Element(f"{{{SITEMAP_NS}}}sitemapindex")
    for path in SITEMAP_FILES:
        sitemap = ElementTree.SubElement(root, f"{{{SITEMAP_NS}}}sitemap")
        ElementTree.SubElement(sitemap, f"{{{SITEMAP_NS}}}loc").text = build_absolute_url(
            base_url, path
        )
        ElementTree.SubElement(sitemap, f"{{{SITEMAP_NS}}}lastmod").text = (
            last_modified.isoformat()
        )
    return _XML_DECLARATION + ElementTree.tostring(root, encoding="unicode")
