"""Schema.org structured data (JSON-LD) for rich search results."""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from app.config import settings
from app.models.locale import Locale
from app.services.urls import build_absolute_url, build_canonical_url

SCHEMA_CONTEXT = "https://schema.org"

JsonLd = Dict[str, Any]


def organization(base_url: Optional[str] = None, same_as: Iterable[str] = ()) -> JsonLd:
    base_url = base_url or settings.base_url
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": settings.SITE_NAME,
        "url": base_url,
        "logo": build_absolute_url(base_url, "/logo.png"),
        "description": "Professional paragliding tandem flights in Georgia",
        "address": {"@type": "PostalAddress", "addressCountry": "GE"},
        "sameAs": list(same_as),
    }


def website(base_url: Optional[str] = None, locale: Locale = Locale.KA) -> JsonLd:
    """WebSite schema with a sitelinks search box pointing at the locations listing."""
    base_url = base_url or settings.base_url
    search_url = build_canonical_url(base_url, locale, "locations")
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": settings.SITE_NAME,
        "url": base_url,
        "potentialAction": {
            "@type": "SearchAction",
            "target": {
                "@type": "EntryPoint",
                "urlTemplate": f"{search_url}?search={{search_term_string}}",
            },
            "query-input": "required name=search_term_string",
        },
    }


def breadcrumbs(items: Iterable[Tuple[str, str]]) -> JsonLd:
    """BreadcrumbList from ``(name, url)`` pairs, positions starting at 1."""
    elements: List[JsonLd] = [
        {"@type": "ListItem", "position": position, "name": name, "item": url}
        for position, (name, url) in enumerate(items, start=1)
    ]
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": elements,
    }


def tourist_attraction(
    name: str,
    description: str,
    url: str,
    country_name: str,
    image: Optional[str] = None,
    rating: Optional[float] = None,
    rating_count: Optional[int] = None,
    altitude: Optional[int] = None,
) -> JsonLd:
    """TouristAttraction schema for a flying location.

    ``aggregateRating`` is only emitted for a rating backed by at least one
    review; ``geo`` only when the take-off altitude is known.
    """
    schema: JsonLd = {
        "@context": SCHEMA_CONTEXT,
        "@type": "TouristAttraction",
        "name": name,
        "description": description,
        "url": url,
        "address": {
            "@type": "PostalAddress",
            "addressCountry": "GE",
            "addressRegion": country_name,
            "addressLocality": name,
        },
        "additionalType": "https://schema.org/SportsActivityLocation",
    }
    if image:
        schema["image"] = image
    if rating and rating_count and rating_count > 0:
        schema["aggregateRating"] = {
            "@type": "AggregateRating",
            "ratingValue": f"{float(rating):.1f}",
            "bestRating": "5",
            "worstRating": "1",
            "reviewCount": rating_count,
        }
    if altitude:
        schema["geo"] = {"@type": "GeoCoordinates", "elevation": f"{altitude}m"}
    return schema
