"""Page metadata assembly: translated texts + alternates + Open Graph + robots."""

from typing import Optional, Union

from app.config import settings
from app.models.entity import Localized
from app.models.locale import Locale, LocaleCatalog
from app.models.page import CountryPage, LocationPage
from app.models.seo import AlternateUrlSet, OpenGraph, PageMetadata, Robots
from app.services.alternates import build_alternate_urls, static_page_alternates
from app.services.locales import default_catalog
from app.services.page_seo import PAGE_PATHS, get_page_og, get_page_seo
from app.services.urls import build_absolute_url

# Private pages that must never be indexed
NOINDEX_ROUTES = (
    "/login",
    "/register",
    "/forgot-password",
    "/profile",
    "/bookings",
    "/notifications",
    "/cms",
    "/user",
    "/auth",
)

DEFAULT_OG_IMAGE_PATH = "/og-image.jpg"


def is_noindex_path(path: str) -> bool:
    """Return *True* when the locale-less *path* is one of the private routes."""
    path = "/" + path.strip("/")
    return any(path == route or path.startswith(route + "/") for route in NOINDEX_ROUTES)


def localized_text(texts: Localized, locale: Locale, catalog: LocaleCatalog) -> str:
    """Text in *locale*, else in the default locale, else an empty string."""
    return texts.get(locale) or texts.get(catalog.default) or ""


def _build(
    locale: Locale,
    title: str,
    description: str,
    alternates: AlternateUrlSet,
    og_title: str,
    og_description: str,
    og_image: Optional[str],
    robots: Robots,
) -> PageMetadata:
    return PageMetadata(
        locale=locale,
        title=title,
        description=description,
        alternates=alternates,
        open_graph=OpenGraph(
            title=og_title,
            description=og_description,
            locale=locale.og_locale,
            site_name=settings.SITE_NAME,
            url=alternates.canonical,
            images=[og_image] if og_image else [],
        ),
        robots=robots,
        direction=locale.direction,
    )


def assemble_page_metadata(
    page_key: str,
    locale: Union[Locale, str, None],
    base_url: Optional[str] = None,
    catalog: Optional[LocaleCatalog] = None,
) -> PageMetadata:
    """Assemble the metadata block of the static page *page_key*.

    Texts come from :func:`~app.services.page_seo.get_page_seo` (with its
    default-locale fallback), alternates from the page's fixed path.
    """
    base_url = base_url or settings.base_url
    catalog = catalog or default_catalog()
    resolved = catalog.resolve(locale)

    path = PAGE_PATHS.get(page_key, page_key)
    alternates = static_page_alternates(path, resolved, base_url, catalog)

    seo = get_page_seo(page_key, resolved, catalog)
    og = get_page_og(page_key, resolved, catalog)
    return _build(
        resolved,
        title=seo.title,
        description=seo.description,
        alternates=alternates,
        og_title=f"{og.title} | {settings.SITE_NAME}",
        og_description=og.description,
        og_image=build_absolute_url(base_url, DEFAULT_OG_IMAGE_PATH),
        robots=Robots(index=not is_noindex_path(path)),
    )


def assemble_entity_metadata(
    page: Union[CountryPage, LocationPage],
    locale: Union[Locale, str, None],
    base_url: Optional[str] = None,
    catalog: Optional[LocaleCatalog] = None,
) -> Optional[PageMetadata]:
    """Assemble the metadata block of a country or location page.

    The entity's own SEO texts win; otherwise titles and descriptions are
    derived from its localized names.  Returns *None* when the entity is not
    linkable in the requested locale.
    """
    base_url = base_url or settings.base_url
    catalog = catalog or default_catalog()
    resolved = catalog.resolve(locale)

    alternates = build_alternate_urls(page, resolved, base_url, catalog)
    if alternates is None:
        return None

    if isinstance(page, LocationPage):
        entity = page.location
        name = localized_text(entity.names, resolved, catalog)
        country_name = localized_text(entity.country.names, resolved, catalog)
        fallback_title = f"{name} - {country_name} | Paragliding"
        fallback_description = (
            f"Paragliding in {name}, {country_name}. Book your tandem flight today!"
        )
    else:
        entity = page.country
        name = localized_text(entity.names, resolved, catalog)
        fallback_title = name
        fallback_description = get_page_seo("locations", resolved, catalog).description

    title = localized_text(entity.seo_titles, resolved, catalog) or fallback_title
    description = (
        localized_text(entity.seo_descriptions, resolved, catalog) or fallback_description
    )
    return _build(
        resolved,
        title=title,
        description=description,
        alternates=alternates,
        og_title=title,
        og_description=description,
        og_image=entity.og_image_url or build_absolute_url(base_url, DEFAULT_OG_IMAGE_PATH),
        robots=Robots(),
    )

