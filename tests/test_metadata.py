"""Tests for page metadata assembly."""

from datetime import datetime, timezone

import pytest

from app.config import settings
from app.models.entity import Country, Location
from app.models.locale import Locale, LocaleCatalog
from app.models.page import CountryPage, LocationPage
from app.services.metadata import (
    assemble_entity_metadata,
    assemble_page_metadata,
    is_noindex_path,
)

_BASE = "https://example.com"
_CATALOG = LocaleCatalog()


def _georgia(**overrides) -> Country:
    fields = {
        "id": 1,
        "slugs": {Locale.KA: "sakartvelo", Locale.EN: "georgia"},
        "names": {Locale.KA: "საქართველო", Locale.EN: "Georgia"},
    }
    fields.update(overrides)
    return Country(**fields)


def _gudauri(**overrides) -> Location:
    fields = {
        "id": 10,
        "slugs": {Locale.KA: "gudauri"},
        "names": {Locale.KA: "გუდაური", Locale.EN: "Gudauri"},
        "country": _georgia(),
        "updated_at": datetime(2025, 1, 1, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return Location(**fields)


class TestIsNoindexPath:
    @pytest.mark.parametrize("path", ["/login", "login", "/cms/pages", "/user", "/bookings/"])
    def test_private(self, path):
        assert is_noindex_path(path)

    @pytest.mark.parametrize("path", ["", "/about", "/users", "/locations"])
    def test_public(self, path):
        assert not is_noindex_path(path)


class TestAssemblePageMetadata:
    def test_about_page(self):
        metadata = assemble_page_metadata("about", "en", base_url=_BASE, catalog=_CATALOG)

        assert metadata.locale is Locale.EN
        assert metadata.title == "About Us"
        assert metadata.alternates.canonical == "https://example.com/en/about"
        assert metadata.robots.index is True
        assert metadata.direction == "ltr"

        og = metadata.open_graph
        assert og.title == f"About Us | {settings.SITE_NAME}"
        assert og.url == metadata.alternates.canonical
        assert og.locale == "en_US"
        assert og.site_name == settings.SITE_NAME
        assert og.images == ["https://example.com/og-image.jpg"]

    def test_home_canonical_is_locale_root(self):
        metadata = assemble_page_metadata("home", Locale.KA, base_url=_BASE, catalog=_CATALOG)
        assert metadata.alternates.canonical == "https://example.com/ka"
        assert metadata.alternates.languages["x-default"] == "https://example.com/ka"

    def test_private_page_is_noindex(self):
        metadata = assemble_page_metadata("login", "en", base_url=_BASE, catalog=_CATALOG)
        assert metadata.robots.index is False
        assert str(metadata.robots) == "noindex, follow"

    def test_arabic_is_rtl(self):
        metadata = assemble_page_metadata("contact", "ar", base_url=_BASE, catalog=_CATALOG)
        assert metadata.direction == "rtl"
        assert metadata.open_graph.locale == "ar_AR"

    def test_unsupported_locale_uses_default(self):
        metadata = assemble_page_metadata("about", "fr", base_url=_BASE, catalog=_CATALOG)
        assert metadata.locale is Locale.KA
        assert metadata.alternates.canonical == "https://example.com/ka/about"


class TestAssembleEntityMetadata:
    def test_location_titles_derive_from_names(self):
        metadata = assemble_entity_metadata(
            LocationPage(location=_gudauri()), "en", base_url=_BASE, catalog=_CATALOG
        )
        assert metadata.title == "Gudauri - Georgia | Paragliding"
        assert metadata.description == (
            "Paragliding in Gudauri, Georgia. Book your tandem flight today!"
        )
        assert metadata.alternates.canonical == "https://example.com/en/locations/georgia/gudauri"

    def test_location_seo_texts_win(self):
        location = _gudauri(
            seo_titles={Locale.EN: "Fly over Gudauri"},
            seo_descriptions={Locale.KA: "გუდაურის აღწერა"},
            og_image_url="https://cdn.example.com/gudauri.jpg",
        )
        metadata = assemble_entity_metadata(
            LocationPage(location=location), "en", base_url=_BASE, catalog=_CATALOG
        )
        assert metadata.title == "Fly over Gudauri"
        # Falls back to the default-locale SEO description
        assert metadata.description == "გუდაურის აღწერა"
        assert metadata.open_graph.images == ["https://cdn.example.com/gudauri.jpg"]

    def test_country_uses_name_and_locations_description(self):
        metadata = assemble_entity_metadata(
            CountryPage(country=_georgia()), "de", base_url=_BASE, catalog=_CATALOG
        )
        # No German name, so the default-locale name is used
        assert metadata.title == "საქართველო"
        assert metadata.alternates.canonical == "https://example.com/de/locations/sakartvelo"
        assert metadata.open_graph.images == ["https://example.com/og-image.jpg"]
        assert metadata.robots.index is True

    def test_unlinkable_entity_returns_none(self):
        country = _georgia(slugs={Locale.EN: "georgia"})
        assert (
            assemble_entity_metadata(CountryPage(country=country), "en", _BASE, _CATALOG) is None
        )
