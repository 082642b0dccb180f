"""Tests for the static page SEO catalog."""

import pytest

from app.models.locale import Locale, LocaleCatalog
from app.models.seo import PageSeo
from app.services.page_seo import (
    PAGE_PATHS,
    PAGE_SEO,
    format_title,
    get_page_og,
    get_page_seo,
)

_CATALOG = LocaleCatalog()


class TestGetPageSeo:
    def test_translated_text(self):
        seo = get_page_seo("about", Locale.EN, _CATALOG)
        assert seo.title == "About Us"
        assert seo.description.startswith("Meet Paragliding Georgia")

    def test_unsupported_locale_returns_default_text(self):
        seo = get_page_seo("about", "fr", _CATALOG)
        assert seo.title == "ჩვენ შესახებ"

    def test_missing_translation_falls_back_to_default(self, monkeypatch):
        monkeypatch.setitem(
            PAGE_SEO,
            "partial",
            PageSeo(title={Locale.KA: "ნაწილობრივი"}, description={Locale.KA: "აღწერა"}),
        )
        seo = get_page_seo("partial", Locale.DE, _CATALOG)
        assert seo.title == "ნაწილობრივი"
        assert seo.description == "აღწერა"

    def test_unknown_page_falls_back_to_home(self):
        assert get_page_seo("nope", Locale.EN, _CATALOG) == get_page_seo("home", Locale.EN, _CATALOG)

    @pytest.mark.parametrize("page_key", sorted(PAGE_SEO))
    def test_every_page_has_default_locale_text(self, page_key):
        seo = PAGE_SEO[page_key]
        assert seo.title[Locale.KA]
        assert seo.description[Locale.KA]


class TestGetPageOg:
    def test_without_overrides_matches_page_text(self):
        assert get_page_og("contact", Locale.RU, _CATALOG) == get_page_seo(
            "contact", Locale.RU, _CATALOG
        )

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setitem(
            PAGE_SEO,
            "special",
            PageSeo(
                title={Locale.KA: "სათაური", Locale.EN: "Title"},
                description={Locale.KA: "აღწერა", Locale.EN: "Description"},
                og_title={Locale.EN: "Share title"},
            ),
        )
        og = get_page_og("special", Locale.EN, _CATALOG)
        assert og.title == "Share title"
        assert og.description == "Description"


class TestFormatTitle:
    def test_locale_template(self):
        assert format_title("About Us", Locale.EN, _CATALOG) == "About Us | Paragliding Georgia"

    def test_unsupported_locale_uses_default_template(self):
        assert format_title("X", "fr", _CATALOG) == "X | პარაგლაიდინგი საქართველოში"

    def test_title_with_brand_suffix_is_not_wrapped_again(self):
        title = "Gudauri - Georgia | Paragliding"
        assert format_title(title, Locale.EN, _CATALOG) == title


class TestPagePaths:
    def test_home_is_root(self):
        assert PAGE_PATHS["home"] == ""

    def test_other_pages_use_their_key(self):
        assert PAGE_PATHS["about"] == "about"
        assert set(PAGE_PATHS) == set(PAGE_SEO)
