"""Tests for JSON-LD builders and <head> tag rendering."""

import json

from bs4 import BeautifulSoup

from app.models.locale import Locale, LocaleCatalog
from app.services import jsonld
from app.services.head import render_head_tags
from app.services.metadata import assemble_page_metadata

_BASE = "https://example.com"
_CATALOG = LocaleCatalog()


# ---------------------------------------------------------------------------
# JSON-LD
# ---------------------------------------------------------------------------


class TestJsonLd:
    def test_organization(self):
        data = jsonld.organization(_BASE, same_as=["https://facebook.com/paragliding"])
        assert data["@type"] == "Organization"
        assert data["url"] == _BASE
        assert data["logo"] == "https://example.com/logo.png"
        assert data["sameAs"] == ["https://facebook.com/paragliding"]

    def test_website_search_action(self):
        data = jsonld.website(_BASE, Locale.KA)
        assert data["potentialAction"]["target"]["urlTemplate"] == (
            "https://example.com/ka/locations?search={search_term_string}"
        )

    def test_breadcrumbs_positions(self):
        data = jsonld.breadcrumbs([("Home", f"{_BASE}/en"), ("About", f"{_BASE}/en/about")])
        items = data["itemListElement"]
        assert [item["position"] for item in items] == [1, 2]
        assert items[1] == {
            "@type": "ListItem",
            "position": 2,
            "name": "About",
            "item": "https://example.com/en/about",
        }

    def test_tourist_attraction_minimal(self):
        data = jsonld.tourist_attraction(
            "Gudauri", "Tandem flights", f"{_BASE}/en/locations/georgia/gudauri", "Georgia"
        )
        assert data["address"]["addressRegion"] == "Georgia"
        assert "aggregateRating" not in data
        assert "geo" not in data
        assert "image" not in data

    def test_tourist_attraction_rating_needs_reviews(self):
        data = jsonld.tourist_attraction("Gudauri", "", "u", "Georgia", rating=4.8, rating_count=0)
        assert "aggregateRating" not in data

    def test_tourist_attraction_full(self):
        data = jsonld.tourist_attraction(
            "Gudauri",
            "Tandem flights",
            "u",
            "Georgia",
            image="https://cdn.example.com/g.jpg",
            rating=4.8,
            rating_count=12,
            altitude=2200,
        )
        assert data["aggregateRating"]["ratingValue"] == "4.8"
        assert data["aggregateRating"]["reviewCount"] == 12
        assert data["geo"]["elevation"] == "2200m"
        assert data["image"] == "https://cdn.example.com/g.jpg"


# ---------------------------------------------------------------------------
# Head tags
# ---------------------------------------------------------------------------


def _render(page_key="about", locale="en", json_ld=()):
    metadata = assemble_page_metadata(page_key, locale, base_url=_BASE, catalog=_CATALOG)
    html = render_head_tags(metadata, json_ld, _CATALOG)
    return metadata, BeautifulSoup(html, "lxml")


class TestRenderHeadTags:
    def test_title_uses_template(self):
        _, soup = _render()
        assert soup.title.string == "About Us | Paragliding Georgia"

    def test_canonical_and_alternates(self):
        metadata, soup = _render()
        assert soup.find("link", rel="canonical")["href"] == "https://example.com/en/about"

        alternates = soup.find_all("link", rel="alternate")
        assert {link["hreflang"]: link["href"] for link in alternates} == dict(
            metadata.alternates.languages
        )

    def test_meta_tags(self):
        metadata, soup = _render()
        assert soup.find("meta", attrs={"name": "description"})["content"] == metadata.description
        assert soup.find("meta", attrs={"name": "robots"})["content"] == "index, follow"
        assert soup.find("meta", property="og:url")["content"] == "https://example.com/en/about"
        assert soup.find("meta", property="og:locale")["content"] == "en_US"
        assert soup.find("meta", attrs={"name": "twitter:card"})["content"] == (
            "summary_large_image"
        )

    def test_private_page_robots(self):
        _, soup = _render("profile")
        assert soup.find("meta", attrs={"name": "robots"})["content"] == "noindex, follow"

    def test_json_ld_scripts(self):
        crumbs = jsonld.breadcrumbs([("Home", f"{_BASE}/en")])
        _, soup = _render(json_ld=[crumbs])

        scripts = soup.find_all("script", type="application/ld+json")
        assert len(scripts) == 1
        assert json.loads(scripts[0].string) == crumbs

    def test_script_close_tag_is_escaped(self):
        metadata = assemble_page_metadata("about", "en", base_url=_BASE, catalog=_CATALOG)
        html = render_head_tags(metadata, [{"name": "</script><b>x</b>"}], _CATALOG)
        assert "</script><b>" not in html
        assert "<\\/script>" in html
