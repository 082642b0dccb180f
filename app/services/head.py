"""Render a page's metadata block as ``<head>`` tags."""

import json
from typing import Iterable, Optional

from bs4 import BeautifulSoup

from app.models.locale import LocaleCatalog
from app.models.seo import PageMetadata
from app.services.jsonld import JsonLd
from app.services.page_seo import format_title


def _json_for_script(data: JsonLd) -> str:
    # "</" inside a script body would close the tag early
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")


def render_head_tags(
    metadata: PageMetadata,
    json_ld: Iterable[JsonLd] = (),
    catalog: Optional[LocaleCatalog] = None,
) -> str:
    """Return the HTML fragment for *metadata*.

    Emits ``<title>`` (with the locale's title template), description and
    robots meta tags, the canonical link, one ``<link rel="alternate">`` per
    hreflang entry, Open Graph and Twitter card tags, then one JSON-LD
    ``<script>`` per item of *json_ld*.
    """
    soup = BeautifulSoup("", "lxml")

    def add(tag: str, **attrs: str) -> None:
        soup.append(soup.new_tag(tag, attrs=attrs))

    title = soup.new_tag("title")
    title.string = format_title(metadata.title, metadata.locale, catalog)
    soup.append(title)

    add("meta", name="description", content=metadata.description)
    add("meta", name="robots", content=str(metadata.robots))
    add("link", rel="canonical", href=metadata.alternates.canonical)
    for hreflang, href in metadata.alternates.languages.items():
        add("link", rel="alternate", hreflang=hreflang, href=href)

    og = metadata.open_graph
    add("meta", property="og:title", content=og.title)
    add("meta", property="og:description", content=og.description)
    add("meta", property="og:type", content=og.type)
    add("meta", property="og:locale", content=og.locale)
    add("meta", property="og:site_name", content=og.site_name)
    add("meta", property="og:url", content=og.url)
    for image in og.images:
        add("meta", property="og:image", content=image)

    add("meta", name="twitter:card", content="summary_large_image")
    add("meta", name="twitter:title", content=og.title)
    add("meta", name="twitter:description", content=og.description)

    for data in json_ld:
        script = soup.new_tag("script", attrs={"type": "application/ld+json"})
        script.string = _json_for_script(data)
        soup.append(script)

    return "\n".join(str(tag) for tag in soup.contents)
