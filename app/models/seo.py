from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from app.models.locale import Locale


class AlternateUrlSet(BaseModel):
    """Canonical URL of a page plus its hreflang alternates.

    ``languages`` is keyed by hreflang code and always ends with the
    synthetic ``"x-default"`` entry.
    """

    model_config = ConfigDict(frozen=True)

    canonical: str
    languages: Dict[str, str]


class SeoText(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str


class PageSeo(BaseModel):
    """Translated title/description of one static page, keyed by locale."""

    model_config = ConfigDict(frozen=True)

    title: Dict[Locale, str]
    description: Dict[Locale, str]
    og_title: Optional[Dict[Locale, str]] = None
    og_description: Optional[Dict[Locale, str]] = None


class OpenGraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    type: str = "website"
    locale: str
    site_name: str
    url: str
    images: List[str] = []


class Robots(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: bool = True
    follow: bool = True

    def __str__(self) -> str:
        return ", ".join(
            ["index" if self.index else "noindex", "follow" if self.follow else "nofollow"]
        )


class PageMetadata(BaseModel):
    """Everything the rendering layer needs for a page's ``<head>``."""

    model_config = ConfigDict(frozen=True)

    locale: Locale
    title: str
    description: str
    alternates: AlternateUrlSet
    open_graph: OpenGraph
    robots: Robots = Robots()
    direction: str = "ltr"
