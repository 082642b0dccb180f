"""Backend rows that carry one URL slug (and optional SEO texts) per locale."""

from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.models.locale import Locale

Localized = Dict[Locale, Optional[str]]


def localized_from_row(row: Mapping[str, Any], field: str) -> Localized:
    """Collect the ``<field>_<code>`` columns of *row* into a locale-keyed mapping."""
    return {locale: row.get(f"{field}_{locale.value}") for locale in Locale}


class SluggableEntity(BaseModel):
    """Any linkable record: a stable id plus a (possibly sparse) slug per locale."""

    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
    slugs: Localized = Field(default_factory=dict)
    names: Localized = Field(default_factory=dict)
    seo_titles: Localized = Field(default_factory=dict)
    seo_descriptions: Localized = Field(default_factory=dict)
    og_image_url: Optional[str] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def _row_fields(cls, row: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "id": row["id"],
            "slugs": localized_from_row(row, "slug"),
            "names": localized_from_row(row, "name"),
            "seo_titles": localized_from_row(row, "seo_title"),
            "seo_descriptions": localized_from_row(row, "seo_description"),
            "og_image_url": row.get("og_image_url"),
            "updated_at": row.get("updated_at"),
        }


class Country(SluggableEntity):
    is_active: bool = True

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Country":
        return cls(**cls._row_fields(row), is_active=row.get("is_active", True))


class Location(SluggableEntity):
    country: Country
    rating: Optional[float] = None
    rating_count: Optional[int] = None
    altitude: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Location":
        # PostgREST returns an embedded to-one relation as an object, but
        # some joins come back as a single-item list.
        country_row = row["countries"]
        if isinstance(country_row, list):
            country_row = country_row[0]
        return cls(
            **cls._row_fields(row),
            country=Country.from_row(country_row),
            rating=row.get("cached_rating"),
            rating_count=row.get("cached_rating_count"),
            altitude=row.get("altitude"),
        )
