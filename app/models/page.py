from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from app.models.entity import Country, Location


class StaticPage(BaseModel):
    """A page whose path is the same in every locale (``""`` is the home page)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["static"] = "static"
    path: str = ""


class CountryPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["country"] = "country"
    country: Country


class LocationPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["location"] = "location"
    location: Location


PageRef = Union[StaticPage, CountryPage, LocationPage]
