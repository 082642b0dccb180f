"""Pre-rendering parameters for the site's static generation step."""

import logging
from typing import Dict, List, Literal

from fastapi import APIRouter, Request

from app.config import settings
from app.limiter import limiter
from app.routers.errors import fetch_or_raise
from app.services.repository import fetch_countries, fetch_locations
from app.services.static_params import (
    generate_country_params,
    generate_locale_params,
    generate_location_params,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/static-params", tags=["static-params"])


@router.get(
    "/{kind}",
    summary="Route parameters to pre-render",
    description=(
        "`locale` lists every published locale; `country` and `location` list "
        "one parameter set per linkable entity and locale."
    ),
)
@limiter.limit(settings.RATE_LIMIT)
async def static_params(
    request: Request, kind: Literal["locale", "country", "location"]
) -> List[Dict[str, str]]:
    if kind == "locale":
        return generate_locale_params()
    if kind == "country":
        countries = await fetch_or_raise(fetch_countries(), "countries")
        return generate_country_params(countries)

    locations = await fetch_or_raise(fetch_locations(), "locations")
    params = generate_location_params(locations)
    logger.info("Location params generated", extra={"count": len(params)})
    return params
