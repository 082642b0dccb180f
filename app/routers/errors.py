"""Translate data-fetch failures into HTTP errors."""

import logging
from typing import Awaitable, TypeVar

import httpx
from fastapi import HTTPException

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def fetch_or_raise(awaitable: Awaitable[T], what: str) -> T:
    """Await a repository call and propagate its errors as HTTP exceptions."""
    try:
        return await awaitable
    except httpx.TimeoutException:
        logger.error("Timeout fetching %s from the backend", what)
        raise HTTPException(status_code=504, detail="The backend timed out.")
    except httpx.HTTPStatusError as exc:
        logger.error("Backend error fetching %s: %s", what, exc)
        raise HTTPException(
            status_code=502, detail=f"Backend returned HTTP {exc.response.status_code}."
        )
    except (httpx.RequestError, RuntimeError) as exc:
        logger.error("Error fetching %s: %s", what, exc)
        raise HTTPException(status_code=502, detail=str(exc))
