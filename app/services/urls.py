"""Absolute URL construction from a base URL, a locale and path segments."""

from typing import Iterable, Union
from urllib.parse import quote, urlparse

from app.models.locale import Locale

ALLOWED_SCHEMES = {"http", "https"}


def _validate_base_url(base_url: str) -> str:
    """Return *base_url* without trailing slashes; raise ValueError if it is not absolute."""
    parsed = urlparse(base_url)
    if parsed.scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"Base URL must use http or https, got '{base_url}'.")
    if not parsed.netloc:
        raise ValueError(f"Base URL must have a host, got '{base_url}'.")
    return base_url.rstrip("/")


def split_path(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def build_url(
    base_url: str,
    locale: Union[Locale, str],
    segments: Iterable[str] = (),
) -> str:
    """Join *base_url*, the *locale* segment and URL-encoded *segments*.

    Separators are always a single ``/``: slashes around the base URL and
    around each segment are dropped, as are empty segments.  The locale
    segment is never omitted.

    >>> build_url("https://x.com", "en", ["locations", "georgia", "gudauri"])
    'https://x.com/en/locations/georgia/gudauri'
    """
    base = _validate_base_url(base_url)
    code = locale.value if isinstance(locale, Locale) else locale.strip().strip("/")
    if not code:
        raise ValueError("Locale segment must not be empty.")

    parts = [quote(code, safe="")]
    for segment in segments:
        segment = segment.strip().strip("/")
        if segment:
            parts.append(quote(segment, safe=""))
    return f"{base}/{'/'.join(parts)}"


def build_canonical_url(base_url: str, locale: Union[Locale, str], path: str = "") -> str:
    """Like :func:`build_url` but takes a ``/``-separated *path* string."""
    return build_url(base_url, locale, split_path(path))


def build_absolute_url(base_url: str, path: str = "") -> str:
    """Return a locale-less URL under *base_url* (sitemaps, robots, assets)."""
    base = _validate_base_url(base_url)
    parts = [quote(part, safe="") for part in split_path(path)]
    return f"{base}/{'/'.join(parts)}" if parts else base
