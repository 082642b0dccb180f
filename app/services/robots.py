"""robots.txt rendering."""

from typing import List, Optional, Sequence, Tuple

from app.config import settings
from app.services.urls import build_absolute_url

_PRIVATE_PAGES = [
    "/*/login",
    "/*/register",
    "/*/forgot-password",
    "/*/profile",
    "/*/bookings",
    "/*/notifications",
    "/*/user",
    "/*/user-promotions",
    "/*/cms",
    "/*/cms/*",
    "/api/",
    "/api/*",
    "/auth/",
    "/auth/*",
]

# Query strings that only produce duplicate content
_DUPLICATE_QUERIES = [
    "/*?sort=*",
    "/*?filter=*",
    "/*?page=*",
    "/*?utm_*",
    "/*?ref=*",
    "/*?fbclid=*",
    "/*?gclid=*",
]

ROBOTS_RULES: List[Tuple[str, Sequence[str]]] = [
    ("*", _PRIVATE_PAGES + _DUPLICATE_QUERIES),
    ("Googlebot", _PRIVATE_PAGES),
]


def render_robots(base_url: Optional[str] = None) -> str:
    base_url = base_url or settings.base_url
    lines: List[str] = []
    for user_agent, disallow in ROBOTS_RULES:
        lines.append(f"User-Agent: {user_agent}")
        lines.append("Allow: /")
        lines.extend(f"Disallow: {path}" for path in disallow)
        lines.append("")
    lines.append(f"Host: {base_url}")
    lines.append(f"Sitemap: {build_absolute_url(base_url, '/sitemap.xml')}")
    return "\n".join(lines) + "\n"
