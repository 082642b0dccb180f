"""Per-locale slug resolution and slug hygiene helpers."""

import re
from typing import Optional

from app.models.entity import SluggableEntity
from app.models.locale import Locale, LocaleCatalog

# Latin lowercase, digits, hyphen, plus the Georgian, Cyrillic and Arabic blocks
_SLUG_CHARS = r"a-z0-9\u10D0-\u10FF\u0400-\u04FF\u0600-\u06FF-"
_VALID_SLUG = re.compile(rf"^[{_SLUG_CHARS}]+$")


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip().strip("/")
    return value or None


def resolve_slug(
    entity: SluggableEntity, locale: Locale, catalog: LocaleCatalog
) -> Optional[str]:
    """Return the slug of *entity* for *locale*.

    Falls back to the catalog's default-locale slug when the locale has no
    (or a blank) slug.  Returns *None* when the default slug is missing too:
    such an entity is not linkable and callers leave it out.
    """
    return _clean(entity.slugs.get(locale)) or _clean(entity.slugs.get(catalog.default))


def is_linkable(entity: SluggableEntity, catalog: LocaleCatalog) -> bool:
    return _clean(entity.slugs.get(catalog.default)) is not None


def is_valid_slug(slug: str) -> bool:
    return bool(_VALID_SLUG.match(slug))
