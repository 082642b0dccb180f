"""Locale registry: the catalog the rest of the service works against."""

import logging
from functools import lru_cache

from app.config import settings
from app.models.locale import Locale, LocaleCatalog

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_catalog() -> LocaleCatalog:
    """Return the site-wide catalog: every :class:`Locale`, in declaration order.

    ``DEFAULT_LOCALE`` and ``X_DEFAULT_LOCALE`` come from the settings; a
    value that is not a supported locale is logged and ignored.
    """
    default = Locale.parse(settings.DEFAULT_LOCALE)
    if default is None:
        logger.warning("Unsupported DEFAULT_LOCALE %r, using 'ka'", settings.DEFAULT_LOCALE)
        default = Locale.KA

    x_default = Locale.parse(settings.X_DEFAULT_LOCALE)
    if settings.X_DEFAULT_LOCALE and x_default is None:
        logger.warning(
            "Unsupported X_DEFAULT_LOCALE %r, using the default locale", settings.X_DEFAULT_LOCALE
        )

    return LocaleCatalog(locales=tuple(Locale), default=default, x_default=x_default)
