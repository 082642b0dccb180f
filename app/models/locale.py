"""Supported locales and the catalog that designates default and x-default."""

from enum import Enum
from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator


class Locale(str, Enum):
    """Closed set of locales the site is published in."""

    KA = "ka"
    EN = "en"
    RU = "ru"
    AR = "ar"
    DE = "de"
    TR = "tr"

    @classmethod
    def parse(cls, code: Union[str, "Locale", None]) -> Optional["Locale"]:
        """Return the locale matching *code*, or *None* when it is not supported.

        Case variants and region-qualified tags are accepted: ``"EN"``,
        ``"en-US"`` and ``"en_GB"`` all map to :attr:`EN`.
        """
        if isinstance(code, Locale):
            return code
        if not code:
            return None
        language = code.strip().replace("_", "-").split("-")[0].lower()
        try:
            return cls(language)
        except ValueError:
            return None

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def hreflang(self) -> str:
        """ISO 639-1 code advertised in ``hreflang`` attributes."""
        return self.value

    @property
    def direction(self) -> str:
        return "rtl" if self is Locale.AR else "ltr"

    @property
    def og_locale(self) -> str:
        return _OG_LOCALES[self]


_DISPLAY_NAMES = {
    Locale.KA: "ქართული",
    Locale.EN: "English",
    Locale.RU: "Русский",
    Locale.AR: "العربية",
    Locale.DE: "Deutsch",
    Locale.TR: "Türkçe",
}

_OG_LOCALES = {
    Locale.KA: "ka_GE",
    Locale.EN: "en_US",
    Locale.RU: "ru_RU",
    Locale.AR: "ar_AR",
    Locale.DE: "de_DE",
    Locale.TR: "tr_TR",
}

X_DEFAULT = "x-default"


class LocaleCatalog(BaseModel):
    """Ordered set of published locales plus the default and x-default picks.

    Invariants: the catalog is non-empty, lists every locale once, and both
    ``default`` and ``x_default`` are members of ``locales``.
    """

    model_config = ConfigDict(frozen=True)

    locales: Tuple[Locale, ...] = tuple(Locale)
    default: Locale = Locale.KA
    x_default: Locale = Locale.KA

    @model_validator(mode="before")
    @classmethod
    def _x_default_follows_default(cls, data: Any) -> Any:
        # An unset x-default points at the default locale.
        if isinstance(data, dict) and data.get("x_default") is None:
            data = {**data, "x_default": data.get("default", Locale.KA)}
        return data

    @model_validator(mode="after")
    def _check_members(self) -> "LocaleCatalog":
        if not self.locales:
            raise ValueError("A locale catalog needs at least one locale.")
        if len(set(self.locales)) != len(self.locales):
            raise ValueError("A locale catalog must not list a locale twice.")
        if self.default not in self.locales:
            raise ValueError(f"Default locale '{self.default.value}' is not in the catalog.")
        if self.x_default not in self.locales:
            raise ValueError(f"x-default locale '{self.x_default.value}' is not in the catalog.")
        return self

    def is_supported(self, code: Union[str, Locale, None]) -> bool:
        locale = Locale.parse(code)
        return locale is not None and locale in self.locales

    def resolve(self, code: Union[str, Locale, None]) -> Locale:
        """Map *code* onto a catalog locale, falling back to :attr:`default`."""
        locale = Locale.parse(code)
        if locale is None or locale not in self.locales:
            return self.default
        return locale
