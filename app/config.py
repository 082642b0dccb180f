"""Runtime configuration loaded from the environment (or a local ``.env``)."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings.

    Environment Variables:
        SITE_URL: Public base URL of the website, without a trailing slash.
        SITE_NAME: Brand name used in titles, Open Graph and JSON-LD.
        DEFAULT_LOCALE: Fallback locale for slugs, translations and
            unsupported locale codes.
        X_DEFAULT_LOCALE: Locale whose URL is advertised as ``x-default``.
            Empty means "same as DEFAULT_LOCALE".
        SUPABASE_URL / SUPABASE_KEY: Backend REST endpoint and anon key.
        SUPABASE_TIMEOUT: Per-request timeout in seconds.
        STATIC_PAGES_LASTMOD: ISO timestamp reported for static pages in
            the sitemap.
        LOG_LEVEL: Root logging level.
        RATE_LIMIT: slowapi limit string applied to every public endpoint.
        TRUSTED_PROXIES: Comma-separated proxy addresses whose
            X-Forwarded-For header is trusted.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    SITE_URL: str = "http://localhost:3000"
    SITE_NAME: str = "Paragliding Georgia"
    DEFAULT_LOCALE: str = "ka"
    X_DEFAULT_LOCALE: str = ""

    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    SUPABASE_TIMEOUT: int = 10

    STATIC_PAGES_LASTMOD: str = "2025-11-24T00:00:00Z"
    LOG_LEVEL: str = "INFO"
    RATE_LIMIT: str = "60/minute"
    TRUSTED_PROXIES: str = "127.0.0.1,::1"

    @property
    def base_url(self) -> str:
        return self.SITE_URL.rstrip("/")

    @property
    def trusted_proxies(self) -> list[str]:
        return [host.strip() for host in self.TRUSTED_PROXIES.split(",") if host.strip()]


settings = Settings()
