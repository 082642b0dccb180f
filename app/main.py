import logging
import logging.config

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.config import settings
from app.limiter import limiter
from app.routers.params import router as params_router
from app.routers.seo import router as seo_router
from app.routers.sitemap import router as sitemap_router

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": settings.LOG_LEVEL, "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Paraglide SEO",
    description=(
        "Locale-aware SEO for the paragliding marketplace: canonical and hreflang "
        "alternates, page metadata, sitemaps, robots.txt and JSON-LD."
    ),
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Client IPs for rate limiting come from X-Forwarded-For when sent by a trusted proxy
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=settings.trusted_proxies)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(seo_router)
app.include_router(sitemap_router)
app.include_router(params_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from Paraglide SEO", "site_url": settings.base_url}
