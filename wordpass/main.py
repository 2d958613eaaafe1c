"""
wordpass HTTP service
Serves passphrases from a dictionary loaded once at startup
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from wordpass import __version__
from wordpass.config import Settings, resolve_log_level, settings, validate_settings
from wordpass.logging_config import setup_logging
from wordpass.middleware.rate_limit import RateLimitConfig, RateLimiter
from wordpass.routers import health, passphrase
from wordpass.wordlist import load_dictionary


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    active_settings: Settings = app.state.settings

    setup_logging(resolve_log_level(active_settings))

    # Fail fast on bad configuration before serving anything
    validate_settings(active_settings)

    if getattr(app.state, "dictionary", None) is None:
        app.state.dictionary = load_dictionary(active_settings)

    yield

    app.state.dictionary = None


def create_app(active_settings: Optional[Settings] = None) -> FastAPI:
    """Application factory"""
    active_settings = active_settings or settings

    app = FastAPI(
        title="wordpass",
        description="Memorable passphrase generator",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.state.settings = active_settings
    app.state.dictionary = None
    app.state.rate_limiter = RateLimiter(RateLimitConfig.from_settings(active_settings))

    app.include_router(health.router, tags=["health"])
    app.include_router(passphrase.router, prefix="/api", tags=["passphrase"])

    return app


app = create_app()
