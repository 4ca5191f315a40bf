"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI

from quotevote.domain.service import RateLimiter
from quotevote.interface.api.routes import health, posts, votes
from quotevote.util.di.container import create_container, setup_di
from quotevote.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run the rate limiter sweep for the lifetime of the app."""
    container: AsyncContainer = app.state.dishka_container
    rate_limiter = await container.get(RateLimiter)
    rate_limiter.start()
    try:
        yield
    finally:
        await rate_limiter.stop()
        await container.close()
        logfire.info("Application shut down")


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use, defaults to the production container
    """
    app_instance = FastAPI(
        title="Quote.Vote Scoring API",
        description="Vote tallies, trending and rate limiting for Quote.Vote posts",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(votes.router)

    return app_instance
