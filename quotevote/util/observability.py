"""Logfire setup for the scoring service.

Application code logs straight through ``logfire``; spans are named after
the operation (``score_service.update_score``, ``post_score_repository.*``)
and carry ``post_id`` / ``user_id`` attributes so a single vote can be
followed from the HTTP request down to its SQL.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from quotevote.config import ObservabilitySettings, Settings

SERVICE_NAME = "quotevote-scoring"

# Health checks are polled constantly and carry no scoring information
UNTRACED_URLS = ["/health"]


def should_send(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit ``OBSERVABILITY__SEND_TO_LOGFIRE`` wins; otherwise sending
    is on exactly when a token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Test runs keep the console quiet; other environments print spans
    nested under their parents.

    Args:
        settings: Application settings
    """
    send = should_send(settings.observability)
    console = (
        False
        if settings.environment == "test"
        else logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )
    )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=console,
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send,
        trending_window_hours=settings.scoring.trending_window_hours,
        vote_limit=settings.rate_limit.vote_limit,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace vote, score and trending requests.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app, capture_headers=False, excluded_urls=UNTRACED_URLS
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace scoring queries, tagging the SQL with the active span.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
