#!/usr/bin/env python3
"""Create the scoring tables with Logfire error tracking."""

import asyncio
import sys

import logfire

from quotevote.config import Settings
from quotevote.persistence.database import create_engine, create_tables
from quotevote.util.observability import configure_logfire


async def _create(settings: Settings) -> None:
    engine = create_engine(settings)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


def main() -> int:
    """Create tables and log any errors to Logfire."""
    settings = Settings()

    configure_logfire(settings)

    try:
        logfire.info("Creating database tables")
        asyncio.run(_create(settings))
        logfire.info("Database tables ready")
        return 0

    except Exception as e:
        logfire.error(
            "Table creation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
