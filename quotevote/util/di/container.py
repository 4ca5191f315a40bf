"""Dependency injection container."""

import logfire
from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from quotevote.util.di import PROVIDERS, get_provider


def create_container(*extra: Provider) -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Args:
        extra: Additional providers, appended after the production ones

    Returns:
        Configured DI container with production providers
    """
    provider_classes = [get_provider(base, use_mock=False) for base in PROVIDERS]
    logfire.debug(
        "Building DI container",
        providers=[cls.__name__ for cls in provider_classes],
    )
    # FastapiProvider exposes the Request to request-scoped factories
    return make_async_container(
        *(cls() for cls in provider_classes), FastapiProvider(), *extra
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    The container is closed by the app lifespan, not here.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
