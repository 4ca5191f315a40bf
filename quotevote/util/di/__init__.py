"""Dependency injection module."""

from typing import Type

from quotevote.util.di.application import ProdApplicationProvider
from quotevote.util.di.base import Component, ProviderBase
from quotevote.util.di.core import ProdConfigProvider
from quotevote.util.di.domain import ProdDomainProvider
from quotevote.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from quotevote.util.error import DependencyInjectionError

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    Automatically determines if provider is mockable by checking for subclasses.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Mockable component, select by __is_mock__ flag

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    if not base.is_mockable():
        # Concrete provider - no implementations, use as-is
        return base

    impl = base.implementation(use_mock)
    if impl is None:
        raise DependencyInjectionError(
            base.__mock_component__ or base.__name__,
            "mock" if use_mock else "production",
        )

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
