"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have both a production and a mock provider
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider with subclasses is a mockable component: its subclasses are
    the production and mock implementations, told apart by ``__is_mock__``.
    A provider without subclasses is used as-is.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool) -> type["ProviderBase"] | None:
        """Pick the subclass implementing this component, if any."""
        return next(
            (c for c in cls.__subclasses__() if c.__is_mock__ == use_mock),
            None,
        )
