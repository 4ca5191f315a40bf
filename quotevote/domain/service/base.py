"""Base service class for domain services."""

from typing import Any, Callable


class Service:
    """Base class for all domain services.

    Services that depend on time read it through an injected clock so
    tests can move time by hand.
    """

    def __init__(self, clock: Callable[[], Any]) -> None:
        self.clock = clock

    def now(self) -> Any:
        """Current time as reported by the service's clock."""
        return self.clock()
