"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when no provider implementation matches a request.

    Attributes:
        component: Name of the component that could not be resolved
        kind: "mock" or "production"
    """

    def __init__(self, component: str, kind: str):
        self.component = component
        self.kind = kind
        super().__init__(f"No {kind} implementation for {component}")
