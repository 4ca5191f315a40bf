"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class RateLimitExceededError(DomainError):
    """Raised when an actor has used up their quota for an action.

    Attributes:
        action: Name of the rate-limited action
        retry_after: Whole seconds until the current window resets
    """

    def __init__(self, action: str, retry_after: int):
        self.action = action
        self.retry_after = retry_after
        super().__init__(
            f"Rate limit exceeded for {action}. "
            f"Please try again in {retry_after} seconds."
        )
