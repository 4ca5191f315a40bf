"""Rate limit window state."""

from dataclasses import dataclass


@dataclass
class RateLimitEntry:
    """Fixed-window counter for one actor/action pair.

    Mutable on purpose: the limiter bumps ``count`` in place while the
    window is open.
    """

    count: int
    reset_at: float
