"""In-process rate limiter.

Fixed-window counter per ``"{actor}:{action}"`` key. Each instance owns
its own map; a background sweep started with ``start()`` drops expired
entries so abandoned keys do not pile up.
"""

import asyncio
import math
import threading
import time
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Callable, Optional
from uuid import UUID

import logfire

from quotevote.config import RateLimitSettings
from quotevote.domain.error import RateLimitExceededError
from quotevote.domain.model.rate_limit import RateLimitEntry

from .base import Service


def _lookup(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def resolve_actor_id(actor: Any) -> Optional[str]:
    """Resolve the identifier an action is attributed to.

    Accepts a raw id (``str`` or ``UUID``) or a request-like object
    carrying a ``user`` with an ``_id`` or ``id``. Mappings are read by
    key, anything else by attribute.

    Args:
        actor: Raw id or request/context object

    Returns:
        Identifier string, or None for anonymous actors
    """
    if actor is None:
        return None
    if isinstance(actor, str):
        return actor or None
    if isinstance(actor, UUID):
        return str(actor)

    user = _lookup(actor, "user")
    if user is None:
        return None

    user_id = _lookup(user, "_id")
    if user_id is None:
        user_id = _lookup(user, "id")
    if user_id is None or user_id == "":
        return None
    return str(user_id)


class RateLimiter(Service):
    """Fixed-window rate limiter held in process memory.

    Boundary bursts (up to twice the limit across two adjacent windows)
    are accepted.
    """

    def __init__(
        self,
        settings: RateLimitSettings,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        """Initialize rate limiter.

        Args:
            settings: Rate limit settings
            clock: Monotonic seconds source, defaults to time.monotonic
        """
        super().__init__(clock or time.monotonic)
        self.settings = settings
        self._entries: dict[str, RateLimitEntry] = {}
        self._lock = threading.Lock()
        self._sweep_task: asyncio.Task[None] | None = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @staticmethod
    def make_key(actor_id: str, action: str) -> str:
        return f"{actor_id}:{action}"

    def check_rate_limit(
        self,
        actor: Any,
        action: str,
        limit: int | None = None,
        window_seconds: float | None = None,
    ) -> bool:
        """Count an action against the actor's quota.

        Anonymous actors are always allowed and leave no state behind.

        Args:
            actor: Raw id or request-like object (see resolve_actor_id)
            action: Name of the action, e.g. "sendMessage"
            limit: Actions allowed per window (default from settings)
            window_seconds: Window length (default from settings)

        Returns:
            True when the action is allowed

        Raises:
            RateLimitExceededError: If the quota for the current window is used up
        """
        actor_id = resolve_actor_id(actor)
        if actor_id is None:
            return True

        limit = limit if limit is not None else self.settings.default_limit
        window = (
            window_seconds if window_seconds is not None else self.settings.window_seconds
        )
        key = self.make_key(actor_id, action)

        with self._lock:
            now = self.now()
            entry = self._entries.get(key)

            if entry is None or now >= entry.reset_at:
                self._entries[key] = RateLimitEntry(count=1, reset_at=now + window)
                return True

            if entry.count >= limit:
                retry_after = math.ceil(entry.reset_at - now)
                logfire.warn(
                    "Rate limit exceeded",
                    actor_id=actor_id,
                    action=action,
                    limit=limit,
                    retry_after=retry_after,
                )
                raise RateLimitExceededError(action, retry_after)

            entry.count += 1
            return True

    def reset_rate_limit(self, actor: Any, action: str) -> None:
        """Forget the actor's window for an action.

        Args:
            actor: Raw id or request-like object (see resolve_actor_id)
            action: Name of the action
        """
        actor_id = resolve_actor_id(actor)
        if actor_id is None:
            return

        with self._lock:
            self._entries.pop(self.make_key(actor_id, action), None)

    def get_entry(self, actor: Any, action: str) -> RateLimitEntry | None:
        """Return a snapshot of the current window for an actor/action, if any."""
        actor_id = resolve_actor_id(actor)
        if actor_id is None:
            return None
        with self._lock:
            entry = self._entries.get(self.make_key(actor_id, action))
            return replace(entry) if entry else None

    def sweep(self) -> int:
        """Delete every entry whose window has passed.

        Returns:
            Number of entries removed
        """
        with self._lock:
            now = self.now()
            expired = [key for key, entry in self._entries.items() if now > entry.reset_at]
            for key in expired:
                del self._entries[key]
            remaining = len(self._entries)

        if expired:
            logfire.debug("Rate limit sweep", removed=len(expired), remaining=remaining)
        return len(expired)

    @property
    def running(self) -> bool:
        return self._sweep_task is not None and not self._sweep_task.done()

    def start(self) -> None:
        """Schedule the periodic sweep on the running event loop.

        Does nothing if the sweep is disabled or already running.
        """
        if not self.settings.sweep_enabled:
            logfire.info("Rate limit sweep disabled")
            return
        if self.running:
            return

        self._sweep_task = asyncio.get_running_loop().create_task(self._sweep_loop())
        logfire.info(
            "Rate limit sweep started",
            interval_seconds=self.settings.sweep_interval_seconds,
        )

    async def stop(self) -> None:
        """Cancel the periodic sweep and wait for it to finish."""
        task, self._sweep_task = self._sweep_task, None
        if task is None:
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logfire.info("Rate limit sweep stopped")

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self.settings.sweep_interval_seconds)
            self.sweep()
