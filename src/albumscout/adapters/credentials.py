"""Access tokens and the optional per-process credential cache."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from albumscout.domain.model import Platform

log = getLogger(__name__)

DEFAULT_REFRESH_MARGIN = timedelta(seconds=60)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class AccessToken:
    value: str = field(repr=False)
    expires_at: datetime

    def is_fresh(self, *, now: datetime, margin: timedelta = DEFAULT_REFRESH_MARGIN) -> bool:
        return now < self.expires_at - margin


type TokenLoader = Callable[[], Awaitable[AccessToken]]


class CredentialCache:
    """Platform-keyed token cache that refreshes lazily on expiry.

    Each platform has its own lock, so concurrent requests share one refresh
    instead of stampeding the token endpoint.
    """

    def __init__(
        self,
        *,
        margin: timedelta = DEFAULT_REFRESH_MARGIN,
        now_provider: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._margin = margin
        self._now = now_provider
        self._tokens: dict[Platform, AccessToken] = {}
        self._locks: dict[Platform, asyncio.Lock] = {}

    async def get(self, platform: Platform, loader: TokenLoader) -> AccessToken:
        cached = self._tokens.get(platform)
        if cached is not None and cached.is_fresh(now=self._now(), margin=self._margin):
            return cached

        lock = self._locks.setdefault(platform, asyncio.Lock())
        async with lock:
            cached = self._tokens.get(platform)
            if cached is not None and cached.is_fresh(now=self._now(), margin=self._margin):
                return cached
            log.info("Refreshing %s credential", platform)
            token = await loader()
            self._tokens[platform] = token
            return token

    def invalidate(self, platform: Platform | None = None) -> None:
        if platform is None:
            self._tokens.clear()
        else:
            self._tokens.pop(platform, None)
