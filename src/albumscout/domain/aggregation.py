"""Concurrent fan-out over the platform searches."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from .model import MAX_ALBUMS_PER_PLATFORM, Platform, PlatformOutcome, SearchResult

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping, Sequence

    from .model import Album

type PlatformSearch = Callable[[], Awaitable[Sequence[Album]]]

log = getLogger(__name__)


async def aggregate_platforms(
    searches: Mapping[Platform, PlatformSearch],
    *,
    isolate_failures: bool = False,
    limit: int = MAX_ALBUMS_PER_PLATFORM,
) -> SearchResult:
    """Run every platform search concurrently and merge the albums.

    Without ``isolate_failures`` the first failing platform cancels the others
    and its exception propagates unchanged. With it, each failure is recorded
    as an error outcome and the remaining platforms are still returned.
    """

    if isolate_failures:
        outcomes = await _gather_isolated(searches)
    else:
        outcomes = await _gather_strict(searches)
    return SearchResult.from_outcomes(outcomes, limit=limit)


async def _gather_strict(
    searches: Mapping[Platform, PlatformSearch],
) -> dict[Platform, PlatformOutcome]:
    try:
        async with asyncio.TaskGroup() as group:
            tasks = {
                platform: group.create_task(_run(search), name=f"search-{platform}")
                for platform, search in searches.items()
            }
    except ExceptionGroup as failures:
        first = failures.exceptions[0]
        log.error("Album search aborted: %s", first)
        raise first from None

    return {
        platform: PlatformOutcome(platform=platform, albums=task.result())
        for platform, task in tasks.items()
    }


async def _gather_isolated(
    searches: Mapping[Platform, PlatformSearch],
) -> dict[Platform, PlatformOutcome]:
    platforms = list(searches)
    results = await asyncio.gather(
        *(_run(searches[platform]) for platform in platforms),
        return_exceptions=True,
    )

    outcomes: dict[Platform, PlatformOutcome] = {}
    for platform, result in zip(platforms, results, strict=True):
        if isinstance(result, Exception):
            log.error("%s search failed, continuing without it: %s", platform, result)
            outcomes[platform] = PlatformOutcome(platform=platform, error=str(result))
        elif isinstance(result, BaseException):
            raise result
        else:
            outcomes[platform] = PlatformOutcome(platform=platform, albums=result)
    return outcomes


async def _run(search: PlatformSearch) -> tuple[Album, ...]:
    return tuple(await search())
