"""Aggregation settings."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag, env_float

DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class SearchSettings:
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    isolate_failures: bool = False


def get_search_settings() -> SearchSettings:
    return SearchSettings(
        request_timeout_seconds=env_float(
            "ALBUMSCOUT_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS
        ),
        isolate_failures=env_flag("ALBUMSCOUT_ISOLATE_FAILURES"),
    )
