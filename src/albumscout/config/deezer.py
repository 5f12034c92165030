"""Deezer configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .http_resilience import RateLimit, ResilienceConfig

DEEZER_API_BASE_URL = "https://api.deezer.com"
DEEZER_TIMEOUT_SECONDS = 10.0


def default_deezer_resilience() -> ResilienceConfig:
    # Deezer allows 50 requests per 5 seconds per client.
    return ResilienceConfig(
        name="deezer",
        base_url=DEEZER_API_BASE_URL,
        timeout_seconds=DEEZER_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=50, per_seconds=5.0),
    )


@dataclass(frozen=True)
class DeezerConfig:
    resilience: ResilienceConfig = field(default_factory=default_deezer_resilience)


def get_deezer_config() -> DeezerConfig:
    return DeezerConfig()
