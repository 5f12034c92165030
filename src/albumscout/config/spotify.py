"""Spotify configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_vars
from .http_resilience import ResilienceConfig

SPOTIFY_API_BASE_URL = "https://api.spotify.com/v1"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class SpotifyConfig:
    client_id: str
    client_secret: str
    resilience: ResilienceConfig
    token_url: str = SPOTIFY_TOKEN_URL


def default_spotify_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="spotify",
        base_url=SPOTIFY_API_BASE_URL,
        timeout_seconds=SPOTIFY_TIMEOUT_SECONDS,
    )


def get_spotify_config(*, resilience: ResilienceConfig | None = None) -> SpotifyConfig:
    values = require_env_vars(("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET"))
    return SpotifyConfig(
        client_id=values["SPOTIFY_CLIENT_ID"],
        client_secret=values["SPOTIFY_CLIENT_SECRET"],
        resilience=resilience or default_spotify_resilience(),
    )
