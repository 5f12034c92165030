"""Apple Music configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import optional_env_var, require_env_vars
from .http_resilience import ResilienceConfig

APPLE_MUSIC_API_BASE_URL = "https://api.music.apple.com"
APPLE_MUSIC_TIMEOUT_SECONDS = 10.0
DEFAULT_APPLE_MUSIC_STOREFRONT = "de"


@dataclass(frozen=True)
class AppleMusicConfig:
    private_key_path: Path
    team_id: str
    key_id: str
    resilience: ResilienceConfig
    storefront: str = DEFAULT_APPLE_MUSIC_STOREFRONT


def default_apple_music_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="appleMusic",
        base_url=APPLE_MUSIC_API_BASE_URL,
        timeout_seconds=APPLE_MUSIC_TIMEOUT_SECONDS,
    )


def get_apple_music_config(*, resilience: ResilienceConfig | None = None) -> AppleMusicConfig:
    values = require_env_vars(
        (
            "APPLE_MUSIC_PRIVATE_KEY_PATH",
            "APPLE_MUSIC_TEAM_ID",
            "APPLE_MUSIC_KEY_ID",
        )
    )
    return AppleMusicConfig(
        private_key_path=Path(values["APPLE_MUSIC_PRIVATE_KEY_PATH"]).expanduser(),
        team_id=values["APPLE_MUSIC_TEAM_ID"],
        key_id=values["APPLE_MUSIC_KEY_ID"],
        storefront=optional_env_var("APPLE_MUSIC_STOREFRONT", DEFAULT_APPLE_MUSIC_STOREFRONT),
        resilience=resilience or default_apple_music_resilience(),
    )
