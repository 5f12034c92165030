"""Application configuration helpers."""

from __future__ import annotations

from .apple_music import AppleMusicConfig, get_apple_music_config
from .deezer import DeezerConfig, get_deezer_config
from .env import require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .logging import configure_logging
from .search import SearchSettings, get_search_settings
from .spotify import SpotifyConfig, get_spotify_config

__all__ = [
    "AppleMusicConfig",
    "ConfigurationError",
    "DeezerConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "SearchSettings",
    "SpotifyConfig",
    "configure_logging",
    "get_apple_music_config",
    "get_deezer_config",
    "get_search_settings",
    "get_spotify_config",
    "require_env_vars",
]
