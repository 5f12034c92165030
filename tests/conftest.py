from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from albumscout.config.apple_music import AppleMusicConfig, default_apple_music_resilience
from albumscout.config.deezer import DeezerConfig
from albumscout.config.search import SearchSettings
from albumscout.config.spotify import SpotifyConfig, default_spotify_resilience
from tests.helpers.upstreams import FakeUpstreams

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def upstreams() -> FakeUpstreams:
    return FakeUpstreams()


@pytest.fixture
def ec_private_key_pem() -> str:
    key = ec.generate_private_key(ec.SECP256R1())
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def apple_key_path(tmp_path: Path, ec_private_key_pem: str) -> Path:
    path = tmp_path / "AuthKey_KEY1234567.p8"
    path.write_text(ec_private_key_pem)
    return path


@pytest.fixture
def spotify_config() -> SpotifyConfig:
    return SpotifyConfig(
        client_id="client-id",
        client_secret="client-secret",  # noqa: S106
        resilience=default_spotify_resilience(),
    )


@pytest.fixture
def apple_music_config(apple_key_path: Path) -> AppleMusicConfig:
    return AppleMusicConfig(
        private_key_path=apple_key_path,
        team_id="TEAM123456",
        key_id="KEY1234567",
        resilience=default_apple_music_resilience(),
    )


@pytest.fixture
def deezer_config() -> DeezerConfig:
    return DeezerConfig()


@pytest.fixture
def search_settings() -> SearchSettings:
    return SearchSettings(request_timeout_seconds=5.0)
