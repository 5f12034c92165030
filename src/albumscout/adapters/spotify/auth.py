"""Client-credentials token exchange for the Spotify Web API."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as SchemaValidationError

from albumscout.adapters.credentials import AccessToken
from albumscout.domain.errors import AuthenticationError
from albumscout.domain.model import Platform

if TYPE_CHECKING:
    from albumscout.adapters.http_resilience import ResilientClient
    from albumscout.config.spotify import SpotifyConfig

log = getLogger(__name__)

DEFAULT_TOKEN_LIFETIME_SECONDS = 3600


class SpotifyTokenResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    access_token: str
    token_type: str = "Bearer"
    expires_in: int = DEFAULT_TOKEN_LIFETIME_SECONDS


async def fetch_spotify_token(
    config: SpotifyConfig,
    client: ResilientClient,
    *,
    now: datetime | None = None,
) -> AccessToken:
    """Exchange the app's client id/secret for a bearer token."""

    try:
        response = await client.post(
            config.token_url,
            data={"grant_type": "client_credentials"},
            auth=httpx.BasicAuth(config.client_id, config.client_secret),
        )
    except httpx.HTTPError as exc:
        raise AuthenticationError(
            f"Spotify token request failed: {exc}", platform=Platform.SPOTIFY
        ) from exc

    if not response.is_success:
        log.error("Spotify token endpoint returned HTTP %s", response.status_code)
        raise AuthenticationError(
            f"Spotify token request was rejected (HTTP {response.status_code}); "
            "check SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET",
            platform=Platform.SPOTIFY,
        )

    try:
        payload = response.json()
    except ValueError:
        payload = None

    try:
        token = SpotifyTokenResponse.model_validate(payload)
    except SchemaValidationError as exc:
        log.error("Spotify token endpoint returned HTTP %s without a token", response.status_code)
        raise AuthenticationError(
            "Spotify access token could not be generated; "
            "check SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET",
            platform=Platform.SPOTIFY,
        ) from exc

    if not token.access_token:
        raise AuthenticationError(
            "Spotify token endpoint returned an empty access token",
            platform=Platform.SPOTIFY,
        )

    issued_at = now or datetime.now(UTC)
    return AccessToken(
        value=token.access_token,
        expires_at=issued_at + timedelta(seconds=token.expires_in),
    )
