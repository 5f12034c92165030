"""Developer-token generation for the Apple Music API."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from logging import getLogger
from typing import TYPE_CHECKING, Final

import jwt  # PyJWT

from albumscout.adapters.credentials import AccessToken
from albumscout.config.apple_music import get_apple_music_config
from albumscout.config.errors import ConfigurationError
from albumscout.domain.errors import AuthenticationError
from albumscout.domain.model import Platform

if TYPE_CHECKING:
    from albumscout.config.apple_music import AppleMusicConfig

log = getLogger(__name__)

DEVELOPER_TOKEN_ALGORITHM: Final[str] = "ES256"
DEVELOPER_TOKEN_LIFETIME: Final[timedelta] = timedelta(days=180)


def generate_apple_music_token(
    config: AppleMusicConfig | None = None,
    *,
    now: datetime | None = None,
) -> AccessToken:
    """Sign a developer token with the team's private key.

    The token carries the team id as issuer and the key id in its header, and
    stays valid for 180 days.
    """

    try:
        active_config = config or get_apple_music_config()
    except ConfigurationError as exc:
        raise AuthenticationError(str(exc), platform=Platform.APPLE_MUSIC) from exc

    try:
        private_key = active_config.private_key_path.read_text()
    except OSError as exc:
        raise AuthenticationError(
            f"Cannot read Apple Music private key {active_config.private_key_path}: {exc}",
            platform=Platform.APPLE_MUSIC,
        ) from exc

    issued_at = (now or datetime.now(UTC)).replace(microsecond=0)
    expires_at = issued_at + DEVELOPER_TOKEN_LIFETIME
    claims = {
        "iss": active_config.team_id,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    headers = {"alg": DEVELOPER_TOKEN_ALGORITHM, "kid": active_config.key_id}

    try:
        token = jwt.encode(
            claims,
            private_key,
            algorithm=DEVELOPER_TOKEN_ALGORITHM,
            headers=headers,
        )
    except (jwt.PyJWTError, ValueError, TypeError) as exc:
        raise AuthenticationError(
            f"Failed to sign Apple Music developer token: {exc}",
            platform=Platform.APPLE_MUSIC,
        ) from exc

    log.debug("Generated Apple Music developer token valid until %s", expires_at.isoformat())
    return AccessToken(value=token, expires_at=expires_at)
