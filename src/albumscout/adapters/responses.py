"""Request/validation helpers that translate upstream failures into domain errors."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from albumscout.domain.errors import ProviderError, ProviderPayloadError

if TYPE_CHECKING:
    from httpx._types import HeaderTypes

    from albumscout.domain.model import Platform

    from .http_resilience import ResilientClient

log = getLogger(__name__)


async def get_json(
    client: ResilientClient,
    url: str,
    *,
    platform: Platform,
    what: str,
    headers: HeaderTypes | None = None,
) -> object:
    """GET ``url`` and return the decoded JSON body.

    Transport failures and non-success statuses raise ``ProviderError``; a body
    that is not JSON raises ``ProviderPayloadError``.
    """

    try:
        response = await client.get(url, headers=headers)
    except httpx.TimeoutException as exc:
        log.error("%s %s timed out", platform, what)
        raise ProviderError(f"{what} timed out", platform=platform) from exc
    except httpx.HTTPError as exc:
        log.error("%s %s failed: %s", platform, what, exc)
        raise ProviderError(f"{what} failed: {exc}", platform=platform) from exc

    if not response.is_success:
        log.error("%s %s returned HTTP %s", platform, what, response.status_code)
        raise ProviderError(
            f"{what} failed: {response.reason_phrase}",
            platform=platform,
            status=response.status_code,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise ProviderPayloadError(
            f"{what} returned a non-JSON body",
            platform=platform,
            status=response.status_code,
        ) from exc


def validate_payload[M: BaseModel](
    model: type[M],
    payload: object,
    *,
    platform: Platform,
    what: str,
) -> M:
    try:
        return model.model_validate(payload)
    except SchemaValidationError as exc:
        log.error("%s %s payload rejected: %s", platform, what, exc)
        raise ProviderPayloadError(
            f"Unexpected {what} payload ({exc.error_count()} validation errors)",
            platform=platform,
        ) from exc
