"""POST /api/search: form input in, unified albums out."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, Final

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import JSONResponse

from albumscout.config import get_search_settings
from albumscout.domain import ValidationError

if TYPE_CHECKING:
    from .app import SearchService

logger = logging.getLogger(__name__)

MISSING_ARTIST_MESSAGE: Final[str] = "Künstlername muss angegeben werden."
SEARCH_FAILED_MESSAGE: Final[str] = "Fehler bei der Albumsuche."

router = APIRouter(prefix="/api", tags=["Search"])


def parse_search_form(artist_name: str | None, album_name: str | None) -> tuple[str, str | None]:
    """Trim the form fields; an empty album counts as absent."""

    artist = (artist_name or "").strip()
    album = (album_name or "").strip()
    if not artist:
        raise ValidationError(MISSING_ARTIST_MESSAGE)
    return artist, album or None


@router.post("/search")
async def search_albums(
    request: Request,
    artist_name: Annotated[str, Form(alias="artistName")] = "",
    album_name: Annotated[str, Form(alias="albumName")] = "",
) -> JSONResponse:
    try:
        artist, album = parse_search_form(artist_name, album_name)
    except ValidationError as exc:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})

    search: SearchService = request.app.state.search_service
    settings = request.app.state.settings
    try:
        effective_settings = settings or get_search_settings()
        result = await search(
            artist,
            album,
            settings=effective_settings,
            credential_cache=request.app.state.credential_cache,
        )
    except Exception:
        # Upstream detail stays in the log; clients only get the generic message.
        logger.exception("Album search failed for artist=%r, album=%r", artist, album)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": SEARCH_FAILED_MESSAGE},
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=result.to_payload(include_status=effective_settings.isolate_failures),
    )
