"""Field-normalisation helpers shared by the platform translators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final
from urllib.parse import quote

from albumscout.domain.model import UNKNOWN_YEAR

if TYPE_CHECKING:
    from collections.abc import Iterable

SEARCH_LIMIT: Final[int] = 5
COVER_SIZE: Final[int] = 300

_WIDTH_PLACEHOLDER = "{w}"
_HEIGHT_PLACEHOLDER = "{h}"


def encode_component(value: str) -> str:
    """Percent-encode ``value`` the way browsers' ``encodeURIComponent`` does."""

    return quote(value, safe="-_.!~*'()")


def build_search_query(artist_name: str, album_name: str | None = None) -> str:
    """Return the encoded search term for a catalog search.

    The artist name alone is used when no album name is given; otherwise both
    names are encoded separately and joined by a space.
    """

    artist = encode_component(artist_name)
    if not album_name:
        return artist
    return f"{artist} {encode_component(album_name)}"


def release_year(release_date: str | None, *, separator: str = "-") -> str:
    if not release_date:
        return UNKNOWN_YEAR
    return release_date.split(separator, 1)[0]


def seconds_to_milliseconds(seconds: int) -> int:
    return seconds * 1000


def resolve_artwork_template(url: str, *, size: int = COVER_SIZE) -> str:
    return url.replace(_WIDTH_PLACEHOLDER, str(size)).replace(_HEIGHT_PLACEHOLDER, str(size))


def first_preview(candidates: Iterable[str | None]) -> str | None:
    """Return the first non-empty preview URL, stopping at the first match."""

    for candidate in candidates:
        if candidate:
            return candidate
    return None
