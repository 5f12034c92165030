"""HTTP boundary for album searches."""

from __future__ import annotations

from .app import create_app
from .routes import SEARCH_FAILED_MESSAGE, parse_search_form, router

__all__ = ["SEARCH_FAILED_MESSAGE", "create_app", "parse_search_form", "router"]
