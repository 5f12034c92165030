from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from signal import SIGINT, signal
from typing import TYPE_CHECKING

import uvicorn
from dotenv import load_dotenv

from albumscout.api import create_app, parse_search_form
from albumscout.app import search_all_platforms
from albumscout.config import ConfigurationError, configure_logging, get_search_settings
from albumscout.domain import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from albumscout.config import SearchSettings

log = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Search albums on Spotify, Apple Music and Deezer"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Run one search and print the JSON result")
    search.add_argument("artist", type=str, help="Artist name (required)")
    search.add_argument("--album", type=str, default="", help="Optional album name")
    search.add_argument(
        "--timeout",
        type=float,
        help="Overall deadline in seconds (defaults to ALBUMSCOUT_REQUEST_TIMEOUT)",
    )
    search.add_argument(
        "--isolate-failures",
        action="store_true",
        help="Return the platforms that succeeded even if another one fails",
    )

    serve = subparsers.add_parser("serve", help="Serve POST /api/search over HTTP")
    serve.add_argument("--host", type=str, default=DEFAULT_HOST)
    serve.add_argument("--port", type=int, default=DEFAULT_PORT)

    return parser.parse_args(list(argv))


def _search_settings(args: argparse.Namespace) -> SearchSettings:
    settings = get_search_settings()
    if args.timeout is not None:
        if args.timeout <= 0:
            raise ValueError("Timeout must be positive")
        settings = replace(settings, request_timeout_seconds=args.timeout)
    if args.isolate_failures:
        settings = replace(settings, isolate_failures=True)
    return settings


def _run_search(args: argparse.Namespace) -> None:
    try:
        artist, album = parse_search_form(args.artist, args.album)
        settings = _search_settings(args)
    except (ValidationError, ValueError, ConfigurationError) as exc:
        log.error("Invalid search input: %s", exc)
        sys.exit(2)

    try:
        result = search_all_platforms(artist, album, settings=settings)
    except Exception:
        log.exception("Album search failed")
        sys.exit(1)

    payload = result.to_payload(include_status=settings.isolate_failures)
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2) + "\n")


def _serve(args: argparse.Namespace) -> None:
    uvicorn.run(create_app(), host=args.host, port=args.port)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else None)

    if parsed_args.command == "search":
        _run_search(parsed_args)
    elif parsed_args.command == "serve":
        _serve(parsed_args)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
