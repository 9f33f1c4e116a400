#!/usr/bin/env python3
"""
Command line entry point.

Usage:
    shortlink --url https://example.com/a   # shorten and print
    shortlink --serve                       # run the HTTP server
    shortlink                               # same as --serve

The CLI opens the same snapshot file as the server. Running both at
once against one file is not supported: each process keeps its own
in-memory copy and the last writer wins.
"""

import argparse
import sys
from typing import List, Optional

from shortlink_app.config import settings
from shortlink_app.dependencies import get_url_service
from shortlink_app.exceptions import InvalidInputError, StoreError
from shortlink_app.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shortlink",
        description="Shorten a URL or run the URL shortener HTTP server",
    )
    parser.add_argument("--url", help="URL to shorten")
    parser.add_argument("--serve", action="store_true", help="Run HTTP server")
    parser.add_argument("--host", default=settings.host, help=f"Host to bind to (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port to listen on (default: {settings.port})")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level",
    )
    return parser


def run_server(host: str, port: int) -> None:
    import uvicorn

    uvicorn.run("main:app", host=host, port=port, log_config=None)


def shorten(url: str) -> int:
    """Shorten one URL and print it. Returns the process exit code."""
    url_service = get_url_service()
    try:
        short_url = url_service.shorten(url)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except StoreError as e:
        print(f"Error: could not store short URL: {e}", file=sys.stderr)
        return 1

    print(f"Shortened URL: {short_url}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    # main.py configures logging again when uvicorn imports it
    settings.log_level = args.log_level
    configure_logging(args.log_level)

    if args.url is not None and not args.serve:
        return shorten(args.url)

    run_server(args.host, args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
