"""Command that fetches URLs through the file-backed response cache."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .chat_cli import _quoted
from .fetch import http_get, raw_get
from .http_cache import get_or_fetch

DEFAULT_CACHE_FILE = "./data.json"
DEFAULT_URLS = (
    "http://localhost:8888",
    "http://localhost:8888/leisure_data.csv",
    "http://localhost:8888/config.json",
    "http://localhost:8888/chart.plugin.js",
)


def _timestamp(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError("time must not be negative")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fetch each URL via the cache and print every body."""
    parser = argparse.ArgumentParser(
        prog="filecaches-fetch",
        description="Fetch URLs, keeping their bodies in a JSON cache file.",
    )
    parser.add_argument("urls", nargs="*", default=list(DEFAULT_URLS))
    parser.add_argument("--cache-file", default=DEFAULT_CACHE_FILE)
    parser.add_argument("--time", type=_timestamp, default=1000)
    parser.add_argument(
        "--raw",
        action="store_true",
        help="use a bare HTTP/1.1 socket request instead of a full client",
    )
    args = parser.parse_args(argv)

    fetcher = raw_get if args.raw else http_get
    results = [
        (url, get_or_fetch(args.cache_file, url, args.time, fetcher)) for url in args.urls
    ]
    for url, body in results:
        if body is None:
            print(f"No body for {url}", file=sys.stderr)
            return 1
        print(_quoted(body))
    return 0


if __name__ == "__main__":
    sys.exit(main())