"""A JSON-file-backed cache of response bodies keyed by URL."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, dataclass
from typing import Any, Callable, Optional

from .fetch import http_get
from .storage import read_text, write_text


@dataclass
class CacheEntry:
    """One cached body with optional freshness metadata."""

    body: str
    expiry: Optional[int] = None
    etag: Optional[str] = None
    last_modified: Optional[int] = None

    @classmethod
    def from_json(cls, raw: Any) -> "CacheEntry":
        if not isinstance(raw, dict) or not isinstance(raw.get("body"), str):
            raise ValueError("malformed cache entry")
        expiry = _optional_uint(raw.get("expiry"))
        last_modified = _optional_uint(raw.get("last_modified"))
        etag = raw.get("etag")
        if etag is not None and not isinstance(etag, str):
            raise ValueError("malformed etag")
        return cls(raw["body"], expiry, etag, last_modified)


def _optional_uint(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError("expected a non-negative integer")
    return value


class HttpCache:
    """Cache of bodies stored as JSON in a single file.

    Every operation reads the file afresh; a missing or unreadable file
    counts as an empty cache.
    """

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path

    def _load(self) -> dict[str, CacheEntry]:
        try:
            data = json.loads(read_text(self.file_path))
            entries = data["entries"]
            if not isinstance(entries, dict):
                raise ValueError("entries must be an object")
            return {key: CacheEntry.from_json(raw) for key, raw in entries.items()}
        except (ValueError, TypeError, KeyError):
            return {}

    def _save(self, entries: dict[str, CacheEntry]) -> None:
        payload = {"entries": {key: asdict(entry) for key, entry in entries.items()}}
        write_text(json.dumps(payload, separators=(",", ":"), ensure_ascii=False), self.file_path)

    def add_response(
        self,
        key: str,
        body: str,
        expiry: Optional[int] = None,
        etag: Optional[str] = None,
        last_modified: Optional[int] = None,
    ) -> None:
        """Add or replace the entry for ``key``."""
        entries = self._load()
        entries[key] = CacheEntry(body, expiry, etag, last_modified)
        self._save(entries)

    def get_response(self, key: str, current_time: int) -> Optional[str]:
        """Return the cached body, or None if absent or past its expiry."""
        entry = self._load().get(key)
        if entry is None:
            return None
        if entry.expiry is not None and current_time > entry.expiry:
            return None
        return entry.body

    def invalidate(self, key: str) -> None:
        """Remove the entry for ``key`` if present."""
        entries = self._load()
        entries.pop(key, None)
        self._save(entries)

    def clear(self) -> None:
        """Remove every entry."""
        self._save({})


def get_or_fetch(
    file_path: str,
    key: str,
    current_time: int,
    fetcher: Callable[[str], Optional[str]] = http_get,
) -> Optional[str]:
    """Return the cached body for ``key`` or fetch it, store it and return it."""
    cache = HttpCache(file_path)
    cached = cache.get_response(key, current_time)
    if cached is not None:
        print(f"Cache hit for {key}")
        return cached
    print(f"Cache miss or stale entry for {key}. Fetching from network...")
    body = fetcher(key)
    if body is None:
        print(f"Failed to fetch response from network for {key}", file=sys.stderr)
        return None
    cache.add_response(key, body)
    return body