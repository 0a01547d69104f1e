import json

import pytest

from filecaches.http_cache import CacheEntry, HttpCache, get_or_fetch

KEY = "http://localhost:8888/config.json"


@pytest.fixture
def cache_path(tmp_path):
    return str(tmp_path / "data.json")


def test_add_then_get(cache_path):
    cache = HttpCache(cache_path)
    cache.add_response(KEY, "body")
    assert cache.get_response(KEY, 1000) == "body"


def test_missing_key_is_none(cache_path):
    assert HttpCache(cache_path).get_response(KEY, 0) is None


def test_expired_entry_is_none_but_boundary_is_fresh(cache_path):
    cache = HttpCache(cache_path)
    cache.add_response(KEY, "body", expiry=100)
    assert cache.get_response(KEY, 100) == "body"
    assert cache.get_response(KEY, 101) is None


def test_add_replaces_existing(cache_path):
    cache = HttpCache(cache_path)
    cache.add_response(KEY, "first")
    cache.add_response(KEY, "second")
    assert cache.get_response(KEY, 0) == "second"


def test_invalidate_removes_only_that_key(cache_path):
    cache = HttpCache(cache_path)
    cache.add_response(KEY, "a")
    cache.add_response("other", "b")
    cache.invalidate(KEY)
    assert cache.get_response(KEY, 0) is None
    assert cache.get_response("other", 0) == "b"


def test_clear_empties_file(cache_path):
    cache = HttpCache(cache_path)
    cache.add_response(KEY, "a")
    cache.clear()
    assert cache.get_response(KEY, 0) is None
    with open(cache_path, encoding="utf-8") as handle:
        assert json.load(handle) == {"entries": {}}


def test_file_layout(cache_path):
    HttpCache(cache_path).add_response(KEY, "body", expiry=5, etag="tag", last_modified=3)
    with open(cache_path, encoding="utf-8") as handle:
        stored = json.load(handle)
    assert stored == {
        "entries": {KEY: {"body": "body", "expiry": 5, "etag": "tag", "last_modified": 3}}
    }


def test_corrupt_file_counts_as_empty(cache_path):
    with open(cache_path, "w", encoding="utf-8") as handle:
        handle.write("{not json")
    cache = HttpCache(cache_path)
    assert cache.get_response(KEY, 0) is None
    cache.add_response(KEY, "fresh")
    assert cache.get_response(KEY, 0) == "fresh"


def test_missing_optional_fields_are_accepted(cache_path):
    with open(cache_path, "w", encoding="utf-8") as handle:
        json.dump({"entries": {KEY: {"body": "kept"}}}, handle)
    assert HttpCache(cache_path).get_response(KEY, 0) == "kept"


def test_cache_entry_rejects_bad_body():
    with pytest.raises(ValueError):
        CacheEntry.from_json({"body": 3})


def test_get_or_fetch_miss_then_hit(cache_path, capsys):
    calls = []

    def fetcher(url):
        calls.append(url)
        return "network body"

    assert get_or_fetch(cache_path, KEY, 0, fetcher) == "network body"
    assert get_or_fetch(cache_path, KEY, 1000, fetcher) == "network body"
    assert calls == [KEY]
    out = capsys.readouterr().out
    assert f"Cache miss or stale entry for {KEY}. Fetching from network..." in out
    assert f"Cache hit for {KEY}" in out


def test_get_or_fetch_failure_stores_nothing(cache_path, capsys):
    assert get_or_fetch(cache_path, KEY, 0, lambda url: None) is None
    assert HttpCache(cache_path).get_response(KEY, 0) is None
    assert f"Failed to fetch response from network for {KEY}" in capsys.readouterr().err


def test_get_or_fetch_refetches_stale_entry(cache_path):
    HttpCache(cache_path).add_response(KEY, "old", expiry=10)
    assert get_or_fetch(cache_path, KEY, 20, lambda url: "new") == "new"
    assert HttpCache(cache_path).get_response(KEY, 10**9) == "new"