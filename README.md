# filecaches

Small caches that keep their data as JSON in a single file on disk:

- **HTTP response cache** (`filecaches.http_cache`): stores response bodies by
  URL, with optional expiry, ETag and last-modified values.
- **Chat history cache** (`filecaches.chat_history`): remembers prompts,
  responses and conversation contexts from a local Ollama server, up to 1000
  entries, dropping the oldest first.

Every cache operation reads the file afresh. A missing, unreadable or
malformed file counts as an empty cache. Failures to write the file are
ignored.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## HTTP cache

```python
from filecaches.http_cache import HttpCache, get_or_fetch
from filecaches.fetch import http_get, raw_get

cache = HttpCache("data.json")
cache.add_response("http://localhost:8888/config.json", "{}", expiry=2000)
cache.get_response("http://localhost:8888/config.json", 1000)   # "{}"
cache.get_response("http://localhost:8888/config.json", 3000)   # None (stale)
cache.invalidate("http://localhost:8888/config.json")
cache.clear()

body = get_or_fetch("data.json", "http://localhost:8888/", 1000, http_get)
```

`HttpCache.get_response` returns `None` when the key is absent or when
`current_time` is later than the entry's expiry; entries without an expiry never
go stale.

`get_or_fetch` returns a cached body if there is one (printing
`Cache hit for <url>`). Otherwise it calls the fetcher, stores the body with no
expiry, ETag or last-modified value, and returns it. If the fetcher returns
`None`, a message goes to stderr and `None` is returned. The fetcher defaults to
`http_get`.

Two fetchers are provided in `filecaches.fetch`:

- `http_get(url)` uses `requests`. It returns the body, or `None` on a
  connection error or a status outside 2xx, and prints `Fetched <n> bytes`.
- `raw_get(url)` sends a minimal HTTP/1.1 `GET` over a plain socket with
  `Connection: close` and returns everything after the header block. It
  returns `None` if the URL has no host or known port, the connection fails, or
  the reply is not valid UTF-8. It does not speak TLS, follow redirects, check
  the status or decode chunked bodies.

## Chat history cache

```python
from filecaches.chat_history import ChatCache, ask, parse_ollama_stream
from filecaches.ollama import ask_model

answer = ask("data.json", "llama3", "Why is the sky blue?", ask_model)
```

`ask` returns the cached response of the oldest entry for the same model
(ignoring case) whose prompt contains the new prompt (ignoring case). Otherwise
it calls `ask_model(model, prompt, context)` with the newest stored context for
that model, parses the JSON-lines reply with `parse_ollama_stream`, records the
response and the new context, and returns the response. It returns `None` if
the model gives no reply.

`ollama.ask_model(model, prompt, context=(), api_url=DEFAULT_API_URL)` posts to
`http://localhost:11434/api/generate` by default with `"stream": false`,
adding the context only when it is non-empty. It returns the non-blank lines of
the reply, each ending in a newline, or `None` on failure or an empty reply.

`ChatCache` also offers `add_response`, `get_response`, `get_latest_context`
and `clear`.

## Commands

```
filecaches-chat [--cache-file PATH] [--api-url URL]
```

Asks on stdin for a model name and then a prompt, and prints the answer as a
double-quoted string with control characters escaped. Answers are cached in
`./data.json` by default. Exits with status 1 if the model gives no answer.

```
filecaches-fetch [URL ...] [--cache-file PATH] [--time N] [--raw]
```

Fetches each URL through the HTTP cache (default `./data.json`) and prints
every body as a quoted string. Without URLs it fetches a fixed set from
`http://localhost:8888`. `--time` is the current time used for expiry checks
(default 1000); `--raw` uses `raw_get` instead of `http_get`. Exits with status
1 if any body could not be obtained.

## Other helpers

`filecaches.users` holds a `UserData` dataclass with `change_user`,
`get_name` and `multiply`, and `filecaches.storage` has `read_text` and
`write_text`, which never raise on I/O errors.

## What it does not do

The HTTP cache does not follow HTTP caching rules: it never reads
`Cache-Control`, `Expires`, `ETag` or `Last-Modified` headers, and fetched
bodies are stored without expiry, so they stay cached until invalidated or
cleared. There is no locking, so concurrent writers to the same cache file can
overwrite each other.