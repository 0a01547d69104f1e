"""A JSON-file-backed history of model prompts, replies and contexts."""

from __future__ import annotations

import json
import string
from collections import deque
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Optional, Sequence

from . import ollama
from .storage import read_text, write_text

MAX_ITEMS = 1000
_U64_MAX = 2**64 - 1
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _is_u64(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= _U64_MAX


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


@dataclass
class Entry:
    """One cached exchange with a model."""

    model: str
    prompt: str
    response: str
    context: list[int] = field(default_factory=list)

    @classmethod
    def from_json(cls, raw: Any) -> "Entry":
        if not isinstance(raw, dict):
            raise ValueError("entry must be an object")
        texts = [raw.get(name) for name in ("model", "prompt", "response")]
        if not all(isinstance(text, str) for text in texts):
            raise ValueError("entry fields must be strings")
        context = raw.get("context")
        if not isinstance(context, list) or not all(_is_u64(v) for v in context):
            raise ValueError("context must be a list of non-negative integers")
        return cls(*texts, list(context))


class ChatCache:
    """Bounded, oldest-first list of exchanges stored as JSON in one file.

    Every operation reads the file afresh; a missing or unreadable file
    counts as an empty history.
    """

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path

    def _load(self) -> deque[Entry]:
        try:
            data = json.loads(read_text(self.file_path))
            raw_entries = data["entries"]
            if not isinstance(raw_entries, list):
                raise ValueError("entries must be a list")
            return deque(Entry.from_json(raw) for raw in raw_entries)
        except (ValueError, TypeError, KeyError):
            return deque()

    def _save(self, entries: deque[Entry]) -> None:
        payload = {"entries": [asdict(entry) for entry in entries]}
        write_text(json.dumps(payload, separators=(",", ":"), ensure_ascii=False), self.file_path)

    def add_response(
        self, model: str, prompt: str, response: str, context: Sequence[int]
    ) -> None:
        """Append an exchange, dropping the oldest one when the list is full."""
        entries = self._load()
        if len(entries) >= MAX_ITEMS:
            entries.popleft()
        entries.append(Entry(model, prompt, response, list(context)))
        self._save(entries)

    def get_response(self, model: str, prompt: str) -> Optional[str]:
        """Return the oldest reply from ``model`` whose prompt contains ``prompt``.

        Both comparisons ignore case.
        """
        model_lower = model.lower()
        prompt_lower = prompt.lower()
        return next(
            (
                entry.response
                for entry in self._load()
                if entry.model.lower() == model_lower and prompt_lower in entry.prompt.lower()
            ),
            None,
        )

    def get_latest_context(self, model: str) -> Optional[list[int]]:
        """Return the context of the newest exchange with ``model``.

        The model name is compared ignoring ASCII case only.
        """
        wanted = _ascii_lower(model)
        return next(
            (
                list(entry.context)
                for entry in reversed(self._load())
                if _ascii_lower(entry.model) == wanted
            ),
            None,
        )

    def clear(self) -> None:
        """Remove every exchange."""
        self._save(deque())


def parse_ollama_stream(json_stream: str) -> tuple[str, list[int]]:
    """Join the ``response`` pieces of a JSON-lines reply and pick its context.

    The context comes from a line whose ``done`` is true; lines that are not
    valid JSON are skipped.
    """
    response_parts: list[str] = []
    context: list[int] = []
    for line in json_stream.split("\n"):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        try:
            message = json.loads(line)
        except ValueError:
            continue
        if not isinstance(message, dict):
            continue
        text = message.get("response")
        if isinstance(text, str):
            response_parts.append(text)
        if message.get("done") is True:
            raw_context = message.get("context")
            if isinstance(raw_context, list):
                context = [value for value in raw_context if _is_u64(value)]
    return "".join(response_parts), context


def ask(
    file_path: str,
    model: str,
    prompt: str,
    ask_model: Callable[[str, str, Sequence[int]], Optional[str]] = ollama.ask_model,
) -> Optional[str]:
    """Answer ``prompt`` from the history, or ask the model and record the reply."""
    cache = ChatCache(file_path)
    cached = cache.get_response(model, prompt)
    if cached is not None:
        return cached
    latest_context = cache.get_latest_context(model) or []
    raw = ask_model(model, prompt, latest_context)
    if raw is None:
        return None
    response, new_context = parse_ollama_stream(raw)
    cache.add_response(model, prompt, response, new_context)
    return response