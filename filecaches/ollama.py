"""Client for a local Ollama text-generation endpoint."""

from __future__ import annotations

from typing import Optional, Sequence

import requests

DEFAULT_API_URL = "http://localhost:11434/api/generate"


def ask_model(
    model: str,
    prompt: str,
    context: Sequence[int] = (),
    api_url: str = DEFAULT_API_URL,
) -> Optional[str]:
    """Send ``prompt`` to ``model`` and return the raw JSON-lines reply.

    The previous conversation ``context`` is included only when non-empty.
    Blank lines are dropped and every kept line ends with a newline. Returns
    None if the request fails or the reply holds nothing but whitespace.
    """
    payload = {"model": model, "prompt": prompt, "stream": False}
    if context:
        payload["context"] = list(context)

    try:
        response = requests.post(api_url, json=payload)
        text = response.text
    except (requests.RequestException, UnicodeDecodeError, LookupError):
        return None

    kept = [
        line.removesuffix("\r")
        for line in text.split("\n")
        if line.strip()
    ]
    json_lines = "".join(f"{line}\n" for line in kept)
    if not json_lines.strip():
        return None
    return json_lines