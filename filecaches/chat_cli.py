"""Interactive command: ask a model one question, answering from history if possible."""

from __future__ import annotations

import argparse
import functools
import sys
from typing import Optional, Sequence

from . import ollama
from .chat_history import ask

DEFAULT_CACHE_FILE = "./data.json"

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def _quoted(text: str) -> str:
    """Render ``text`` as a double-quoted literal with control characters escaped."""
    pieces = []
    for char in text:
        escaped = _ESCAPES.get(char)
        if escaped is None:
            escaped = char if char.isprintable() else f"\\u{{{ord(char):x}}}"
        pieces.append(escaped)
    return '"' + "".join(pieces) + '"'


def _prompt_line(prompt: str) -> Optional[str]:
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    return line or None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a model name and a prompt from stdin and print the answer."""
    parser = argparse.ArgumentParser(
        prog="filecaches-chat",
        description="Send a prompt to a model, reusing replies cached in a JSON file.",
    )
    parser.add_argument("--cache-file", default=DEFAULT_CACHE_FILE)
    parser.add_argument("--api-url", default=ollama.DEFAULT_API_URL)
    args = parser.parse_args(argv)

    model = _prompt_line("Enter Model: ")
    if model is None:
        print("Exiting...")
        return 0
    line = _prompt_line(">>> ")
    if line is None:
        print("Exiting...")
        return 0

    ask_model = functools.partial(ollama.ask_model, api_url=args.api_url)
    answer = ask(args.cache_file, model.strip(), line, ask_model)
    if answer is None:
        print("No response from the model", file=sys.stderr)
        return 1
    print(_quoted(answer))
    return 0


if __name__ == "__main__":
    sys.exit(main())