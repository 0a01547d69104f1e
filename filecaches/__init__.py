"""File-backed JSON caches for HTTP response bodies and Ollama chat history."""

__version__ = "0.1.0"