"""Fetching a URL's body, either through requests or a bare HTTP/1.1 socket."""

from __future__ import annotations

import socket
from typing import Optional
from urllib.parse import urlsplit

import requests

_DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}


def http_get(url: str) -> Optional[str]:
    """GET ``url`` and return its body, or None on error or a non-2xx status."""
    try:
        response = requests.get(url)
    except requests.RequestException:
        return None
    if not 200 <= response.status_code < 300:
        return None
    try:
        text = response.text
    except (requests.RequestException, UnicodeDecodeError, LookupError):
        return None
    print(f"Fetched {len(text.encode('utf-8'))} bytes")
    return text


def raw_get(url: str) -> Optional[str]:
    """Send a minimal HTTP/1.1 GET over a plain socket and return the body.

    Returns None if the URL is unusable, the connection fails or the reply is
    not valid UTF-8. If the reply has no header separator it is returned whole.
    """
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return None
    host = parts.hostname
    scheme = parts.scheme.lower()
    if not scheme or not host:
        return None
    if port is None:
        port = _DEFAULT_PORTS.get(scheme)
        if port is None:
            return None

    path = parts.path or "/"
    if parts.query:
        path = f"{path}?{parts.query}"

    host_header = f"[{host}]" if ":" in host else host
    request = (
        f"GET {path} HTTP/1.1\r\n"
        f"Host: {host_header}\r\n"
        "Connection: close\r\n\r\n"
    )

    try:
        with socket.create_connection((host, port)) as conn:
            conn.sendall(request.encode("utf-8"))
            chunks = []
            while chunk := conn.recv(65536):
                chunks.append(chunk)
    except OSError:
        return None

    try:
        response = b"".join(chunks).decode("utf-8")
    except UnicodeDecodeError:
        return None

    _, separator, body = response.partition("\r\n\r\n")
    return body if separator else response