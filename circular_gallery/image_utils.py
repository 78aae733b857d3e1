"""Image utilities - source classification and fetching."""

from __future__ import annotations
import os
from io import BytesIO
from typing import Optional
from urllib.parse import urlparse

import requests
from PIL import Image

from .config import IMG_EXTS, HTTP_TIMEOUT_S, HTTP_USER_AGENT

_session: Optional[requests.Session] = None


def get_session() -> requests.Session:
    """Shared HTTP session so workers reuse connections."""
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers["User-Agent"] = HTTP_USER_AGENT
    return _session


def is_remote(source: str) -> bool:
    """Check if an image source is an http(s) URL."""
    return urlparse(source).scheme in ("http", "https")


def is_supported_image(filepath: str) -> bool:
    """Check if file has a supported image extension."""
    ext = os.path.splitext(filepath)[1].lower()
    return ext in IMG_EXTS


def fetch_image_bytes(source: str, timeout: float = HTTP_TIMEOUT_S) -> bytes:
    """Read raw image bytes from a URL or a local path.

    Raises:
        requests.RequestException: HTTP failure or non-2xx status.
        OSError: local file cannot be read.
    """
    if is_remote(source):
        resp = get_session().get(source, timeout=timeout)
        resp.raise_for_status()
        return resp.content

    path = source[len("file://"):] if source.startswith("file://") else source
    with open(path, "rb") as f:
        return f.read()


def open_image(source: str) -> Image.Image:
    """Fetch and decode an image. The result is fully loaded into memory."""
    data = fetch_image_bytes(source)
    img = Image.open(BytesIO(data))
    img.load()
    return img
