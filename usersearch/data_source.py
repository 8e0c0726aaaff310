"""One-time loading of the user directory.

The directory is a JSON array of user objects served from a fixed URL. It is
fetched once; any failure is logged and leaves the caller with an empty list,
so searches simply come back empty.
"""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, List
from urllib.error import URLError
from urllib.parse import urlparse
from urllib.request import url2pathname, urlopen

from pydantic import ValidationError

from .config import settings
from .models import User

logger = logging.getLogger(__name__)


class DataSourceError(RuntimeError):
    """Raised when the user payload cannot be read or decoded."""


def _read_source(source: str, timeout: float) -> bytes:
    parsed = urlparse(source)
    if parsed.scheme in {"http", "https"}:
        try:
            with urlopen(source, timeout=timeout) as response:
                return response.read()
        except (OSError, URLError) as exc:
            raise DataSourceError(f"Failed to download {source}") from exc
    path = Path(url2pathname(parsed.path)) if parsed.scheme == "file" else Path(source)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise DataSourceError(f"Failed to read {path}") from exc


def parse_users(payload: Any) -> List[User]:
    """Validate a decoded payload, skipping records that are not usable."""
    if not isinstance(payload, list):
        raise DataSourceError(f"Expected a JSON array of users, got {type(payload).__name__}")
    users: List[User] = []
    for position, raw in enumerate(payload):
        try:
            users.append(User.model_validate(raw))
        except ValidationError as exc:
            logger.warning("Skipping malformed user record #%s: %s", position, exc.errors())
    return users


def load_users(source: str, timeout: float | None = None) -> List[User]:
    """Blocking load; raises :class:`DataSourceError` on any failure."""
    raw = _read_source(source, settings.fetch_timeout_seconds if timeout is None else timeout)
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DataSourceError(f"Invalid JSON from {source}") from exc
    return parse_users(payload)


async def fetch_users(source: str | None = None, timeout: float | None = None) -> List[User]:
    """Fetch the directory once without blocking the event loop.

    Never raises: on failure the error is logged and an empty list returned.
    """
    source = source or settings.users_url
    try:
        users = await asyncio.to_thread(load_users, source, timeout)
    except DataSourceError:
        logger.exception("Error fetching users from %s", source)
        return []
    logger.info("Loaded %s users from %s", len(users), source)
    return users
