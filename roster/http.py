"""
Small urllib helpers shared by the API clients.

Status handling is left to the callers: a 4xx/5xx answer comes back as
``(status, body)`` just like a 200 does.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from .exceptions import TransportError, UnexpectedResponseError

USER_AGENT = "Roster-Harvester/1.0"


def fetch_text(request: Request, timeout: float | None = None) -> tuple[int, str]:
    """Perform a request and return its status and decoded body.

    Raises:
        TransportError: If no response was received
    """
    try:
        with urlopen(request, timeout=timeout) as response:
            return response.status, response.read().decode("utf-8")
    except HTTPError as e:
        return e.code, e.read().decode("utf-8", errors="replace")
    except OSError as e:
        reason = getattr(e, "reason", e)
        raise TransportError(f"Request to {request.full_url} failed: {reason}") from e


def decode_json(body: str, source: str) -> Any:
    """Decode a JSON body, failing with UnexpectedResponseError."""
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise UnexpectedResponseError(f"Invalid JSON from {source}: {e}") from e
