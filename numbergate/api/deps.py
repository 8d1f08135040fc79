# numbergate/api/deps.py
"""API Dependencies - Dependency injection for FastAPI routes."""

import json
from typing import Any

from fastapi import Depends, Request

from numbergate.config.settings import Settings, get_settings
from numbergate.core.clock import Clock, SystemClock
from numbergate.core.exceptions import RequestBodyError

_system_clock = SystemClock()


def get_clock() -> Clock:
    """
    Clock used by every handler.

    Tests replace it through ``app.dependency_overrides[get_clock]``.
    """
    return _system_clock


def get_app_settings() -> Settings:
    """Cached settings, as a dependency so tests can override them."""
    return get_settings()


def get_client_ip(request: Request, settings: Settings = Depends(get_app_settings)) -> str | None:
    """
    Address of the calling client.

    With ``api.trust_forwarded_for`` enabled the first ``X-Forwarded-For``
    hop is used, otherwise the socket peer.
    """
    if settings.api.trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            first_hop = forwarded.split(",")[0].strip()
            if first_hop:
                return first_hop
    return request.client.host if request.client else None


async def get_request_payload(request: Request) -> Any:
    """
    Decoded request body.

    JSON bodies (or bodies without a content type) are parsed as JSON,
    URL-encoded forms become a plain dict, anything else is ``None``.

    Raises:
        RequestBodyError: when a JSON body cannot be decoded
    """
    content_type = request.headers.get("content-type", "")
    if "application/x-www-form-urlencoded" in content_type:
        return dict(await request.form())

    body = await request.body()
    if not body:
        return None
    if content_type and "json" not in content_type:
        return None
    try:
        return json.loads(body)
    except ValueError as e:
        raise RequestBodyError() from e
