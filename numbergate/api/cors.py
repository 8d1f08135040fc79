# numbergate/api/cors.py
"""
Origin gate.

Requests without an ``Origin`` header pass through. Known origins get the
usual CORS headers with credentials allowed. Any other origin is answered
with 403 before routing.
"""

from typing import Iterable, Optional
from urllib.parse import urlsplit

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from numbergate.config.settings import CORSConfig
from numbergate.core.exceptions import OriginRejectedError
from numbergate.utils.logger import logger


class OriginPolicy:
    """Decides whether a browser origin may call the API."""

    def __init__(self, origins: Iterable[str], platform_suffixes: Iterable[str] = ()):
        self.origins = frozenset(o.rstrip("/") for o in origins if o)
        self.platform_suffixes = tuple("." + s.lower().lstrip(".") for s in platform_suffixes if s)

    @classmethod
    def from_config(cls, config: CORSConfig) -> "OriginPolicy":
        origins = list(config.local_origins)
        if config.frontend_url:
            origins.append(config.frontend_url)
        return cls(origins, config.platform_suffixes)

    def _matches_platform(self, origin: str) -> bool:
        host = urlsplit(origin).hostname
        if not host:
            return False
        return host.endswith(self.platform_suffixes)

    def is_allowed(self, origin: Optional[str]) -> bool:
        if origin is None:
            return True
        return origin in self.origins or self._matches_platform(origin)


class OriginGateMiddleware(CORSMiddleware):
    """``CORSMiddleware`` that refuses unknown origins instead of ignoring them."""

    def __init__(self, app: ASGIApp, policy: OriginPolicy) -> None:
        super().__init__(
            app,
            allow_origins=sorted(policy.origins),
            allow_methods=["*"],
            allow_headers=["*"],
            allow_credentials=True,
        )
        self.policy = policy

    def is_allowed_origin(self, origin: str) -> bool:
        return self.policy.is_allowed(origin)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            origin = Headers(scope=scope).get("origin")
            if not self.policy.is_allowed(origin):
                exc = OriginRejectedError(origin)
                logger.warning(f"[{exc.code}] {exc.message}: {origin} ({scope.get('method')} {scope.get('path')})")
                response = JSONResponse(status_code=exc.status_code, content=exc.to_dict())
                await response(scope, receive, send)
                return

        await super().__call__(scope, receive, send)
