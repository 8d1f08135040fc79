# numbergate/api/routes/__init__.py
"""API Routes."""

from numbergate.api.routes.access import router as access_router
from numbergate.api.routes.numbers import router as numbers_router

__all__ = [
    "numbers_router",
    "access_router",
]
