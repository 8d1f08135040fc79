# numbergate/api/server.py
"""
FastAPI Server for NumberGate

Provides the REST API for:
- The current time-derived number
- Prediction checks
- Access reporting
- Service information and health
"""

import asyncio
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from numbergate.api.cors import OriginGateMiddleware, OriginPolicy
from numbergate.api.deps import get_clock
from numbergate.api.headers import SECURITY_HEADERS, SecurityHeadersMiddleware
from numbergate.api.models.responses import HealthResponse, RootResponse
from numbergate.api.routes import access_router, numbers_router
from numbergate.config.settings import get_settings
from numbergate.core.clock import Clock, isoformat_utc
from numbergate.core.constants import API_PREFIX, ENDPOINTS, ErrorMessages
from numbergate.core.exceptions import NumberGateException
from numbergate.core.generator import take_sample
from numbergate.core.runtime import RUNTIME_ID, uptime_seconds
from numbergate.utils.logger import logger, setup_logger

settings = get_settings()

setup_logger(
    level=settings.logging.level,
    log_file=settings.logging.file,
    rotation=settings.logging.rotation,
    retention=settings.logging.retention,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler."""
    port = settings.api.port
    sample = take_sample(app.dependency_overrides.get(get_clock, get_clock)())

    logger.info("=" * 60)
    logger.info(f"{settings.app.name} running on port {port}")
    logger.info(f"Runtime ID: {RUNTIME_ID}")
    logger.info(f"Current time-based number: {sample.number}")
    logger.info(f"API endpoints available at http://localhost:{port}{API_PREFIX}/")
    logger.info("=" * 60)

    yield

    logger.info("Shutdown signal received, shutting down gracefully")


app = FastAPI(
    title=settings.app.name,
    description="Time-based number API with prediction checks and access logging",
    version=settings.app.version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# Add request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request and attach diagnostic headers."""
    start_time = time.time()
    request_id = f"{int(start_time * 1000)}"
    client = request.client.host if request.client else "-"

    try:
        response = await call_next(request)
    except Exception as e:
        process_time = (time.time() - start_time) * 1000
        logger.opt(exception=e).error(f"<<< ERROR [{request_id}] {type(e).__name__}: {e} ({process_time:.2f}ms)")
        raise

    process_time = (time.time() - start_time) * 1000
    logger.info(
        f'{client} "{request.method} {request.url.path}" {response.status_code} '
        f'"{request.headers.get("user-agent", "-")}" ({process_time:.2f}ms)'
    )

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Process-Time"] = f"{process_time:.2f}ms"
    response.headers["X-Runtime-ID"] = RUNTIME_ID

    return response


# Rejected origins never reach logging or routing.
app.add_middleware(OriginGateMiddleware, policy=OriginPolicy.from_config(settings.cors))
app.add_middleware(SecurityHeadersMiddleware)

app.include_router(numbers_router, prefix=API_PREFIX)
app.include_router(access_router, prefix=API_PREFIX)


@app.get("/", response_model=RootResponse, tags=["Root"])
async def root() -> RootResponse:
    """Describe the available routes."""
    return RootResponse(
        message=settings.app.name,
        version=settings.app.version,
        endpoints=dict(ENDPOINTS),
        documentation=f"Visit {API_PREFIX}/health for server status",
    )


@app.get(f"{API_PREFIX}/health", response_model=HealthResponse, tags=["Health"])
async def health(clock: Clock = Depends(get_clock)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        message=f"{settings.app.name} is running",
        timestamp=isoformat_utc(clock.now()),
        uptime=uptime_seconds(),
    )


@app.exception_handler(NumberGateException)
async def numbergate_exception_handler(request: Request, exc: NumberGateException) -> JSONResponse:
    """
    Convert known NumberGateException subclasses to their HTTP responses.

    Client errors are logged at WARNING, server errors at ERROR with the
    underlying cause. Only ``exc.message`` reaches the client.
    """
    if exc.status_code < 500:
        logger.warning(f"[{exc.code}] {exc.message} ({request.method} {request.url.path}) {exc.context}")
    else:
        cause = exc.__cause__ or exc
        logger.opt(exception=cause).error(
            f"[{exc.code}] {exc.message} ({request.method} {request.url.path}) {exc.context}"
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (404, 405) keep their status but use the common envelope."""
    message = ErrorMessages.NOT_FOUND if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected exceptions; details stay in the server log."""
    logger.opt(exception=exc).error(f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": ErrorMessages.INTERNAL},
        headers=SECURITY_HEADERS,
    )


async def start_server(host: str | None = None, port: int | None = None, log_level: str = "info") -> None:
    """Start the API server; uvicorn handles SIGINT and SIGTERM."""
    import uvicorn

    config = uvicorn.Config(
        app=app,
        host=host or settings.api.host,
        port=port or settings.api.port,
        log_level=log_level,
        reload=False,
    )
    server = uvicorn.Server(config)
    await server.serve()


if __name__ == "__main__":
    asyncio.run(start_server())
