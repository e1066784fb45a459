"""FastAPI application entry point.

Run with: uvicorn src.main:app --port 3001
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import settings
from src.ad_common.errors import AppError, InternalError
from src.ad_common.response import error_response
from src.ad_dashboard.api.router import router as dashboard_router
from src.ad_gateway.middleware.request_log import RequestLogMiddleware
from src.container import AppContainer

logger = logging.getLogger("ad.app")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: build ports, probe DB + Redis. Shutdown: dispose both pools."""
    container = AppContainer.from_settings(settings)
    await container.start()
    app.state.container = container
    logger.info("%s started on port %d", settings.APP_NAME, settings.PORT)
    yield
    await container.stop()
    logger.info("%s stopped", settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Airdrop dashboard API over PostgreSQL with a Redis read-through cache",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


def _envelope(request: Request, status_code: int, code: int, message: str) -> JSONResponse:
    resp = error_response(code, message, getattr(request.state, "request_id", None))
    return JSONResponse(status_code=status_code, content=resp.model_dump())


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("Error %d: %s", exc.code, exc.message)
    return _envelope(request, exc.http_status, exc.code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _envelope(request, 422, 422, f"Validation error: {exc.errors()}")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Endpoint not found" if exc.status_code == 404 else str(exc.detail)
    return _envelope(request, exc.status_code, exc.status_code, message)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    err = InternalError()
    return _envelope(request, err.http_status, err.code, err.message)


app.include_router(dashboard_router)


@app.get("/")
async def root() -> dict[str, object]:
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }


@app.get("/health")
async def health(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    status = await container.health()
    return {
        "status": "ok" if status["database"] else "degraded",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "services": {
            name: "connected" if up else "disconnected" for name, up in status.items()
        },
    }
