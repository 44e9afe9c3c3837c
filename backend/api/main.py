"""FastAPI application entrypoint for the registration service."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from backend.api.middleware.logging import LoggingMiddleware
from backend.api.routes import accounts, registration
from backend.core.config import settings
from backend.core.database import database_manager
from backend.core.exceptions import ApplicationError, InvalidRequestError
from backend.core.observability import setup_logging, setup_tracing
from backend.models import ErrorEnvelope

setup_logging()


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Initialize shared resources on startup and tear them down on shutdown."""

    await database_manager.initialize()
    try:
        yield
    finally:
        await database_manager.close()


app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

setup_tracing(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)

# Routers
app.include_router(registration.router, prefix="/api")
app.include_router(accounts.router, prefix="/api")

app.mount("/metrics", make_asgi_app())


@app.get("/health")
async def healthcheck() -> Dict[str, str]:
    """Liveness probe."""

    return {"status": "ok", "environment": settings.ENVIRONMENT}


def _envelope(exc: ApplicationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=ErrorEnvelope.from_error(exc).model_dump(by_alias=True))


@app.exception_handler(ApplicationError)
async def handle_application_error(_: Request, exc: ApplicationError):
    """Return the error envelope for application layer exceptions."""

    return _envelope(exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(_: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}" for error in exc.errors()
    )
    return _envelope(InvalidRequestError(problems or "Invalid request"))
