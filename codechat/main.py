"""FastAPI application entry point.

Run the server with ``python -m codechat``, which also configures logging so
the startup notice is visible.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

import logging

from codechat import __version__
from codechat.config import get_settings
from codechat.api.admin import health
from codechat.api.routes import friends, messages, users
from codechat.services.errors import InvalidRequestError, MessengerError
from codechat.services.messenger import Messenger

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown events."""
    # Startup: fresh in-memory state for this process
    app.state.messenger = Messenger.from_settings(get_settings())
    logger.info(f"Server running on port {get_settings().app_port}")

    yield
    counts = app.state.messenger.counts()
    logger.info(
        f"Shutting down with {counts['users']} users, "
        f"{counts['friendships']} friendships, {counts['messages']} messages"
    )


async def messenger_error_handler(request: Request, exc: MessengerError) -> JSONResponse:
    """Report domain errors as ``success: false`` with HTTP 200."""
    return JSONResponse(status_code=200, content={"success": False, "message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies the same way as domain errors."""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return await messenger_error_handler(request, InvalidRequestError())


async def api_http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Report unparseable API request bodies as ``success: false``.

    Anything other than a 400 under ``/api/`` keeps its HTTP status.
    """
    if exc.status_code == 400 and request.url.path.startswith("/api/"):
        logger.warning(f"Unparseable request to {request.url.path}: {exc.detail}")
        return await messenger_error_handler(request, InvalidRequestError())
    return await http_exception_handler(request, exc)


app = FastAPI(
    title="codechat",
    description="Friends-by-code messaging backend",
    version=__version__,
    lifespan=lifespan,
    debug=settings.app_debug,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
)

app.add_exception_handler(MessengerError, messenger_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(StarletteHTTPException, api_http_error_handler)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(users.router)
app.include_router(friends.router)
app.include_router(messages.router)
