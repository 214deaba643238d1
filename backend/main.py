"""
Bloglist FastAPI Application

Main entry point for the Bloglist server.
Configures FastAPI with CORS, routes, error handlers and database.
"""

import logging
import secrets
from dataclasses import replace
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from app.config import Settings
from app.core.errors import BlogApiError
from app.core.request_logger import log_request
from app.core.tokens import TokenService
from app.database import build_engine, build_session_factory, init_db
from app.api.routes import blogs, health, login, stats, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Handles:
    - Database initialisation on startup
    - Engine disposal on shutdown
    """
    settings = app.state.settings
    logger.info(f"Starting {settings.APP_NAME} v{settings.VERSION}")
    init_db(app.state.engine)
    logger.info(f"Server ready on {settings.server.HOST}:{settings.server.PORT}")

    yield

    logger.info("Shutting down server...")
    app.state.engine.dispose()


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Join pydantic errors into one readable message."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", "invalid"))
    return "; ".join(messages)


def register_error_handlers(app: FastAPI) -> None:
    """Map every failure to a JSON body with a stable message."""

    @app.exception_handler(BlogApiError)
    async def blog_api_error_handler(request: Request, exc: BlogApiError):
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _format_validation_errors(exc)
        logger.info(f"{request.method} {request.url.path} -> 400: {message}")
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"error": "unknown endpoint"})
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build a configured application.

    Args:
        settings: Settings to use; read from the environment when omitted

    Returns:
        FastAPI application with its engine, session factory and
        token service on app.state
    """
    settings = settings or Settings.from_env()

    if not settings.auth.SECRET:
        logger.warning("SECRET is not set; using a random per-process signing secret")
        settings = replace(settings, auth=replace(settings.auth, SECRET=secrets.token_urlsafe(32)))

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        description="Blog list with token authentication",
        lifespan=lifespan,
        debug=settings.DEBUG,
        dependencies=[Depends(log_request)],
    )

    app.state.settings = settings
    app.state.engine = build_engine(settings.database)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.token_service = TokenService(
        settings.auth.SECRET,
        ttl_seconds=settings.auth.TOKEN_TTL_SECONDS,
        algorithm=settings.auth.TOKEN_ALGORITHM,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.server.CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(login.router)
    app.include_router(blogs.router)
    app.include_router(users.router)
    app.include_router(stats.router)

    @app.get("/")
    async def root() -> dict:
        """
        Root endpoint.

        Returns:
            dict: Welcome message and API information.
        """
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "version": settings.VERSION,
            "docs": "/docs",
            "health": "/health",
        }

    return app


def run() -> None:
    """Start the server with uvicorn."""
    import uvicorn

    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.server.HOST, port=settings.server.PORT)


if __name__ == "__main__":
    run()
