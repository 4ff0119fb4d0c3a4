# app/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, settings as default_settings
from app.database.base import GameStore
from app.exceptions import AppError, validation_details
from app.middleware.request_logging import RequestLoggingMiddleware
from app.routes import games, healthcheck

logger = logging.getLogger(__name__)


def error_response(error: object) -> JSONResponse:
    """Single place where any raised error becomes an HTTP response"""
    if isinstance(error, AppError):
        return JSONResponse(status_code=error.status_code, content=error.to_response())

    if isinstance(error, RequestValidationError):
        content = {
            "error": "Invalid request body",
            "statusCode": 400,
            "details": validation_details(error.errors()),
        }
        return JSONResponse(status_code=400, content=content)

    if isinstance(error, StarletteHTTPException):
        message = "Path not found" if error.status_code == 404 else str(error.detail)
        content = {"error": message, "statusCode": error.status_code}
        return JSONResponse(status_code=error.status_code, content=content, headers=error.headers)

    exc_info = error if isinstance(error, BaseException) else None
    logger.error(f"Unhandled error: {error!r}", exc_info=exc_info)
    content = {"error": "Internal server error", "statusCode": 500}
    return JSONResponse(status_code=500, content=content)


async def handle_error(request: Request, exc: Exception) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} failed: {exc}")
    return error_response(exc)


def build_store(settings: Settings) -> GameStore:
    if settings.STORE_BACKEND == "memory":
        from app.database.memory import InMemoryGameStore

        logger.warning("Using in-memory game store, data is lost on restart")
        return InMemoryGameStore()

    if settings.STORE_BACKEND == "firestore":
        from app.database.firestore import FirestoreGameStore, create_firestore_client

        return FirestoreGameStore(create_firestore_client(settings), settings.GAMES_COLLECTION)

    raise ValueError(f"Unknown store backend: {settings.STORE_BACKEND!r}")


def create_app(store: Optional[GameStore] = None, settings: Settings = default_settings) -> FastAPI:
    app = FastAPI(title="Games Admin API")
    app.state.store = store if store is not None else build_store(settings)

    # CORS Middleware Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    if settings.DEBUG:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(AppError, handle_error)
    app.add_exception_handler(RequestValidationError, handle_error)
    app.add_exception_handler(StarletteHTTPException, handle_error)
    app.add_exception_handler(Exception, handle_error)

    # Include routers
    app.include_router(healthcheck.router)
    app.include_router(games.router)

    return app
